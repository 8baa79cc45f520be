"""Shared httpx plumbing for remote embedding services."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from ...errors import EmbeddingError

logger = logging.getLogger(__name__)


def build_client(config: dict[str, Any], timeout: float) -> httpx.Client:
    """Use an injected client/transport if configured, else a plain client."""
    client = config.get("client")
    if client is not None:
        return client
    transport = config.get("transport")
    return httpx.Client(timeout=timeout, transport=transport)


def post_json(
    client: httpx.Client,
    url: str,
    payload: Any,
    service: str,
    headers: dict[str, str] | None = None,
) -> Any:
    """POST a JSON payload and return the decoded response.

    Raises:
        EmbeddingError: On transport errors, non-2xx responses or invalid JSON.
            The upstream status and body are included in the message.
    """
    try:
        response = client.post(url, json=payload, headers=headers)
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        detail = exc.response.text
        logger.error(
            "%s embedding request failed (%s): %s",
            service, exc.response.status_code, detail,
        )
        raise EmbeddingError(
            f"{service} embedding request failed "
            f"({exc.response.status_code}): {detail}"
        ) from exc
    except httpx.HTTPError as exc:
        logger.error("%s embedding request failed: %s", service, exc)
        raise EmbeddingError(f"{service} embedding request failed: {exc}") from exc

    try:
        return response.json()
    except ValueError as exc:
        raise EmbeddingError(f"{service} returned a non-JSON response") from exc


def close_quietly(client: httpx.Client | None) -> None:
    if client is None:
        return
    try:
        client.close()
    except Exception:
        pass


__all__ = ["build_client", "post_json", "close_quietly"]
