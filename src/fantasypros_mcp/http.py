from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from .exceptions import (
    FantasyProsAuthError,
    FantasyProsClientError,
    FantasyProsHTTPError,
    FantasyProsRateLimitError,
    FantasyProsServerError,
    FantasyProsTransportError,
)

log = logging.getLogger(__name__)


def _upstream_message(resp: httpx.Response) -> Optional[str]:
    """Pull the provider's ``message`` field out of an error body, if any."""
    try:
        body = resp.json()
    except ValueError:
        return None
    if isinstance(body, dict):
        msg = body.get("message")
        if isinstance(msg, str) and msg.strip():
            return msg.strip()
    return None


def _classify(resp: httpx.Response) -> FantasyProsHTTPError:
    status = resp.status_code
    upstream = _upstream_message(resp)

    if status in (401, 403):
        cls: type[FantasyProsHTTPError] = FantasyProsAuthError
        fallback = f"Auth failed (HTTP {status}). Check FANTASYPROS_API_KEY."
    elif status == 429:
        cls = FantasyProsRateLimitError
        fallback = "Rate limited (HTTP 429)."
    elif 500 <= status <= 599:
        cls = FantasyProsServerError
        fallback = f"Server error (HTTP {status})."
    else:
        cls = FantasyProsClientError
        snippet = resp.text[:200].strip()
        fallback = f"Client error (HTTP {status})."
        if snippet:
            fallback = f"Client error (HTTP {status}): {snippet}"

    return cls(upstream or fallback, status_code=status, upstream_message=upstream)


async def request_json(
    *,
    client: httpx.AsyncClient,
    url: str,
    params: Optional[Dict[str, Any]] = None,
) -> Any:
    """
    Single GET, no retries:
      - non-2xx mapped onto the FantasyPros* exception hierarchy
      - transport failures wrapped in FantasyProsTransportError
      - body returned as parsed JSON, untouched
    """
    try:
        resp = await client.get(url, params=params)
    except httpx.HTTPError as e:
        detail = str(e) or type(e).__name__
        raise FantasyProsTransportError(f"Request to {url} failed: {detail}") from e

    if not resp.is_success:
        err = _classify(resp)
        log.debug("GET %s -> HTTP %s", url, resp.status_code)
        raise err

    try:
        return resp.json()
    except ValueError as e:
        raise FantasyProsClientError(
            f"Response from {url} was not valid JSON (HTTP {resp.status_code}).",
            status_code=resp.status_code,
        ) from e
