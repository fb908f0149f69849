"""Outbound calls to the Magento REST API.

Every tool that talks to Magento goes through ``call_api``: it checks the
per-call headers, normalizes the bearer token, performs the request with
httpx and returns the decoded JSON body.
"""

import json
import logging
from typing import Any, Mapping, Optional

import httpx

from .config import load_settings
from .errors import ApiCallError, ParseError, TransportError
from .schemas import ForwarderRequest

logger = logging.getLogger(__name__)

_UNSET = object()


def _make_client(timeout: Optional[float]) -> httpx.AsyncClient:
    """Short-lived client for a single call."""
    return httpx.AsyncClient(timeout=timeout)


async def _send(request: ForwarderRequest, client: httpx.AsyncClient) -> Any:
    content = json.dumps(request.body) if request.sends_body else None
    logger.debug(f"{request.method} {request.url}")
    response = await client.request(
        request.method,
        request.url,
        headers=request.outgoing_headers(),
        content=content,
    )

    if not response.is_success:
        raise TransportError(response.status_code, response.reason_phrase, response.text)

    try:
        return response.json()
    except ValueError as e:
        raise ParseError(f"Invalid JSON response: {e}") from e


async def call_api(
    endpoint: str,
    method: str = "GET",
    body: Optional[Any] = None,
    headers: Optional[Mapping[str, str]] = None,
    *,
    client: Optional[httpx.AsyncClient] = None,
    timeout: Any = _UNSET,
) -> Any:
    """
    Call ``{domain}/rest/V1/{endpoint}`` and return the parsed JSON body.

    Args:
        endpoint: REST path suffix, already percent-encoded
        method: HTTP method (default: GET)
        body: Optional payload, sent as JSON for non-GET methods only
        headers: Per-call headers; must carry x-magento-domain and authorization
        client: Optional shared httpx client; a short-lived one is used otherwise
        timeout: Seconds before giving up, None for no limit (default: MAGENTO_TIMEOUT)

    Returns:
        The decoded JSON response

    Raises:
        ApiCallError: for any failure; other exceptions are wrapped in one
    """
    try:
        request = ForwarderRequest.build(endpoint, method, body, headers)
        if client is not None:
            return await _send(request, client)

        if timeout is _UNSET:
            timeout = load_settings().timeout
        async with _make_client(timeout) as owned:
            return await _send(request, owned)
    except ApiCallError:
        raise
    except Exception as e:
        raise ApiCallError(str(e) or type(e).__name__) from e
