"""Shared helpers for building tool responses."""

import json
import logging
import math
from decimal import Decimal
from typing import Any, Mapping, Optional
from urllib.parse import quote, urlencode

import httpx
from mcp.types import TextContent

from ..forwarder import call_api

logger = logging.getLogger(__name__)

# Characters encodeURIComponent leaves alone, on top of quote()'s own set.
_SEGMENT_SAFE = "!*'()"


def text_content(text: str) -> list[TextContent]:
    """Wrap a string as a single text content block."""
    return [TextContent(type="text", text=text)]


def error_content(message: str) -> list[TextContent]:
    return text_content(f"Error: {message}")


def json_content(data: Any) -> list[TextContent]:
    """Pretty-print a decoded JSON value with two-space indentation."""
    return text_content(json.dumps(data, indent=2, ensure_ascii=False))


def encode_segment(value: str) -> str:
    """Percent-encode a value for use as a single URL path segment."""
    return quote(value, safe=_SEGMENT_SAFE)


def encode_query(params: Mapping[str, Any]) -> str:
    """Form-encode query parameters, spaces as ``+``."""
    return urlencode({k: format_value(v) for k, v in params.items()}, safe="*")


def format_value(value: Any) -> str:
    """Render a scalar the way it reads in a URL or a text result.

    Floats follow JavaScript's Number#toString: integral values lose their
    trailing ``.0``, positional notation is used for exponents from -6 to 20,
    and exponents are unpadded (``1e-7``, ``1e+21``). Booleans become
    ``true``/``false``.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer() and abs(value) < 1e21:
            return str(int(value))
        text = repr(value)
        if "e" not in text:
            return text
        mantissa, exponent = text.split("e")
        power = int(exponent)
        if -7 < power < 21:
            return format(Decimal(text), "f")
        return f"{mantissa}e{'+' if power > 0 else '-'}{abs(power)}"
    return str(value)


async def forward_as_text(
    endpoint: str,
    headers: Optional[Mapping[str, str]],
    client: Optional[httpx.AsyncClient] = None,
) -> list[TextContent]:
    """GET an endpoint and render the result, or the failure, as text content."""
    try:
        result = await call_api(endpoint, "GET", None, headers, client=client)
    except Exception as e:
        logger.warning(f"{endpoint.split('?')[0]} failed: {e}")
        return error_content(str(e))
    return json_content(result)
