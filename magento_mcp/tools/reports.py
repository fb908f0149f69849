"""Sales report tools: bestsellers and revenue."""

from typing import Any, Mapping, Optional

import httpx
from mcp.types import TextContent

from .base import encode_query, forward_as_text

DATE_RANGE_HELP = (
    "Date range: 'today', 'yesterday', 'this week', 'last week', 'this month', "
    "'last month', 'ytd', 'last year', or 'YYYY-MM-DD to YYYY-MM-DD'"
)
STATUS_HELP = "Order status filter (e.g., 'complete', 'processing')"


def _report_query(params: dict[str, Any], status: Optional[str]) -> str:
    # status is appended last and only when non-empty
    if status:
        params["status"] = status
    return encode_query(params)


async def get_bestsellers(
    date_range: str = "today",
    limit: float = 10,
    status: Optional[str] = None,
    headers: Optional[Mapping[str, str]] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> list[TextContent]:
    """
    Fetch the best-selling products for a date range.

    Args:
        date_range: Named range such as ``last week`` or ``YYYY-MM-DD to YYYY-MM-DD`` (default: today)
        limit: Number of bestsellers to return (default: 10)
        status: Optional order status filter

    Returns:
        One text block with the report JSON, or an ``Error:`` block
    """
    query = _report_query({"dateRange": date_range, "limit": limit}, status)
    return await forward_as_text(f"mcpdata/bestsellers?{query}", headers, client)


async def get_revenue(
    date_range: str = "today",
    status: Optional[str] = None,
    include_tax: bool = True,
    headers: Optional[Mapping[str, str]] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> list[TextContent]:
    """
    Fetch revenue totals for a date range.

    ``include_tax`` is sent as ``true``/``false``.
    """
    query = _report_query({"dateRange": date_range, "includeTax": include_tax}, status)
    return await forward_as_text(f"mcpdata/revenue?{query}", headers, client)
