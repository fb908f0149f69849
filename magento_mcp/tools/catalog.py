"""Product catalog tools backed by the Magento ``mcpdata`` endpoints.

Each function builds the REST path for one lookup and hands it to the
forwarder; the JSON answer comes back pretty-printed as text content.
"""

from typing import Mapping, Optional

import httpx
from mcp.types import TextContent

from .base import encode_query, encode_segment, forward_as_text


async def get_product_by_sku(
    sku: str,
    headers: Optional[Mapping[str, str]] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> list[TextContent]:
    """
    Fetch a single product by SKU.

    Args:
        sku: Product SKU, percent-encoded into the path
        headers: Per-call headers carrying the Magento domain and token
        client: Optional httpx client to reuse

    Returns:
        One text block with the product JSON, or an ``Error:`` block
    """
    return await forward_as_text(f"mcpdata/product/sku/{encode_segment(sku)}", headers, client)


async def get_products_by_ids(
    ids: str,
    headers: Optional[Mapping[str, str]] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> list[TextContent]:
    """
    Fetch several products by a comma-separated id list.

    The whole list is encoded as one path segment, so ``1,2,3`` travels as
    ``1%2C2%2C3``.
    """
    return await forward_as_text(f"mcpdata/products/ids/{encode_segment(ids)}", headers, client)


async def search_products(
    query: Optional[str] = "",
    page_size: float = 10,
    current_page: float = 1,
    headers: Optional[Mapping[str, str]] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> list[TextContent]:
    """
    Search products by name.

    All three query parameters are always sent, ``query`` possibly empty.

    Args:
        query: Search query for product names (default: empty)
        page_size: Number of products per page (default: 10)
        current_page: Page number, 1-indexed (default: 1)
    """
    params = encode_query(
        {
            "query": query or "",
            "pageSize": page_size,
            "currentPage": current_page,
        }
    )
    return await forward_as_text(f"mcpdata/products/search?{params}", headers, client)


async def get_product_categories(
    sku: str,
    headers: Optional[Mapping[str, str]] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> list[TextContent]:
    """Fetch the categories a product belongs to."""
    return await forward_as_text(f"mcpdata/product/categories/{encode_segment(sku)}", headers, client)
