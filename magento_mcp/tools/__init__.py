"""Magento MCP tool implementations.

Exports every tool handler registered by the server.
"""

from .arithmetic import add, calculate
from .catalog import (
    get_product_by_sku,
    get_product_categories,
    get_products_by_ids,
    search_products,
)
from .reports import get_bestsellers, get_revenue

__all__ = [
    "get_product_by_sku",
    "get_products_by_ids",
    "search_products",
    "get_product_categories",
    "get_bestsellers",
    "get_revenue",
    "add",
    "calculate",
]
