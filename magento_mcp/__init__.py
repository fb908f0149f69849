"""Magento MCP server package."""

from .errors import (
    ApiCallError,
    DomainError,
    MagentoMCPError,
    MissingContextError,
    ParseError,
    TransportError,
)
from .forwarder import call_api
from .schemas import CallContext, ForwarderRequest

__all__ = [
    "call_api",
    "CallContext",
    "ForwarderRequest",
    "MagentoMCPError",
    "ApiCallError",
    "MissingContextError",
    "TransportError",
    "ParseError",
    "DomainError",
]
