"""Exception hierarchy for the Magento MCP server.

    MagentoMCPError
    ├── ApiCallError              (anything surfacing from the forwarder)
    │   ├── MissingContextError   (required headers absent, before I/O)
    │   ├── TransportError(status, reason, body)
    │   └── ParseError            (malformed JSON)
    └── DomainError               (e.g. divide by zero)

Every ApiCallError renders with the fixed ``API call error: `` prefix.
Tool handlers never let these escape: they are rendered as ``Error: ...``
text content at the tool boundary.
"""

from __future__ import annotations


class MagentoMCPError(Exception):
    """Base exception for all Magento MCP errors."""


# ─── Forwarder Errors ─────────────────────────────────────────


class ApiCallError(MagentoMCPError):
    """A forwarded call failed. ``detail`` holds the unprefixed message."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"API call error: {detail}")


class MissingContextError(ApiCallError):
    """Domain or authorization header absent from the call context."""

    def __init__(self) -> None:
        super().__init__("Missing required headers: x-magento-domain and authorization")


class TransportError(ApiCallError):
    """Upstream answered with a non-success HTTP status."""

    def __init__(self, status: int, reason: str, body: str) -> None:
        self.status = status
        self.reason = reason
        self.body = body
        super().__init__(f"API call failed: {status} {reason} - {body}")


class ParseError(ApiCallError):
    """Upstream body was not valid JSON."""


# ─── Domain Errors ────────────────────────────────────────────


class DomainError(MagentoMCPError):
    """Local computation rejected its input."""
