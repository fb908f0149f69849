"""Pydantic schemas for forwarded Magento REST calls."""

from typing import Any, Mapping, Optional

from pydantic import BaseModel, Field

from .errors import MissingContextError

DOMAIN_HEADER = "x-magento-domain"
AUTHORIZATION_HEADER = "authorization"
BEARER_PREFIX = "Bearer "

# Headers that belong to the inbound MCP hop and must not reach Magento.
_HOP_HEADERS = frozenset(
    {
        "host",
        "connection",
        "keep-alive",
        "content-length",
        "content-type",
        "transfer-encoding",
        "te",
        "trailer",
        "upgrade",
        "accept",
        "accept-encoding",
        "proxy-authorization",
        "proxy-connection",
        "mcp-session-id",
        "mcp-protocol-version",
        "last-event-id",
    }
)


class CallContext(BaseModel):
    """Per-call headers supplied by the MCP caller."""

    domain: str = Field(description="Base URL of the Magento instance")
    authorization: str = Field(description="Bearer credential, with or without the scheme prefix")
    extra_headers: dict[str, str] = Field(default_factory=dict, description="Remaining forwardable headers")

    @classmethod
    def from_headers(cls, headers: Optional[Mapping[str, str]]) -> "CallContext":
        """Split raw request headers into context and forwardable extras.

        Raises MissingContextError when the domain or the credential is absent.
        """
        lowered = {k.lower(): v for k, v in (headers or {}).items()}
        domain = lowered.pop(DOMAIN_HEADER, "")
        authorization = lowered.pop(AUTHORIZATION_HEADER, "")
        if not domain or not authorization:
            raise MissingContextError()
        extras = {k: v for k, v in lowered.items() if k not in _HOP_HEADERS}
        return cls(domain=domain, authorization=authorization, extra_headers=extras)

    @property
    def bearer_token(self) -> str:
        if self.authorization.startswith(BEARER_PREFIX):
            return self.authorization
        return f"{BEARER_PREFIX}{self.authorization}"


class ForwarderRequest(BaseModel):
    """A single outbound call against the Magento REST API."""

    domain: str
    token: str
    endpoint: str
    method: str = "GET"
    body: Optional[Any] = None
    extra_headers: dict[str, str] = Field(default_factory=dict)

    @classmethod
    def build(
        cls,
        endpoint: str,
        method: str = "GET",
        body: Optional[Any] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> "ForwarderRequest":
        context = CallContext.from_headers(headers)
        return cls(
            domain=context.domain,
            token=context.bearer_token,
            endpoint=endpoint,
            method=method.upper(),
            body=body,
            extra_headers=context.extra_headers,
        )

    @property
    def url(self) -> str:
        return f"{self.domain.rstrip('/')}/rest/V1/{self.endpoint}"

    @property
    def sends_body(self) -> bool:
        return self.method != "GET" and self.body is not None

    def outgoing_headers(self) -> dict[str, str]:
        """Default JSON headers, then caller extras; the bearer token always wins."""
        merged = {
            "Authorization": self.token,
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        canonical = {k.lower(): k for k in merged}
        for name, value in self.extra_headers.items():
            merged[canonical.get(name.lower(), name)] = value
        merged["Authorization"] = self.token
        return merged
