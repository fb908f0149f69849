"""Shared fixtures: a fake Magento upstream behind httpx.MockTransport."""

import asyncio
from typing import Callable, Optional

import httpx
import pytest

from magento_mcp import forwarder


class FakeMagento:
    """Records every outbound request and answers with a canned response."""

    def __init__(
        self,
        response: httpx.Response,
        raises: Optional[Callable[[httpx.Request], Exception]] = None,
    ):
        self.response = response
        self.raises = raises
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.raises is not None:
            raise self.raises(request)
        return self.response

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))

    @property
    def last(self) -> httpx.Request:
        assert self.requests, "no request reached the upstream"
        return self.requests[-1]

    def run(self, fn, *args, **kwargs):
        """Run an async tool or forwarder call against this upstream."""

        async def _go():
            async with self.client() as client:
                return await fn(*args, client=client, **kwargs)

        return asyncio.run(_go())


@pytest.fixture
def magento():
    """Factory for a fake upstream; defaults to ``200 {}``."""

    def _make(status: int = 200, raises=None, **kwargs) -> FakeMagento:
        if not kwargs:
            kwargs = {"json": {}}
        return FakeMagento(httpx.Response(status, **kwargs), raises=raises)

    return _make


@pytest.fixture
def store_headers() -> dict:
    return {
        "x-magento-domain": "https://shop.example.com",
        "authorization": "abc123",
    }


@pytest.fixture
def route_upstream(monkeypatch):
    """Point the forwarder's own short-lived clients at a fake upstream.

    Returns the list of timeouts those clients were created with.
    """

    def _route(upstream: FakeMagento) -> list:
        timeouts = []

        def _make_client(timeout):
            timeouts.append(timeout)
            return upstream.client()

        monkeypatch.setattr(forwarder, "_make_client", _make_client)
        return timeouts

    return _route
