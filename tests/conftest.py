import os
import sys

import httpx
import pytest

# Ensure project root is on sys.path so tests can import `nws_weather_mcp`
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from nws_weather_mcp import client  # noqa: E402


class FakeNWS:
    """Routes NWS requests to canned (status, json) replies keyed by URL path."""

    def __init__(self):
        self.routes = {}
        self.requests: list[httpx.Request] = []

    def reply(self, path, json=None, status=200):
        self.routes[path] = (status, json)

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        status, body = self.routes.get(request.url.path, (404, {"detail": "not found"}))
        return httpx.Response(status, json=body)


@pytest.fixture
def nws():
    fake = FakeNWS()
    client.use_transport(httpx.MockTransport(fake.handle))
    try:
        yield fake
    finally:
        client.use_transport(None)
