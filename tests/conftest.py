"""Shared test fixtures for shopee_lib tests."""

import httpx
import pytest

from shopee_lib import ShopeeClient


COOKIE = "SPC_EC=token123; shopee_webUnique_ccd=abc%2Fdef%3D%3D; SPC_U=99"


class FakeShopee:
    """Serves canned JSON per endpoint path and records every request."""

    def __init__(self):
        self.responses = {}
        self.requests = []

    def set(self, path, body, status=200):
        self.responses[path] = (status, body)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.path not in self.responses:
            return httpx.Response(404, json={"error": "not found"})
        status, body = self.responses[request.url.path]
        if isinstance(body, str):
            return httpx.Response(status, text=body)
        return httpx.Response(status, json=body)

    @property
    def transport(self):
        return httpx.MockTransport(self.handler)


@pytest.fixture
def fake_shopee():
    return FakeShopee()


@pytest.fixture
def make_client(fake_shopee):
    def _make(cookie=COOKIE):
        return ShopeeClient(cookie, transport=fake_shopee.transport)
    return _make


@pytest.fixture
def coins_body():
    return {"code": 0, "msg": "success", "coins": 120, "userid": "99", "username": "alice"}


@pytest.fixture
def settings_body():
    return {
        "code": 0,
        "msg": "success",
        "data": {
            "userid": "99",
            "checked_in_today": True,
            "today_index": 3,
            "checkin_list": [1, 1, 2, 2, 3, 3, 5],
        },
    }
