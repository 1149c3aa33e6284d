"""Pytest shared fixtures for portal client tests."""
import json
import pathlib
import sys
from typing import Any, Optional

# Add project root to Python path
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest
import requests

from sso_portal.core.portal import SsoClient


BASE_URL = "https://portal.sso.eu-west-1.amazonaws.com"


class StubResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, payload: Any = None, status_code: int = 200, text: Optional[str] = None):
        self.status_code = status_code
        self.text = text if text is not None else json.dumps(payload)
        self.url = ""

    def json(self):
        return json.loads(self.text)


class PortalStub:
    """Routes stubbed requests by (method, url) and records every call."""

    def __init__(self):
        self.routes: dict = {}
        self.calls: list = []

    def add(self, method: str, url: str, response):
        self.routes[(method, url)] = response

    def _dispatch(self, method, url, kwargs):
        self.calls.append({"method": method, "url": url, **kwargs})
        try:
            response = self.routes[(method, url)]
        except KeyError:
            raise RuntimeError(f"Unexpected HTTP {method} in unit test: {url}")
        if isinstance(response, Exception):
            raise response
        response.url = url
        return response

    def get(self, url, *args, **kwargs):
        return self._dispatch("GET", url, kwargs)

    def post(self, url, *args, **kwargs):
        return self._dispatch("POST", url, kwargs)


# ─────────────────────────────────────────────────────────────────────────────
# Network Guard Rails
# ─────────────────────────────────────────────────────────────────────────────
@pytest.fixture(autouse=True)
def portal(monkeypatch):
    """Replace requests.get/post so no test reaches the real portal.

    Tests register responses with ``portal.add(method, url, response)``;
    anything unregistered fails loudly.
    """
    stub = PortalStub()
    monkeypatch.setattr(requests, "get", stub.get)
    monkeypatch.setattr(requests, "post", stub.post)
    return stub


@pytest.fixture()
def client():
    """Client bound to a fixed token, skipping the auth code exchange."""
    return SsoClient("test-token", BASE_URL, request_timeout=5)


@pytest.fixture(autouse=True)
def _clean_portal_env(monkeypatch):
    for var in (
        "SSO_PORTAL_REGION",
        "SSO_PORTAL_ORG_ID",
        "SSO_PORTAL_REQUEST_TIMEOUT",
    ):
        monkeypatch.delenv(var, raising=False)
