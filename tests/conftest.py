"""Shared test fixtures.

Provides a fake analytics service built on httpx.MockTransport and keeps the
endpoint override out of the environment so requests hit the default URL.
"""

import json

import httpx
import pytest

from core import report_client


@pytest.fixture(autouse=True)
def _default_report_url(monkeypatch):
    monkeypatch.delenv("CAMPAIGN_REPORT_URL", raising=False)


@pytest.fixture
def fake_reports(monkeypatch):
    """Route every report request to a per-channel canned response.

    Tests fill ``responses`` with channel → httpx.Response (or a callable
    taking the request).  ``calls`` records the channel of every request in
    the order it arrived.
    """
    state = {"responses": {}, "calls": []}

    def handler(request: httpx.Request) -> httpx.Response:
        channel = json.loads(request.content)["output"]["channel"][0]
        state["calls"].append(channel)
        canned = state["responses"].get(channel)
        if canned is None:
            return httpx.Response(200, json={})
        if callable(canned):
            return canned(request)
        return canned

    monkeypatch.setattr(
        report_client, "_new_client",
        lambda: httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )
    return state
