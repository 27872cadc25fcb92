"""Shared test fixtures and dummy classes."""

from __future__ import annotations

import json

import pytest

from datadog_monitors import client as client_mod


class DummyResponse:
    """Dummy HTTP response for testing."""

    def __init__(self, data: object = None, status: int = 200, text: str = "") -> None:
        self._data = data
        self.status_code = status
        self.text = text or ("" if data is None else json.dumps(data))
        self.ok = 200 <= status < 300

    def json(self) -> object:
        return self._data


class RecordingRequest:
    """Stand-in for `requests.request` that records every call."""

    def __init__(self, response: DummyResponse | None = None) -> None:
        self.response = response or DummyResponse()
        self.calls: list[dict[str, object]] = []

    def __call__(self, method: str, url: str, **kwargs: object) -> DummyResponse:
        self.calls.append({"method": method, "url": url, **kwargs})
        return self.response

    @property
    def last(self) -> dict[str, object]:
        return self.calls[-1]


@pytest.fixture
def dd_client() -> client_mod.Client:
    return client_mod.Client(
        api_key="api-key",
        app_key="app-key",
        base_url="https://dd.example/api/",
        timeout=5,
    )


@pytest.fixture
def fake_request(monkeypatch) -> RecordingRequest:
    recorder = RecordingRequest()
    monkeypatch.setattr(client_mod.requests, "request", recorder)
    return recorder
