from __future__ import annotations

from typing import Dict

import pytest
from fastapi.testclient import TestClient

from eurofx.core.config import Settings
from eurofx.main import create_app
from eurofx.routers.convert import get_rate_source
from eurofx.services.rates.base import RateSource, RateTable
from eurofx.services.rates.errors import RateDataUnavailable

ECB_SAMPLE = b"""<?xml version="1.0" encoding="UTF-8"?>
<gesmes:Envelope xmlns:gesmes="http://www.gesmes.org/xml/2002-08-01"
    xmlns="http://www.ecb.int/vocabulary/2002-08-01/eurofxref">
  <gesmes:subject>Reference rates</gesmes:subject>
  <gesmes:Sender>
    <gesmes:name>European Central Bank</gesmes:name>
  </gesmes:Sender>
  <Cube>
    <Cube time="2024-05-10">
      <Cube currency="USD" rate="1.10"/>
      <Cube currency="JPY" rate="160.0"/>
      <Cube currency="GBP" rate="0.86"/>
    </Cube>
  </Cube>
</gesmes:Envelope>
"""


class FixedRateSource(RateSource):
    """In-memory source; counts fetches and hands out a copy each time."""

    def __init__(self, rates: Dict[str, float] | None = None, error: Exception | None = None):
        self.rates = dict(rates or {})
        self.error = error
        self.calls = 0

    def fetch(self) -> RateTable:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return dict(self.rates)


class FakeResponse:
    def __init__(self, body: bytes, read_error: Exception | None = None):
        self._body = body
        self.read_error = read_error

    def read(self) -> bytes:
        if self.read_error is not None:
            raise self.read_error
        return self._body

    def __enter__(self) -> "FakeResponse":
        return self

    def __exit__(self, *exc) -> None:
        return None


@pytest.fixture
def table() -> RateTable:
    return {"USD": 1.10, "JPY": 160.0, "GBP": 0.86}


@pytest.fixture
def source(table) -> FixedRateSource:
    return FixedRateSource(table)


@pytest.fixture
def settings() -> Settings:
    return Settings(rates_url="http://rates.test/eurofxref-daily.xml")


def _client_for(settings: Settings, rate_source: RateSource) -> TestClient:
    app = create_app(settings_override=settings)
    app.dependency_overrides[get_rate_source] = lambda: rate_source
    return TestClient(app)


@pytest.fixture
def client(settings, source) -> TestClient:
    return _client_for(settings, source)


@pytest.fixture
def failing_client(settings):
    def _make(error: RateDataUnavailable) -> TestClient:
        return _client_for(settings, FixedRateSource(error=error))

    return _make


@pytest.fixture
def fake_urlopen(monkeypatch):
    """Replace urllib's urlopen; returns the list of requested URLs.

    Pass a list of responses/exceptions to `fake_urlopen.queue`; each call pops one.
    """
    calls: list = []
    queue: list = []

    def _urlopen(url, timeout=None):
        calls.append((url, timeout))
        item = queue.pop(0)
        if isinstance(item, Exception):
            raise item
        return item

    monkeypatch.setattr("urllib.request.urlopen", _urlopen)
    monkeypatch.setattr("time.sleep", lambda s: None)
    _urlopen.calls = calls  # type: ignore[attr-defined]
    _urlopen.queue = queue  # type: ignore[attr-defined]
    return _urlopen
