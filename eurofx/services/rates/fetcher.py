from __future__ import annotations

"""Reference-rate document fetcher.

The ECB daily feed is a small XML envelope whose leaf ``Cube`` elements carry
``currency`` and ``rate`` attributes:

    <Cube time="2024-05-10">
        <Cube currency="USD" rate="1.0773"/>
        ...
    </Cube>

Every element with both attributes counts, at any depth and regardless of
namespace. Elements missing either attribute are skipped. A document that
yields no rates at all is an error, never an empty table.
"""
import logging
import math
import xml.etree.ElementTree as ET
from typing import TYPE_CHECKING

from eurofx.services.http_client import HttpError, get_bytes
from .base import RateSource, RateTable
from .errors import ParseError, RetrievalError

if TYPE_CHECKING:  # pragma: no cover
    from eurofx.core.config import Settings

logger = logging.getLogger("eurofx.rates.fetcher")


def parse_rate_document(payload: bytes) -> RateTable:
    try:
        root = ET.fromstring(payload)
    except ET.ParseError as e:
        raise ParseError(f"rate document is not well-formed XML: {e}") from e

    table: RateTable = {}
    for el in root.iter():
        code = el.get("currency")
        raw = el.get("rate")
        if code is None or raw is None:
            continue
        try:
            rate = float(raw)
        except ValueError as e:
            raise ParseError(f"invalid rate {raw!r} for {code}") from e
        if not math.isfinite(rate) or rate <= 0:
            raise ParseError(f"rate for {code} must be a positive number, got {raw!r}")
        if code in table:
            logger.debug("duplicate rate for %s, keeping last value", code)
        table[code] = rate

    if not table:
        raise ParseError("rate document contains no currency/rate elements")
    return table


class RateTableFetcher(RateSource):
    """Fetches and parses the reference document on every call."""

    def __init__(
        self,
        url: str,
        *,
        timeout: float = 5.0,
        retries: int = 0,
        backoff: float = 0.5,
    ):
        self.url = url
        self.timeout = timeout
        self.retries = retries
        self.backoff = backoff

    @classmethod
    def from_settings(cls, settings: "Settings") -> "RateTableFetcher":
        return cls(
            str(settings.rates_url),
            timeout=settings.http_timeout_seconds,
            retries=settings.fetch_retries,
            backoff=settings.fetch_backoff_seconds,
        )

    def fetch(self) -> RateTable:
        try:
            payload = get_bytes(
                self.url,
                timeout=self.timeout,
                retries=self.retries,
                backoff=self.backoff,
            )
        except HttpError as e:
            raise RetrievalError(str(e)) from e
        table = parse_rate_document(payload)
        logger.debug("fetched %d rates from %s", len(table), self.url)
        return table
