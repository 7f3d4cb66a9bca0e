"""Converter service: the three public conversion entry points.

Each call fetches a fresh rate table from the injected source and runs one
conversion over it. Nothing is kept between calls, so a single instance can
be shared freely across concurrent requests.

Errors from the source (RetrievalError / ParseError) and from the engine
(CurrencyNotFound) propagate unchanged; the HTTP layer maps them.
"""

from __future__ import annotations
import logging

from .rates.base import RateSource
from .rates.conversion import DEFAULT_BASE, ConversionRequest, convert_request

logger = logging.getLogger("eurofx.converter")


class ConverterService:
    def __init__(self, source: RateSource, base_currency: str = DEFAULT_BASE):
        self._source = source
        self.base_currency = base_currency

    def from_euro(self, to: str, value: float) -> float:
        """Shortcut for convert(base, to, value)."""
        return self.convert(self.base_currency, to, value)

    def to_euro(self, from_: str, value: float) -> float:
        """Shortcut for convert(from_, base, value)."""
        return self.convert(from_, self.base_currency, value)

    def convert(self, from_: str, to: str, value: float) -> float:
        request = ConversionRequest(from_code=from_, to_code=to, amount=value)
        # Fetch first: rate data must be reachable even when the amount short-circuits.
        table = self._source.fetch()
        result = convert_request(table, request, self.base_currency)
        logger.info("converted %s %s -> %s = %s", value, from_, to, result)
        return result
