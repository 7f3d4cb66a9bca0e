from __future__ import annotations

"""Typed failures of the rate pipeline.

Two families reach callers:
    - RateDataUnavailable: the reference document could not be obtained
      (RetrievalError) or understood (ParseError).
    - CurrencyNotFound: the table was fetched fine but a requested code is
      neither listed nor the base currency.
"""
from typing import Iterable, Tuple


class RateError(Exception):
    pass


class RateDataUnavailable(RateError):
    reason: str = "unavailable"


class RetrievalError(RateDataUnavailable):
    reason = "retrieval"


class ParseError(RateDataUnavailable):
    reason = "parse"


class CurrencyNotFound(RateError):
    def __init__(self, codes: Iterable[str]):
        self.codes: Tuple[str, ...] = tuple(codes)
        quoted = ", ".join(f'"{c}"' for c in self.codes)
        super().__init__(f"Rates for {quoted} are not provided by the reference feed")
