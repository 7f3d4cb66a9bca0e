from __future__ import annotations

from dataclasses import dataclass
from typing import List

from .base import RateTable
from .errors import CurrencyNotFound

"""Base-pivoted currency conversion.

Every rate is "units of currency per one unit of base", so any pair converts
through the base: amount / rate(from) * rate(to), with rate(base) = 1.0.

Case order matters and is evaluated first-match-wins:
    1. non-positive amount -> 0.0, before any code is looked at
    2. base -> base        -> amount unchanged
    3. X -> base           -> amount / rate(X)
    4. base -> X           -> amount * rate(X)
    5. X -> Y              -> amount / rate(X) * rate(Y)
    6. anything else       -> CurrencyNotFound
"""

DEFAULT_BASE = "EUR"


@dataclass(frozen=True)
class ConversionRequest:
    from_code: str
    to_code: str
    amount: float


def _unresolved(table: RateTable, base: str, *codes: str) -> List[str]:
    missing: List[str] = []
    for code in codes:
        if code != base and code not in table and code not in missing:
            missing.append(code)
    return missing


def convert(
    table: RateTable,
    from_code: str,
    to_code: str,
    amount: float,
    base: str = DEFAULT_BASE,
) -> float:
    if amount <= 0:
        return 0.0
    if from_code == base and to_code == base:
        return amount
    if to_code == base and from_code in table:
        return amount / table[from_code]
    if from_code == base and to_code in table:
        return amount * table[to_code]
    if from_code in table and to_code in table:
        return (amount / table[from_code]) * table[to_code]
    raise CurrencyNotFound(_unresolved(table, base, from_code, to_code))


def convert_request(
    table: RateTable, request: ConversionRequest, base: str = DEFAULT_BASE
) -> float:
    return convert(table, request.from_code, request.to_code, request.amount, base)
