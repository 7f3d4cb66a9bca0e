from __future__ import annotations

"""Rate source abstraction.

Anything that can hand back a freshly built rate table. Production uses the
HTTP fetcher; tests plug in fixed tables.
"""
from abc import ABC, abstractmethod
from typing import Dict

# currency code -> units of that currency per one unit of the base currency
RateTable = Dict[str, float]


class RateSource(ABC):
    @abstractmethod
    def fetch(self) -> RateTable:
        """Return a new rate table. Never cached."""
        raise NotImplementedError
