"""Static exchange-rate table"""

from decimal import Decimal
from typing import FrozenSet, Mapping, Optional

from finance_calculator.config import settings


class StaticRateProvider:
    """Rate provider backed by a fixed "SRC_DST" -> rate table"""

    def __init__(self, rates: Mapping[str, Decimal] | None = None):
        table = rates if rates is not None else settings.exchange_rates
        self._rates = {pair.upper(): Decimal(str(rate)) for pair, rate in table.items()}

    @property
    def currencies(self) -> FrozenSet[str]:
        """Every currency code appearing on either side of a pair"""
        return frozenset(code for pair in self._rates for code in pair.split("_"))

    def get_rate(self, source: str, target: str) -> Optional[Decimal]:
        """Rate for the pair, or None when the table has no such entry"""
        return self._rates.get(f"{source}_{target}")
