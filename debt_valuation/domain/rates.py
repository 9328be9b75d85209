"""Historical rate table with last-known-rate fallback"""

from bisect import bisect_right
from dataclasses import replace
from typing import Iterable, Iterator, List, Protocol

from debt_valuation.domain.exceptions import InvalidRateDataError
from debt_valuation.domain.models import RateObservation
from debt_valuation.utils.date_utils import period_key


class RateTable:
    """
    Immutable, sparse set of monthly rate observations.

    Observations are sorted chronologically once at construction. A month
    without its own observation is answered with the nearest earlier one,
    or with the earliest observation when the query predates the table.

    Raises:
        InvalidRateDataError: On empty input, duplicate months, months
            outside 1-12 or non-positive rates
    """

    def __init__(self, observations: Iterable[RateObservation]):
        ordered = sorted(observations, key=lambda obs: obs.period_key)
        if not ordered:
            raise InvalidRateDataError("Rate table needs at least one observation")

        for obs in ordered:
            if not 1 <= obs.month <= 12:
                raise InvalidRateDataError(f"Invalid month {obs.month} for {obs.year}")
            if min(obs.usd, obs.eur, obs.gold) <= 0:
                raise InvalidRateDataError(f"Non-positive rate for {obs.year}-{obs.month:02d}")

        self._observations: tuple[RateObservation, ...] = tuple(ordered)
        self._keys: List[int] = [obs.period_key for obs in ordered]

        if len(set(self._keys)) != len(self._keys):
            raise InvalidRateDataError("Duplicate observation for the same month")

    def __len__(self) -> int:
        return len(self._observations)

    def __iter__(self) -> Iterator[RateObservation]:
        return iter(self._observations)

    def __contains__(self, period: tuple) -> bool:
        year, month = period
        return self.contains(year, month)

    @property
    def earliest(self) -> RateObservation:
        return self._observations[0]

    @property
    def latest(self) -> RateObservation:
        return self._observations[-1]

    def contains(self, year: int, month: int) -> bool:
        """True when the month has its own observation"""
        index = bisect_right(self._keys, period_key(year, month)) - 1
        return index >= 0 and self._keys[index] == period_key(year, month)

    def lookup(self, year: int, month: int) -> RateObservation:
        """Rates for a month, carrying the last known observation forward"""
        target = period_key(year, month)
        index = bisect_right(self._keys, target) - 1

        if index < 0:
            # Query predates the table: degrade to the oldest known rate
            index = 0

        obs = self._observations[index]
        if obs.period_key == target:
            return obs
        return replace(obs, year=year, month=month)


class RateSource(Protocol):
    """Anything that can provide a RateTable covering a range of months"""

    async def load(self, start_year: int, start_month: int, end_year: int, end_month: int) -> RateTable:
        ...


class StaticRateSource:
    """Rate source backed by an already-built table"""

    def __init__(self, table: RateTable):
        self.table = table

    async def load(self, start_year: int, start_month: int, end_year: int, end_month: int) -> RateTable:
        return self.table
