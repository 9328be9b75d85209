"""Rate service HTTP client for fetching monthly historical rates"""

import httpx
from decimal import Decimal, InvalidOperation
from debt_valuation.domain.models import RateObservation
from debt_valuation.domain.rates import RateTable
from debt_valuation.domain.exceptions import RateSourceError, InvalidRateDataError
from debt_valuation.config import settings
from debt_valuation.infrastructure.observability.metrics import rate_source_failures_counter


class RemoteRateSource:
    """Client for an external monthly rate API"""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url or settings.rate_api_base
        self.timeout = timeout or settings.http_timeout_seconds
        self.transport = transport

    async def load(self, start_year: int, start_month: int, end_year: int, end_month: int) -> RateTable:
        """
        Fetch monthly rates for [start, end] and build a RateTable from them.

        No retries: the caller owns retry and timeout policy beyond the
        per-request timeout.

        Raises:
            RateSourceError: On timeout, HTTP errors, or invalid response
        """
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            try:
                response = await client.get(
                    f"{self.base_url}/rates/monthly",
                    params={
                        "start": f"{start_year}-{start_month:02d}",
                        "end": f"{end_year}-{end_month:02d}",
                    },
                )
                response.raise_for_status()
                data = response.json()

                return RateTable(
                    RateObservation(
                        year=int(rate["year"]),
                        month=int(rate["month"]),
                        usd=Decimal(str(rate["usd"])),
                        eur=Decimal(str(rate["eur"])),
                        gold=Decimal(str(rate["gold"])),
                    )
                    for rate in data.get("rates", [])
                )

            except httpx.TimeoutException as e:
                rate_source_failures_counter.labels(reason="timeout").inc()
                raise RateSourceError(f"Rate API timeout after {self.timeout}s") from e
            except httpx.HTTPStatusError as e:
                rate_source_failures_counter.labels(reason="http_status").inc()
                raise RateSourceError(f"Rate API error: {e.response.status_code}") from e
            except httpx.RequestError as e:
                rate_source_failures_counter.labels(reason="unreachable").inc()
                raise RateSourceError(f"Rate API unreachable: {e}") from e
            except (KeyError, ValueError, TypeError, AttributeError, InvalidOperation, InvalidRateDataError) as e:
                rate_source_failures_counter.labels(reason="malformed").inc()
                raise RateSourceError(f"Invalid rate data from rate API: {e}") from e
