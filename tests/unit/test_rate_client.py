"""Unit tests for the remote rate source client"""

import pytest
import httpx
from decimal import Decimal
from debt_valuation.domain.exceptions import RateSourceError
from debt_valuation.infrastructure.clients.rates import RemoteRateSource


def source_with(handler) -> RemoteRateSource:
    return RemoteRateSource(base_url="http://rates.test", timeout=1.0, transport=httpx.MockTransport(handler))


async def test_load_builds_table_from_response():
    """Test a well-formed response becomes a RateTable with fallback"""
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["path"] = request.url.path
        seen["params"] = dict(request.url.params)
        return httpx.Response(
            200,
            json={
                "rates": [
                    {"year": 2025, "month": 1, "usd": 35.437, "eur": 36.6893, "gold": 3250},
                    {"year": 2025, "month": 2, "usd": 36.0729, "eur": 37.5777, "gold": 3380},
                ]
            },
        )

    table = await source_with(handler).load(2025, 1, 2025, 3)

    assert seen["path"] == "/rates/monthly"
    assert seen["params"] == {"start": "2025-01", "end": "2025-03"}
    assert len(table) == 2
    assert table.lookup(2025, 3).usd == Decimal("36.0729")


async def test_load_http_error_raises_rate_source_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(502, json={"detail": "bad gateway"})

    with pytest.raises(RateSourceError, match="502"):
        await source_with(handler).load(2025, 1, 2025, 3)


async def test_load_timeout_raises_rate_source_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    with pytest.raises(RateSourceError, match="timeout"):
        await source_with(handler).load(2025, 1, 2025, 3)


async def test_load_connection_error_raises_rate_source_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(RateSourceError, match="unreachable"):
        await source_with(handler).load(2025, 1, 2025, 3)


@pytest.mark.parametrize(
    "payload",
    [
        {"rates": []},  # empty table
        {"rates": [{"year": 2025, "month": 1, "usd": 35.4}]},  # missing keys
        {"rates": [{"year": 2025, "month": 1, "usd": 0, "eur": 1, "gold": 1}]},  # non-positive rate
        {"rates": [{"year": 2025, "month": 1, "usd": "abc", "eur": 1, "gold": 1}]},  # not a number
        [{"year": 2025, "month": 1}],  # wrong envelope
    ],
)
async def test_load_malformed_payload_raises_rate_source_error(payload):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=payload)

    with pytest.raises(RateSourceError, match="Invalid rate data"):
        await source_with(handler).load(2025, 1, 2025, 3)
