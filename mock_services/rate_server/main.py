from fastapi import FastAPI, HTTPException, Query

from debt_valuation.infrastructure.data.historical_rates import HISTORICAL_RATES

app = FastAPI(title="Mock Rate Server", version="1.0.0")


def _parse_period(value: str) -> int:
    try:
        year, month = (int(part) for part in value.split("-"))
    except ValueError:
        raise HTTPException(status_code=400, detail=f"bad period {value!r}, expected YYYY-MM")
    if not 1 <= month <= 12:
        raise HTTPException(status_code=400, detail=f"bad month in {value!r}")
    return year * 12 + month


@app.get("/health")
def health(): return {"status": "ok"}

@app.get("/rates/monthly")
def get_monthly_rates(start: str = Query(...), end: str = Query(...)):
    # Observations inside the range plus the last one before it, so the client can carry it forward
    start_key, end_key = _parse_period(start), _parse_period(end)
    rows = sorted(HISTORICAL_RATES, key=lambda r: r[0] * 12 + r[1])
    before = [r for r in rows if r[0] * 12 + r[1] < start_key][-1:]
    inside = [r for r in rows if start_key <= r[0] * 12 + r[1] <= end_key]
    return {
        "rates": [
            {"year": y, "month": m, "usd": float(usd), "eur": float(eur), "gold": float(gold)}
            for y, m, usd, eur, gold in (before + inside or rows[:1])
        ]
    }
