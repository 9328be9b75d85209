"""Calendar month arithmetic on (year, month) pairs"""

from typing import List, Tuple

MONTH_NAMES = {
    "tr": [
        "Ocak", "Şubat", "Mart", "Nisan", "Mayıs", "Haziran",
        "Temmuz", "Ağustos", "Eylül", "Ekim", "Kasım", "Aralık",
    ],
    "en": [
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    ],
}


def period_key(year: int, month: int) -> int:
    """Chronological sort key for a calendar month"""
    return year * 12 + month


def next_month(year: int, month: int) -> Tuple[int, int]:
    """Step one month forward, carrying December into January of the next year"""
    month += 1
    if month > 12:
        return year + 1, 1
    return year, month


def generate_month_range(
    start_year: int, start_month: int, end_year: int, end_month: int
) -> List[Tuple[int, int]]:
    """Generate (year, month) pairs from start to end (inclusive); empty when reversed"""
    months = []
    year, month = start_year, start_month
    end_key = period_key(end_year, end_month)

    while period_key(year, month) <= end_key:
        months.append((year, month))
        year, month = next_month(year, month)

    return months


def month_label(year: int, month: int, language: str = "tr") -> str:
    """Human-readable label such as 'Şubat 2026'"""
    names = MONTH_NAMES.get(language, MONTH_NAMES["tr"])
    return f"{names[month - 1]} {year}"
