from __future__ import annotations

from datetime import date
from typing import Iterator

from dateutil.relativedelta import relativedelta


def add_months(start: date, months: int) -> date:
    # relativedelta clamps the day to the target month's length (Jan 31 + 1 -> Feb 28/29)
    return start + relativedelta(months=months)


def month_label(d: date) -> str:
    return f"{d.year}-{d.month:02d}"


def iter_month_dates(start: date, months: int) -> Iterator[tuple[int, date]]:
    for m in range(max(0, months)):
        yield m, add_months(start, m)


def months_between(start: date, end: date) -> int:
    return (end.year - start.year) * 12 + (end.month - start.month)
