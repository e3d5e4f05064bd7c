"""Shared helpers for turning tabular rows into entity dataclasses.

Rows arrive from the persistence collaborator either as a pandas DataFrame or
as a list of plain dicts keyed by display column names ("Name", "Start Date",
...). Loaders skip rows that cannot describe an entity instead of failing.
"""
from __future__ import annotations

import logging
import math
from datetime import date, datetime
from enum import Enum
from typing import Any, Iterable, List, Type, TypeVar

import pandas as pd
from dateutil.parser import isoparse

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)


def iter_rows(rows: pd.DataFrame | Iterable[dict] | None) -> List[dict[str, Any]]:
    if rows is None:
        return []
    if isinstance(rows, pd.DataFrame):
        return rows.to_dict("records")
    return [dict(row) for row in rows]


def is_blank(value: Any) -> bool:
    if value is None or value is pd.NaT:
        return True
    if isinstance(value, float) and math.isnan(value):
        return True
    return not str(value).strip()


def text(row: dict, key: str, default: str = "") -> str:
    value = row.get(key)
    if is_blank(value):
        return default
    return str(value).strip()


def number(row: dict, key: str, default: float = 0.0) -> float:
    value = row.get(key)
    if is_blank(value):
        return default
    try:
        parsed = float(value)
    except (TypeError, ValueError):
        return default
    return parsed if math.isfinite(parsed) else default


def parse_date(value: Any) -> date | None:
    """Accept date, datetime/Timestamp or ISO strings; None for blanks or garbage."""
    if is_blank(value):
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return isoparse(str(value).strip()).date()
    except (ValueError, OverflowError):
        return None


def coerce_enum(enum_cls: Type[E], value: Any, default: E) -> E:
    if isinstance(value, enum_cls):
        return value
    if is_blank(value):
        return default
    try:
        return enum_cls(str(value).strip().lower())
    except ValueError:
        logger.warning("Unknown %s value %r, using %s", enum_cls.__name__, value, default.value)
        return default


def row_dates(row: dict, start_key: str, end_key: str, label: str) -> tuple[date, date] | None:
    start = parse_date(row.get(start_key))
    end = parse_date(row.get(end_key))
    if start is None or end is None:
        logger.warning("Skipping %s row %r: unparseable %s/%s", label, row.get("Name"), start_key, end_key)
        return None
    return start, end
