import math
from dataclasses import asdict
from typing import List, Sequence, TypeVar

import pandas as pd

from ..config import DEFAULT_DOWNSAMPLE_POINTS
from ..data_model import MonthlyProjection, StressScore

REQUIRED_COLUMNS = {"Scenario", "MonthIndex", "CalendarYear", "MonthInYear"}

PROJECTION_COLUMNS = {
    "month": "Month",
    "total_income": "TotalIncome",
    "total_expenses": "TotalExpenses",
    "net_cashflow": "NetCashflow",
    "net_worth": "NetWorth",
    "net_worth_low": "NetWorthLow",
    "net_worth_high": "NetWorthHigh",
}

STRESS_COLUMNS = {
    "month": "Month",
    "composite": "Composite",
    "free_time": "FreeTime",
    "financial_surplus": "FinancialSurplus",
    "overlap_count": "OverlapCount",
    "caregiving_load": "CaregivingLoad",
    "sleep_proxy": "SleepProxy",
    "emotional_load": "EmotionalLoad",
}

T = TypeVar("T")


def _series_frame(rows: Sequence, columns: dict, scenario: str) -> pd.DataFrame:
    if not rows:
        return pd.DataFrame(columns=["Scenario", "MonthIndex", "CalendarYear", "MonthInYear", *columns.values()])
    df = pd.DataFrame([asdict(row) for row in rows]).rename(columns=columns)
    parts = df["Month"].str.split("-", n=1, expand=True)
    df.insert(0, "Scenario", scenario)
    df.insert(1, "MonthIndex", range(len(df)))
    df.insert(2, "CalendarYear", parts[0].astype(int))
    df.insert(3, "MonthInYear", parts[1].astype(int))
    return df


def projection_to_frame(projections: Sequence[MonthlyProjection], scenario: str = "Scenario") -> pd.DataFrame:
    return _series_frame(projections, PROJECTION_COLUMNS, scenario)


def stress_to_frame(scores: Sequence[StressScore], scenario: str = "Scenario") -> pd.DataFrame:
    return _series_frame(scores, STRESS_COLUMNS, scenario)


def _prepare(df: pd.DataFrame) -> pd.DataFrame:
    missing = REQUIRED_COLUMNS.difference(df.columns)
    if missing:
        raise KeyError(f"Missing required columns: {', '.join(sorted(missing))}")
    return df.sort_values(["Scenario", "MonthIndex"]).copy()


def aggregate_period(df: pd.DataFrame, freq: str = "M") -> pd.DataFrame:
    """Aggregate monthly engine output to monthly/quarterly/yearly snapshots.

    Each period keeps its last month's row, so balances such as NetWorth read
    as period-end values.
    """
    if df.empty:
        return df

    freq = (freq or "M").upper()
    if freq not in {"M", "Q", "Y"}:
        raise ValueError(f"Unknown aggregation frequency: {freq}")
    df = _prepare(df)

    if freq == "Q":
        df["PeriodValue"] = df["MonthIndex"] // 3
        quarter = ((df["MonthInYear"] - 1) // 3 + 1).astype(int)
        df["Period"] = df["CalendarYear"].astype(str) + " Q" + quarter.astype(str)
        return df.groupby(["Scenario", "PeriodValue"], as_index=False).last()

    if freq == "Y":
        df["PeriodValue"] = df["MonthIndex"] // 12
        df["Period"] = df["CalendarYear"].astype(str)
        return df.groupby(["Scenario", "PeriodValue"], as_index=False).last()

    df["PeriodValue"] = df["MonthIndex"]
    df["Period"] = df.get("Month", df["MonthIndex"].astype(str))
    return df


def downsample(rows: Sequence[T], max_points: int = DEFAULT_DOWNSAMPLE_POINTS) -> List[T]:
    """Keep every n-th row so at most ``max_points`` remain (first row always kept)."""
    if max_points <= 0 or len(rows) <= max_points:
        return list(rows)
    step = math.ceil(len(rows) / max_points)
    return [row for index, row in enumerate(rows) if index % step == 0]
