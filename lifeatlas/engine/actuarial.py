"""Simplified US period life tables: annual probability of dying (qx) by age.

Condensed from CDC NVSS 2021 data at five-year breakpoints; values between
breakpoints are linearly interpolated and ages outside the table use the
nearest boundary rate.
"""
from __future__ import annotations

import logging
from typing import Sequence, Tuple

from ..data_model import Sex

logger = logging.getLogger(__name__)

QxTable = Sequence[Tuple[float, float]]

LIFE_TABLE_QX_MALE: QxTable = (
    (0, 0.00600), (1, 0.00040), (5, 0.00015), (10, 0.00012),
    (15, 0.00060), (20, 0.00130), (25, 0.00160), (30, 0.00170),
    (35, 0.00200), (40, 0.00250), (45, 0.00380), (50, 0.00580),
    (55, 0.00900), (60, 0.01350), (65, 0.01900), (70, 0.02700),
    (75, 0.04200), (80, 0.06700), (85, 0.10500), (90, 0.16500),
    (95, 0.25000), (100, 0.38000), (105, 0.50000), (110, 1.0),
)

LIFE_TABLE_QX_FEMALE: QxTable = (
    (0, 0.00500), (1, 0.00035), (5, 0.00012), (10, 0.00010),
    (15, 0.00030), (20, 0.00050), (25, 0.00060), (30, 0.00070),
    (35, 0.00090), (40, 0.00140), (45, 0.00220), (50, 0.00350),
    (55, 0.00550), (60, 0.00850), (65, 0.01250), (70, 0.01900),
    (75, 0.03100), (80, 0.05200), (85, 0.08800), (90, 0.14500),
    (95, 0.22000), (100, 0.35000), (105, 0.48000), (110, 1.0),
)


def is_male(sex: Sex | str) -> bool:
    return str(getattr(sex, "value", sex)).strip().lower() == Sex.MALE.value


def is_female(sex: Sex | str) -> bool:
    return str(getattr(sex, "value", sex)).strip().lower() == Sex.FEMALE.value


def table_for_sex(sex: Sex | str) -> QxTable:
    """Male table for "male", female table for everything else."""
    if is_male(sex):
        return LIFE_TABLE_QX_MALE
    if not is_female(sex):
        logger.warning("Unsupported sex %r, using the female life table", sex)
    return LIFE_TABLE_QX_FEMALE


def interpolate_qx(table: QxTable, age: float) -> float:
    if age <= table[0][0]:
        return table[0][1]
    if age >= table[-1][0]:
        return table[-1][1]

    for (a0, q0), (a1, q1) in zip(table, table[1:]):
        if a0 <= age < a1:
            t = (age - a0) / (a1 - a0)
            return q0 + t * (q1 - q0)
    return table[-1][1]
