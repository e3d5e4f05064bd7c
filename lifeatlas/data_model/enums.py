from __future__ import annotations

from enum import Enum


class PhaseCategory(str, Enum):
    CAREER = "career"
    EDUCATION = "education"
    FAMILY = "family"
    CAREGIVING = "caregiving"
    HEALTH = "health"
    HOUSING = "housing"
    FINANCIAL = "financial"
    PERSONAL = "personal"
    RELATIONSHIP = "relationship"
    BIOLOGIC_RHYTHMS = "biologic-rhythms"


class CertaintyLevel(str, Enum):
    CONFIRMED = "confirmed"
    LIKELY = "likely"
    POSSIBLE = "possible"
    SPECULATIVE = "speculative"


class FlexibilityLevel(str, Enum):
    FIXED = "fixed"
    NEGOTIABLE = "negotiable"
    FLEXIBLE = "flexible"


class AccountType(str, Enum):
    CHECKING = "checking"
    SAVINGS = "savings"
    INVESTMENT = "investment"
    RETIREMENT = "retirement"
    PROPERTY = "property"
    DEBT = "debt"
    OTHER = "other"


class DebtStrategy(str, Enum):
    MINIMUM_PAYMENT = "minimum-payment"
    FIXED_PAYMENT = "fixed-payment"
    SNOWBALL = "snowball"
    AVALANCHE = "avalanche"


class SavingsGoalType(str, Enum):
    EMERGENCY = "emergency"
    RETIREMENT = "retirement"
    EDUCATION = "education"
    HOUSE = "house"
    CUSTOM = "custom"


class Sex(str, Enum):
    MALE = "male"
    FEMALE = "female"


class Relationship(str, Enum):
    PARTNER = "partner"
    CHILD = "child"
    PARENT = "parent"
    SIBLING = "sibling"
    OTHER = "other"


class ZoomLevel(str, Enum):
    DECADE = "decade"
    YEAR = "year"
    MONTH = "month"
    WEEK = "week"


PHASE_CATEGORIES = [c.value for c in PhaseCategory]
DEBT_STRATEGIES = [s.value for s in DebtStrategy]
