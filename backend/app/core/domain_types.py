"""Domain Types — enums and bounds shared by schemas, models and seed data.

Invariants:
    - PlanName is the closed set of plan tiers; nothing else reaches storage
    - Length/range bounds live here once; schemas and ORM columns read them

Design Decisions:
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

PlanId = NewType("PlanId", int)
MemberId = NewType("MemberId", int)
ExerciseId = NewType("ExerciseId", int)


# ─── Enums ───────────────────────────────────────────────────────

class PlanName(str, Enum):
    """Plan tiers offered by the gym."""
    NORMAL = "normal"
    PREMIUM = "premium"
    PLATINA = "platina"


class EntityKind(str, Enum):
    """The three row-shaped entities exposed by the API."""
    MEMBER = "member"
    PLAN = "plan"
    EXERCISE = "exercise"


# ─── Bounds ──────────────────────────────────────────────────────

NAME_MIN_LENGTH = 3
NAME_MAX_LENGTH = 100
EMAIL_MAX_LENGTH = 100
DESCRIPTION_MIN_LENGTH = 5
DESCRIPTION_MAX_LENGTH = 500
MEMBER_MIN_AGE = 16
MEMBER_MAX_AGE = 100
PLAN_MIN_PRICE = 0.01
PLAN_MAX_PRICE = 99_999_999.99  # Numeric(10, 2) column capacity
MAX_ID = 2_147_483_647  # Integer primary key capacity on PostgreSQL
