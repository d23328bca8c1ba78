"""ORM Models — SQLAlchemy declarative models for plans, members and exercises.

Invariants:
    - All models inherit from Base (db/base.py)
    - Plan is the parent; members and exercises reference it by plan_id

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs (ADR: standard SQLAlchemy pattern)
"""

from app.models.plan import Plan  # noqa: F401
from app.models.member import Member  # noqa: F401
from app.models.exercise import Exercise  # noqa: F401
