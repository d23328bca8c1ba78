"""Boundary Protocols — structural contracts between the pure core and the ORM shell.

Invariants:
    - Core NEVER imports ORM models; it sees rows through these Protocols
    - Implementations are the SQLAlchemy models in app/models/

Design Decisions:
    - Protocol over ABC: structural subtyping, test doubles are plain namespaces
"""

from typing import Protocol, Sequence

from app.core.domain_types import ExerciseId, MemberId, PlanId


class ExerciseLike(Protocol):
    """Structural contract for an exercise row."""
    id: ExerciseId
    name: str
    description: str
    plan_id: PlanId


class MemberLike(Protocol):
    """Structural contract for a member row."""
    id: MemberId
    name: str
    email: str
    age: int
    plan_id: PlanId


class PlanLike(Protocol):
    """Structural contract for a plan row with its relationships loaded."""
    id: PlanId
    name: str
    price: float
    trainer: str
    members: Sequence[MemberLike]
    exercises: Sequence[ExerciseLike]
