"""Relationship-aware Responses — entities with their related rows embedded.

Design Decisions:
    - Kept apart from the per-entity modules so plan <-> member <-> exercise
      schemas never import each other in a cycle
"""

from app.schemas.common import ApiModel
from app.schemas.exercise import ExerciseResponse
from app.schemas.member import MemberBrief, MemberResponse
from app.schemas.plan import PlanResponse


class MemberDetail(MemberResponse):
    plan: PlanResponse


class ExerciseDetail(ExerciseResponse):
    plan: PlanResponse


class PlanDetail(PlanResponse):
    members: list[MemberResponse]
    exercises: list[ExerciseResponse]


class PlanSummary(PlanResponse):
    """Plan list entry: member count instead of the member rows."""
    member_count: int
    exercises: list[ExerciseResponse]


class PlanStatistics(ApiModel):
    """One /estatisticas entry."""
    plan: str
    total_members: int
    trainer: str
    price: float
    exercises: list[ExerciseResponse]
    members: list[MemberBrief]
