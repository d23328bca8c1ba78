"""Plan Statistics — pure per-plan rollups across members and exercises.

Invariants:
    - Input plans must have members and exercises already loaded (no IO here)
    - One entry per plan, in the order the plans were given
    - Plan name is uppercased; members are reduced to name + age

Design Decisions:
    - Pure function, not an ORM method (ADR: persistence rows stay dumb, rollups are presentation)
    - Returns plain dicts with snake_case keys; the response schema owns the wire casing
"""

from typing import Iterable

from app.core.repository_protocols import ExerciseLike, MemberLike, PlanLike


def compute_plan_statistics(plans: Iterable[PlanLike]) -> list[dict]:
    """Compute the statistics projection for every plan. Pure, no IO."""
    return [_plan_rollup(plan) for plan in plans]


def _plan_rollup(plan: PlanLike) -> dict:
    return {
        "plan": plan.name.upper(),
        "total_members": len(plan.members),
        "trainer": plan.trainer,
        "price": plan.price,
        "exercises": [_exercise_view(e) for e in plan.exercises],
        "members": [_member_view(m) for m in plan.members],
    }


def _exercise_view(exercise: ExerciseLike) -> dict:
    return {
        "id": exercise.id,
        "name": exercise.name,
        "description": exercise.description,
        "plan_id": exercise.plan_id,
    }


def _member_view(member: MemberLike) -> dict:
    return {"name": member.name, "age": member.age}
