"""Plan Repository — plan CRUD plus the join and aggregate reads.

Invariants:
    - A plan with members or exercises is never deleted (ReferenceConflictError)
    - list_with_member_counts counts in SQL; member rows are not loaded
"""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.core.domain_types import PlanId
from app.core.errors import ReferenceConflictError
from app.models import Exercise, Member, Plan
from app.repositories.crud import CrudRepository, storable_id


class PlanRepository(CrudRepository[Plan]):

    def __init__(self):
        super().__init__(Plan, "Plan")

    async def list_with_member_counts(
        self, db: AsyncSession,
    ) -> list[tuple[Plan, int]]:
        """Every plan with its exercises loaded and its member count."""
        member_counts = (
            select(
                Member.plan_id,
                func.count(Member.id).label("member_count"),
            )
            .group_by(Member.plan_id)
            .subquery()
        )
        stmt = (
            select(Plan, func.coalesce(member_counts.c.member_count, 0))
            .outerjoin(member_counts, member_counts.c.plan_id == Plan.id)
            .options(selectinload(Plan.exercises))
            .order_by(Plan.id)
        )
        async with self.storage_errors(db, "list"):
            result = await db.execute(stmt)
            return [(plan, count) for plan, count in result.all()]

    async def list_with_relations(self, db: AsyncSession) -> list[Plan]:
        """Every plan with members and exercises loaded (statistics input)."""
        return await self.find_all(db, include=("members", "exercises"))

    async def count_references(
        self, db: AsyncSession, plan_id: PlanId,
    ) -> tuple[int, int]:
        """(members, exercises) still pointing at the plan."""
        if not storable_id(plan_id):
            return 0, 0
        async with self.storage_errors(db, "count"):
            members = await db.scalar(
                select(func.count(Member.id)).where(Member.plan_id == plan_id),
            )
            exercises = await db.scalar(
                select(func.count(Exercise.id)).where(Exercise.plan_id == plan_id),
            )
            return members, exercises

    async def delete(self, db: AsyncSession, id: int) -> bool:
        members, exercises = await self.count_references(db, PlanId(id))
        if members or exercises:
            raise ReferenceConflictError(
                f"Plan '{id}' still has {members} member(s) and "
                f"{exercises} exercise(s)",
            )
        return await super().delete(db, id)
