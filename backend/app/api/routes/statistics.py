"""Statistics — GET /estatisticas, per-plan rollups of members and exercises.

Invariants:
    - One entry per plan, ordered by plan id; plans without members report 0
    - Read-then-map: one query batch, then the pure compute_plan_statistics
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.plan_statistics import compute_plan_statistics
from app.infrastructure.database import get_db
from app.repositories import plan_repository
from app.schemas.details import PlanStatistics

router = APIRouter(prefix="/estatisticas", tags=["estatisticas"])


@router.get("", response_model=list[PlanStatistics])
async def get_statistics(db: AsyncSession = Depends(get_db)):
    plans = await plan_repository.list_with_relations(db)
    return compute_plan_statistics(plans)
