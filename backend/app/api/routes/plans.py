"""Plans — CRUD for /planos.

Invariants:
    - The list carries memberCount and exercises per plan
    - GET /planos/{id} embeds members and exercises
    - DELETE of a plan still referenced by members/exercises -> 409, nothing deleted

Design Decisions:
    - Block-on-delete over cascade: removing a plan never silently removes members
"""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import ResourceNotFoundError
from app.infrastructure.database import get_db
from app.repositories import plan_repository
from app.schemas.common import MessageResponse
from app.schemas.details import PlanDetail, PlanSummary
from app.schemas.exercise import ExerciseResponse
from app.schemas.plan import PlanCreate, PlanResponse, PlanUpdate

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/planos", tags=["planos"])


@router.get("", response_model=list[PlanSummary])
async def list_plans(db: AsyncSession = Depends(get_db)):
    rows = await plan_repository.list_with_member_counts(db)
    return [
        PlanSummary(
            id=plan.id,
            name=plan.name,
            price=plan.price,
            trainer=plan.trainer,
            member_count=count,
            exercises=[ExerciseResponse.model_validate(e) for e in plan.exercises],
        )
        for plan, count in rows
    ]


@router.get("/{plan_id}", response_model=PlanDetail)
async def get_plan(plan_id: int, db: AsyncSession = Depends(get_db)):
    plan = await plan_repository.find_by_id(
        db, plan_id, include=("members", "exercises"),
    )
    if plan is None:
        raise ResourceNotFoundError("Plan", plan_id)
    return plan


@router.post(
    "", response_model=PlanResponse, status_code=status.HTTP_201_CREATED,
)
async def create_plan(body: PlanCreate, db: AsyncSession = Depends(get_db)):
    plan = await plan_repository.create(db, body.model_dump())
    logger.info("Plan created", extra={"entity": "plan", "entity_id": plan.id})
    return plan


@router.put("/{plan_id}", response_model=PlanResponse)
async def update_plan(
    plan_id: int, body: PlanUpdate, db: AsyncSession = Depends(get_db),
):
    plan = await plan_repository.update(db, plan_id, body.changes())
    if plan is None:
        raise ResourceNotFoundError("Plan", plan_id)
    logger.info("Plan updated", extra={"entity": "plan", "entity_id": plan_id})
    return plan


@router.delete("/{plan_id}", response_model=MessageResponse)
async def delete_plan(plan_id: int, db: AsyncSession = Depends(get_db)):
    if not await plan_repository.delete(db, plan_id):
        raise ResourceNotFoundError("Plan", plan_id)
    logger.info("Plan deleted", extra={"entity": "plan", "entity_id": plan_id})
    return {"message": "Plano deletado"}
