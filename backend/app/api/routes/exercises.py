"""Exercises — CRUD for /exercicios."""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import ResourceNotFoundError
from app.infrastructure.database import get_db
from app.repositories import exercise_repository
from app.schemas.common import MessageResponse
from app.schemas.details import ExerciseDetail
from app.schemas.exercise import ExerciseCreate, ExerciseResponse, ExerciseUpdate

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/exercicios", tags=["exercicios"])


@router.get("", response_model=list[ExerciseResponse])
async def list_exercises(db: AsyncSession = Depends(get_db)):
    return await exercise_repository.find_all(db)


@router.get("/{exercise_id}", response_model=ExerciseDetail)
async def get_exercise(exercise_id: int, db: AsyncSession = Depends(get_db)):
    exercise = await exercise_repository.find_by_id(
        db, exercise_id, include=("plan",),
    )
    if exercise is None:
        raise ResourceNotFoundError("Exercise", exercise_id)
    return exercise


@router.post(
    "", response_model=ExerciseResponse, status_code=status.HTTP_201_CREATED,
)
async def create_exercise(
    body: ExerciseCreate, db: AsyncSession = Depends(get_db),
):
    exercise = await exercise_repository.create(db, body.model_dump())
    logger.info(
        "Exercise created",
        extra={"entity": "exercise", "entity_id": exercise.id},
    )
    return exercise


@router.put("/{exercise_id}", response_model=ExerciseResponse)
async def update_exercise(
    exercise_id: int, body: ExerciseUpdate, db: AsyncSession = Depends(get_db),
):
    exercise = await exercise_repository.update(db, exercise_id, body.changes())
    if exercise is None:
        raise ResourceNotFoundError("Exercise", exercise_id)
    logger.info(
        "Exercise updated",
        extra={"entity": "exercise", "entity_id": exercise_id},
    )
    return exercise


@router.delete("/{exercise_id}", response_model=MessageResponse)
async def delete_exercise(exercise_id: int, db: AsyncSession = Depends(get_db)):
    if not await exercise_repository.delete(db, exercise_id):
        raise ResourceNotFoundError("Exercise", exercise_id)
    logger.info(
        "Exercise deleted",
        extra={"entity": "exercise", "entity_id": exercise_id},
    )
    return {"message": "Exercício deletado"}
