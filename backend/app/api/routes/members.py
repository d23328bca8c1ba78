"""Members — CRUD for /membros.

Invariants:
    - Bodies are validated by MemberCreate/MemberUpdate before any storage call
    - GET /membros/{id} embeds the member's plan; the list does not
    - Missing ids raise ResourceNotFoundError (404), never an empty 200
"""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import ResourceNotFoundError
from app.infrastructure.database import get_db
from app.repositories import member_repository
from app.schemas.common import MessageResponse
from app.schemas.details import MemberDetail
from app.schemas.member import MemberCreate, MemberResponse, MemberUpdate

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/membros", tags=["membros"])


@router.get("", response_model=list[MemberResponse])
async def list_members(db: AsyncSession = Depends(get_db)):
    return await member_repository.find_all(db)


@router.get("/{member_id}", response_model=MemberDetail)
async def get_member(member_id: int, db: AsyncSession = Depends(get_db)):
    member = await member_repository.find_by_id(db, member_id, include=("plan",))
    if member is None:
        raise ResourceNotFoundError("Member", member_id)
    return member


@router.post(
    "", response_model=MemberResponse, status_code=status.HTTP_201_CREATED,
)
async def create_member(body: MemberCreate, db: AsyncSession = Depends(get_db)):
    member = await member_repository.create(db, body.model_dump())
    logger.info(
        "Member created", extra={"entity": "member", "entity_id": member.id},
    )
    return member


@router.put("/{member_id}", response_model=MemberResponse)
async def update_member(
    member_id: int, body: MemberUpdate, db: AsyncSession = Depends(get_db),
):
    """Apply only the fields present in the body."""
    member = await member_repository.update(db, member_id, body.changes())
    if member is None:
        raise ResourceNotFoundError("Member", member_id)
    logger.info(
        "Member updated", extra={"entity": "member", "entity_id": member_id},
    )
    return member


@router.delete("/{member_id}", response_model=MessageResponse)
async def delete_member(member_id: int, db: AsyncSession = Depends(get_db)):
    if not await member_repository.delete(db, member_id):
        raise ResourceNotFoundError("Member", member_id)
    logger.info(
        "Member deleted", extra={"entity": "member", "entity_id": member_id},
    )
    return {"message": "Membro deletado"}
