"""Plan Schemas — tier enum, positive price, trainer name bounds."""

from pydantic import Field

from app.core.domain_types import (
    PlanName, NAME_MIN_LENGTH, NAME_MAX_LENGTH, PLAN_MIN_PRICE, PLAN_MAX_PRICE,
)
from app.schemas.common import ApiModel, PartialUpdate


class PlanCreate(ApiModel):
    """Plan creation: every field required."""
    name: PlanName
    price: float = Field(
        gt=0, ge=PLAN_MIN_PRICE, le=PLAN_MAX_PRICE, allow_inf_nan=False,
    )
    trainer: str = Field(min_length=NAME_MIN_LENGTH, max_length=NAME_MAX_LENGTH)


class PlanUpdate(PartialUpdate):
    """Plan update: any subset of PlanCreate fields."""
    name: PlanName | None = None
    price: float | None = Field(
        None, gt=0, ge=PLAN_MIN_PRICE, le=PLAN_MAX_PRICE, allow_inf_nan=False,
    )
    trainer: str | None = Field(
        None, min_length=NAME_MIN_LENGTH, max_length=NAME_MAX_LENGTH,
    )


class PlanResponse(ApiModel):
    id: int
    name: str
    price: float
    trainer: str
