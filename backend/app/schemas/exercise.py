"""Exercise Schemas — name/description bounds and an integer plan reference."""

from pydantic import Field

from app.core.domain_types import (
    NAME_MIN_LENGTH, NAME_MAX_LENGTH, MAX_ID,
    DESCRIPTION_MIN_LENGTH, DESCRIPTION_MAX_LENGTH,
)
from app.schemas.common import ApiModel, PartialUpdate


class ExerciseCreate(ApiModel):
    """Exercise creation: every field required."""
    name: str = Field(min_length=NAME_MIN_LENGTH, max_length=NAME_MAX_LENGTH)
    description: str = Field(
        min_length=DESCRIPTION_MIN_LENGTH, max_length=DESCRIPTION_MAX_LENGTH,
    )
    plan_id: int = Field(gt=0, le=MAX_ID, strict=True)


class ExerciseUpdate(PartialUpdate):
    name: str | None = Field(
        None, min_length=NAME_MIN_LENGTH, max_length=NAME_MAX_LENGTH,
    )
    description: str | None = Field(
        None, min_length=DESCRIPTION_MIN_LENGTH, max_length=DESCRIPTION_MAX_LENGTH,
    )
    plan_id: int | None = Field(None, gt=0, le=MAX_ID, strict=True)


class ExerciseResponse(ApiModel):
    id: int
    name: str
    description: str
    plan_id: int
