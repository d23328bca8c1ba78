"""Member Schemas — name/email/age bounds and plan reference.

Invariants:
    - name 3-100 chars, email valid and <= 100 chars, age 16-100, planId in 1..MAX_ID
    - age and planId must be JSON integers: numeric strings and floats are rejected
    - email is stored as sent; EmailStr only decides whether it is valid
    - planId existence is NOT checked here: the FK constraint decides
"""

from typing import Any

from pydantic import EmailStr, Field, ValidatorFunctionWrapHandler, field_validator

from app.core.domain_types import (
    NAME_MIN_LENGTH, NAME_MAX_LENGTH, EMAIL_MAX_LENGTH,
    MEMBER_MIN_AGE, MEMBER_MAX_AGE, MAX_ID,
)
from app.schemas.common import ApiModel, PartialUpdate


def _check_email(v: Any, handler: ValidatorFunctionWrapHandler) -> str | None:
    email = handler(v)
    if email is None:
        return None
    if len(v) > EMAIL_MAX_LENGTH:
        raise ValueError(f"email must have at most {EMAIL_MAX_LENGTH} characters")
    # email-validator lowercases the domain; keep the client's spelling
    if v.casefold() == email.casefold():
        return v
    return email


class MemberCreate(ApiModel):
    """Member creation: every field required."""
    name: str = Field(min_length=NAME_MIN_LENGTH, max_length=NAME_MAX_LENGTH)
    email: EmailStr
    age: int = Field(ge=MEMBER_MIN_AGE, le=MEMBER_MAX_AGE, strict=True)
    plan_id: int = Field(gt=0, le=MAX_ID, strict=True)

    @field_validator("email", mode="wrap")
    @classmethod
    def email_as_sent(cls, v: Any, handler: ValidatorFunctionWrapHandler) -> str:
        return _check_email(v, handler)


class MemberUpdate(PartialUpdate):
    """Member update: any subset of MemberCreate fields."""
    name: str | None = Field(
        None, min_length=NAME_MIN_LENGTH, max_length=NAME_MAX_LENGTH,
    )
    email: EmailStr | None = None
    age: int | None = Field(None, ge=MEMBER_MIN_AGE, le=MEMBER_MAX_AGE, strict=True)
    plan_id: int | None = Field(None, gt=0, le=MAX_ID, strict=True)

    @field_validator("email", mode="wrap")
    @classmethod
    def email_as_sent(
        cls, v: Any, handler: ValidatorFunctionWrapHandler,
    ) -> str | None:
        return _check_email(v, handler)


class MemberResponse(ApiModel):
    id: int
    name: str
    email: str
    age: int
    plan_id: int


class MemberBrief(ApiModel):
    """Member reduced to what the statistics endpoint exposes."""
    name: str
    age: int
