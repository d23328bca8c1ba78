"""Schema Bases — wire casing and partial-update semantics shared by every entity.

Invariants:
    - ApiModel serializes camelCase, accepts camelCase or snake_case on input
    - PartialUpdate: absent fields are untouched; explicit nulls are rejected
"""

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Base for every request/response schema."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        use_enum_values=True,
    )


class PartialUpdate(ApiModel):
    """Base for update payloads: only present fields are validated and applied."""

    @model_validator(mode="after")
    def reject_explicit_nulls(self):
        nulls = sorted(
            name for name in self.model_fields_set if getattr(self, name) is None
        )
        if nulls:
            raise ValueError(f"fields cannot be null: {', '.join(nulls)}")
        return self

    def changes(self) -> dict:
        """Fields the client actually sent, keyed by attribute name."""
        return self.model_dump(exclude_unset=True)


class MessageResponse(BaseModel):
    message: str
