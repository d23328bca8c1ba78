"""Payload Validation — pure full/partial validation of raw payloads per entity kind.

Invariants:
    - No side effects: payload in, ValidationResult out
    - Full mode requires every field; partial mode checks only present fields
    - Violations carry a dotted field path (wire names) and a readable message

Design Decisions:
    - Reuses the request DTOs so HTTP bodies, seed data and direct callers share one rule set
    - Returns a result instead of raising; callers that want an exception call unwrap()
"""

from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping

from pydantic import BaseModel, ValidationError

from app.core.domain_types import EntityKind
from app.core.errors import FieldViolation, PayloadValidationError
from app.schemas.exercise import ExerciseCreate, ExerciseUpdate
from app.schemas.member import MemberCreate, MemberUpdate
from app.schemas.plan import PlanCreate, PlanUpdate

_SCHEMAS: dict[EntityKind, tuple[type[BaseModel], type[BaseModel]]] = {
    EntityKind.MEMBER: (MemberCreate, MemberUpdate),
    EntityKind.PLAN: (PlanCreate, PlanUpdate),
    EntityKind.EXERCISE: (ExerciseCreate, ExerciseUpdate),
}


@dataclass(frozen=True)
class ValidationResult:
    """Either a normalized value or the list of violations, never both."""
    value: dict[str, Any] | None = None
    violations: list[FieldViolation] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.violations

    def unwrap(self) -> dict[str, Any]:
        if not self.ok:
            raise PayloadValidationError(self.violations)
        return self.value


def violations_from_errors(errors: Iterable[Mapping[str, Any]]) -> list[FieldViolation]:
    """Convert pydantic error dicts into FieldViolations."""
    return [
        FieldViolation(
            field=".".join(str(loc) for loc in e["loc"]) or "payload",
            message=e["msg"],
            type=e["type"],
        )
        for e in errors
    ]


def validate_payload(
    kind: EntityKind, payload: Any, partial: bool = False,
) -> ValidationResult:
    """Validate a raw payload for one entity kind.

    Args:
        kind: which entity the payload describes.
        payload: the candidate mapping (camelCase or snake_case keys).
        partial: True for update semantics (only present fields checked).

    Returns:
        ValidationResult whose value holds the typed fields keyed by attribute
        name; in partial mode only the fields present in the payload.
    """
    create_schema, update_schema = _SCHEMAS[kind]
    schema = update_schema if partial else create_schema
    try:
        model = schema.model_validate(payload)
    except ValidationError as exc:
        return ValidationResult(violations=violations_from_errors(exc.errors()))
    return ValidationResult(value=model.model_dump(exclude_unset=partial))
