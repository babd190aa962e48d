"""Request payload validation returning structured results instead of raising."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, ValidationError

M = TypeVar("M", bound=BaseModel)


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str


@dataclass
class ValidationResult(Generic[M]):
    value: Optional[M] = None
    errors: list[FieldError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.value is not None and not self.errors


def _field_name(loc: tuple[Any, ...]) -> str:
    return ".".join(str(part) for part in loc) or "__root__"


def _message(err: dict[str, Any]) -> str:
    msg = err.get("msg", "Invalid value")
    # pydantic prefixes messages raised from validators
    return msg.removeprefix("Value error, ")


def validate_payload(model: type[M], data: Any) -> ValidationResult[M]:
    if not isinstance(data, dict):
        return ValidationResult(errors=[FieldError("__root__", "Request body must be a JSON object")])
    try:
        return ValidationResult(value=model.model_validate(data))
    except ValidationError as e:
        errors = [FieldError(_field_name(err.get("loc", ())), _message(err)) for err in e.errors()]
        return ValidationResult(errors=errors)
