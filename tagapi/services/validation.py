# tagapi/services/validation.py
"""
Explicit request validation.

Routers receive raw JSON and run it through these helpers before touching
any service, so a rejected payload never reaches the database. Failures come
back as data (a ValidationResult) rather than as an exception; the caller
decides how to log and surface them.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, List, Optional, Sequence, Tuple, Type, TypeVar, Union

from pydantic import BaseModel, TypeAdapter, ValidationError

M = TypeVar("M", bound=BaseModel)
V = TypeVar("V")


@dataclass(frozen=True)
class FieldError:
    loc: Tuple[Union[str, int], ...]
    msg: str
    type: str

    @property
    def field(self) -> str:
        return ".".join(str(p) for p in self.loc)

    def as_dict(self) -> dict:
        return {"field": self.field, "message": self.msg, "type": self.type}


@dataclass
class ValidationResult(Generic[V]):
    value: Optional[V] = None
    errors: List[FieldError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def _field_errors(exc: ValidationError) -> List[FieldError]:
    return [
        FieldError(loc=tuple(e.get("loc", ())), msg=e.get("msg", ""), type=e.get("type", ""))
        for e in exc.errors()
    ]


def validate_model(model: Type[M], payload: Any) -> ValidationResult[M]:
    try:
        return ValidationResult(value=model.model_validate(payload))
    except ValidationError as exc:
        return ValidationResult(errors=_field_errors(exc))


def validate_many(model: Type[M], payloads: Sequence[Any]) -> ValidationResult[List[M]]:
    """
    Validate every element; errors are reported for all of them (with the
    element index first in `loc`) and no partial value is returned.
    """
    adapter = TypeAdapter(List[model])  # type: ignore[valid-type]
    try:
        return ValidationResult(value=adapter.validate_python(payloads))
    except ValidationError as exc:
        return ValidationResult(errors=_field_errors(exc))
