"""Shared service error definitions."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from ..models import FieldError

ERR_MISSING_FIELDS = "ERR_MISSING_FIELDS"
ERR_VALIDATION = "ERR_VALIDATION"
ERR_ENCODING_CONSTRAINT = "ERR_ENCODING_CONSTRAINT"


@dataclass(slots=True)
class ServiceError(Exception):
    code: str
    message: str
    status_code: int = 400
    errors: list[str] = field(default_factory=list)
    field_errors: list[FieldError] = field(default_factory=list)

    def __str__(self) -> str:  # noqa: D401 override
        return f"{self.code}: {self.message}"


def err_missing_fields(missing: Sequence[str]) -> ServiceError:
    return ServiceError(
        code=ERR_MISSING_FIELDS,
        message=f"Missing fields: {', '.join(missing)}",
        status_code=400,
        errors=list(missing),
    )


def err_validation(field_errors: Sequence[FieldError]) -> ServiceError:
    return ServiceError(
        code=ERR_VALIDATION,
        message="\n".join(error.detail for error in field_errors),
        status_code=422,
        errors=[error.detail for error in field_errors],
        field_errors=list(field_errors),
    )


def err_encoding_constraint(message: str | None = None) -> ServiceError:
    return ServiceError(
        code=ERR_ENCODING_CONSTRAINT,
        message=message or "Value too long for single-byte TLV length",
        status_code=500,
    )
