"""Invoice value types shared by validation and encoding."""
from __future__ import annotations

import enum
from dataclasses import astuple, dataclass, fields


class ErrorKind(str, enum.Enum):
    MISSING_FIELD = "MISSING_FIELD"
    TRN_FORMAT = "TRN_FORMAT"
    INTEGER_FORMAT = "INTEGER_FORMAT"
    DATE_FORMAT = "DATE_FORMAT"


@dataclass(frozen=True)
class InvoiceFields:
    """The five mandatory fields of a simplified tax invoice, in wire order."""

    seller_name: str
    seller_trn: str
    invoice_date: str
    invoice_total: str
    vat_total: str

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    def values(self) -> tuple[str, ...]:
        return astuple(self)

    def items(self) -> list[tuple[str, str]]:
        return list(zip(self.field_names(), self.values()))


@dataclass(frozen=True)
class FieldError:
    kind: ErrorKind
    field: str
    detail: str

    def __str__(self) -> str:  # noqa: D401 override
        return self.detail
