"""Format rules for the five invoice QR fields."""
from __future__ import annotations

import re

from .dates import looks_like_iso_datetime
from .models import ErrorKind, FieldError, InvoiceFields

TRN_LENGTH = 15

_TRN_SHAPE = re.compile(r"[0-9]{15}")
_DIGITS = re.compile(r"[0-9]+")
_DECIMAL_MARKS = re.compile(r"[.,]")


def check_presence(fields: InvoiceFields) -> list[str]:
    """Return the names of fields that are empty after trimming, in wire order."""

    return [name for name, value in fields.items() if not (value or "").strip()]


def check_tax_registration_number(value: str, field: str = "seller_trn") -> FieldError | None:
    trn = (value or "").strip()

    if not _TRN_SHAPE.fullmatch(trn):
        return FieldError(ErrorKind.TRN_FORMAT, field, f"TRN must consist of exactly {TRN_LENGTH} digits.")
    if trn[0] != "3" or trn[-1] != "3":
        return FieldError(ErrorKind.TRN_FORMAT, field, "TRN must start with 3 and end with 3.")
    return None


def check_integer_no_decimals(value: str, label: str, field: str | None = None) -> FieldError | None:
    """Accept only whole numbers written as plain ASCII digits.

    A decimal separator is reported on its own so that ``"12.5"`` reads as
    "contains decimals" rather than the generic digits-only message.
    """

    amount = (value or "").strip()
    field = field or label

    if _DECIMAL_MARKS.search(amount):
        return FieldError(ErrorKind.INTEGER_FORMAT, field, f"{label} must not contain decimals.")
    if not _DIGITS.fullmatch(amount):
        return FieldError(ErrorKind.INTEGER_FORMAT, field, f"{label} must be digits only (integer).")
    return None


def check_iso_datetime(value: str, field: str = "invoice_date") -> FieldError | None:
    if not looks_like_iso_datetime((value or "").strip()):
        return FieldError(
            ErrorKind.DATE_FORMAT,
            field,
            "Invoice Date must be YYYY-MM-DD, YYYY-MM-DD HH:mm or an ISO-8601 datetime.",
        )
    return None


def collect_format_errors(fields: InvoiceFields, *, strict_dates: bool = False) -> list[FieldError]:
    """Run every format rule and return all failures, never stopping early."""

    checks = [
        check_tax_registration_number(fields.seller_trn),
        check_integer_no_decimals(fields.invoice_total, "Invoice Total", field="invoice_total"),
        check_integer_no_decimals(fields.vat_total, "VAT Total", field="vat_total"),
    ]
    if strict_dates:
        checks.append(check_iso_datetime(fields.invoice_date))
    return [error for error in checks if error is not None]
