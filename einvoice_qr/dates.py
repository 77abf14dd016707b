"""Normalization of hand-typed invoice dates into ISO-8601 with a fixed offset."""
from __future__ import annotations

import re

DEFAULT_UTC_OFFSET = "+03:00"

_DATE_ONLY = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
# Narrower than Python's \s: no \x1c-\x1f or \x85.
_SEPARATOR = r"[ \t\n\v\f\r\u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]"
_DATE_TIME = re.compile(r"([0-9]{4}-[0-9]{2}-[0-9]{2})" + _SEPARATOR + r"+([0-9]{2}:[0-9]{2})")
_ISO_DATETIME = re.compile(
    r"[0-9]{4}-[0-9]{2}-[0-9]{2}T[0-9]{2}:[0-9]{2}(:[0-9]{2}(\.[0-9]+)?)?(Z|[+-][0-9]{2}:[0-9]{2})?"
)


def to_iso_date(value: str | None, utc_offset: str = DEFAULT_UTC_OFFSET) -> str:
    """Expand ``YYYY-MM-DD`` and ``YYYY-MM-DD HH:mm`` shorthands.

    Values that already carry a ``T`` separator, and anything else that does
    not match a shorthand, are returned untouched. No calendar checks are made
    and the offset is appended as-is, never computed.
    """

    if not value:
        return ""
    if "T" in value:
        return value

    if _DATE_ONLY.fullmatch(value):
        return f"{value}T00:00:00{utc_offset}"

    match = _DATE_TIME.fullmatch(value)
    if match:
        date_part, time_part = match.groups()
        return f"{date_part}T{time_part}:00{utc_offset}"

    return value


def looks_like_iso_datetime(value: str) -> bool:
    return _ISO_DATETIME.fullmatch(value) is not None
