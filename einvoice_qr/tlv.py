"""Utility helpers to build binary TLV records (1-byte tag, 1-byte length)."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

MAX_TAG = 255
MAX_VALUE_BYTES = 255


class TLVLengthError(ValueError):
    """Raised when a value cannot be framed with a single length byte."""

    def __init__(self, tag: int, length: int):
        self.tag = tag
        self.length = length
        super().__init__(f"Value too long for tag {tag}: {length} bytes (max {MAX_VALUE_BYTES})")


@dataclass(frozen=True)
class TLVRecord:
    tag: int
    value: bytes

    def __post_init__(self) -> None:
        if not 1 <= self.tag <= MAX_TAG:
            raise ValueError(f"Invalid tag number: {self.tag} (must be 1-{MAX_TAG})")
        if len(self.value) > MAX_VALUE_BYTES:
            raise TLVLengthError(self.tag, len(self.value))

    @property
    def length(self) -> int:
        return len(self.value)

    def serialize(self) -> bytes:
        return bytes([self.tag, self.length]) + self.value


def text_record(tag: int, value: str) -> TLVRecord:
    return TLVRecord(tag=tag, value=value.encode("utf-8"))


def encode_tlv(tag: int, value: str) -> bytes:
    """Encode a single text value as ``[tag][length][utf-8 bytes]``."""

    return text_record(tag, value).serialize()


def build_tlv(records: Iterable[TLVRecord]) -> bytes:
    """Serialize iterable of TLV records into one payload."""

    return b"".join(record.serialize() for record in records)
