"""Simplified tax invoice QR payload encoder (phase 1, tags 1-5)."""
from __future__ import annotations

import base64
from dataclasses import dataclass

from .models import InvoiceFields
from .tlv import build_tlv, text_record

TAG_SELLER_NAME = 1
TAG_SELLER_TRN = 2
TAG_INVOICE_DATE = 3
TAG_INVOICE_TOTAL = 4
TAG_VAT_TOTAL = 5


@dataclass(frozen=True)
class EncodedPayload:
    payload: bytes
    base64: str

    @property
    def hex(self) -> str:
        return self.payload.hex()


def build_payload(fields: InvoiceFields) -> bytes:
    """Concatenate the five TLV records in their fixed tag order."""

    return build_tlv(
        [
            text_record(TAG_SELLER_NAME, fields.seller_name),
            text_record(TAG_SELLER_TRN, fields.seller_trn),
            text_record(TAG_INVOICE_DATE, fields.invoice_date),
            text_record(TAG_INVOICE_TOTAL, fields.invoice_total),
            text_record(TAG_VAT_TOTAL, fields.vat_total),
        ]
    )


def to_base64(payload: bytes) -> str:
    return base64.b64encode(payload).decode("ascii")


def encode_invoice(fields: InvoiceFields) -> EncodedPayload:
    payload = build_payload(fields)
    return EncodedPayload(payload=payload, base64=to_base64(payload))
