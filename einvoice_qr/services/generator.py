"""Invoice QR generation pipeline: normalize, validate, encode, render."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from ..config import ErrorCorrectionLevel, Settings, settings as default_settings
from ..dates import to_iso_date
from ..invoice_encoder import EncodedPayload, encode_invoice
from ..models import InvoiceFields
from ..renderer import render_qr_payload, save_png
from ..tlv import TLVLengthError
from ..validation import check_presence, collect_format_errors
from .errors import err_encoding_constraint, err_missing_fields, err_validation

logger = logging.getLogger("einvoice_qr.generator")


@dataclass(slots=True)
class GenerateResult:
    fields: InvoiceFields
    encoded: EncodedPayload
    qr_png_bytes: bytes | None = None
    qr_png_base64: str | None = None
    file_path: Path | None = None


class InvoiceQRGenerator:
    def __init__(self, config: Settings | None = None):
        self.settings = config or default_settings

    def prepare_fields(
        self,
        *,
        seller_name: str | None,
        seller_trn: str | None,
        invoice_date: str | None,
        invoice_total: str | None,
        vat_total: str | None,
    ) -> InvoiceFields:
        """Strip raw input and normalize the date; no validation happens here."""

        return InvoiceFields(
            seller_name=(seller_name or "").strip(),
            seller_trn=(seller_trn or "").strip(),
            invoice_date=to_iso_date((invoice_date or "").strip(), utc_offset=self.settings.utc_offset),
            invoice_total=(invoice_total or "").strip(),
            vat_total=(vat_total or "").strip(),
        )

    def validate(self, fields: InvoiceFields) -> None:
        missing = check_presence(fields)
        if missing:
            logger.warning("missing invoice fields", extra={"missing_fields": missing})
            raise err_missing_fields(missing)

        errors = collect_format_errors(fields, strict_dates=self.settings.strict_dates)
        if errors:
            logger.warning(
                "invoice fields failed validation",
                extra={"error_kinds": [error.kind.value for error in errors], "error_count": len(errors)},
            )
            raise err_validation(errors)

    def encode(self, fields: InvoiceFields) -> EncodedPayload:
        try:
            return encode_invoice(fields)
        except TLVLengthError as exc:
            logger.error("tlv value exceeds length framing", extra={"tag": exc.tag, "byte_length": exc.length})
            raise err_encoding_constraint(str(exc)) from exc

    def generate(
        self,
        *,
        seller_name: str | None,
        seller_trn: str | None,
        invoice_date: str | None,
        invoice_total: str | None,
        vat_total: str | None,
        render_image: bool = True,
        output_dir: Path | str | None = None,
        error_correction: ErrorCorrectionLevel | None = None,
    ) -> GenerateResult:
        fields = self.prepare_fields(
            seller_name=seller_name,
            seller_trn=seller_trn,
            invoice_date=invoice_date,
            invoice_total=invoice_total,
            vat_total=vat_total,
        )
        self.validate(fields)
        encoded = self.encode(fields)
        logger.info("qr payload generated", extra={"payload_bytes": len(encoded.payload)})

        result = GenerateResult(fields=fields, encoded=encoded)
        if not render_image:
            return result

        render = render_qr_payload(
            encoded.base64,
            error_correction=error_correction or self.settings.error_correction,
            box_size=self.settings.qr_box_size,
            border=self.settings.qr_border,
        )
        result.qr_png_bytes = render["png_bytes"]
        result.qr_png_base64 = render["png_base64"]

        if output_dir is not None:
            result.file_path = save_png(render["png_bytes"], output_dir, self.settings.output_filename)
            logger.info("qr image saved", extra={"file_path": str(result.file_path)})

        return result
