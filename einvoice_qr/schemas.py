"""Pydantic schemas for API contracts."""
from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class ErrorCorrectionEnum(str, Enum):
    L = "L"
    M = "M"
    Q = "Q"
    H = "H"


class GenerateQRRequest(BaseModel):
    seller_name: str = Field(default="", description="Seller name as printed on the invoice")
    seller_trn: str = Field(default="", description="15-digit tax registration number, starts and ends with 3")
    invoice_date: str = Field(default="", description="ISO-8601 datetime, YYYY-MM-DD or YYYY-MM-DD HH:mm")
    invoice_total: str = Field(default="", description="Invoice total including VAT, whole number")
    vat_total: str = Field(default="", description="VAT total, whole number")
    error_correction: ErrorCorrectionEnum | None = None
    include_image: bool = True


class GenerateQRResponse(BaseModel):
    payload_base64: str
    payload_hex: str
    invoice_date: str
    qr_png_base64: str | None = None


class ErrorResponse(BaseModel):
    code: str
    message: str
    errors: list[str] = Field(default_factory=list)
