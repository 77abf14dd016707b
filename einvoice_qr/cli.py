"""Command-line entry point: collect invoice fields, print the payload, save the QR image."""
from __future__ import annotations

import argparse
import sys
from typing import Callable

from .config import LoggingConfig, settings
from .logging_conf import configure_logging
from .services.errors import ServiceError
from .services.generator import InvoiceQRGenerator

CLI_LOGGING = LoggingConfig(level="ERROR", json_logs=False)

PROMPTS = {
    "seller_name": "Seller name: ",
    "seller_trn": "Seller TRN (15 digits, start/end with 3): ",
    "invoice_date": "Invoice Date (ISO e.g. 2026-02-23T18:30:00+03:00 or 2026-02-23 18:30): ",
    "invoice_total": "Invoice Total (integer, no decimals): ",
    "vat_total": "VAT Total (integer, no decimals): ",
}


def collect_fields(args: argparse.Namespace, ask: Callable[[str], str] = input) -> dict[str, str]:
    """Use values given as flags and prompt for the rest."""

    values: dict[str, str] = {}
    for name, prompt in PROMPTS.items():
        value = getattr(args, name)
        if value is None:
            try:
                value = ask(prompt)
            except EOFError:
                value = ""
        values[name] = value.strip()
    return values


def _report_error(message: str) -> int:
    print("\nError:", file=sys.stderr)
    print(message, file=sys.stderr)
    return 1


def cmd_generate(args: argparse.Namespace, ask: Callable[[str], str] = input) -> int:
    values = collect_fields(args, ask)
    generator = InvoiceQRGenerator(settings)

    try:
        result = generator.generate(
            **values,
            render_image=not args.no_image,
            output_dir=None if args.no_image else args.output_dir,
            error_correction=args.error_correction,
        )
    except ServiceError as exc:
        return _report_error(exc.message)
    except OSError as exc:
        return _report_error(str(exc))

    print("\nBase64:")
    print(result.encoded.base64)

    if result.file_path is not None:
        print("\nQR saved to:")
        print(result.file_path)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Simplified tax invoice QR generator")
    parser.add_argument("--seller-name", dest="seller_name", help="Seller name")
    parser.add_argument("--seller-trn", dest="seller_trn", help="Seller tax registration number")
    parser.add_argument("--invoice-date", dest="invoice_date", help="Invoice date, ISO-8601 or YYYY-MM-DD [HH:mm]")
    parser.add_argument("--invoice-total", dest="invoice_total", help="Invoice total (integer)")
    parser.add_argument("--vat-total", dest="vat_total", help="VAT total (integer)")
    parser.add_argument("--output-dir", default=str(settings.output_dir), help="Directory for the QR PNG")
    parser.add_argument("--no-image", action="store_true", help="Only print the base64 payload")
    parser.add_argument(
        "--error-correction",
        choices=["L", "M", "Q", "H"],
        default=settings.error_correction,
        help="QR error correction level",
    )
    parser.set_defaults(func=cmd_generate)
    return parser


def main(argv: list[str] | None = None) -> int:
    configure_logging(CLI_LOGGING)
    parser = build_parser()
    args = parser.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
