"""FastAPI application for einvoice-qr."""
from __future__ import annotations

import logging

from fastapi import Depends, FastAPI, Header, HTTPException, Request, status
from fastapi.responses import JSONResponse, Response

from .config import settings
from .logging_conf import configure_logging
from .middleware import RequestLoggingMiddleware
from .monitoring import metrics_payload, record_payload_generated, record_service_error
from .schemas import ErrorResponse, GenerateQRRequest, GenerateQRResponse
from .services.errors import ServiceError
from .services.generator import InvoiceQRGenerator

app = FastAPI(title="einvoice-qr", version="0.1.0")
app.add_middleware(RequestLoggingMiddleware)

logger = logging.getLogger("einvoice_qr.api")


def _warn_insecure_defaults() -> None:
    if settings.api_key == "dev-secret-key":
        logger.warning(
            "api key is using its default value",
            extra={"config_key": "api_key"},
        )


@app.on_event("startup")
async def on_startup() -> None:
    configure_logging()
    _warn_insecure_defaults()


async def require_api_key(x_api_key: str = Header(...)) -> None:
    if x_api_key != settings.api_key:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid API key")


def get_generator() -> InvoiceQRGenerator:
    return InvoiceQRGenerator(settings)


@app.exception_handler(ServiceError)
async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    route = request.scope.get("route")
    route_path = route.path if route else request.url.path
    logger.warning(
        "service error",
        extra={"code": exc.code, "path": route_path, "method": request.method},
    )
    record_service_error(exc.code, route_path)
    body = ErrorResponse(code=exc.code, message=exc.message, errors=exc.errors)
    return JSONResponse(status_code=exc.status_code, content=body.model_dump())


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    route = request.scope.get("route")
    route_path = route.path if route else request.url.path
    logger.exception(
        "unhandled exception",
        extra={"path": route_path, "method": request.method},
    )
    return JSONResponse(status_code=500, content={"code": "ERR_INTERNAL", "message": "Internal server error"})


@app.get("/health", tags=["system"])
async def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/metrics", tags=["system"])
async def metrics() -> Response:
    payload, content_type = metrics_payload()
    return Response(content=payload, media_type=content_type)


@app.post(
    "/v1/qr",
    response_model=GenerateQRResponse,
    responses={400: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
    tags=["qr"],
    dependencies=[Depends(require_api_key)],
)
async def generate_qr(
    payload: GenerateQRRequest,
    generator: InvoiceQRGenerator = Depends(get_generator),
) -> GenerateQRResponse:
    result = generator.generate(
        seller_name=payload.seller_name,
        seller_trn=payload.seller_trn,
        invoice_date=payload.invoice_date,
        invoice_total=payload.invoice_total,
        vat_total=payload.vat_total,
        render_image=payload.include_image,
        error_correction=payload.error_correction.value if payload.error_correction else None,
    )
    record_payload_generated()

    return GenerateQRResponse(
        payload_base64=result.encoded.base64,
        payload_hex=result.encoded.hex,
        invoice_date=result.fields.invoice_date,
        qr_png_base64=result.qr_png_base64,
    )
