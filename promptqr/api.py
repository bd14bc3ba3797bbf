"""FastAPI application serving PromptPay QR codes."""
from __future__ import annotations

import logging

from fastapi import Depends, FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response

from .config import settings
from .errors import ServiceError
from .logging_conf import configure_logging
from .middleware import RequestLoggingMiddleware, route_path
from .monitoring import metrics_payload, record_service_error
from .promptpay_encoder import format_amount
from .schemas import ErrorResponse, PayloadResponse, PointOfInitiation
from .services.generator import QRGenerator

app = FastAPI(title=settings.app_name, version="0.1.0")
app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(CORSMiddleware, allow_origins=settings.allowed_origins, allow_methods=["GET"])

logger = logging.getLogger("promptqr.api")

_ERROR_RESPONSES = {400: {"model": ErrorResponse}}


@app.on_event("startup")
async def on_startup() -> None:
    configure_logging()
    logger.info(
        "service started",
        extra={"environment": settings.environment, "zero_amount_policy": settings.zero_amount_policy.value},
    )


@app.exception_handler(ServiceError)
async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    path = route_path(request)
    logger.warning(
        "service error",
        extra={"code": exc.code, "path": path, "method": request.method},
    )
    record_service_error(exc.code, path)
    return JSONResponse(status_code=exc.status_code, content={"code": exc.code, "error": exc.message})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(
        "unhandled exception",
        extra={"path": route_path(request), "method": request.method},
    )
    return JSONResponse(status_code=500, content={"code": "ERR_INTERNAL", "error": "Failed to generate QR code"})


def amount_param(
    amont: str | None = Query(default=None, description="Fixed amount in THB"),
    amount: str | None = Query(default=None, description="Alias of `amont`"),
) -> str | None:
    """Read the amount from ``amont``, falling back to ``amount``."""

    return amont if amont is not None else amount


def get_generator() -> QRGenerator:
    return QRGenerator(settings)


@app.get("/health", tags=["system"])
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/metrics", tags=["system"])
def metrics() -> Response:
    payload, content_type = metrics_payload()
    return Response(content=payload, media_type=content_type)


@app.get(
    "/api/{number}",
    tags=["qr"],
    response_class=Response,
    responses={200: {"content": {"image/png": {}}}, **_ERROR_RESPONSES},
)
def qr_image(
    number: str,
    amount: str | None = Depends(amount_param),
    generator: QRGenerator = Depends(get_generator),
) -> Response:
    result = generator.generate(number, amount)
    return Response(
        content=result.png_bytes,
        media_type="image/png",
        headers={"Cache-Control": "no-store"},
    )


@app.get("/api/{number}/payload", response_model=PayloadResponse, tags=["qr"], responses=_ERROR_RESPONSES)
def qr_payload(
    number: str,
    amount: str | None = Depends(amount_param),
    generator: QRGenerator = Depends(get_generator),
) -> PayloadResponse:
    encoded = generator.generate(number, amount, render=False).encoded
    target = encoded.target

    return PayloadResponse(
        payload=encoded.payload,
        crc=encoded.crc,
        target_type=target.type,
        target=target.canonical,
        display=target.formatted,
        amount=format_amount(encoded.amount) if encoded.amount is not None else None,
        point_of_initiation=PointOfInitiation.DYNAMIC if encoded.is_dynamic else PointOfInitiation.STATIC,
    )
