"""Tradução de exceções de domínio/infra para respostas HTTP.

Rotas apenas propagam; os handlers registrados no app convertem:
- EntityNotFoundError, PaymentNotFoundError: 404
- InvalidTransitionError, PaymentNotCancellableError, DuplicateCustomerError: 409
- ConnectionNotReadyError, ValueError: 400
- DailyLimitExceededError: 429
- GatewayTransportError, GatewayRequestError, MessageDeliveryError: 502
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from utils.errors import (
    ConnectionNotReadyError,
    DailyLimitExceededError,
    DomainError,
    DuplicateCustomerError,
    EntityNotFoundError,
    InfrastructureError,
    InvalidTransitionError,
    PaymentNotCancellableError,
    PaymentNotFoundError,
)

logger = logging.getLogger(__name__)

DOMAIN_STATUS: dict[type[DomainError], int] = {
    EntityNotFoundError: status.HTTP_404_NOT_FOUND,
    PaymentNotFoundError: status.HTTP_404_NOT_FOUND,
    InvalidTransitionError: status.HTTP_409_CONFLICT,
    PaymentNotCancellableError: status.HTTP_409_CONFLICT,
    DuplicateCustomerError: status.HTTP_409_CONFLICT,
    ConnectionNotReadyError: status.HTTP_400_BAD_REQUEST,
    DailyLimitExceededError: status.HTTP_429_TOO_MANY_REQUESTS,
}


def status_for_domain_error(exc: DomainError) -> int:
    """Status HTTP da falha de domínio (400 se não mapeada)."""
    for error_type in type(exc).__mro__:
        if error_type in DOMAIN_STATUS:
            return DOMAIN_STATUS[error_type]
    return status.HTTP_400_BAD_REQUEST


async def domain_error_handler(request: Request, exc: Exception) -> JSONResponse:
    if not isinstance(exc, DomainError):
        raise exc
    status_code = status_for_domain_error(exc)
    logger.info(
        "request_domain_error",
        extra={
            "component": "api",
            "path": request.url.path,
            "error_type": type(exc).__name__,
            "status_code": status_code,
        },
    )
    return JSONResponse(status_code=status_code, content={"error": str(exc)})


async def infrastructure_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.warning(
        "request_gateway_error",
        extra={
            "component": "api",
            "path": request.url.path,
            "error_type": type(exc).__name__,
        },
    )
    return JSONResponse(
        status_code=status.HTTP_502_BAD_GATEWAY,
        content={"error": str(exc) or "Falha ao comunicar com serviço externo"},
    )


async def value_error_handler(request: Request, exc: Exception) -> JSONResponse:
    status_code = (
        status.HTTP_422_UNPROCESSABLE_ENTITY
        if isinstance(exc, ValidationError)
        else status.HTTP_400_BAD_REQUEST
    )
    return JSONResponse(status_code=status_code, content={"error": str(exc)})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(InfrastructureError, infrastructure_error_handler)
    app.add_exception_handler(ValueError, value_error_handler)


__all__ = [
    "DOMAIN_STATUS",
    "domain_error_handler",
    "infrastructure_error_handler",
    "register_exception_handlers",
    "status_for_domain_error",
    "value_error_handler",
]
