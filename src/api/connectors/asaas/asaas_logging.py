"""Helpers de logging para a API Asaas (sem PII)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .asaas_errors import AsaasApiError

logger = logging.getLogger(__name__)


def log_asaas_error(api_error: AsaasApiError, method: str, endpoint: str) -> None:
    """Loga erro do gateway sem expor documento, cartão ou chave."""
    logger.warning(
        "asaas_api_error",
        extra={
            "component": "asaas_gateway",
            "method": method,
            "endpoint": endpoint,
            "status_code": api_error.status_code,
            "error_code": api_error.code,
        },
    )


def log_success(method: str, endpoint: str, status_code: int) -> None:
    logger.debug(
        "asaas_request_ok",
        extra={
            "component": "asaas_gateway",
            "method": method,
            "endpoint": endpoint,
            "status_code": status_code,
        },
    )
