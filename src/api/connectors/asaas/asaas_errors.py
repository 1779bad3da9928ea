"""Erros e helpers de parsing para a API Asaas."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class AsaasApiError:
    """Erro retornado pela API Asaas (`errors[0]`)."""

    status_code: int
    code: str
    description: str


def is_transport_status(status_code: int) -> bool:
    """Status tratados como falha de transporte (rate limit e 5xx)."""
    return status_code == 429 or status_code >= 500


def parse_asaas_error(status_code: int, response_data: Any) -> AsaasApiError | None:
    """Extrai o primeiro erro do corpo `{"errors": [{"code", "description"}]}`.

    Args:
        status_code: Status HTTP da resposta
        response_data: Corpo JSON decodificado

    Returns:
        AsaasApiError se status >= 400, None se sucesso
    """
    if status_code < 400:
        return None

    code = "unknown"
    description = f"Erro HTTP {status_code}"
    if isinstance(response_data, dict):
        errors = response_data.get("errors")
        if isinstance(errors, list) and errors and isinstance(errors[0], dict):
            code = str(errors[0].get("code") or code)
            description = str(errors[0].get("description") or description)

    return AsaasApiError(status_code=status_code, code=code, description=description)
