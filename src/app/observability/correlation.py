"""Correlation id por requisição HTTP.

Cada requisição ao back-office recebe um id (header `X-Correlation-ID`
ou gerado) que acompanha todos os logs emitidos durante o processamento,
inclusive os das chamadas ao Asaas e ao WPPConnect.

Uso (middleware em app.app):
    token = set_correlation_id(request.headers.get(CORRELATION_HEADER))
    try:
        response = await call_next(request)
    finally:
        reset_correlation_id(token)
"""

from __future__ import annotations

import uuid
from contextvars import ContextVar, Token

CORRELATION_HEADER = "X-Correlation-ID"

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """Id da requisição corrente ("" fora de requisição)."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o id da requisição corrente; gera um novo se ausente.

    Returns:
        Token para restaurar o valor anterior.
    """
    value = (correlation_id or "").strip() or generate_correlation_id()
    return _correlation_id.set(value)


def reset_correlation_id(token: Token[str]) -> None:
    _correlation_id.reset(token)


def generate_correlation_id() -> str:
    return uuid.uuid4().hex
