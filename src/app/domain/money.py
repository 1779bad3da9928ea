"""Tipos monetários compartilhados pelos modelos de domínio.

Valores circulam como Decimal. No JSON do back-office viram string
decimal exata ("18600.00"); nos espelhos do gateway viram número, que é
o formato do próprio Asaas.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Annotated

from pydantic import PlainSerializer

CENTS = Decimal("0.01")

Money = Annotated[Decimal, PlainSerializer(str, return_type=str, when_used="json")]

GatewayAmount = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


def to_decimal(value: object) -> Decimal:
    """Converte entrada opcional em Decimal; None vira zero."""
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)  # type: ignore[arg-type]


def quantize_cents(value: Decimal) -> Decimal:
    """Arredonda para centavos (meio para cima)."""
    return value.quantize(CENTS, rounding=ROUND_HALF_UP)


__all__ = ["CENTS", "GatewayAmount", "Money", "quantize_cents", "to_decimal"]
