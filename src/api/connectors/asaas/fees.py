"""Tarifa estimada do gateway por forma de cobrança.

Valor apenas informativo para exibição; nunca é somado ao valor
cobrado nem usado em conciliação.
"""

from __future__ import annotations

from decimal import Decimal
from typing import assert_never

from app.domain.money import quantize_cents, to_decimal
from app.domain.payments import BillingType

CREDIT_CARD_FEE_RATE = Decimal("0.015")
PIX_FEE_RATE = Decimal("0.0099")
DEFAULT_BOLETO_FEE = Decimal("1.99")


def estimate_gateway_fee(
    billing_type: BillingType,
    value: Decimal | None,
    boleto_fee: Decimal = DEFAULT_BOLETO_FEE,
) -> Decimal | None:
    """Estima a tarifa do gateway.

    Args:
        billing_type: Forma de cobrança.
        value: Valor da cobrança.
        boleto_fee: Tarifa fixa por boleto.

    Returns:
        Tarifa em centavos exatos, ou None quando a forma de cobrança
        ainda não foi definida (UNDEFINED).
    """
    amount = to_decimal(value)
    match billing_type:
        case BillingType.CREDIT_CARD:
            return quantize_cents(amount * CREDIT_CARD_FEE_RATE)
        case BillingType.PIX:
            return quantize_cents(amount * PIX_FEE_RATE)
        case BillingType.BOLETO:
            return quantize_cents(boleto_fee)
        case BillingType.UNDEFINED:
            return None
        case _:
            assert_never(billing_type)
