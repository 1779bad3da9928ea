"""Testes da tarifa estimada por forma de cobrança."""

from __future__ import annotations

from decimal import Decimal

import pytest

from api.connectors.asaas.fees import estimate_gateway_fee
from app.domain.payments import BillingType


class TestEstimateGatewayFee:
    @pytest.mark.parametrize(
        ("billing_type", "value", "expected"),
        [
            (BillingType.CREDIT_CARD, Decimal("1000"), Decimal("15.00")),
            (BillingType.PIX, Decimal("1000"), Decimal("9.90")),
            (BillingType.BOLETO, Decimal("1000"), Decimal("1.99")),
            (BillingType.BOLETO, Decimal("50000"), Decimal("1.99")),
            (BillingType.UNDEFINED, Decimal("1000"), None),
        ],
    )
    def test_fee_table(
        self, billing_type: BillingType, value: Decimal, expected: Decimal | None
    ) -> None:
        assert estimate_gateway_fee(billing_type, value) == expected

    def test_boleto_fee_is_configurable(self) -> None:
        assert estimate_gateway_fee(BillingType.BOLETO, Decimal("10"), Decimal("3.49")) == Decimal(
            "3.49"
        )
