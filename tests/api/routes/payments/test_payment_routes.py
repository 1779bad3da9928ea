"""Testes das rotas de pagamentos sobre o gateway demo."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from api.connectors.asaas import AsaasDemoGateway
from api.routes.payments.router import (
    cancel_payment,
    create_payment,
    get_balance,
    get_payment,
    get_pix_qr_code,
    list_gateway_customers,
    list_payments,
)
from app.domain.payments import BillingType, PaymentCheckout, PaymentStatus
from app.infra.cache.query_cache import QueryCache
from app.infra.stores import MemoryCustomerStore
from app.services.payment_service import PaymentService
from utils.errors import PaymentNotCancellableError, PaymentNotFoundError


@pytest.fixture
def service() -> PaymentService:
    return PaymentService(AsaasDemoGateway(), QueryCache(), MemoryCustomerStore())


@pytest.mark.asyncio
async def test_balance_carries_mode(service: PaymentService) -> None:
    assert await get_balance(service=service) == {
        "balance": 0.0,
        "degraded": False,
        "mode": "demo",
    }


@pytest.mark.asyncio
async def test_customer_page_is_camel_case(service: PaymentService) -> None:
    payload = await list_gateway_customers(offset=0, limit=10, name=None, service=service)

    assert payload["mode"] == "demo"
    assert payload["hasMore"] is True
    assert payload["degraded"] is False
    assert payload["totalCount"] > 10
    assert "cpfCnpj" in payload["data"][0]


@pytest.mark.asyncio
async def test_list_payments_by_status(service: PaymentService) -> None:
    payload = await list_payments(
        offset=0, limit=100, payment_status=PaymentStatus.CANCELED, service=service
    )

    assert payload["data"]
    assert {p["status"] for p in payload["data"]} == {"CANCELED"}
    assert isinstance(payload["data"][0]["value"], float)


@pytest.mark.asyncio
async def test_get_and_cancel(service: PaymentService) -> None:
    payload = await get_payment("demo_payment_1", service=service)
    assert payload["data"]["id"] == "demo_payment_1"

    assert await cancel_payment("demo_payment_1", service=service) == {
        "id": "demo_payment_1",
        "deleted": True,
        "mode": "demo",
    }

    with pytest.raises(PaymentNotFoundError):
        await get_payment("pay_unknown", service=service)
    with pytest.raises(PaymentNotCancellableError):
        await cancel_payment("demo_payment_6", service=service)


@pytest.mark.asyncio
async def test_create_payment(service: PaymentService) -> None:
    body = PaymentCheckout.model_validate(
        {
            "customerName": "Ana Pereira",
            "customerCpfCnpj": "123.456.789-09",
            "billingType": "PIX",
            "value": 2500,
            "dueDate": "2025-03-10",
        }
    )

    payload = await create_payment(body, service=service)

    data = payload["data"]
    assert data["billingType"] == BillingType.PIX.value
    assert data["value"] == 2500.0
    assert data["dueDate"] == date(2025, 3, 10).isoformat()
    assert data["customerName"] == "Ana Pereira"
    assert Decimal(str(data["estimatedFee"])) == Decimal("24.75")


@pytest.mark.asyncio
async def test_pix_qr_code(service: PaymentService) -> None:
    payload = await get_pix_qr_code("demo_payment_3", service=service)
    assert payload["data"]["payload"].startswith("000201")

    assert (await get_pix_qr_code("pay_1", service=service))["data"] is None
