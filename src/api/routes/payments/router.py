"""Endpoints de pagamentos (gateway Asaas, modo live ou demo).

Endpoints:
- GET /api/payments/balance
- GET /api/payments/customers
- POST /api/payments/customers
- GET /api/payments
- POST /api/payments
- GET /api/payments/{payment_id}
- DELETE /api/payments/{payment_id}
- GET /api/payments/{payment_id}/pix-qr-code

Toda resposta carrega `mode` ("live" ou "demo"). Saldo e listagens
trazem `degraded: true` quando o gateway falhou e o valor é o fallback
vazio. Objetos do gateway seguem em camelCase, como o próprio Asaas.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Query, status

from app.bootstrap import get_payment_service
from app.domain.payments import GatewayCustomer, PaymentCheckout, PaymentStatus
from app.services.payment_service import PaymentService

router = APIRouter()

MAX_PAGE_SIZE = 100


def _with_mode(service: PaymentService, payload: dict[str, Any]) -> dict[str, Any]:
    return {**payload, "mode": service.mode.value}


@router.get("/balance")
async def get_balance(
    service: PaymentService = Depends(get_payment_service),
) -> dict[str, Any]:
    balance = await service.get_balance()
    return _with_mode(service, balance.model_dump(mode="json", by_alias=True))


@router.get("/customers")
async def list_gateway_customers(
    offset: int = Query(default=0, ge=0),
    limit: int = Query(default=10, ge=1, le=MAX_PAGE_SIZE),
    name: str | None = None,
    service: PaymentService = Depends(get_payment_service),
) -> dict[str, Any]:
    page = await service.list_customers(offset=offset, limit=limit, name=name)
    return _with_mode(service, page.model_dump(mode="json", by_alias=True))


@router.post("/customers", status_code=status.HTTP_201_CREATED)
async def create_gateway_customer(
    body: GatewayCustomer,
    service: PaymentService = Depends(get_payment_service),
) -> dict[str, Any]:
    customer = await service.create_customer(body)
    return _with_mode(service, {"data": customer.model_dump(mode="json", by_alias=True)})


@router.get("")
async def list_payments(
    offset: int = Query(default=0, ge=0),
    limit: int = Query(default=10, ge=1, le=MAX_PAGE_SIZE),
    payment_status: PaymentStatus | None = Query(default=None, alias="status"),
    service: PaymentService = Depends(get_payment_service),
) -> dict[str, Any]:
    page = await service.list_payments(offset=offset, limit=limit, status=payment_status)
    return _with_mode(service, page.model_dump(mode="json", by_alias=True))


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_payment(
    body: PaymentCheckout,
    service: PaymentService = Depends(get_payment_service),
) -> dict[str, Any]:
    payment = await service.create_payment(body)
    return _with_mode(service, {"data": payment.model_dump(mode="json", by_alias=True)})


@router.get("/{payment_id}")
async def get_payment(
    payment_id: str,
    service: PaymentService = Depends(get_payment_service),
) -> dict[str, Any]:
    payment = await service.get_payment(payment_id)
    return _with_mode(service, {"data": payment.model_dump(mode="json", by_alias=True)})


@router.delete("/{payment_id}")
async def cancel_payment(
    payment_id: str,
    service: PaymentService = Depends(get_payment_service),
) -> dict[str, Any]:
    await service.cancel_payment(payment_id)
    return _with_mode(service, {"id": payment_id, "deleted": True})


@router.get("/{payment_id}/pix-qr-code")
async def get_pix_qr_code(
    payment_id: str,
    service: PaymentService = Depends(get_payment_service),
) -> dict[str, Any]:
    qr_code = await service.get_pix_qr_code(payment_id)
    data = qr_code.model_dump(mode="json", by_alias=True) if qr_code is not None else None
    return _with_mode(service, {"data": data})
