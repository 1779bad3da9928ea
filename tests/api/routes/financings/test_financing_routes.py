"""Testes das rotas de financiamento (handlers chamados diretamente)."""

from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from api.routes.financings.router import (
    create_financing,
    delete_financing,
    financing_summary,
    get_financing,
    list_financings,
    toggle_financing_status,
    update_financing,
)
from api.routes.financings.schemas import FinancingCreate, FinancingUpdate, StatusToggle
from app.infra.stores import MemoryFinancingStore, MemoryPersonnelStore
from app.services.financing_service import FinancingService
from config.settings.financing import FinancingSettings
from fsm.states.financing import FinancingStatus
from utils.errors import EntityNotFoundError


@pytest.fixture
def service() -> FinancingService:
    return FinancingService(
        MemoryFinancingStore(), MemoryPersonnelStore(), FinancingSettings()
    )


def _body(**overrides: object) -> FinancingCreate:
    data: dict[str, object] = {
        "customer_name": "João Silva",
        "bank": "Banco Pan",
        "asset_value": "100000",
        "accessories_percentage": "5",
        "fee_amount": "200",
        "expected_return": "20000",
        "agent_commission": "1000",
        "seller_commission": "500",
    }
    data.update(overrides)
    return FinancingCreate.model_validate(data)


def test_create_body_rejects_derived_fields() -> None:
    with pytest.raises(ValidationError):
        _body(net_profit="1")


def test_update_body_keeps_only_sent_fields() -> None:
    body = FinancingUpdate.model_validate({"fee_amount": "700", "notes": None})
    assert body.to_changes() == {"fee_amount": Decimal("700"), "notes": None}


@pytest.mark.asyncio
async def test_crud_flow(service: FinancingService) -> None:
    created = await create_financing(_body(), service=service)
    assert created.net_profit == Decimal("18600.00")
    assert created.status == FinancingStatus.ANALYSIS

    fetched = await get_financing(created.id, service=service)
    assert fetched.id == created.id

    updated = await update_financing(
        created.id, FinancingUpdate(fee_amount=Decimal("700")), service=service
    )
    assert updated.net_profit == Decimal("19100.00")

    listed = await list_financings(service=service)
    assert [p.id for p in listed] == [created.id]

    response = await delete_financing(created.id, service=service)
    assert response.status_code == 204
    with pytest.raises(EntityNotFoundError):
        await get_financing(created.id, service=service)


@pytest.mark.asyncio
async def test_status_toggle(service: FinancingService) -> None:
    created = await create_financing(_body(), service=service)

    paid = await toggle_financing_status(
        created.id, StatusToggle(status=FinancingStatus.PAID), service=service
    )
    assert paid.status == FinancingStatus.PAID

    with pytest.raises(ValueError):
        await toggle_financing_status(
            created.id, StatusToggle(status=FinancingStatus.APPROVED), service=service
        )


@pytest.mark.asyncio
async def test_summary_counts_every_status(service: FinancingService) -> None:
    await create_financing(_body(), service=service)

    summary = await financing_summary(service=service)

    assert summary.count_by_status == {"analysis": 1, "approved": 0, "paid": 0, "rejected": 0}
    assert summary.total_net_profit == Decimal("18600.00")
    assert summary.model_dump(mode="json")["total_net_profit"] == "18600.00"
