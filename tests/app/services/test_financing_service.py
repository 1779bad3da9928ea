"""Testes do FinancingService (recálculo e fluxo de status)."""

from __future__ import annotations

import logging
from decimal import Decimal

import pytest

from app.domain.personnel import Personnel, PersonnelType
from app.infra.stores import MemoryFinancingStore, MemoryPersonnelStore
from app.services.financing_service import FinancingService
from config.settings.financing import FinancingSettings
from fsm.states.financing import FinancingStatus
from utils.errors import EntityNotFoundError, InvalidTransitionError

BASE_FIELDS = {
    "customer_name": "Maria Oliveira",
    "bank": "Banco Pan",
    "asset_value": Decimal("100000"),
    "accessories_percentage": Decimal("5"),
    "fee_amount": Decimal("200"),
    "expected_return": Decimal("20000"),
    "agent_commission": Decimal("1000"),
    "seller_commission": Decimal("500"),
}


def _service(strict: bool = False) -> tuple[FinancingService, MemoryPersonnelStore]:
    personnel = MemoryPersonnelStore()
    service = FinancingService(
        MemoryFinancingStore(),
        personnel,
        FinancingSettings(strict_transitions=strict),
    )
    return service, personnel


class TestCreate:
    @pytest.mark.asyncio
    async def test_create_computes_derived_fields(self) -> None:
        service, _ = _service()

        proposal = await service.create(dict(BASE_FIELDS))

        assert proposal.status == FinancingStatus.ANALYSIS
        assert proposal.ila_amount == Decimal("5100.00")
        assert proposal.accessories_value == Decimal("5000.00")
        assert proposal.net_profit == Decimal("18600.00")
        assert (await service.get(proposal.id)).net_profit == Decimal("18600.00")

    @pytest.mark.asyncio
    async def test_client_supplied_derived_fields_are_ignored(self) -> None:
        service, _ = _service()

        proposal = await service.create({**BASE_FIELDS, "net_profit": Decimal("1")})

        assert proposal.net_profit == Decimal("18600.00")

    @pytest.mark.asyncio
    async def test_defaults_from_return_table_and_agent_rate(self) -> None:
        """Retorno esperado e comissão do agente vêm da tabela e da taxa."""
        service, personnel = _service()
        await personnel.save(
            Personnel(
                id="ag-1",
                name="Carlos Agente",
                type=PersonnelType.AGENT,
                commission_rate=Decimal("10"),
            )
        )

        proposal = await service.create(
            {
                "customer_name": "Ana Pereira",
                "bank": "Santander",
                "asset_value": Decimal("50000"),
                "return_type": "R2",
                "agent_id": "ag-1",
            }
        )

        assert proposal.expected_return == Decimal("1200.00")
        assert proposal.agent_commission == Decimal("120.00")
        assert proposal.agent_name == "Carlos Agente"
        # 1200 - 306 - 120
        assert proposal.net_profit == Decimal("774.00")

    @pytest.mark.asyncio
    async def test_explicit_commission_wins_over_rate(self) -> None:
        service, personnel = _service()
        await personnel.save(
            Personnel(id="ag-1", name="Ag", type=PersonnelType.AGENT, commission_rate=Decimal("10"))
        )

        proposal = await service.create({**BASE_FIELDS, "agent_id": "ag-1"})

        assert proposal.agent_commission == Decimal("1000")


class TestTableDerivedValues:
    """Retorno esperado segue a tabela enquanto o operador não fixa um valor."""

    @pytest.mark.asyncio
    async def test_asset_or_return_type_change_rederives_return(self) -> None:
        service, _ = _service()
        proposal = await service.create(
            {
                "customer_name": "Ana Pereira",
                "bank": "Santander",
                "asset_value": Decimal("100000"),
                "return_type": "R1",
            }
        )
        assert proposal.expected_return == Decimal("1200.00")
        assert proposal.net_profit == Decimal("894.00")

        bigger = await service.update(proposal.id, {"asset_value": Decimal("200000")})
        assert bigger.expected_return == Decimal("2400.00")
        assert bigger.ila_amount == Decimal("612.00")
        assert bigger.net_profit == Decimal("1788.00")

        r6 = await service.update(proposal.id, {"return_type": "R6"})
        assert r6.expected_return == Decimal("12000.00")
        assert r6.net_profit == Decimal("8940.00")

    @pytest.mark.asyncio
    async def test_explicit_zero_survives_unrelated_update(self) -> None:
        service, personnel = _service()
        await personnel.save(
            Personnel(id="ag-1", name="Ag", type=PersonnelType.AGENT, commission_rate=Decimal("10"))
        )
        proposal = await service.create(
            {
                "customer_name": "Ana Pereira",
                "bank": "Santander",
                "asset_value": Decimal("100000"),
                "return_type": "R3",
                "expected_return": Decimal("0"),
                "agent_id": "ag-1",
                "agent_commission": Decimal("0"),
            }
        )

        updated = await service.update(proposal.id, {"notes": "x"})

        assert updated.expected_return == Decimal("0")
        assert updated.agent_commission == Decimal("0")
        assert updated.expected_return_overridden is True

    @pytest.mark.asyncio
    async def test_null_releases_override(self) -> None:
        service, _ = _service()
        proposal = await service.create(dict(BASE_FIELDS, return_type="R2"))
        assert proposal.expected_return == Decimal("20000")

        updated = await service.update(proposal.id, {"expected_return": None})

        assert updated.expected_return_overridden is False
        assert updated.expected_return == Decimal("2400.00")

    @pytest.mark.asyncio
    async def test_commission_follows_rederived_return(self) -> None:
        service, personnel = _service()
        await personnel.save(
            Personnel(id="ag-1", name="Ag", type=PersonnelType.AGENT, commission_rate=Decimal("10"))
        )
        proposal = await service.create(
            {
                "customer_name": "Ana Pereira",
                "bank": "Santander",
                "asset_value": Decimal("50000"),
                "return_type": "R2",
                "agent_id": "ag-1",
            }
        )
        assert proposal.agent_commission == Decimal("120.00")

        updated = await service.update(proposal.id, {"asset_value": Decimal("100000")})

        assert updated.expected_return == Decimal("2400.00")
        assert updated.agent_commission == Decimal("240.00")

    @pytest.mark.asyncio
    async def test_flags_are_not_accepted_as_input(self) -> None:
        service, _ = _service()

        proposal = await service.create(
            {
                "customer_name": "Ana Pereira",
                "bank": "Santander",
                "asset_value": Decimal("100000"),
                "return_type": "R1",
                "expected_return_overridden": True,
            }
        )

        assert proposal.expected_return_overridden is False
        assert proposal.expected_return == Decimal("1200.00")


class TestUpdateAndStatus:
    @pytest.mark.asyncio
    async def test_update_recomputes_net_profit(self) -> None:
        service, _ = _service()
        proposal = await service.create(dict(BASE_FIELDS))

        updated = await service.update(proposal.id, {"fee_amount": Decimal("700")})

        assert updated.net_profit == Decimal("19100.00")

    @pytest.mark.asyncio
    async def test_off_graph_transition_is_logged_but_allowed(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        service, _ = _service()
        proposal = await service.create(dict(BASE_FIELDS))

        with caplog.at_level(logging.WARNING):
            updated = await service.change_status(
                proposal.id, FinancingStatus.PAID, quick_toggle=True
            )

        assert updated.status == FinancingStatus.PAID
        assert "financing_transition_off_graph" in caplog.messages

    @pytest.mark.asyncio
    async def test_strict_mode_rejects_off_graph_transition(self) -> None:
        service, _ = _service(strict=True)
        proposal = await service.create(dict(BASE_FIELDS))

        with pytest.raises(InvalidTransitionError):
            await service.change_status(proposal.id, FinancingStatus.PAID)

        approved = await service.change_status(proposal.id, FinancingStatus.APPROVED)
        paid = await service.change_status(approved.id, FinancingStatus.PAID)
        assert paid.status == FinancingStatus.PAID

    @pytest.mark.asyncio
    async def test_quick_toggle_only_paid_or_analysis(self) -> None:
        service, _ = _service()
        proposal = await service.create(dict(BASE_FIELDS))

        with pytest.raises(ValueError, match="paid"):
            await service.change_status(
                proposal.id, FinancingStatus.REJECTED, quick_toggle=True
            )

    @pytest.mark.asyncio
    async def test_generic_update_accepts_any_status(self) -> None:
        service, _ = _service()
        proposal = await service.create(dict(BASE_FIELDS))

        updated = await service.update(proposal.id, {"status": "rejected"})

        assert updated.status == FinancingStatus.REJECTED


class TestListAndDelete:
    @pytest.mark.asyncio
    async def test_list_enriches_agent_name(self) -> None:
        service, personnel = _service()
        await personnel.save(Personnel(id="ag-1", name="Nome Antigo", type=PersonnelType.AGENT))
        await service.create({**BASE_FIELDS, "agent_id": "ag-1"})
        await personnel.save(Personnel(id="ag-1", name="Nome Novo", type=PersonnelType.AGENT))

        [listed] = await service.list_proposals()

        assert listed.agent_name == "Nome Novo"

    @pytest.mark.asyncio
    async def test_summary_and_delete(self) -> None:
        service, _ = _service()
        proposal = await service.create(dict(BASE_FIELDS))

        summary = await service.summary()
        assert summary.total_net_profit == Decimal("18600.00")

        await service.delete(proposal.id)
        with pytest.raises(EntityNotFoundError):
            await service.get(proposal.id)
        with pytest.raises(EntityNotFoundError):
            await service.delete(proposal.id)
