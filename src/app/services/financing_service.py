"""Serviço de propostas de financiamento.

Recalcula os valores derivados a cada gravação e aplica as mudanças de
status conforme o grafo de transições (ver fsm/transitions).
"""

from __future__ import annotations

import logging
import uuid
from decimal import Decimal
from typing import TYPE_CHECKING, Any

from app.domain.financing import FinancingProposal
from app.services.financing_calculator import (
    PortfolioSummary,
    commission_from_rate,
    compute_valuation,
    expected_return_for,
    summarize_portfolio,
    valuation_inputs_of,
)
from fsm.states.financing import QUICK_TOGGLE_STATUSES, FinancingStatus
from fsm.transitions.rules import is_transition_valid
from fsm.types.transition import StatusTransition
from utils.errors import EntityNotFoundError, InvalidTransitionError

if TYPE_CHECKING:
    from app.domain.personnel import Personnel
    from app.protocols.stores import FinancingStoreProtocol, PersonnelStoreProtocol
    from config.settings.financing import FinancingSettings

logger = logging.getLogger(__name__)

COMPONENT = "financing_service"

# Campos derivados nunca aceitos como entrada
_DERIVED_FIELDS = frozenset({
    "ila_amount",
    "accessories_value",
    "net_profit",
    "id",
    "created_at",
    "expected_return_overridden",
    "agent_commission_overridden",
    "seller_commission_overridden",
})

# Valores com default calculado que o operador pode fixar
_OVERRIDABLE_FIELDS = ("expected_return", "agent_commission", "seller_commission")


class FinancingService:
    """CRUD de propostas com recálculo e fluxo de status."""

    def __init__(
        self,
        store: FinancingStoreProtocol,
        personnel_store: PersonnelStoreProtocol,
        settings: FinancingSettings,
    ) -> None:
        self._store = store
        self._personnel = personnel_store
        self._settings = settings

    async def list_proposals(self) -> list[FinancingProposal]:
        """Lista propostas com o nome atual do agente."""
        people = {person.id: person for person in await self._personnel.list_all()}
        proposals = await self._store.list_all()
        return [
            proposal.model_copy(update={"agent_name": people[proposal.agent_id].name})
            if proposal.agent_id in people
            else proposal
            for proposal in proposals
        ]

    async def get(self, financing_id: str) -> FinancingProposal:
        proposal = await self._store.get(financing_id)
        if proposal is None:
            raise EntityNotFoundError("Financiamento", financing_id)
        return proposal

    async def summary(self) -> PortfolioSummary:
        return summarize_portfolio(await self._store.list_all())

    async def create(self, fields: dict[str, Any]) -> FinancingProposal:
        """Cria proposta em análise a partir dos campos informados.

        Retorno esperado e comissões ausentes são preenchidos pela tabela
        de retorno e pela taxa de comissão do agente/vendedor.
        """
        data = _with_override_flags(fields)
        data.setdefault("status", FinancingStatus.ANALYSIS)
        proposal = FinancingProposal(id=uuid.uuid4().hex, **data)
        proposal = await self._recompute(proposal)
        await self._store.save(proposal)
        logger.info(
            "financing_created",
            extra={
                "component": COMPONENT,
                "financing_id": proposal.id,
                "return_type": proposal.return_type.value,
                "status": proposal.status.value,
            },
        )
        return proposal

    async def update(self, financing_id: str, changes: dict[str, Any]) -> FinancingProposal:
        """Atualização genérica; aceita qualquer status.

        `None` em retorno esperado ou comissão desfaz o valor fixado e
        volta ao cálculo pela tabela ou pela taxa.
        """
        current = await self.get(financing_id)
        data = _with_override_flags(changes)

        target_status = data.pop("status", None)
        if target_status is not None:
            self._check_transition(current, FinancingStatus(target_status), "generic_update")

        updated = current.model_copy(update=data)
        # model_copy não valida; revalida o registro completo
        updated = FinancingProposal.model_validate(updated.model_dump())
        if target_status is not None:
            updated.status = FinancingStatus(target_status)
        updated = await self._recompute(updated)
        await self._store.save(updated)
        return updated

    async def change_status(
        self,
        financing_id: str,
        target: FinancingStatus,
        quick_toggle: bool = False,
    ) -> FinancingProposal:
        """Muda o status de uma proposta.

        Args:
            financing_id: Proposta alvo.
            target: Novo status.
            quick_toggle: Atalho da listagem; aceita apenas `paid` e `analysis`.

        Raises:
            ValueError: Status fora do atalho quando quick_toggle=True.
            InvalidTransitionError: Transição fora do grafo com modo estrito.
        """
        if quick_toggle and target not in QUICK_TOGGLE_STATUSES:
            raise ValueError("Status inválido. Use 'paid' ou 'analysis'.")
        proposal = await self.get(financing_id)
        trigger = "status_toggle" if quick_toggle else "status_change"
        self._check_transition(proposal, target, trigger)
        proposal.status = target
        await self._store.save(proposal)
        return proposal

    async def delete(self, financing_id: str) -> None:
        if not await self._store.delete(financing_id):
            raise EntityNotFoundError("Financiamento", financing_id)
        logger.info(
            "financing_deleted",
            extra={"component": COMPONENT, "financing_id": financing_id},
        )

    def _check_transition(
        self,
        proposal: FinancingProposal,
        target: FinancingStatus,
        trigger: str,
    ) -> None:
        if proposal.status == target:
            return
        transition = StatusTransition(
            financing_id=proposal.id,
            from_status=proposal.status,
            to_status=target,
            trigger=trigger,
            on_graph=is_transition_valid(proposal.status, target),
        )
        if not transition.on_graph:
            logger.warning(
                "financing_transition_off_graph",
                extra={
                    "component": COMPONENT,
                    "strict": self._settings.strict_transitions,
                    **transition.to_log_dict(),
                },
            )
            if self._settings.strict_transitions:
                raise InvalidTransitionError(proposal.status.value, target.value)
        logger.info(
            "financing_status_changed",
            extra={"component": COMPONENT, **transition.to_log_dict()},
        )

    async def _recompute(self, proposal: FinancingProposal) -> FinancingProposal:
        """Recalcula retorno e comissões não fixados, ILA, acessórios e lucro."""
        update: dict[str, Any] = {}

        expected_return = proposal.expected_return
        if not proposal.expected_return_overridden:
            expected_return = expected_return_for(proposal.return_type, proposal.asset_value)
            update["expected_return"] = expected_return

        agent = await self._person(proposal.agent_id)
        if agent is not None:
            update["agent_name"] = agent.name
        if not proposal.agent_commission_overridden:
            update["agent_commission"] = _commission(expected_return, agent)

        if not proposal.seller_commission_overridden:
            seller = await self._person(proposal.seller_id)
            update["seller_commission"] = _commission(expected_return, seller)

        filled = proposal.model_copy(update=update)
        valuation = compute_valuation(valuation_inputs_of(filled))
        return filled.model_copy(
            update={
                "ila_amount": valuation.ila_amount,
                "accessories_value": valuation.accessories_value,
                "net_profit": valuation.net_profit,
            }
        )

    async def _person(self, personnel_id: str | None) -> Personnel | None:
        if not personnel_id:
            return None
        return await self._personnel.get(personnel_id)


def _with_override_flags(fields: dict[str, Any]) -> dict[str, Any]:
    """Filtra campos derivados e marca os valores fixados pelo operador.

    Valor informado (inclusive zero) fixa o campo; `None` libera o campo
    para voltar ao cálculo automático.
    """
    data = {k: v for k, v in fields.items() if k not in _DERIVED_FIELDS}
    for field in _OVERRIDABLE_FIELDS:
        if field not in data:
            continue
        overridden = data[field] is not None
        data[f"{field}_overridden"] = overridden
        if not overridden:
            del data[field]
    return data


def _commission(expected_return: Decimal, person: Personnel | None) -> Decimal:
    if person is None:
        return Decimal("0")
    return commission_from_rate(expected_return, person.commission_rate)
