"""Proposta de financiamento de veículo.

Valores derivados (ila_amount, accessories_value, net_profit) são sempre
recalculados a partir dos campos de entrada e da taxa de comissão do
agente referenciado; nunca são editados diretamente. Retorno esperado e
comissões seguem a tabela e as taxas até o operador fixar um valor
(flags `*_overridden`).
"""

from __future__ import annotations

from datetime import UTC, datetime
from decimal import Decimal
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from app.domain.money import Money
from fsm.states.financing import DEFAULT_INITIAL_STATUS, FinancingStatus


def _utcnow() -> datetime:
    return datetime.now(UTC)


class ReturnType(StrEnum):
    """Tabela de retorno negociada com o banco (R0 a R6, RF)."""

    R0 = "R0"
    R1 = "R1"
    R2 = "R2"
    R3 = "R3"
    R4 = "R4"
    R6 = "R6"
    RF = "RF"

    @property
    def percentage(self) -> Decimal:
        """Fração do valor do bem paga como retorno."""
        return RETURN_PERCENTAGES[self]


RETURN_PERCENTAGES: dict[ReturnType, Decimal] = {
    ReturnType.R0: Decimal("0"),
    ReturnType.R1: Decimal("0.012"),
    ReturnType.R2: Decimal("0.024"),
    ReturnType.R3: Decimal("0.036"),
    ReturnType.R4: Decimal("0.048"),
    ReturnType.R6: Decimal("0.060"),
    ReturnType.RF: Decimal("0.015"),
}


class FinancingProposal(BaseModel):
    """Proposta de financiamento encaminhada a um banco."""

    model_config = ConfigDict(extra="ignore", validate_assignment=True)

    id: str = Field(..., description="Identificador interno da proposta.")
    customer_id: str | None = Field(default=None, description="Cliente interno, se cadastrado.")
    customer_name: str = Field(..., min_length=1)
    bank: str = Field(..., min_length=1)
    asset_value: Money = Field(default=Decimal("0"), ge=0)
    return_type: ReturnType = ReturnType.R0
    accessories_percentage: Money = Field(default=Decimal("0"), ge=0, le=100)
    fee_amount: Money = Field(default=Decimal("0"), ge=0)
    released_amount: Money = Field(default=Decimal("0"), ge=0)
    expected_return: Money = Field(default=Decimal("0"), ge=0)
    agent_commission: Money = Field(default=Decimal("0"), ge=0)
    seller_commission: Money = Field(default=Decimal("0"), ge=0)
    status: FinancingStatus = DEFAULT_INITIAL_STATUS
    agent_id: str | None = None
    agent_name: str | None = None
    seller_id: str | None = None
    notes: str | None = None
    created_at: datetime = Field(default_factory=_utcnow)

    # Valores fixados pelo operador; sem marca, seguem a tabela e as taxas
    expected_return_overridden: bool = False
    agent_commission_overridden: bool = False
    seller_commission_overridden: bool = False

    # Derivados
    ila_amount: Money = Decimal("0")
    accessories_value: Money = Decimal("0")
    net_profit: Money = Decimal("0")


__all__ = ["RETURN_PERCENTAGES", "FinancingProposal", "ReturnType"]
