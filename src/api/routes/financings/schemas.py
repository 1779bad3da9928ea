"""Corpos de requisição das rotas de financiamento.

Campos derivados (ila_amount, accessories_value, net_profit) não são
aceitos: o servidor sempre os recalcula.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from app.domain.financing import ReturnType
from app.domain.money import Money
from fsm.states.financing import FinancingStatus


class FinancingCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    customer_name: str = Field(..., min_length=1)
    customer_id: str | None = None
    bank: str = Field(..., min_length=1)
    asset_value: Decimal = Field(default=Decimal("0"), ge=0)
    return_type: ReturnType = ReturnType.R0
    accessories_percentage: Decimal = Field(default=Decimal("0"), ge=0, le=100)
    fee_amount: Decimal = Field(default=Decimal("0"), ge=0)
    released_amount: Decimal = Field(default=Decimal("0"), ge=0)
    expected_return: Decimal | None = Field(default=None, ge=0)
    agent_commission: Decimal | None = Field(default=None, ge=0)
    seller_commission: Decimal | None = Field(default=None, ge=0)
    status: FinancingStatus | None = None
    agent_id: str | None = None
    seller_id: str | None = None
    notes: str | None = None

    def to_fields(self) -> dict[str, Any]:
        """Campos informados; omitidos ficam para os defaults do serviço."""
        return self.model_dump(exclude_none=True)


class FinancingUpdate(BaseModel):
    """Campos omitidos ficam como estão; `null` em expected_return ou nas
    comissões volta ao cálculo pela tabela e pelas taxas."""

    model_config = ConfigDict(extra="forbid")

    customer_name: str | None = Field(default=None, min_length=1)
    customer_id: str | None = None
    bank: str | None = Field(default=None, min_length=1)
    asset_value: Decimal | None = Field(default=None, ge=0)
    return_type: ReturnType | None = None
    accessories_percentage: Decimal | None = Field(default=None, ge=0, le=100)
    fee_amount: Decimal | None = Field(default=None, ge=0)
    released_amount: Decimal | None = Field(default=None, ge=0)
    expected_return: Decimal | None = Field(default=None, ge=0)
    agent_commission: Decimal | None = Field(default=None, ge=0)
    seller_commission: Decimal | None = Field(default=None, ge=0)
    status: FinancingStatus | None = None
    agent_id: str | None = None
    seller_id: str | None = None
    notes: str | None = None

    def to_changes(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class StatusToggle(BaseModel):
    status: FinancingStatus


class PortfolioSummaryResponse(BaseModel):
    count_by_status: dict[str, int]
    total_released: Money
    total_net_profit: Money
    total_paid_margin: Money
