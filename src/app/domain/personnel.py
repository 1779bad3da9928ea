"""Funcionários, agentes e lojistas com taxa de comissão."""

from __future__ import annotations

from datetime import UTC, datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from app.domain.money import Money


class PersonnelType(StrEnum):
    """Vínculo da pessoa com a loja."""

    EMPLOYEE = "employee"
    AGENT = "agent"
    DEALER = "dealer"


class Personnel(BaseModel):
    """Pessoa que recebe comissão sobre propostas."""

    model_config = ConfigDict(extra="ignore")

    id: str
    name: str = Field(..., min_length=1)
    type: PersonnelType
    document: str | None = None
    email: str | None = None
    phone: str | None = None
    role: str | None = None
    is_active: bool = True
    commission_rate: Money | None = Field(
        default=None,
        ge=0,
        le=100,
        description="Percentual de comissão (ex: 1.5 para 1,5%).",
    )
    notes: str | None = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))


__all__ = ["Personnel", "PersonnelType"]
