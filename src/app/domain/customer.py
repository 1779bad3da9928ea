"""Cliente interno da loja (fonte dos dados enviados ao gateway)."""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field


class Customer(BaseModel):
    """Cliente cadastrado no back-office."""

    model_config = ConfigDict(extra="ignore")

    id: str
    name: str = Field(..., min_length=1)
    email: str | None = None
    phone: str | None = None
    document: str | None = Field(default=None, description="CPF ou CNPJ, com ou sem máscara.")
    address: str | None = Field(default=None, description="Ex: 'Rua das Flores, 123'.")
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))


__all__ = ["Customer"]
