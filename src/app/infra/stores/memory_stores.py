"""Stores em memória: apenas para desenvolvimento e testes.

ATENÇÃO: Sem persistência entre reinícios. A persistência real é um
colaborador externo que implementa os mesmos protocolos.
"""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel

from app.domain.customer import Customer
from app.domain.financing import FinancingProposal
from app.domain.messaging import MessagingConnection
from app.domain.personnel import Personnel
from app.protocols.stores import (
    ConnectionStoreProtocol,
    CustomerStoreProtocol,
    FinancingStoreProtocol,
    PersonnelStoreProtocol,
)

ModelT = TypeVar("ModelT", bound=BaseModel)


class _MemoryRecords(Generic[ModelT]):
    """Dicionário id -> registro; devolve cópias para evitar mutação externa."""

    def __init__(self) -> None:
        self._store: dict[str, ModelT] = {}

    def list_all(self) -> list[ModelT]:
        return [record.model_copy(deep=True) for record in self._store.values()]

    def get(self, record_id: str) -> ModelT | None:
        record = self._store.get(record_id)
        return record.model_copy(deep=True) if record is not None else None

    def save(self, record_id: str, record: ModelT) -> None:
        self._store[record_id] = record.model_copy(deep=True)

    def delete(self, record_id: str) -> bool:
        return self._store.pop(record_id, None) is not None


class MemoryFinancingStore(FinancingStoreProtocol):
    """Propostas de financiamento em memória."""

    def __init__(self) -> None:
        self._records: _MemoryRecords[FinancingProposal] = _MemoryRecords()

    async def list_all(self) -> list[FinancingProposal]:
        return sorted(self._records.list_all(), key=lambda p: p.created_at, reverse=True)

    async def get(self, financing_id: str) -> FinancingProposal | None:
        return self._records.get(financing_id)

    async def save(self, proposal: FinancingProposal) -> None:
        self._records.save(proposal.id, proposal)

    async def delete(self, financing_id: str) -> bool:
        return self._records.delete(financing_id)


class MemoryPersonnelStore(PersonnelStoreProtocol):
    """Pessoal em memória."""

    def __init__(self) -> None:
        self._records: _MemoryRecords[Personnel] = _MemoryRecords()

    async def list_all(self) -> list[Personnel]:
        return sorted(self._records.list_all(), key=lambda p: p.name)

    async def get(self, personnel_id: str) -> Personnel | None:
        return self._records.get(personnel_id)

    async def save(self, person: Personnel) -> None:
        self._records.save(person.id, person)

    async def delete(self, personnel_id: str) -> bool:
        return self._records.delete(personnel_id)


class MemoryCustomerStore(CustomerStoreProtocol):
    """Clientes internos em memória."""

    def __init__(self) -> None:
        self._records: _MemoryRecords[Customer] = _MemoryRecords()

    async def list_all(self) -> list[Customer]:
        return sorted(self._records.list_all(), key=lambda c: c.name)

    async def get(self, customer_id: str) -> Customer | None:
        return self._records.get(customer_id)

    async def save(self, customer: Customer) -> None:
        self._records.save(customer.id, customer)


class MemoryConnectionStore(ConnectionStoreProtocol):
    """Conexões de WhatsApp em memória."""

    def __init__(self) -> None:
        self._records: _MemoryRecords[MessagingConnection] = _MemoryRecords()

    async def list_all(self) -> list[MessagingConnection]:
        return sorted(self._records.list_all(), key=lambda c: c.created_at)

    async def get(self, connection_id: str) -> MessagingConnection | None:
        return self._records.get(connection_id)

    async def save(self, connection: MessagingConnection) -> None:
        self._records.save(connection.id, connection)

    async def delete(self, connection_id: str) -> bool:
        return self._records.delete(connection_id)
