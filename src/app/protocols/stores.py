"""Contratos de persistência dos registros do back-office.

A camada de persistência real é externa; as implementações em memória
de app/infra/stores atendem desenvolvimento e testes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from app.domain.customer import Customer
from app.domain.financing import FinancingProposal
from app.domain.messaging import MessagingConnection
from app.domain.personnel import Personnel


class FinancingStoreProtocol(ABC):
    """CRUD de propostas de financiamento."""

    @abstractmethod
    async def list_all(self) -> list[FinancingProposal]: ...

    @abstractmethod
    async def get(self, financing_id: str) -> FinancingProposal | None: ...

    @abstractmethod
    async def save(self, proposal: FinancingProposal) -> None: ...

    @abstractmethod
    async def delete(self, financing_id: str) -> bool: ...


class PersonnelStoreProtocol(ABC):
    """CRUD de pessoal."""

    @abstractmethod
    async def list_all(self) -> list[Personnel]: ...

    @abstractmethod
    async def get(self, personnel_id: str) -> Personnel | None: ...

    @abstractmethod
    async def save(self, person: Personnel) -> None: ...

    @abstractmethod
    async def delete(self, personnel_id: str) -> bool: ...


class CustomerStoreProtocol(ABC):
    """CRUD de clientes internos."""

    @abstractmethod
    async def list_all(self) -> list[Customer]: ...

    @abstractmethod
    async def get(self, customer_id: str) -> Customer | None: ...

    @abstractmethod
    async def save(self, customer: Customer) -> None: ...


class ConnectionStoreProtocol(ABC):
    """CRUD de conexões de WhatsApp."""

    @abstractmethod
    async def list_all(self) -> list[MessagingConnection]: ...

    @abstractmethod
    async def get(self, connection_id: str) -> MessagingConnection | None: ...

    @abstractmethod
    async def save(self, connection: MessagingConnection) -> None: ...

    @abstractmethod
    async def delete(self, connection_id: str) -> bool: ...
