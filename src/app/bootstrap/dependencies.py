"""Factories de stores: criação de implementações concretas.

Este módulo centraliza a criação de stores baseadas nas
configurações de ambiente.
"""

from __future__ import annotations

import logging
import os

from app.infra.stores import (
    MemoryConnectionStore,
    MemoryCustomerStore,
    MemoryFinancingStore,
    MemoryPersonnelStore,
)
from app.protocols.stores import (
    ConnectionStoreProtocol,
    CustomerStoreProtocol,
    FinancingStoreProtocol,
    PersonnelStoreProtocol,
)

logger = logging.getLogger(__name__)

SUPPORTED_BACKENDS = ("memory",)


def _runtime_environment() -> str:
    return os.getenv("ENVIRONMENT", "development").lower()


def _resolve_backend(store_name: str) -> str:
    """Lê STORE_BACKEND da env e alerta quando memória roda fora de dev.

    Raises:
        ValueError: backend desconhecido.
    """
    backend = os.getenv("STORE_BACKEND", "memory").lower()
    if backend not in SUPPORTED_BACKENDS:
        msg = f"STORE_BACKEND inválido: {backend}"
        raise ValueError(msg)

    environment = _runtime_environment()
    if environment not in ("development", "test"):
        logger.warning(
            "memory_store_in_non_dev",
            extra={"backend": backend, "store": store_name, "environment": environment},
        )
    logger.info("store_created", extra={"backend": backend, "store": store_name})
    return backend


def create_financing_store() -> FinancingStoreProtocol:
    _resolve_backend("financing")
    return MemoryFinancingStore()


def create_personnel_store() -> PersonnelStoreProtocol:
    _resolve_backend("personnel")
    return MemoryPersonnelStore()


def create_customer_store() -> CustomerStoreProtocol:
    _resolve_backend("customer")
    return MemoryCustomerStore()


def create_connection_store() -> ConnectionStoreProtocol:
    _resolve_backend("connection")
    return MemoryConnectionStore()
