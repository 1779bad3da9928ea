"""Stores: implementações concretas de persistência.

Módulos disponíveis:
    - memory_stores: stores em memória para desenvolvimento/testes
"""

from __future__ import annotations

from app.infra.stores.memory_stores import (
    MemoryConnectionStore,
    MemoryCustomerStore,
    MemoryFinancingStore,
    MemoryPersonnelStore,
)

__all__ = [
    "MemoryConnectionStore",
    "MemoryCustomerStore",
    "MemoryFinancingStore",
    "MemoryPersonnelStore",
]
