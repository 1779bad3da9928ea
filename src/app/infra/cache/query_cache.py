"""Cache de consultas chaveado pelo caminho do endpoint.

Instância explícita, criada pelo bootstrap e injetada no serviço que a
usa; não há cache global. Mutações no gateway devem invalidar os
prefixos afetados para que a leitura seguinte reflita a mudança.
"""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_TTL_SECONDS = 60.0


class QueryCache:
    """Cache TTL em memória com invalidação por prefixo."""

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: dict[str, tuple[Any, float]] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Any | None:
        """Valor em cache ou None se ausente/expirado."""
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            value, expires_at = entry
            if self._clock() >= expires_at:
                del self._entries[key]
                return None
            return value

    def set(self, key: str, value: Any) -> None:
        with self._lock:
            self._entries[key] = (value, self._clock() + self._ttl_seconds)

    async def get_or_load(
        self,
        key: str,
        loader: Callable[[], Awaitable[T]],
        cacheable: Callable[[T], bool] | None = None,
    ) -> T:
        """Retorna o valor em cache ou executa `loader` e guarda o resultado.

        Resultados recusados por `cacheable` são devolvidos sem ir ao cache.
        """
        cached = self.get(key)
        if cached is not None:
            logger.debug(
                "query_cache_hit",
                extra={"component": "query_cache", "action": "get", "key": key},
            )
            return cached
        value = await loader()
        if cacheable is not None and not cacheable(value):
            logger.debug(
                "query_cache_skipped",
                extra={"component": "query_cache", "action": "set", "key": key},
            )
            return value
        self.set(key, value)
        return value

    def invalidate(self, *prefixes: str) -> int:
        """Remove entradas cujo caminho começa com algum dos prefixos.

        Returns:
            Quantidade de entradas removidas.
        """
        with self._lock:
            keys = [k for k in self._entries if k.startswith(prefixes)]
            for key in keys:
                del self._entries[key]
        logger.debug(
            "query_cache_invalidated",
            extra={
                "component": "query_cache",
                "action": "invalidate",
                "result": "ok",
                "prefixes": list(prefixes),
                "items_cleared": len(keys),
            },
        )
        return len(keys)

    def clear(self) -> None:
        with self._lock:
            count = len(self._entries)
            self._entries.clear()
        logger.info(
            "query_cache_cleared",
            extra={
                "component": "query_cache",
                "action": "clear",
                "result": "ok",
                "items_cleared": count,
            },
        )

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
