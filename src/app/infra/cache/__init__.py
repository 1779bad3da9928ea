"""Cache de consultas a gateways externos."""

from app.infra.cache.query_cache import QueryCache

__all__ = ["QueryCache"]
