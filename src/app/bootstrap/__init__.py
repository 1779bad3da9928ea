"""Bootstrap da aplicação: inicialização e wiring.

Este módulo é o composition root: configura logging, valida settings e
conecta implementações concretas aos protocolos.

Uso:
    from app.bootstrap import initialize_app, get_payment_service

    # Na inicialização do serviço
    initialize_app()

    # Obter serviços
    payments = get_payment_service()
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import TYPE_CHECKING

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import (
    get_base_settings,
    get_financing_settings,
    get_messaging_gateway_settings,
    get_payment_gateway_settings,
)

if TYPE_CHECKING:
    from app.infra.cache import QueryCache
    from app.protocols.messaging_gateway import MessagingGatewayProtocol
    from app.protocols.payment_gateway import PaymentGatewayProtocol
    from app.protocols.stores import (
        ConnectionStoreProtocol,
        CustomerStoreProtocol,
        FinancingStoreProtocol,
        PersonnelStoreProtocol,
    )
    from app.services import FinancingService, MessagingService, PaymentService

STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Inicializa a aplicação com todas as configurações necessárias.

    Deve ser chamada uma vez no início do serviço.

    Configura:
    - Logging estruturado JSON com correlation_id
    """
    settings = get_base_settings()
    configure_logging(
        level=settings.log_level,
        service_name=settings.service_name,
        correlation_id_getter=get_correlation_id,
    )


def initialize_test_app() -> None:
    """Inicializa a aplicação para testes (logging em DEBUG)."""
    configure_logging(
        level="DEBUG",
        service_name=f"{get_base_settings().service_name}_test",
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local.
    """
    base = get_base_settings()
    environment = base.environment
    strict_mode = environment in STRICT_VALIDATION_ENVS
    errors: list[str] = []

    errors.extend(f"base: {error}" for error in base.validate())
    errors.extend(
        f"asaas: {error}" for error in get_payment_gateway_settings().validate(environment)
    )
    errors.extend(f"wppconnect: {error}" for error in get_messaging_gateway_settings().validate())

    if not errors:
        logger.info(
            "settings_validated",
            extra={
                "component": "bootstrap",
                "result": "ok",
                "environment": environment,
                "strict_transitions": get_financing_settings().strict_transitions,
            },
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if strict_mode:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {environment}:\n{details}")


# ──────────────────────────────────────────────────────────────────────────────
# Store Getters (lazy initialization com cache)
# ──────────────────────────────────────────────────────────────────────────────


@lru_cache(maxsize=1)
def get_financing_store() -> FinancingStoreProtocol:
    from app.bootstrap.dependencies import create_financing_store
    return create_financing_store()


@lru_cache(maxsize=1)
def get_personnel_store() -> PersonnelStoreProtocol:
    from app.bootstrap.dependencies import create_personnel_store
    return create_personnel_store()


@lru_cache(maxsize=1)
def get_customer_store() -> CustomerStoreProtocol:
    from app.bootstrap.dependencies import create_customer_store
    return create_customer_store()


@lru_cache(maxsize=1)
def get_connection_store() -> ConnectionStoreProtocol:
    from app.bootstrap.dependencies import create_connection_store
    return create_connection_store()


# ──────────────────────────────────────────────────────────────────────────────
# Gateways e serviços
# ──────────────────────────────────────────────────────────────────────────────


@lru_cache(maxsize=1)
def get_query_cache() -> QueryCache:
    """Cache de consultas do gateway de pagamentos (singleton)."""
    from app.infra.cache import QueryCache
    return QueryCache()


@lru_cache(maxsize=1)
def get_payment_gateway() -> PaymentGatewayProtocol:
    """Gateway de pagamentos; modo live/demo resolvido uma única vez."""
    from api.connectors.asaas import create_payment_gateway
    return create_payment_gateway(get_payment_gateway_settings())


@lru_cache(maxsize=1)
def get_messaging_gateway() -> MessagingGatewayProtocol:
    from api.connectors.wppconnect import create_wppconnect_client
    return create_wppconnect_client(get_messaging_gateway_settings())


@lru_cache(maxsize=1)
def get_financing_service() -> FinancingService:
    from app.services import FinancingService
    return FinancingService(
        get_financing_store(),
        get_personnel_store(),
        get_financing_settings(),
    )


@lru_cache(maxsize=1)
def get_payment_service() -> PaymentService:
    from app.services import PaymentService
    return PaymentService(get_payment_gateway(), get_query_cache(), get_customer_store())


@lru_cache(maxsize=1)
def get_messaging_service() -> MessagingService:
    from app.services import MessagingService
    return MessagingService(
        get_messaging_gateway(),
        get_connection_store(),
        default_daily_limit=get_messaging_gateway_settings().default_daily_limit,
    )


__all__ = [
    "get_connection_store",
    "get_customer_store",
    "get_financing_service",
    "get_financing_store",
    "get_messaging_gateway",
    "get_messaging_service",
    "get_payment_gateway",
    "get_payment_service",
    "get_personnel_store",
    "get_query_cache",
    "initialize_app",
    "initialize_test_app",
    "validate_runtime_settings",
]
