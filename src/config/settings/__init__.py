"""Agregador de settings do back-office.

Re-exporta settings e getters de cada módulo.
"""

from __future__ import annotations

from config.settings.asaas import (
    ASAAS_PRODUCTION_URL,
    ASAAS_SANDBOX_URL,
    PaymentGatewaySettings,
    get_payment_gateway_settings,
)
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.financing import (
    FinancingSettings,
    get_financing_settings,
)
from config.settings.wppconnect import (
    DEFAULT_WPPCONNECT_URL,
    MessagingGatewaySettings,
    get_messaging_gateway_settings,
)

__all__ = [
    "ASAAS_PRODUCTION_URL",
    "ASAAS_SANDBOX_URL",
    "DEFAULT_WPPCONNECT_URL",
    "BaseSettings",
    "Environment",
    "FinancingSettings",
    "MessagingGatewaySettings",
    "PaymentGatewaySettings",
    "get_base_settings",
    "get_financing_settings",
    "get_messaging_gateway_settings",
    "get_payment_gateway_settings",
]
