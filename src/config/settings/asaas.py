"""Settings do gateway de pagamentos Asaas.

Sem `ASAAS_API_KEY` o adapter opera em modo demo (dados sintéticos).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from functools import lru_cache
from typing import Literal

AsaasEnvironment = Literal["sandbox", "production"]

ASAAS_SANDBOX_URL = "https://api-sandbox.asaas.com/v3"
ASAAS_PRODUCTION_URL = "https://api.asaas.com/v3"

DEFAULT_BOLETO_FEE = Decimal("1.99")


@dataclass(frozen=True)
class PaymentGatewaySettings:
    """Configurações do Asaas.

    Attributes:
        api_key: Chave da conta (vazia = modo demo)
        environment: sandbox ou production
        base_url_override: URL explícita (sobrepõe environment)
        timeout_seconds: Timeout de cada requisição
        boleto_fee: Tarifa fixa informativa por boleto
    """

    api_key: str = ""
    environment: AsaasEnvironment = "sandbox"
    base_url_override: str = ""
    timeout_seconds: float = 15.0
    boleto_fee: Decimal = DEFAULT_BOLETO_FEE

    @property
    def is_configured(self) -> bool:
        """True quando há credencial para o modo live."""
        return bool(self.api_key.strip())

    @property
    def base_url(self) -> str:
        """URL base da API v3."""
        if self.base_url_override:
            return self.base_url_override.rstrip("/")
        if self.environment == "production":
            return ASAAS_PRODUCTION_URL
        return ASAAS_SANDBOX_URL

    def validate(self, environment: str = "development") -> list[str]:
        """Valida configurações do gateway.

        Args:
            environment: Ambiente da aplicação; produção exige chave e
                conta de produção.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []

        if self.timeout_seconds <= 0:
            errors.append("ASAAS_TIMEOUT_SECONDS deve ser positivo")

        if self.boleto_fee < 0:
            errors.append("ASAAS_BOLETO_FEE não pode ser negativo")

        if environment == "production":
            if not self.is_configured:
                errors.append("ASAAS_API_KEY obrigatório em production")
            if self.environment != "production" and not self.base_url_override:
                errors.append("ASAAS_ENVIRONMENT deve ser production em production")

        return errors


def _parse_asaas_environment(raw: str) -> AsaasEnvironment:
    if raw.strip().lower() in ("production", "prod"):
        return "production"
    return "sandbox"


def _parse_decimal(raw: str | None, default: Decimal) -> Decimal:
    if raw is None or not raw.strip():
        return default
    try:
        return Decimal(raw.strip())
    except InvalidOperation:
        return default


def _load_payment_gateway_from_env() -> PaymentGatewaySettings:
    return PaymentGatewaySettings(
        api_key=os.getenv("ASAAS_API_KEY", ""),
        environment=_parse_asaas_environment(os.getenv("ASAAS_ENVIRONMENT", "sandbox")),
        base_url_override=os.getenv("ASAAS_BASE_URL", ""),
        timeout_seconds=float(os.getenv("ASAAS_TIMEOUT_SECONDS", "15")),
        boleto_fee=_parse_decimal(os.getenv("ASAAS_BOLETO_FEE"), DEFAULT_BOLETO_FEE),
    )


@lru_cache(maxsize=1)
def get_payment_gateway_settings() -> PaymentGatewaySettings:
    """Retorna instância cacheada de PaymentGatewaySettings."""
    return _load_payment_gateway_from_env()
