"""Settings do servidor WPPConnect (automação de WhatsApp).

A chave secreta não tem valor padrão: deve ser provisionada por
variável de ambiente ou secret manager.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

DEFAULT_WPPCONNECT_URL = "http://localhost:21465"
DEFAULT_DAILY_LIMIT = 1000


@dataclass(frozen=True)
class MessagingGatewaySettings:
    """Configurações do WPPConnect.

    Attributes:
        base_url: URL do servidor WPPConnect
        secret_key: Chave compartilhada (path e Bearer)
        timeout_seconds: Timeout de cada requisição
        default_daily_limit: Limite diário aplicado a novas conexões
    """

    base_url: str = DEFAULT_WPPCONNECT_URL
    secret_key: str = ""
    timeout_seconds: float = 15.0
    default_daily_limit: int = DEFAULT_DAILY_LIMIT

    @property
    def api_base(self) -> str:
        """Prefixo das rotas: {base_url}/api/{secret_key}."""
        return f"{self.base_url.rstrip('/')}/api/{self.secret_key}"

    def validate(self) -> list[str]:
        """Valida configurações do servidor de mensagens.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []

        if not self.secret_key:
            errors.append("WPPCONNECT_SECRET_KEY não configurado")

        if not self.base_url.startswith(("http://", "https://")):
            errors.append(f"WPPCONNECT_BASE_URL inválida: {self.base_url}")

        if self.timeout_seconds <= 0:
            errors.append("WPPCONNECT_TIMEOUT_SECONDS deve ser positivo")

        if self.default_daily_limit < 1:
            errors.append("WPPCONNECT_DEFAULT_DAILY_LIMIT deve ser >= 1")

        return errors


def _load_messaging_gateway_from_env() -> MessagingGatewaySettings:
    return MessagingGatewaySettings(
        base_url=os.getenv("WPPCONNECT_BASE_URL", DEFAULT_WPPCONNECT_URL),
        secret_key=os.getenv("WPPCONNECT_SECRET_KEY", ""),
        timeout_seconds=float(os.getenv("WPPCONNECT_TIMEOUT_SECONDS", "15")),
        default_daily_limit=int(
            os.getenv("WPPCONNECT_DEFAULT_DAILY_LIMIT", str(DEFAULT_DAILY_LIMIT))
        ),
    )


@lru_cache(maxsize=1)
def get_messaging_gateway_settings() -> MessagingGatewaySettings:
    """Retorna instância cacheada de MessagingGatewaySettings."""
    return _load_messaging_gateway_from_env()
