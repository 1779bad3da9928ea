"""Factory do gateway de pagamentos.

O modo (live/demo) é decidido uma única vez, aqui, pela presença da
chave da API.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.connectors.asaas.demo_gateway import AsaasDemoGateway
from api.connectors.asaas.live_gateway import AsaasLiveGateway
from app.domain.payments import GatewayMode

if TYPE_CHECKING:
    from api.connectors.http_base import HttpClient
    from app.protocols.payment_gateway import PaymentGatewayProtocol
    from config.settings import PaymentGatewaySettings

logger = logging.getLogger(__name__)


def resolve_gateway_mode(settings: PaymentGatewaySettings) -> GatewayMode:
    """LIVE com chave configurada, DEMO caso contrário."""
    return GatewayMode.LIVE if settings.is_configured else GatewayMode.DEMO


def create_payment_gateway(
    settings: PaymentGatewaySettings | None = None,
    http_client: HttpClient | None = None,
) -> PaymentGatewayProtocol:
    """Cria o gateway conforme o modo resolvido.

    Args:
        settings: PaymentGatewaySettings opcional. Se None, carrega do ambiente.
        http_client: Cliente HTTP opcional (testes).

    Returns:
        Implementação de PaymentGatewayProtocol.
    """
    from config.settings import get_payment_gateway_settings

    asaas = settings or get_payment_gateway_settings()
    mode = resolve_gateway_mode(asaas)
    logger.info(
        "payment_gateway_mode_resolved",
        extra={"component": "asaas_gateway", "mode": mode.value},
    )
    if mode is GatewayMode.LIVE:
        return AsaasLiveGateway(asaas, http_client=http_client)
    return AsaasDemoGateway(boleto_fee=asaas.boleto_fee)
