"""Connector do gateway de pagamentos Asaas (modos live e demo)."""

from api.connectors.asaas.demo_gateway import AsaasDemoGateway
from api.connectors.asaas.factory import create_payment_gateway, resolve_gateway_mode
from api.connectors.asaas.fees import estimate_gateway_fee
from api.connectors.asaas.live_gateway import AsaasLiveGateway
from api.connectors.asaas.mappers import (
    enrich_payment_with_customer,
    format_customer_for_gateway,
    split_address,
)

__all__ = [
    "AsaasDemoGateway",
    "AsaasLiveGateway",
    "create_payment_gateway",
    "enrich_payment_with_customer",
    "estimate_gateway_fee",
    "format_customer_for_gateway",
    "resolve_gateway_mode",
    "split_address",
]
