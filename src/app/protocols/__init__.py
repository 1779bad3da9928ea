"""Protocolos e contratos do core da aplicação."""

from .messaging_gateway import MessagingGatewayProtocol
from .payment_gateway import PaymentGatewayProtocol
from .stores import (
    ConnectionStoreProtocol,
    CustomerStoreProtocol,
    FinancingStoreProtocol,
    PersonnelStoreProtocol,
)

__all__ = [
    "ConnectionStoreProtocol",
    "CustomerStoreProtocol",
    "FinancingStoreProtocol",
    "MessagingGatewayProtocol",
    "PaymentGatewayProtocol",
    "PersonnelStoreProtocol",
]
