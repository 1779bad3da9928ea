"""Modelos de domínio do back-office."""

from app.domain.customer import Customer
from app.domain.financing import RETURN_PERCENTAGES, FinancingProposal, ReturnType
from app.domain.messaging import MessagingConnection, OutboundMessageType, session_id_for
from app.domain.money import GatewayAmount, Money, quantize_cents, to_decimal
from app.domain.payments import (
    Balance,
    BillingType,
    CheckoutAddress,
    CreatePaymentRequest,
    CreditCard,
    CreditCardHolderInfo,
    GatewayCustomer,
    GatewayMode,
    GatewayPayment,
    Page,
    PaymentCheckout,
    PaymentStatus,
    PixQrCode,
    settlement_state,
)
from app.domain.personnel import Personnel, PersonnelType

__all__ = [
    "RETURN_PERCENTAGES",
    "Balance",
    "BillingType",
    "CheckoutAddress",
    "CreatePaymentRequest",
    "CreditCard",
    "CreditCardHolderInfo",
    "Customer",
    "FinancingProposal",
    "GatewayAmount",
    "GatewayCustomer",
    "GatewayMode",
    "GatewayPayment",
    "MessagingConnection",
    "Money",
    "OutboundMessageType",
    "Page",
    "PaymentCheckout",
    "PaymentStatus",
    "Personnel",
    "PersonnelType",
    "PixQrCode",
    "ReturnType",
    "quantize_cents",
    "session_id_for",
    "settlement_state",
    "to_decimal",
]
