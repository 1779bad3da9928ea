"""Modelos espelho do gateway de pagamentos (Asaas).

O back-office não guarda cópia autoritativa desses registros: são lidos
sob demanda e no máximo mantidos no cache de consultas do chamador.
Os nomes de campo seguem o formato camelCase do gateway via alias.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from enum import StrEnum
from typing import Generic, Literal, TypeVar, assert_never

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from app.domain.money import GatewayAmount

T = TypeVar("T")

SettlementState = Literal["open", "settled", "reversed", "cancelled"]


class GatewayMode(StrEnum):
    """Modo de operação do adapter, resolvido uma vez na construção."""

    LIVE = "live"
    DEMO = "demo"


class BillingType(StrEnum):
    """Forma de cobrança.

    UNDEFINED só aparece em leituras (cliente escolhe no link de
    pagamento); criação aceita apenas BOLETO, CREDIT_CARD e PIX.
    """

    BOLETO = "BOLETO"
    CREDIT_CARD = "CREDIT_CARD"
    PIX = "PIX"
    UNDEFINED = "UNDEFINED"


CREATABLE_BILLING_TYPES: frozenset[BillingType] = frozenset({
    BillingType.BOLETO,
    BillingType.CREDIT_CARD,
    BillingType.PIX,
})


class PaymentStatus(StrEnum):
    """Status de cobrança reportado pelo gateway."""

    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    RECEIVED = "RECEIVED"
    RECEIVED_IN_CASH = "RECEIVED_IN_CASH"
    OVERDUE = "OVERDUE"
    REFUNDED = "REFUNDED"
    REFUND_REQUESTED = "REFUND_REQUESTED"
    CHARGEBACK_REQUESTED = "CHARGEBACK_REQUESTED"
    CHARGEBACK_DISPUTE = "CHARGEBACK_DISPUTE"
    AWAITING_CHARGEBACK_REVERSAL = "AWAITING_CHARGEBACK_REVERSAL"
    DUNNING_REQUESTED = "DUNNING_REQUESTED"
    DUNNING_RECEIVED = "DUNNING_RECEIVED"
    AWAITING_RISK_ANALYSIS = "AWAITING_RISK_ANALYSIS"
    CANCELED = "CANCELED"


def settlement_state(status: PaymentStatus) -> SettlementState:
    """Agrupa o status do gateway para exibição e totais."""
    match status:
        case (
            PaymentStatus.PENDING
            | PaymentStatus.OVERDUE
            | PaymentStatus.AWAITING_RISK_ANALYSIS
            | PaymentStatus.DUNNING_REQUESTED
        ):
            return "open"
        case (
            PaymentStatus.CONFIRMED
            | PaymentStatus.RECEIVED
            | PaymentStatus.RECEIVED_IN_CASH
            | PaymentStatus.DUNNING_RECEIVED
        ):
            return "settled"
        case (
            PaymentStatus.REFUNDED
            | PaymentStatus.REFUND_REQUESTED
            | PaymentStatus.CHARGEBACK_REQUESTED
            | PaymentStatus.CHARGEBACK_DISPUTE
            | PaymentStatus.AWAITING_CHARGEBACK_REVERSAL
        ):
            return "reversed"
        case PaymentStatus.CANCELED:
            return "cancelled"
        case _:
            assert_never(status)


class GatewayModel(BaseModel):
    """Base com aliases camelCase do gateway."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class GatewayCustomer(GatewayModel):
    """Cliente cadastrado no gateway."""

    id: str | None = None
    name: str
    cpf_cnpj: str | None = None
    email: str | None = None
    phone: str | None = None
    mobile_phone: str | None = None
    address: str | None = None
    address_number: str | None = None
    complement: str | None = None
    province: str | None = None
    postal_code: str | None = None
    external_reference: str | None = None
    date_created: str | None = None


class GatewayPayment(GatewayModel):
    """Cobrança no gateway.

    `estimated_fee` é apenas informativo (tabela pública do gateway) e
    nunca deve ser usado em conciliação.
    """

    id: str
    customer: str
    billing_type: BillingType
    value: GatewayAmount
    net_value: GatewayAmount | None = None
    status: PaymentStatus = PaymentStatus.PENDING
    due_date: date
    description: str | None = None
    external_reference: str | None = None
    invoice_url: str | None = None
    bank_slip_url: str | None = None
    invoice_number: str | None = None
    date_created: str | None = None
    pix_qr_code_image: str | None = None
    pix_copia_e_cola: str | None = None
    estimated_fee: GatewayAmount | None = None
    customer_name: str | None = None
    customer_document: str | None = None

    @property
    def settlement(self) -> SettlementState:
        return settlement_state(self.status)


class CreditCard(GatewayModel):
    """Dados do cartão (nunca logados)."""

    holder_name: str
    number: str
    expiry_month: str
    expiry_year: str
    ccv: str


class CreditCardHolderInfo(GatewayModel):
    """Titular do cartão, preenchido a partir do cliente interno."""

    name: str
    email: str | None = None
    cpf_cnpj: str | None = None
    postal_code: str | None = None
    address_number: str | None = None
    address_complement: str | None = None
    phone: str | None = None
    mobile_phone: str | None = None


class CreatePaymentRequest(GatewayModel):
    """Payload de criação de cobrança."""

    customer: str = Field(..., min_length=1, description="ID do cliente no gateway.")
    billing_type: BillingType
    value: GatewayAmount = Field(..., gt=0)
    due_date: date
    description: str | None = None
    external_reference: str | None = None
    credit_card: CreditCard | None = None
    credit_card_holder_info: CreditCardHolderInfo | None = None

    @field_validator("billing_type")
    @classmethod
    def _creatable_billing_type(cls, value: BillingType) -> BillingType:
        if value not in CREATABLE_BILLING_TYPES:
            raise ValueError(f"billingType não permitido na criação: {value}")
        return value


class PixQrCode(GatewayModel):
    """QR Code Pix de uma cobrança."""

    encoded_image: str
    payload: str
    expiration_date: str | None = None


class CheckoutAddress(GatewayModel):
    """Endereço informado no checkout (obrigatório para boleto registrado)."""

    postal_code: str | None = None
    address: str | None = None
    address_number: str | None = None
    complement: str | None = None
    province: str | None = None


class PaymentCheckout(GatewayModel):
    """Pedido de cobrança vindo do back-office.

    O cliente é identificado pelo cadastro interno (`customer_id`) ou
    pelos campos `customer_*`; no gateway ele é localizado pelo CPF/CNPJ
    e criado quando não existe.
    """

    customer_id: str | None = None
    customer_name: str | None = None
    customer_cpf_cnpj: str | None = None
    customer_email: str | None = None
    customer_phone: str | None = None
    billing_type: BillingType
    value: GatewayAmount = Field(..., gt=0)
    due_date: date
    description: str | None = None
    external_reference: str | None = None
    credit_card_data: CreditCard | None = None
    address_info: CheckoutAddress | None = None

    @field_validator("billing_type")
    @classmethod
    def _creatable_billing_type(cls, value: BillingType) -> BillingType:
        if value not in CREATABLE_BILLING_TYPES:
            raise ValueError(f"billingType não permitido na criação: {value}")
        return value

    @model_validator(mode="after")
    def _customer_identified(self) -> PaymentCheckout:
        if not self.customer_id and not (self.customer_name and self.customer_cpf_cnpj):
            raise ValueError("Informe customerId ou customerName e customerCpfCnpj")
        return self


class Page(GatewayModel, Generic[T]):
    """Página de resultados (`{data, totalCount, hasMore}`).

    `degraded` marca a página vazia devolvida no lugar de uma leitura
    que falhou; ela não deve ser guardada em cache.
    """

    data: list[T] = Field(default_factory=list)
    total_count: int = 0
    has_more: bool = False
    degraded: bool = False


class Balance(GatewayModel):
    """Saldo da conta; `degraded` quando o valor é o zero de fallback."""

    balance: GatewayAmount = Decimal("0")
    degraded: bool = False


__all__ = [
    "CREATABLE_BILLING_TYPES",
    "Balance",
    "BillingType",
    "CheckoutAddress",
    "CreatePaymentRequest",
    "CreditCard",
    "CreditCardHolderInfo",
    "GatewayCustomer",
    "GatewayMode",
    "GatewayPayment",
    "Page",
    "PaymentCheckout",
    "PaymentStatus",
    "PixQrCode",
    "SettlementState",
    "settlement_state",
]
