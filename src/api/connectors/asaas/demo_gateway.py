"""Gateway de pagamentos em modo demo (sem ASAAS_API_KEY).

Estratégia alternativa com a mesma interface do modo live: devolve
clientes e cobranças sintéticos, com ids prefixados por `demo_`, para
que o back-office funcione sem credencial. Os dados são derivados do
índice do registro e da data corrente; nada é guardado entre chamadas.
"""

from __future__ import annotations

import logging
import uuid
from datetime import UTC, date, datetime, timedelta
from decimal import Decimal
from typing import Any, TypeVar

from api.connectors.asaas.fees import DEFAULT_BOLETO_FEE, estimate_gateway_fee
from app.domain.money import quantize_cents
from app.domain.payments import (
    Balance,
    BillingType,
    CreatePaymentRequest,
    GatewayCustomer,
    GatewayMode,
    GatewayPayment,
    Page,
    PaymentStatus,
    PixQrCode,
)
from app.protocols.payment_gateway import PaymentGatewayProtocol
from config.logging import log_fallback
from utils.errors import PaymentNotCancellableError, PaymentNotFoundError

logger = logging.getLogger(__name__)

COMPONENT = "asaas_demo_gateway"

DEMO_PREFIX = "demo_"
DEMO_PAYMENT_COUNT = 25

DEMO_CUSTOMER_NAMES: tuple[str, ...] = (
    "João Silva", "Maria Oliveira", "Carlos Santos", "Ana Pereira",
    "Ricardo Ferreira", "Juliana Costa", "Fernando Almeida", "Camila Rodrigues",
    "Pedro Souza", "Mariana Lima", "Luiz Gomes", "Patrícia Ribeiro",
    "André Carvalho", "Bianca Martins", "Marcos Barbosa", "Daniela Teixeira",
)

DEMO_PAYMENT_DESCRIPTIONS: tuple[str, ...] = (
    "Pagamento do veículo GM Celta",
    "Financiamento Strada Working",
    "Entrada parcial Toyota Corolla",
    "Pagamento do Honda Civic",
    "Parcela financiamento Hyundai HB20",
    "Seguro veicular Fiat Uno",
    "Documentação VW Gol",
    "Entrada Honda Fit",
    "Parcela Nissan Versa",
    "Pagamento do Jeep Renegade",
)

DEMO_BILLING_TYPES: tuple[BillingType, ...] = (
    BillingType.BOLETO,
    BillingType.CREDIT_CARD,
    BillingType.PIX,
)

DEMO_STATUSES: tuple[PaymentStatus, ...] = (
    PaymentStatus.PENDING,
    PaymentStatus.CONFIRMED,
    PaymentStatus.RECEIVED,
    PaymentStatus.OVERDUE,
    PaymentStatus.REFUNDED,
    PaymentStatus.CANCELED,
)

DEMO_PIX_PAYLOAD = (
    "00020101021226890014br.gov.bcb.pix2567invoice.asaas.com/pix/demo"
    "52045802BR5925ASAAS PAGAMENTOS LTDA6009SAO PAULO62070503***63041234"
)

NET_VALUE_RATE = Decimal("0.97")

PageT = TypeVar("PageT", bound=Page)


def demo_customer(index: int) -> GatewayCustomer:
    """Cliente sintético de índice `index` (0-based)."""
    slot = index % len(DEMO_CUSTOMER_NAMES)
    name = DEMO_CUSTOMER_NAMES[slot]
    phone = f"(11) 9{9000 + slot}-{1000 + slot}"
    return GatewayCustomer(
        id=f"{DEMO_PREFIX}customer_{slot + 1}",
        name=name,
        cpf_cnpj=f"{100000000 + slot}{slot:02d}",
        email=f"{name.split(' ')[0].lower()}@email.com",
        phone=phone,
        mobile_phone=phone,
        address=f"Rua das Flores, {100 + slot}",
        address_number=str(100 + slot),
        complement="Apto 10" if slot % 3 == 0 else None,
        province="Centro",
        postal_code=f"01000-{100 + slot}",
        date_created=(datetime.now(UTC) - timedelta(days=slot)).isoformat(),
    )


def demo_payment(index: int, today: date | None = None) -> GatewayPayment:
    """Cobrança sintética de índice `index` (0-based)."""
    today = today or datetime.now(UTC).date()
    billing_type = DEMO_BILLING_TYPES[index % len(DEMO_BILLING_TYPES)]
    value = Decimal(500 + (index * 937) % 4500)
    customer = demo_customer(index)
    payment = GatewayPayment(
        id=f"{DEMO_PREFIX}payment_{index + 1}",
        customer=customer.id or "",
        billing_type=billing_type,
        value=value,
        net_value=quantize_cents(value * NET_VALUE_RATE),
        status=DEMO_STATUSES[index % len(DEMO_STATUSES)],
        due_date=today + timedelta(days=(index * 7) % 30 - 15),
        description=DEMO_PAYMENT_DESCRIPTIONS[index % len(DEMO_PAYMENT_DESCRIPTIONS)],
        external_reference=f"sale_{index + 1}",
        invoice_url=f"https://sandbox.asaas.com/i/{index}demo",
        bank_slip_url=(
            f"https://sandbox.asaas.com/b/{index}demo"
            if billing_type == BillingType.BOLETO
            else None
        ),
        invoice_number=str(100000 + index),
        date_created=(datetime.now(UTC) - timedelta(days=index % 30)).isoformat(),
        customer_name=customer.name,
        customer_document=customer.cpf_cnpj,
    )
    if billing_type == BillingType.PIX:
        payment = payment.model_copy(
            update={
                "pix_qr_code_image": f"https://sandbox.asaas.com/pixqrcode/{index}demo",
                "pix_copia_e_cola": DEMO_PIX_PAYLOAD,
            }
        )
    return payment


def _demo_index(payment_id: str, prefix: str, total: int) -> int | None:
    """Índice 0-based de um id sintético, ou None se não for válido."""
    if not payment_id.startswith(prefix):
        return None
    suffix = payment_id[len(prefix):]
    if not suffix.isdigit():
        return None
    index = int(suffix) - 1
    return index if 0 <= index < total else None


class AsaasDemoGateway(PaymentGatewayProtocol):
    """Gateway sintético; nenhuma leitura lança exceção."""

    def __init__(self, boleto_fee: Decimal = DEFAULT_BOLETO_FEE) -> None:
        self._boleto_fee = boleto_fee

    @property
    def mode(self) -> GatewayMode:
        return GatewayMode.DEMO

    async def get_balance(self) -> Balance:
        log_fallback(logger, COMPONENT, reason="demo_mode")
        return Balance()

    async def list_customers(
        self,
        offset: int = 0,
        limit: int = 10,
        name: str | None = None,
        document: str | None = None,
    ) -> Page[GatewayCustomer]:
        customers = [demo_customer(i) for i in range(len(DEMO_CUSTOMER_NAMES))]
        if name:
            keyword = name.strip().lower()
            customers = [c for c in customers if keyword in c.name.lower()]
        if document:
            customers = [c for c in customers if c.cpf_cnpj == document]
        return _paginate(Page[GatewayCustomer], customers, offset, limit)

    async def find_customer_by_document(self, document: str) -> GatewayCustomer | None:
        if not document:
            return None
        page = await self.list_customers(offset=0, limit=1, document=document)
        return page.data[0] if page.data else None

    async def create_customer(self, customer: GatewayCustomer) -> GatewayCustomer:
        created = customer.model_copy(
            update={
                "id": f"{DEMO_PREFIX}customer_{uuid.uuid4().hex[:12]}",
                "date_created": datetime.now(UTC).isoformat(),
            }
        )
        logger.info(
            "asaas_demo_customer_created",
            extra={"component": COMPONENT, "customer_id": created.id},
        )
        return created

    async def list_payments(
        self,
        offset: int = 0,
        limit: int = 10,
        status: PaymentStatus | None = None,
    ) -> Page[GatewayPayment]:
        payments = [demo_payment(i) for i in range(DEMO_PAYMENT_COUNT)]
        if status is not None:
            payments = [p for p in payments if p.status == status]
        return _paginate(Page[GatewayPayment], payments, offset, limit)

    async def get_payment(self, payment_id: str) -> GatewayPayment:
        if not payment_id:
            raise ValueError("payment_id é obrigatório")
        index = _demo_index(payment_id, f"{DEMO_PREFIX}payment_", DEMO_PAYMENT_COUNT)
        if index is None:
            raise PaymentNotFoundError(payment_id)
        return demo_payment(index)

    async def create_payment(self, request: CreatePaymentRequest) -> GatewayPayment:
        value = quantize_cents(request.value)
        payment = GatewayPayment(
            id=f"{DEMO_PREFIX}payment_{uuid.uuid4().hex[:12]}",
            customer=request.customer,
            billing_type=request.billing_type,
            value=value,
            net_value=quantize_cents(value * NET_VALUE_RATE),
            status=PaymentStatus.PENDING,
            due_date=request.due_date,
            description=request.description,
            external_reference=request.external_reference,
            date_created=datetime.now(UTC).isoformat(),
            estimated_fee=estimate_gateway_fee(request.billing_type, value, self._boleto_fee),
        )
        if request.billing_type == BillingType.PIX:
            payment = payment.model_copy(update={"pix_copia_e_cola": DEMO_PIX_PAYLOAD})
        logger.info(
            "asaas_demo_payment_created",
            extra={
                "component": COMPONENT,
                "payment_id": payment.id,
                "billing_type": payment.billing_type.value,
            },
        )
        return payment

    async def cancel_payment(self, payment_id: str) -> None:
        if not payment_id:
            raise ValueError("payment_id é obrigatório")
        try:
            payment = await self.get_payment(payment_id)
        except PaymentNotFoundError as exc:
            raise PaymentNotCancellableError(payment_id, reason="not_found") from exc
        if payment.status == PaymentStatus.CANCELED:
            raise PaymentNotCancellableError(payment_id, reason="already_cancelled")
        logger.info(
            "asaas_demo_payment_cancelled",
            extra={"component": COMPONENT, "payment_id": payment_id},
        )

    async def get_pix_qr_code(self, payment_id: str) -> PixQrCode | None:
        if not payment_id:
            raise ValueError("payment_id é obrigatório")
        if not payment_id.startswith(DEMO_PREFIX):
            return None
        return PixQrCode(
            encoded_image="",
            payload=DEMO_PIX_PAYLOAD,
            expiration_date=(datetime.now(UTC) + timedelta(days=1)).isoformat(),
        )


def _paginate(
    page_type: type[PageT],
    items: list[Any],
    offset: int,
    limit: int,
) -> PageT:
    offset = max(offset, 0)
    limit = max(limit, 0)
    window = items[offset:offset + limit]
    return page_type(
        data=window,
        total_count=len(items),
        has_more=offset + len(window) < len(items),
    )
