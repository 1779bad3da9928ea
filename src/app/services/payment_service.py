"""Serviço de pagamentos sobre o gateway Asaas.

Leituras passam pelo `QueryCache` injetado, chaveado pelo caminho do
endpoint. Toda mutação bem-sucedida invalida os prefixos afetados para
que saldo e listagens reflitam a mudança na leitura seguinte.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from api.connectors.asaas.mappers import (
    enrich_payment_with_customer,
    format_customer_for_gateway,
)
from app.domain.payments import (
    Balance,
    BillingType,
    CreatePaymentRequest,
    CreditCardHolderInfo,
    GatewayCustomer,
    GatewayMode,
    GatewayPayment,
    Page,
    PaymentCheckout,
    PaymentStatus,
    PixQrCode,
)
from utils.digits import only_digits
from utils.errors import DuplicateCustomerError, EntityNotFoundError

if TYPE_CHECKING:
    from app.infra.cache.query_cache import QueryCache
    from app.protocols.payment_gateway import PaymentGatewayProtocol
    from app.protocols.stores import CustomerStoreProtocol

logger = logging.getLogger(__name__)

COMPONENT = "payment_service"

BALANCE_PATH = "/finance/balance"
CUSTOMERS_PATH = "/customers"
PAYMENTS_PATH = "/payments"

# Página usada para resolver nomes de clientes nas listagens
CUSTOMER_LOOKUP_LIMIT = 100


def _is_fresh(result: Balance | Page[Any]) -> bool:
    """Fallbacks de leitura com falha não entram no cache."""
    return not result.degraded


class PaymentService:
    """Orquestra gateway, cache de consultas e cadastro interno de clientes."""

    def __init__(
        self,
        gateway: PaymentGatewayProtocol,
        cache: QueryCache,
        customer_store: CustomerStoreProtocol,
    ) -> None:
        self._gateway = gateway
        self._cache = cache
        self._customers = customer_store

    @property
    def mode(self) -> GatewayMode:
        return self._gateway.mode

    # ──────────────────────────────────────────────────────────────────
    # Leituras (cacheadas)
    # ──────────────────────────────────────────────────────────────────

    async def get_balance(self) -> Balance:
        return await self._cache.get_or_load(
            BALANCE_PATH, self._gateway.get_balance, _is_fresh
        )

    async def list_customers(
        self,
        offset: int = 0,
        limit: int = 10,
        name: str | None = None,
    ) -> Page[GatewayCustomer]:
        key = f"{CUSTOMERS_PATH}?offset={offset}&limit={limit}&name={name or ''}"
        return await self._cache.get_or_load(
            key,
            lambda: self._gateway.list_customers(offset=offset, limit=limit, name=name),
            _is_fresh,
        )

    async def list_payments(
        self,
        offset: int = 0,
        limit: int = 10,
        status: PaymentStatus | None = None,
    ) -> Page[GatewayPayment]:
        """Lista cobranças com nome e documento do cliente."""
        key = f"{PAYMENTS_PATH}?offset={offset}&limit={limit}&status={status or ''}"
        page = await self._cache.get_or_load(
            key,
            lambda: self._gateway.list_payments(offset=offset, limit=limit, status=status),
            _is_fresh,
        )
        if all(payment.customer_name for payment in page.data):
            return page

        customers = await self.list_customers(offset=0, limit=CUSTOMER_LOOKUP_LIMIT)
        by_id = {customer.id: customer for customer in customers.data if customer.id}
        enriched = [
            enrich_payment_with_customer(payment, by_id[payment.customer])
            if not payment.customer_name and payment.customer in by_id
            else payment
            for payment in page.data
        ]
        return page.model_copy(update={"data": enriched})

    async def get_payment(self, payment_id: str) -> GatewayPayment:
        """Consulta direta, sem cache (status muda no gateway)."""
        return await self._gateway.get_payment(payment_id)

    async def get_pix_qr_code(self, payment_id: str) -> PixQrCode | None:
        return await self._gateway.get_pix_qr_code(payment_id)

    # ──────────────────────────────────────────────────────────────────
    # Mutações (invalidam o cache)
    # ──────────────────────────────────────────────────────────────────

    async def create_customer(self, customer: GatewayCustomer) -> GatewayCustomer:
        """Cria cliente no gateway, recusando CPF/CNPJ já cadastrado.

        Raises:
            DuplicateCustomerError: Documento já existe no gateway.
        """
        document = only_digits(customer.cpf_cnpj)
        existing = await self._gateway.find_customer_by_document(document)
        if existing is not None:
            raise DuplicateCustomerError(existing.id)
        created = await self._gateway.create_customer(
            customer.model_copy(update={"cpf_cnpj": document or None})
        )
        self._cache.invalidate(CUSTOMERS_PATH)
        return created

    async def create_payment(self, checkout: PaymentCheckout) -> GatewayPayment:
        """Localiza ou cria o cliente no gateway e cria a cobrança.

        Raises:
            EntityNotFoundError: `customer_id` interno inexistente.
            GatewayTransportError / GatewayRequestError: falha no gateway.
        """
        customer = await self._resolve_customer(checkout)
        existing = await self._gateway.find_customer_by_document(customer.cpf_cnpj or "")
        if existing is not None:
            gateway_customer = existing
        else:
            gateway_customer = await self._gateway.create_customer(customer)
            self._cache.invalidate(CUSTOMERS_PATH)

        request = CreatePaymentRequest(
            customer=gateway_customer.id or "",
            billing_type=checkout.billing_type,
            value=checkout.value,
            due_date=checkout.due_date,
            description=checkout.description,
            external_reference=checkout.external_reference,
        )
        if checkout.billing_type == BillingType.CREDIT_CARD and checkout.credit_card_data:
            request = request.model_copy(
                update={
                    "credit_card": checkout.credit_card_data,
                    "credit_card_holder_info": _holder_info(customer, checkout),
                }
            )

        payment = await self._gateway.create_payment(request)
        self._cache.invalidate(PAYMENTS_PATH, BALANCE_PATH)
        logger.info(
            "payment_created",
            extra={
                "component": COMPONENT,
                "payment_id": payment.id,
                "billing_type": payment.billing_type.value,
                "mode": self.mode.value,
            },
        )
        return enrich_payment_with_customer(payment, gateway_customer)

    async def cancel_payment(self, payment_id: str) -> None:
        """Cancela a cobrança.

        Raises:
            PaymentNotCancellableError: inexistente ou já cancelada.
            GatewayTransportError: gateway indisponível.
        """
        await self._gateway.cancel_payment(payment_id)
        self._cache.invalidate(PAYMENTS_PATH, BALANCE_PATH)
        logger.info(
            "payment_cancelled",
            extra={"component": COMPONENT, "payment_id": payment_id, "mode": self.mode.value},
        )

    async def _resolve_customer(self, checkout: PaymentCheckout) -> GatewayCustomer:
        if checkout.customer_id:
            internal = await self._customers.get(checkout.customer_id)
            if internal is None:
                raise EntityNotFoundError("Cliente", checkout.customer_id)
            return format_customer_for_gateway(internal)

        address = checkout.address_info
        return GatewayCustomer(
            name=checkout.customer_name or "",
            cpf_cnpj=only_digits(checkout.customer_cpf_cnpj) or None,
            email=checkout.customer_email,
            phone=checkout.customer_phone,
            mobile_phone=checkout.customer_phone,
            postal_code=only_digits(address.postal_code) or None if address else None,
            address=address.address if address else None,
            address_number=address.address_number if address else None,
            complement=address.complement if address else None,
            province=address.province if address else None,
        )


def _holder_info(customer: GatewayCustomer, checkout: PaymentCheckout) -> CreditCardHolderInfo:
    """Titular do cartão a partir do cliente; endereço do checkout tem prioridade."""
    address = checkout.address_info
    return CreditCardHolderInfo(
        name=customer.name,
        email=customer.email or "",
        cpf_cnpj=customer.cpf_cnpj,
        postal_code=(only_digits(address.postal_code) if address else None)
        or customer.postal_code
        or "",
        address_number=(address.address_number if address else None)
        or customer.address_number
        or "",
        address_complement=address.complement if address else customer.complement,
        phone=customer.phone or "",
    )
