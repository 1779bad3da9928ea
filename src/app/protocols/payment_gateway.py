"""Contrato do gateway de pagamentos (modos live e demo)."""

from __future__ import annotations

from abc import ABC, abstractmethod

from app.domain.payments import (
    Balance,
    CreatePaymentRequest,
    GatewayCustomer,
    GatewayMode,
    GatewayPayment,
    Page,
    PaymentStatus,
    PixQrCode,
)


class PaymentGatewayProtocol(ABC):
    """Operações do gateway de pagamentos.

    Leituras degradam para vazio/zero em falha, marcadas com `degraded`;
    escritas propagam erro.
    """

    @property
    @abstractmethod
    def mode(self) -> GatewayMode: ...

    @abstractmethod
    async def get_balance(self) -> Balance: ...

    @abstractmethod
    async def list_customers(
        self,
        offset: int = 0,
        limit: int = 10,
        name: str | None = None,
        document: str | None = None,
    ) -> Page[GatewayCustomer]: ...

    @abstractmethod
    async def find_customer_by_document(self, document: str) -> GatewayCustomer | None: ...

    @abstractmethod
    async def create_customer(self, customer: GatewayCustomer) -> GatewayCustomer: ...

    @abstractmethod
    async def list_payments(
        self,
        offset: int = 0,
        limit: int = 10,
        status: PaymentStatus | None = None,
    ) -> Page[GatewayPayment]: ...

    @abstractmethod
    async def get_payment(self, payment_id: str) -> GatewayPayment: ...

    @abstractmethod
    async def create_payment(self, request: CreatePaymentRequest) -> GatewayPayment: ...

    @abstractmethod
    async def cancel_payment(self, payment_id: str) -> None: ...

    @abstractmethod
    async def get_pix_qr_code(self, payment_id: str) -> PixQrCode | None: ...
