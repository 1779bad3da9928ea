"""Gateway de pagamentos Asaas em modo live.

Leituras (saldo, listagens, busca por documento, QR Code Pix) degradam
para zero/vazio em qualquer falha, com log; saldo e páginas de fallback
saem com `degraded=True`. Escritas e `get_payment`
propagam erro:
- falha de rede, timeout, 429 ou 5xx: GatewayTransportError
- 4xx com corpo de erro: GatewayRequestError, ou a falha de domínio
  correspondente (PaymentNotFoundError, PaymentNotCancellableError)
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any

from pydantic import ValidationError

from api.connectors.asaas.asaas_errors import is_transport_status, parse_asaas_error
from api.connectors.asaas.asaas_logging import log_asaas_error, log_success
from api.connectors.asaas.fees import estimate_gateway_fee
from api.connectors.http_base import HttpClient, HttpClientConfig, HttpError, decode_json
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
from app.protocols.payment_gateway import PaymentGatewayProtocol
from config.logging import log_fallback
from config.settings.asaas import PaymentGatewaySettings
from utils.errors import (
    GatewayRequestError,
    GatewayTransportError,
    InfrastructureError,
    PaymentNotCancellableError,
    PaymentNotFoundError,
)

logger = logging.getLogger(__name__)

COMPONENT = "asaas_gateway"

# Falhas que degradam leituras para vazio/zero
_READ_FAILURES = (InfrastructureError, ValueError, ArithmeticError)


class AsaasLiveGateway(PaymentGatewayProtocol):
    """Proxy das operações do Asaas com a chave configurada."""

    def __init__(
        self,
        settings: PaymentGatewaySettings,
        http_client: HttpClient | None = None,
    ) -> None:
        if not settings.is_configured:
            raise ValueError("ASAAS_API_KEY é obrigatório no modo live")
        self._settings = settings
        self._http = http_client or HttpClient(
            HttpClientConfig(
                base_url=settings.base_url,
                timeout_seconds=settings.timeout_seconds,
            )
        )
        self._headers = {
            "access_token": settings.api_key,
            "Content-Type": "application/json",
            "User-Agent": "aprove-backoffice",
        }

    @property
    def mode(self) -> GatewayMode:
        return GatewayMode.LIVE

    async def _call(
        self,
        method: str,
        endpoint: str,
        *,
        params: dict[str, Any] | None = None,
        json_body: dict[str, Any] | None = None,
    ) -> Any:
        """Executa requisição e classifica a falha.

        Raises:
            GatewayTransportError: rede, timeout, 429, 5xx ou JSON inválido.
            GatewayRequestError: demais status >= 400.
        """
        try:
            response = await self._http.request(
                method,
                endpoint,
                params=params,
                json_body=json_body,
                headers=self._headers,
            )
        except HttpError as exc:
            raise GatewayTransportError(f"Asaas indisponível: {exc}") from exc

        if is_transport_status(response.status_code):
            logger.warning(
                "asaas_unavailable",
                extra={
                    "component": COMPONENT,
                    "method": method,
                    "endpoint": endpoint,
                    "status_code": response.status_code,
                },
            )
            raise GatewayTransportError(f"Asaas respondeu {response.status_code}")

        try:
            data = decode_json(response)
        except HttpError as exc:
            raise GatewayTransportError("Resposta do Asaas não é JSON válido") from exc

        api_error = parse_asaas_error(response.status_code, data)
        if api_error is not None:
            log_asaas_error(api_error, method, endpoint)
            raise GatewayRequestError(
                api_error.description,
                status_code=api_error.status_code,
                code=api_error.code,
            )

        log_success(method, endpoint, response.status_code)
        return data

    # ──────────────────────────────────────────────────────────────────
    # Leituras degradáveis
    # ──────────────────────────────────────────────────────────────────

    async def get_balance(self) -> Balance:
        try:
            data = await self._call("GET", "/finance/balance")
            return Balance(balance=Decimal(str(data.get("balance", 0))))
        except (*_READ_FAILURES, AttributeError) as exc:
            log_fallback(logger, COMPONENT, reason=f"balance_{type(exc).__name__}")
            return Balance(degraded=True)

    async def list_customers(
        self,
        offset: int = 0,
        limit: int = 10,
        name: str | None = None,
        document: str | None = None,
    ) -> Page[GatewayCustomer]:
        params = {"offset": offset, "limit": limit, "name": name, "cpfCnpj": document}
        try:
            data = await self._call("GET", "/customers", params=params)
            return Page[GatewayCustomer].model_validate(data)
        except _READ_FAILURES as exc:
            log_fallback(logger, COMPONENT, reason=f"customers_{type(exc).__name__}")
            return Page[GatewayCustomer](degraded=True)

    async def find_customer_by_document(self, document: str) -> GatewayCustomer | None:
        if not document:
            return None
        page = await self.list_customers(offset=0, limit=1, document=document)
        return page.data[0] if page.data else None

    async def list_payments(
        self,
        offset: int = 0,
        limit: int = 10,
        status: PaymentStatus | None = None,
    ) -> Page[GatewayPayment]:
        params = {
            "offset": offset,
            "limit": limit,
            "status": status.value if status is not None else None,
        }
        try:
            data = await self._call("GET", "/payments", params=params)
            return Page[GatewayPayment].model_validate(data)
        except _READ_FAILURES as exc:
            log_fallback(logger, COMPONENT, reason=f"payments_{type(exc).__name__}")
            return Page[GatewayPayment](degraded=True)

    async def get_pix_qr_code(self, payment_id: str) -> PixQrCode | None:
        if not payment_id:
            raise ValueError("payment_id é obrigatório")
        try:
            data = await self._call("GET", f"/payments/{payment_id}/pixQrCode")
            return PixQrCode.model_validate(data)
        except _READ_FAILURES as exc:
            log_fallback(logger, COMPONENT, reason=f"pix_qr_code_{type(exc).__name__}")
            return None

    # ──────────────────────────────────────────────────────────────────
    # Operações que propagam erro
    # ──────────────────────────────────────────────────────────────────

    async def get_payment(self, payment_id: str) -> GatewayPayment:
        if not payment_id:
            raise ValueError("payment_id é obrigatório")
        try:
            data = await self._call("GET", f"/payments/{payment_id}")
        except GatewayRequestError as exc:
            if exc.status_code == 404:
                raise PaymentNotFoundError(payment_id) from exc
            raise
        if isinstance(data, dict) and data.get("deleted"):
            raise PaymentNotFoundError(payment_id)
        try:
            return GatewayPayment.model_validate(data)
        except ValidationError as exc:
            raise GatewayRequestError("Cobrança com formato inesperado") from exc

    async def create_customer(self, customer: GatewayCustomer) -> GatewayCustomer:
        payload = customer.model_dump(by_alias=True, exclude_none=True, exclude={"id"})
        data = await self._call("POST", "/customers", json_body=payload)
        created = GatewayCustomer.model_validate(data)
        logger.info(
            "asaas_customer_created",
            extra={"component": COMPONENT, "customer_id": created.id},
        )
        return created

    async def create_payment(self, request: CreatePaymentRequest) -> GatewayPayment:
        payload = request.model_dump(mode="json", by_alias=True, exclude_none=True)
        data = await self._call("POST", "/payments", json_body=payload)
        try:
            payment = GatewayPayment.model_validate(data)
        except ValidationError as exc:
            raise GatewayRequestError("Cobrança criada com formato inesperado") from exc

        fee = estimate_gateway_fee(payment.billing_type, payment.value, self._settings.boleto_fee)
        logger.info(
            "asaas_payment_created",
            extra={
                "component": COMPONENT,
                "payment_id": payment.id,
                "billing_type": payment.billing_type.value,
            },
        )
        return payment.model_copy(update={"estimated_fee": fee})

    async def cancel_payment(self, payment_id: str) -> None:
        """Remove a cobrança no gateway.

        Raises:
            ValueError: id vazio.
            PaymentNotCancellableError: cobrança inexistente (reason
                "not_found") ou já cancelada (reason "already_cancelled").
            GatewayTransportError: falha de rede/timeout/5xx.
        """
        if not payment_id:
            raise ValueError("payment_id é obrigatório")
        try:
            data = await self._call("DELETE", f"/payments/{payment_id}")
        except GatewayRequestError as exc:
            if exc.status_code == 404:
                raise PaymentNotCancellableError(payment_id, reason="not_found") from exc
            if exc.status_code == 400:
                raise PaymentNotCancellableError(
                    payment_id, reason="already_cancelled"
                ) from exc
            raise

        if not isinstance(data, dict) or not data.get("deleted"):
            raise PaymentNotCancellableError(payment_id, reason="already_cancelled")

        logger.info(
            "asaas_payment_cancelled",
            extra={"component": COMPONENT, "payment_id": payment_id},
        )


__all__ = ["AsaasLiveGateway"]
