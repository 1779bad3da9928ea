"""Serviço de conexões de WhatsApp.

Dono do registro `MessagingConnection`: espelha o status da sessão remota,
aplica o limite diário de envios e transforma falhas silenciosas do
adaptador em erros explícitos.
"""

from __future__ import annotations

import asyncio
import logging
import uuid
from collections.abc import Callable
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any, assert_never

from app.domain.messaging import MessagingConnection, OutboundMessageType, session_id_for
from fsm.states.connection import ConnectionStatus, SessionStatus, connection_status_for
from fsm.transitions.rules import is_session_transition_expected
from utils.errors import (
    ConnectionNotReadyError,
    DailyLimitExceededError,
    EntityNotFoundError,
    GatewayTransportError,
    MessageDeliveryError,
)

if TYPE_CHECKING:
    from app.protocols.messaging_gateway import MessagingGatewayProtocol
    from app.protocols.stores import ConnectionStoreProtocol

logger = logging.getLogger(__name__)

COMPONENT = "messaging_service"

DEFAULT_DAILY_LIMIT = 1000


def _utcnow() -> datetime:
    return datetime.now(UTC)


class MessagingService:
    """Ciclo de vida das conexões e envio de mensagens."""

    def __init__(
        self,
        gateway: MessagingGatewayProtocol,
        store: ConnectionStoreProtocol,
        default_daily_limit: int = DEFAULT_DAILY_LIMIT,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._gateway = gateway
        self._store = store
        self._default_daily_limit = default_daily_limit
        self._clock = clock
        self._locks: dict[str, asyncio.Lock] = {}

    def _lock_for(self, connection_id: str) -> asyncio.Lock:
        return self._locks.setdefault(connection_id, asyncio.Lock())

    # ──────────────────────────────────────────────────────────────────
    # Registro e sessão
    # ──────────────────────────────────────────────────────────────────

    async def list_connections(self) -> list[MessagingConnection]:
        return await self._store.list_all()

    async def get(self, connection_id: str) -> MessagingConnection:
        connection = await self._store.get(connection_id)
        if connection is None:
            raise EntityNotFoundError("Conexão", connection_id)
        return connection

    async def register(
        self,
        name: str,
        phone: str,
        daily_limit: int | None = None,
    ) -> MessagingConnection:
        connection_id = uuid.uuid4().hex
        connection = MessagingConnection(
            id=connection_id,
            name=name,
            phone=phone,
            session_id=session_id_for(connection_id),
            daily_limit=daily_limit or self._default_daily_limit,
            created_at=self._clock(),
        )
        await self._store.save(connection)
        logger.info(
            "messaging_connection_registered",
            extra={"component": COMPONENT, "connection_id": connection_id},
        )
        return connection

    async def connect(self, connection_id: str) -> MessagingConnection:
        """Inicia a sessão remota e espelha o status resultante.

        Raises:
            EntityNotFoundError: conexão inexistente.
            GatewayTransportError: servidor recusou iniciar a sessão.
        """
        connection = await self.get(connection_id)
        started = await self._gateway.start_session(connection.session_id)
        if not started:
            connection.status = ConnectionStatus.DISCONNECTED
            connection.gateway_status = SessionStatus.ERROR
            await self._store.save(connection)
            raise GatewayTransportError("Não foi possível iniciar a sessão do WhatsApp")

        connection.status = ConnectionStatus.CONNECTING
        connection.gateway_status = SessionStatus.STARTING
        await self._store.save(connection)
        return await self.refresh_status(connection_id)

    async def get_qr_code(self, connection_id: str) -> str | None:
        """QR Code de pareamento; None quando já autenticado ou indisponível."""
        connection = await self.get(connection_id)
        qr_code = await self._gateway.get_qr_code(connection.session_id)
        if qr_code is not None:
            connection.qr_code = qr_code
            connection.status = ConnectionStatus.QR_PENDING
            connection.gateway_status = SessionStatus.QRCODE
            await self._store.save(connection)
        return qr_code

    async def refresh_status(self, connection_id: str) -> MessagingConnection:
        """Consulta o gateway e atualiza o registro."""
        connection = await self.get(connection_id)
        reported = await self._gateway.get_session_status(connection.session_id)
        previous = connection.gateway_status

        if previous is not None and not is_session_transition_expected(previous, reported):
            logger.warning(
                "messaging_session_unexpected_transition",
                extra={
                    "component": COMPONENT,
                    "connection_id": connection_id,
                    "from_status": previous.value,
                    "to_status": reported.value,
                },
            )

        connection.gateway_status = reported
        connection.status = connection_status_for(reported)
        if reported == SessionStatus.CONNECTED:
            connection.qr_code = None
            if previous != SessionStatus.CONNECTED:
                connection.last_connected_at = self._clock()
        await self._store.save(connection)

        if previous != reported:
            logger.info(
                "messaging_session_status_changed",
                extra={
                    "component": COMPONENT,
                    "connection_id": connection_id,
                    "from_status": previous.value if previous else None,
                    "to_status": reported.value,
                },
            )
        return connection

    async def disconnect(self, connection_id: str) -> MessagingConnection:
        """Encerra a sessão remota.

        Raises:
            GatewayTransportError: servidor não confirmou o encerramento.
        """
        connection = await self.get(connection_id)
        if not await self._gateway.close_session(connection.session_id):
            raise GatewayTransportError("Não foi possível encerrar a sessão do WhatsApp")
        connection.status = ConnectionStatus.DISCONNECTED
        connection.gateway_status = SessionStatus.DISCONNECTED
        connection.qr_code = None
        await self._store.save(connection)
        return connection

    async def remove(self, connection_id: str) -> None:
        """Encerra a sessão remota (melhor esforço) e apaga o registro."""
        connection = await self.get(connection_id)
        if not await self._gateway.close_session(connection.session_id):
            logger.warning(
                "messaging_session_close_failed",
                extra={"component": COMPONENT, "connection_id": connection_id},
            )
        await self._store.delete(connection_id)
        self._locks.pop(connection_id, None)
        logger.info(
            "messaging_connection_removed",
            extra={"component": COMPONENT, "connection_id": connection_id},
        )

    # ──────────────────────────────────────────────────────────────────
    # Envio
    # ──────────────────────────────────────────────────────────────────

    async def send_message(self, connection_id: str, phone: str, text: str) -> MessagingConnection:
        """Envia texto respeitando o limite diário.

        Raises:
            ConnectionNotReadyError: sessão não está CONNECTED.
            DailyLimitExceededError: limite do dia atingido.
            MessageDeliveryError: gateway não confirmou o envio.
        """
        if not text.strip():
            raise ValueError("Mensagem vazia")

        async def deliver(session_id: str) -> bool:
            return await self._gateway.send_message(session_id, phone, text)

        return await self._send(connection_id, "send_message", deliver)

    async def send_file(
        self,
        connection_id: str,
        phone: str,
        file_url: str,
        filename: str | None = None,
        caption: str | None = None,
    ) -> MessagingConnection:
        """Envia arquivo por URL; mesmas regras de `send_message`."""
        if not file_url.strip():
            raise ValueError("URL do arquivo é obrigatória")

        async def deliver(session_id: str) -> bool:
            return await self._gateway.send_file(session_id, phone, file_url, filename, caption)

        return await self._send(connection_id, "send_file", deliver)

    async def send_outbound(
        self,
        connection_id: str,
        message_type: OutboundMessageType,
        phone: str,
        text: str | None = None,
        media_url: str | None = None,
        filename: str | None = None,
    ) -> MessagingConnection:
        """Despacha pelo tipo: texto vai como mensagem, mídia como arquivo."""
        match message_type:
            case OutboundMessageType.TEXT:
                return await self.send_message(connection_id, phone, text or "")
            case (
                OutboundMessageType.DOCUMENT
                | OutboundMessageType.IMAGE
                | OutboundMessageType.VIDEO
                | OutboundMessageType.AUDIO
            ):
                if not media_url:
                    raise ValueError(f"media_url é obrigatório para {message_type.value}")
                return await self.send_file(connection_id, phone, media_url, filename, text)
            case _:
                assert_never(message_type)

    async def _send(
        self,
        connection_id: str,
        action: str,
        deliver: Callable[[str], Any],
    ) -> MessagingConnection:
        async with self._lock_for(connection_id):
            connection = await self.get(connection_id)
            if connection.gateway_status != SessionStatus.CONNECTED:
                raise ConnectionNotReadyError(
                    "Conexão do WhatsApp não está ativa. Conecte a sessão antes de enviar."
                )

            today = self._clock().date()
            if connection.last_reset_date != today:
                connection.messages_sent = 0
                connection.last_reset_date = today

            if connection.messages_sent >= connection.daily_limit:
                logger.warning(
                    "messaging_daily_limit_reached",
                    extra={
                        "component": COMPONENT,
                        "action": action,
                        "connection_id": connection_id,
                        "daily_limit": connection.daily_limit,
                    },
                )
                await self._store.save(connection)
                raise DailyLimitExceededError(connection.daily_limit)

            if not await deliver(connection.session_id):
                raise MessageDeliveryError("WhatsApp não confirmou o envio")

            connection.messages_sent += 1
            await self._store.save(connection)
            logger.info(
                "messaging_sent",
                extra={
                    "component": COMPONENT,
                    "action": action,
                    "result": "sent",
                    "connection_id": connection_id,
                    "messages_sent": connection.messages_sent,
                },
            )
            return connection

    # ──────────────────────────────────────────────────────────────────
    # Consultas
    # ──────────────────────────────────────────────────────────────────

    async def list_contacts(self, connection_id: str) -> list[dict[str, Any]]:
        connection = await self.get(connection_id)
        return await self._gateway.get_all_contacts(connection.session_id)

    async def check_number(self, connection_id: str, phone: str) -> bool:
        connection = await self.get(connection_id)
        return await self._gateway.check_number_status(connection.session_id, phone)
