"""Testes do MessagingService (sessão, limite diário e envio)."""

from __future__ import annotations

from datetime import UTC, datetime
from unittest.mock import AsyncMock

import pytest

from app.domain.messaging import OutboundMessageType
from app.infra.stores import MemoryConnectionStore
from app.protocols.messaging_gateway import MessagingGatewayProtocol
from app.services.messaging_service import MessagingService
from fsm.states.connection import ConnectionStatus, SessionStatus
from utils.errors import (
    ConnectionNotReadyError,
    DailyLimitExceededError,
    EntityNotFoundError,
    GatewayTransportError,
    MessageDeliveryError,
)


class FakeClock:
    def __init__(self) -> None:
        self.now = datetime(2025, 1, 15, 10, 0, tzinfo=UTC)

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def gateway() -> AsyncMock:
    mock = AsyncMock(spec=MessagingGatewayProtocol)
    mock.start_session.return_value = True
    mock.get_session_status.return_value = SessionStatus.CONNECTED
    mock.get_qr_code.return_value = None
    mock.close_session.return_value = True
    mock.send_message.return_value = True
    mock.send_file.return_value = True
    return mock


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store() -> MemoryConnectionStore:
    return MemoryConnectionStore()


@pytest.fixture
def service(
    gateway: AsyncMock, store: MemoryConnectionStore, clock: FakeClock
) -> MessagingService:
    return MessagingService(gateway, store, default_daily_limit=1000, clock=clock)


async def _connected(service: MessagingService, daily_limit: int | None = None) -> str:
    connection = await service.register("Vendas", "11999990000", daily_limit=daily_limit)
    await service.connect(connection.id)
    return connection.id


class TestSessionLifecycle:
    @pytest.mark.asyncio
    async def test_register_defaults(self, service: MessagingService) -> None:
        connection = await service.register("Vendas", "11999990000")
        assert connection.status == ConnectionStatus.DISCONNECTED
        assert connection.session_id == f"session-{connection.id}"
        assert connection.daily_limit == 1000

    @pytest.mark.asyncio
    async def test_connect_mirrors_gateway_status(
        self, service: MessagingService, clock: FakeClock
    ) -> None:
        connection_id = await _connected(service)

        connection = await service.get(connection_id)
        assert connection.status == ConnectionStatus.CONNECTED
        assert connection.gateway_status == SessionStatus.CONNECTED
        assert connection.last_connected_at == clock.now

    @pytest.mark.asyncio
    async def test_connect_refused(self, service: MessagingService, gateway: AsyncMock) -> None:
        gateway.start_session.return_value = False
        connection = await service.register("Vendas", "11999990000")

        with pytest.raises(GatewayTransportError):
            await service.connect(connection.id)
        stored = await service.get(connection.id)
        assert stored.gateway_status == SessionStatus.ERROR
        assert stored.status == ConnectionStatus.DISCONNECTED

    @pytest.mark.asyncio
    async def test_qr_code_sets_pending(
        self, service: MessagingService, gateway: AsyncMock
    ) -> None:
        gateway.get_qr_code.return_value = "data:image/png;base64,AAA"
        connection = await service.register("Vendas", "11999990000")

        assert await service.get_qr_code(connection.id) == "data:image/png;base64,AAA"
        stored = await service.get(connection.id)
        assert stored.status == ConnectionStatus.QR_PENDING

        gateway.get_session_status.return_value = SessionStatus.CONNECTED
        refreshed = await service.refresh_status(connection.id)
        assert refreshed.qr_code is None
        assert refreshed.status == ConnectionStatus.CONNECTED

    @pytest.mark.asyncio
    async def test_gateway_error_maps_to_disconnected(
        self, service: MessagingService, gateway: AsyncMock
    ) -> None:
        connection_id = await _connected(service)
        gateway.get_session_status.return_value = SessionStatus.ERROR

        refreshed = await service.refresh_status(connection_id)

        assert refreshed.status == ConnectionStatus.DISCONNECTED

    @pytest.mark.asyncio
    async def test_disconnect_failure(self, service: MessagingService, gateway: AsyncMock) -> None:
        connection_id = await _connected(service)
        gateway.close_session.return_value = False

        with pytest.raises(GatewayTransportError):
            await service.disconnect(connection_id)

    @pytest.mark.asyncio
    async def test_remove_is_best_effort(
        self, service: MessagingService, gateway: AsyncMock
    ) -> None:
        connection_id = await _connected(service)
        gateway.close_session.return_value = False

        await service.remove(connection_id)

        with pytest.raises(EntityNotFoundError):
            await service.get(connection_id)


class TestSending:
    @pytest.mark.asyncio
    async def test_not_connected(self, service: MessagingService, gateway: AsyncMock) -> None:
        connection = await service.register("Vendas", "11999990000")

        with pytest.raises(ConnectionNotReadyError):
            await service.send_message(connection.id, "11988887777", "Olá")
        gateway.send_message.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_counter_increments_only_on_success(
        self, service: MessagingService, gateway: AsyncMock
    ) -> None:
        connection_id = await _connected(service)

        sent = await service.send_message(connection_id, "11988887777", "Olá")
        assert sent.messages_sent == 1

        gateway.send_message.return_value = False
        with pytest.raises(MessageDeliveryError):
            await service.send_message(connection_id, "11988887777", "Olá")
        assert (await service.get(connection_id)).messages_sent == 1

    @pytest.mark.asyncio
    async def test_daily_limit_and_reset(
        self, service: MessagingService, gateway: AsyncMock, clock: FakeClock
    ) -> None:
        connection_id = await _connected(service, daily_limit=2)

        await service.send_message(connection_id, "11988887777", "1")
        await service.send_message(connection_id, "11988887777", "2")
        with pytest.raises(DailyLimitExceededError):
            await service.send_message(connection_id, "11988887777", "3")
        assert gateway.send_message.await_count == 2

        clock.now = datetime(2025, 1, 16, 8, 0, tzinfo=UTC)
        sent = await service.send_message(connection_id, "11988887777", "4")
        assert sent.messages_sent == 1

    @pytest.mark.asyncio
    async def test_empty_text_rejected(self, service: MessagingService) -> None:
        connection_id = await _connected(service)
        with pytest.raises(ValueError):
            await service.send_message(connection_id, "11988887777", "  ")

    @pytest.mark.asyncio
    async def test_outbound_media_requires_url(
        self, service: MessagingService, gateway: AsyncMock
    ) -> None:
        connection_id = await _connected(service)

        with pytest.raises(ValueError, match="media_url"):
            await service.send_outbound(
                connection_id, OutboundMessageType.IMAGE, "11988887777", text="Foto"
            )

        await service.send_outbound(
            connection_id,
            OutboundMessageType.DOCUMENT,
            "11988887777",
            text="Contrato",
            media_url="https://cdn.test/contrato.pdf",
            filename="contrato.pdf",
        )
        gateway.send_file.assert_awaited_once()
        args = gateway.send_file.await_args.args
        assert args[2:] == ("https://cdn.test/contrato.pdf", "contrato.pdf", "Contrato")

    @pytest.mark.asyncio
    async def test_queries_use_session(
        self, service: MessagingService, gateway: AsyncMock
    ) -> None:
        connection_id = await _connected(service)
        gateway.get_all_contacts.return_value = [{"id": "1"}]
        gateway.check_number_status.return_value = True

        assert await service.list_contacts(connection_id) == [{"id": "1"}]
        assert await service.check_number(connection_id, "11988887777") is True
        session_id = (await service.get(connection_id)).session_id
        gateway.check_number_status.assert_awaited_once_with(session_id, "11988887777")
