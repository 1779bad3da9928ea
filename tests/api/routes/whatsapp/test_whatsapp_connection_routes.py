"""Testes das rotas de conexões de WhatsApp."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from api.routes.whatsapp.router import (
    ConnectionCreate,
    OutboundFile,
    OutboundMessage,
    check_number,
    connect,
    create_connection,
    delete_connection,
    get_qr_code,
    list_contacts,
    send_file,
    send_message,
)
from app.domain.messaging import OutboundMessageType
from app.infra.stores import MemoryConnectionStore
from app.protocols.messaging_gateway import MessagingGatewayProtocol
from app.services.messaging_service import MessagingService
from fsm.states.connection import ConnectionStatus, SessionStatus
from utils.errors import ConnectionNotReadyError


@pytest.fixture
def gateway() -> AsyncMock:
    mock = AsyncMock(spec=MessagingGatewayProtocol)
    mock.start_session.return_value = True
    mock.get_session_status.return_value = SessionStatus.CONNECTED
    mock.get_qr_code.return_value = None
    mock.close_session.return_value = True
    mock.send_message.return_value = True
    mock.send_file.return_value = True
    mock.get_all_contacts.return_value = [{"id": "5511999990000@c.us"}]
    mock.check_number_status.return_value = True
    return mock


@pytest.fixture
def service(gateway: AsyncMock) -> MessagingService:
    return MessagingService(gateway, MemoryConnectionStore())


@pytest.mark.asyncio
async def test_connect_and_send(service: MessagingService) -> None:
    created = await create_connection(
        ConnectionCreate(name="Vendas", phone="11999990000", daily_limit=50), service=service
    )
    assert created.daily_limit == 50

    connected = await connect(created.id, service=service)
    assert connected.status == ConnectionStatus.CONNECTED

    receipt = await send_message(
        created.id, OutboundMessage(phone="11988887777", text="Olá"), service=service
    )
    assert receipt == {"success": True, "messages_sent": 1, "daily_limit": 50}

    receipt = await send_file(
        created.id,
        OutboundFile(phone="11988887777", file_url="https://cdn.test/a.pdf"),
        service=service,
    )
    assert receipt["messages_sent"] == 2


@pytest.mark.asyncio
async def test_send_before_connect(service: MessagingService) -> None:
    created = await create_connection(
        ConnectionCreate(name="Vendas", phone="11999990000"), service=service
    )

    with pytest.raises(ConnectionNotReadyError):
        await send_message(
            created.id,
            OutboundMessage(phone="11988887777", type=OutboundMessageType.TEXT, text="Olá"),
            service=service,
        )


@pytest.mark.asyncio
async def test_qr_code_or_connected(service: MessagingService, gateway: AsyncMock) -> None:
    created = await create_connection(
        ConnectionCreate(name="Vendas", phone="11999990000"), service=service
    )

    gateway.get_qr_code.return_value = "data:image/png;base64,AAA"
    assert await get_qr_code(created.id, service=service) == {
        "qr_code": "data:image/png;base64,AAA",
        "connected": False,
    }

    gateway.get_qr_code.return_value = None
    assert await get_qr_code(created.id, service=service) == {
        "qr_code": None,
        "connected": True,
    }


@pytest.mark.asyncio
async def test_contacts_check_number_and_delete(service: MessagingService) -> None:
    created = await create_connection(
        ConnectionCreate(name="Vendas", phone="11999990000"), service=service
    )

    contacts = await list_contacts(created.id, service=service)
    assert contacts["total"] == 1
    assert await check_number(created.id, phone="11988887777", service=service) == {
        "exists": True
    }

    response = await delete_connection(created.id, service=service)
    assert response.status_code == 204
    assert await service.list_connections() == []
