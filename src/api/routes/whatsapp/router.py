"""Endpoints de conexões de WhatsApp (servidor WPPConnect).

Endpoints:
- GET /api/whatsapp/connections
- POST /api/whatsapp/connections
- DELETE /api/whatsapp/connections/{connection_id}
- POST /api/whatsapp/connections/{connection_id}/connect
- GET /api/whatsapp/connections/{connection_id}/qr
- GET /api/whatsapp/connections/{connection_id}/status
- POST /api/whatsapp/connections/{connection_id}/disconnect
- POST /api/whatsapp/connections/{connection_id}/messages
- POST /api/whatsapp/connections/{connection_id}/files
- GET /api/whatsapp/connections/{connection_id}/contacts
- GET /api/whatsapp/connections/{connection_id}/check-number
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Query, Response, status
from pydantic import BaseModel, Field

from app.bootstrap import get_messaging_service
from app.domain.messaging import MessagingConnection, OutboundMessageType
from app.services.messaging_service import MessagingService
from fsm.states.connection import ConnectionStatus

router = APIRouter()


class ConnectionCreate(BaseModel):
    name: str = Field(..., min_length=1)
    phone: str = Field(..., min_length=1)
    daily_limit: int | None = Field(default=None, ge=1)


class OutboundMessage(BaseModel):
    phone: str = Field(..., min_length=1)
    type: OutboundMessageType = OutboundMessageType.TEXT
    text: str | None = None
    media_url: str | None = None
    filename: str | None = None


class OutboundFile(BaseModel):
    phone: str = Field(..., min_length=1)
    file_url: str = Field(..., min_length=1)
    filename: str | None = None
    caption: str | None = None


def _delivery_receipt(connection: MessagingConnection) -> dict[str, Any]:
    return {
        "success": True,
        "messages_sent": connection.messages_sent,
        "daily_limit": connection.daily_limit,
    }


@router.get("")
async def list_connections(
    service: MessagingService = Depends(get_messaging_service),
) -> list[MessagingConnection]:
    return await service.list_connections()


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_connection(
    body: ConnectionCreate,
    service: MessagingService = Depends(get_messaging_service),
) -> MessagingConnection:
    return await service.register(body.name, body.phone, body.daily_limit)


@router.delete("/{connection_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_connection(
    connection_id: str,
    service: MessagingService = Depends(get_messaging_service),
) -> Response:
    await service.remove(connection_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{connection_id}/connect")
async def connect(
    connection_id: str,
    service: MessagingService = Depends(get_messaging_service),
) -> MessagingConnection:
    return await service.connect(connection_id)


@router.get("/{connection_id}/qr")
async def get_qr_code(
    connection_id: str,
    service: MessagingService = Depends(get_messaging_service),
) -> dict[str, Any]:
    """QR Code de pareamento; `connected` indica sessão já autenticada."""
    qr_code = await service.get_qr_code(connection_id)
    if qr_code is not None:
        return {"qr_code": qr_code, "connected": False}
    connection = await service.refresh_status(connection_id)
    return {"qr_code": None, "connected": connection.status == ConnectionStatus.CONNECTED}


@router.get("/{connection_id}/status")
async def refresh_status(
    connection_id: str,
    service: MessagingService = Depends(get_messaging_service),
) -> MessagingConnection:
    return await service.refresh_status(connection_id)


@router.post("/{connection_id}/disconnect")
async def disconnect(
    connection_id: str,
    service: MessagingService = Depends(get_messaging_service),
) -> MessagingConnection:
    return await service.disconnect(connection_id)


@router.post("/{connection_id}/messages")
async def send_message(
    connection_id: str,
    body: OutboundMessage,
    service: MessagingService = Depends(get_messaging_service),
) -> dict[str, Any]:
    connection = await service.send_outbound(
        connection_id,
        body.type,
        body.phone,
        text=body.text,
        media_url=body.media_url,
        filename=body.filename,
    )
    return _delivery_receipt(connection)


@router.post("/{connection_id}/files")
async def send_file(
    connection_id: str,
    body: OutboundFile,
    service: MessagingService = Depends(get_messaging_service),
) -> dict[str, Any]:
    connection = await service.send_file(
        connection_id,
        body.phone,
        body.file_url,
        filename=body.filename,
        caption=body.caption,
    )
    return _delivery_receipt(connection)


@router.get("/{connection_id}/contacts")
async def list_contacts(
    connection_id: str,
    service: MessagingService = Depends(get_messaging_service),
) -> dict[str, Any]:
    contacts = await service.list_contacts(connection_id)
    return {"data": contacts, "total": len(contacts)}


@router.get("/{connection_id}/check-number")
async def check_number(
    connection_id: str,
    phone: str = Query(..., min_length=1),
    service: MessagingService = Depends(get_messaging_service),
) -> dict[str, Any]:
    exists = await service.check_number(connection_id, phone)
    return {"exists": exists}
