"""Conexão de WhatsApp registrada no servidor WPPConnect."""

from __future__ import annotations

from datetime import UTC, date, datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from fsm.states.connection import ConnectionStatus, SessionStatus


class OutboundMessageType(StrEnum):
    """Tipo de mensagem de saída."""

    TEXT = "text"
    DOCUMENT = "document"
    IMAGE = "image"
    VIDEO = "video"
    AUDIO = "audio"


class MessagingConnection(BaseModel):
    """Um número de WhatsApp pareado (uma sessão remota por conexão)."""

    model_config = ConfigDict(extra="ignore", validate_assignment=True)

    id: str
    name: str = Field(..., min_length=1)
    phone: str = Field(..., min_length=1)
    session_id: str
    status: ConnectionStatus = ConnectionStatus.DISCONNECTED
    gateway_status: SessionStatus | None = Field(
        default=None,
        description="Último status reportado pelo gateway.",
    )
    qr_code: str | None = None
    daily_limit: int = Field(default=1000, ge=1)
    messages_sent: int = Field(default=0, ge=0)
    last_reset_date: date | None = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    last_connected_at: datetime | None = None


def session_id_for(connection_id: str) -> str:
    """Nome da sessão remota de uma conexão."""
    return f"session-{connection_id}"


__all__ = [
    "MessagingConnection",
    "OutboundMessageType",
    "session_id_for",
]
