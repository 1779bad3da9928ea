"""
Status de sessão do gateway de mensagens e status da conexão persistida.

O gateway reporta `SessionStatus`; o registro `MessagingConnection`
guarda `ConnectionStatus`. A conversão é exaustiva.
"""

from enum import StrEnum
from typing import assert_never


class SessionStatus(StrEnum):
    """Status reportado pelo servidor WPPConnect."""

    STARTING = "STARTING"
    QRCODE = "QRCODE"
    CONNECTED = "CONNECTED"
    DISCONNECTED = "DISCONNECTED"
    ERROR = "ERROR"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, raw: object) -> "SessionStatus":
        """Converte valor bruto do gateway; desconhecido vira ERROR."""
        if isinstance(raw, str):
            try:
                return cls(raw.strip().upper())
            except ValueError:
                return cls.ERROR
        return cls.ERROR


class ConnectionStatus(StrEnum):
    """Status persistido de uma conexão de WhatsApp."""

    CONNECTING = "connecting"
    QR_PENDING = "qr_pending"
    CONNECTED = "connected"
    DISCONNECTED = "disconnected"

    def __str__(self) -> str:
        return self.value


def connection_status_for(session_status: SessionStatus) -> ConnectionStatus:
    """Mapeia status do gateway para o status persistido.

    ERROR vira DISCONNECTED: falha nunca é tratada como conectado.
    """
    match session_status:
        case SessionStatus.STARTING:
            return ConnectionStatus.CONNECTING
        case SessionStatus.QRCODE:
            return ConnectionStatus.QR_PENDING
        case SessionStatus.CONNECTED:
            return ConnectionStatus.CONNECTED
        case SessionStatus.DISCONNECTED | SessionStatus.ERROR:
            return ConnectionStatus.DISCONNECTED
        case _:
            assert_never(session_status)
