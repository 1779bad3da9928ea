"""Contrato do gateway de mensagens (WPPConnect).

Nenhum método lança exceção: falhas viram False, None, [] ou ERROR.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from fsm.states.connection import SessionStatus


class MessagingGatewayProtocol(ABC):
    """Primitivas de sessão e envio."""

    @abstractmethod
    async def start_session(self, session_id: str) -> bool: ...

    @abstractmethod
    async def get_qr_code(self, session_id: str) -> str | None: ...

    @abstractmethod
    async def get_session_status(self, session_id: str) -> SessionStatus: ...

    @abstractmethod
    async def close_session(self, session_id: str) -> bool: ...

    @abstractmethod
    async def send_message(self, session_id: str, phone: str, text: str) -> bool: ...

    @abstractmethod
    async def send_file(
        self,
        session_id: str,
        phone: str,
        file_url: str,
        filename: str | None = None,
        caption: str | None = None,
    ) -> bool: ...

    @abstractmethod
    async def get_all_contacts(self, session_id: str) -> list[dict[str, Any]]: ...

    @abstractmethod
    async def check_number_status(self, session_id: str, phone: str) -> bool: ...
