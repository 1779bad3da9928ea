"""Cliente do servidor WPPConnect (automação de WhatsApp).

Proxy sem estado: cada método faz uma requisição e nunca lança exceção.
Falhas viram False, None, [] ou SessionStatus.ERROR, sempre com log.
Telefones seguem apenas com dígitos e não entram nos logs.

Rotas: {base_url}/api/{secret}/{endpoint}, header Authorization: Bearer {secret}.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from api.connectors.http_base import HttpClient, HttpClientConfig, HttpError, decode_json
from app.protocols.messaging_gateway import MessagingGatewayProtocol
from config.settings.wppconnect import MessagingGatewaySettings
from fsm.states.connection import SessionStatus
from utils.digits import only_digits

if TYPE_CHECKING:
    import httpx

logger = logging.getLogger(__name__)

COMPONENT = "wppconnect_client"


def normalize_phone(phone: str) -> str:
    """Telefone só com dígitos ("(11) 98765-4321" → "11987654321")."""
    return only_digits(phone)


class WppConnectClient(MessagingGatewayProtocol):
    """Primitivas de sessão e envio sobre o WPPConnect."""

    def __init__(
        self,
        settings: MessagingGatewaySettings,
        http_client: HttpClient | None = None,
    ) -> None:
        self._settings = settings
        self._http = http_client or HttpClient(
            HttpClientConfig(
                base_url=settings.api_base,
                timeout_seconds=settings.timeout_seconds,
            )
        )
        self._headers = {
            "Authorization": f"Bearer {settings.secret_key}",
            "Content-Type": "application/json",
        }

    async def _get(self, endpoint: str, params: dict[str, Any]) -> Any:
        response = await self._http.get(f"/{endpoint}", params=params, headers=self._headers)
        return self._decode(endpoint, response)

    async def _post(self, endpoint: str, payload: dict[str, Any]) -> Any:
        response = await self._http.post(f"/{endpoint}", json=payload, headers=self._headers)
        return self._decode(endpoint, response)

    @staticmethod
    def _decode(endpoint: str, response: httpx.Response) -> Any:
        if response.status_code >= 400:
            raise HttpError(f"wppconnect_{endpoint}_failed", status_code=response.status_code)
        return decode_json(response)

    def _log_failure(self, action: str, exc: Exception) -> None:
        logger.warning(
            "wppconnect_request_failed",
            extra={
                "component": COMPONENT,
                "action": action,
                "error_type": type(exc).__name__,
                "status_code": getattr(exc, "status_code", None),
            },
        )

    async def start_session(self, session_id: str) -> bool:
        try:
            data = await self._post(
                "start-session",
                {"session": session_id, "webhook": None, "waitQrCode": True},
            )
        except HttpError as exc:
            self._log_failure("start_session", exc)
            return False
        return isinstance(data, dict) and bool(data.get("status"))

    async def get_qr_code(self, session_id: str) -> str | None:
        try:
            data = await self._get("qrcode", {"session": session_id})
        except HttpError as exc:
            self._log_failure("get_qr_code", exc)
            return None
        if not isinstance(data, dict) or not data.get("status"):
            return None
        qrcode = data.get("qrcode")
        return qrcode if isinstance(qrcode, str) and qrcode else None

    async def get_session_status(self, session_id: str) -> SessionStatus:
        try:
            data = await self._get("status-session", {"session": session_id})
        except HttpError as exc:
            self._log_failure("get_session_status", exc)
            return SessionStatus.ERROR
        if not isinstance(data, dict) or not data.get("status"):
            return SessionStatus.ERROR
        return SessionStatus.parse(data.get("result"))

    async def close_session(self, session_id: str) -> bool:
        try:
            data = await self._post("close-session", {"session": session_id})
        except HttpError as exc:
            self._log_failure("close_session", exc)
            return False
        return isinstance(data, dict) and bool(data.get("status"))

    async def send_message(self, session_id: str, phone: str, text: str) -> bool:
        try:
            data = await self._post(
                "send-message",
                {"session": session_id, "phone": normalize_phone(phone), "message": text},
            )
        except HttpError as exc:
            self._log_failure("send_message", exc)
            return False
        return isinstance(data, dict) and bool(data.get("status"))

    async def send_file(
        self,
        session_id: str,
        phone: str,
        file_url: str,
        filename: str | None = None,
        caption: str | None = None,
    ) -> bool:
        payload: dict[str, Any] = {
            "session": session_id,
            "phone": normalize_phone(phone),
            "path": file_url,
            "filename": filename or file_url.rsplit("/", 1)[-1] or "arquivo",
        }
        if caption:
            payload["caption"] = caption
        try:
            data = await self._post("send-file", payload)
        except HttpError as exc:
            self._log_failure("send_file", exc)
            return False
        return isinstance(data, dict) and bool(data.get("status"))

    async def get_all_contacts(self, session_id: str) -> list[dict[str, Any]]:
        try:
            data = await self._get("all-contacts", {"session": session_id})
        except HttpError as exc:
            self._log_failure("get_all_contacts", exc)
            return []
        contacts = data.get("response") if isinstance(data, dict) else None
        if not isinstance(contacts, list):
            return []
        return [contact for contact in contacts if isinstance(contact, dict)]

    async def check_number_status(self, session_id: str, phone: str) -> bool:
        try:
            data = await self._get(
                "check-number-status",
                {"session": session_id, "phone": normalize_phone(phone)},
            )
        except HttpError as exc:
            self._log_failure("check_number_status", exc)
            return False
        if not isinstance(data, dict):
            return False
        response = data.get("response")
        return isinstance(response, dict) and response.get("numberExists") is True


def create_wppconnect_client(
    settings: MessagingGatewaySettings | None = None,
) -> WppConnectClient:
    """Factory com settings do ambiente.

    Args:
        settings: MessagingGatewaySettings opcional. Se None, carrega do ambiente.
    """
    from config.settings import get_messaging_gateway_settings

    return WppConnectClient(settings or get_messaging_gateway_settings())
