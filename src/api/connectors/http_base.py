"""Cliente HTTP base para conectores da camada API.

Uma requisição por chamada, sem retry: o timeout configurado limita a
espera e qualquer falha de rede vira `HttpError(is_transport=True)`.
A interpretação de status HTTP fica com cada conector.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

logger = logging.getLogger(__name__)


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    base_url: str = ""
    timeout_seconds: float = 15.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True
    # Permite httpx.MockTransport em testes
    transport: httpx.AsyncBaseTransport | None = None


class HttpError(Exception):
    """Erro de requisição HTTP sem dados sensíveis."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        is_transport: bool = False,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.is_transport = is_transport


class HttpClient:
    """Cliente HTTP simples para chamadas externas."""

    def __init__(self, config: HttpClientConfig | None = None) -> None:
        self._config = config or HttpClientConfig()

    @property
    def config(self) -> HttpClientConfig:
        return self._config

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json_body: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        merged_headers = {**self._config.default_headers, **(headers or {})}
        clean_params = {k: v for k, v in (params or {}).items() if v is not None}
        try:
            async with httpx.AsyncClient(
                base_url=self._config.base_url,
                verify=self._config.verify_ssl,
                transport=self._config.transport,
                timeout=self._config.timeout_seconds,
            ) as client:
                return await client.request(
                    method,
                    path,
                    params=clean_params or None,
                    json=json_body,
                    headers=merged_headers,
                )
        except httpx.TimeoutException as exc:
            logger.warning(
                "http_timeout",
                extra={"method": method, "path": path, "error_type": type(exc).__name__},
            )
            raise HttpError("http_timeout", is_transport=True) from exc
        except httpx.HTTPError as exc:
            logger.warning(
                "http_connection_error",
                extra={"method": method, "path": path, "error_type": type(exc).__name__},
            )
            raise HttpError("http_connection_error", is_transport=True) from exc

    async def get(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        return await self.request("GET", path, params=params, headers=headers)

    async def post(
        self,
        path: str,
        json: dict[str, Any],
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        return await self.request("POST", path, json_body=json, headers=headers)

    async def delete(
        self,
        path: str,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        return await self.request("DELETE", path, headers=headers)


def decode_json(response: httpx.Response) -> Any:
    """Decodifica o corpo JSON; corpo vazio vira dict vazio.

    Raises:
        HttpError: Se o corpo não for JSON válido.
    """
    if not response.content:
        return {}
    try:
        return response.json()
    except json.JSONDecodeError as exc:
        raise HttpError("invalid_json", status_code=response.status_code) from exc
