"""Endpoints de health check e readiness."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, Literal

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from app.domain.payments import GatewayMode
from config.settings import get_base_settings

router = APIRouter()


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    version: str = "1.0.0"


@dataclass(frozen=True, slots=True)
class DependencyCheck:
    """Resultado de checagem de dependência."""

    status: Literal["ok", "degraded", "failed"]
    mode: str | None = None
    error: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return {"status": self.status, "mode": self.mode, "error": self.error}


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness probe: verifica se o serviço está rodando."""
    return HealthResponse(
        status="healthy",
        service=get_base_settings().service_name,
        timestamp=datetime.now(UTC).isoformat(),
    )


@router.get("/ready")
async def readiness_check(request: Request) -> JSONResponse:
    """Readiness probe com o modo de cada gateway.

    Modo demo do gateway de pagamentos e WhatsApp sem segredo deixam o
    serviço utilizável (degraded); só a ausência de wiring impede o ready.
    """
    state = request.app.state
    payment_check = _check_payment_gateway(getattr(state, "payment_gateway_mode", None))
    messaging_check = _check_messaging_gateway(getattr(state, "messaging_configured", None))

    ready = payment_check.status != "failed" and messaging_check.status != "failed"
    payload = {
        "status": "ready" if ready else "not_ready",
        "checks": {
            "payment_gateway": payment_check.as_dict(),
            "messaging_gateway": messaging_check.as_dict(),
        },
        "timestamp": datetime.now(UTC).isoformat(),
    }
    return JSONResponse(content=payload, status_code=200 if ready else 503)


def _check_payment_gateway(mode: GatewayMode | None) -> DependencyCheck:
    if mode is None:
        return DependencyCheck(status="failed", error="not_initialized")
    if mode == GatewayMode.DEMO:
        return DependencyCheck(status="degraded", mode=mode.value, error="api_key_missing")
    return DependencyCheck(status="ok", mode=mode.value)


def _check_messaging_gateway(configured: bool | None) -> DependencyCheck:
    if configured is None:
        return DependencyCheck(status="failed", error="not_initialized")
    if not configured:
        return DependencyCheck(status="degraded", error="secret_key_missing")
    return DependencyCheck(status="ok")
