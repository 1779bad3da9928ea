"""Agregador de rotas: registra todos os routers do back-office.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.customers.router import router as customers_router
from api.routes.financings.router import router as financings_router
from api.routes.health.router import router as health_router
from api.routes.payments.router import router as payments_router
from api.routes.personnel.router import router as personnel_router
from api.routes.whatsapp.router import router as whatsapp_router


def create_api_router() -> APIRouter:
    """Cria router principal com todos os sub-routers registrados.

    Returns:
        APIRouter configurado com todos os endpoints.
    """
    api_router = APIRouter()

    # Health checks (sem prefixo para /health e /ready na raiz)
    api_router.include_router(health_router, tags=["health"])

    api_router.include_router(personnel_router, prefix="/api/personnel", tags=["personnel"])
    api_router.include_router(customers_router, prefix="/api/customers", tags=["customers"])
    api_router.include_router(financings_router, prefix="/api/financings", tags=["financings"])
    api_router.include_router(payments_router, prefix="/api/payments", tags=["payments"])
    api_router.include_router(
        whatsapp_router,
        prefix="/api/whatsapp/connections",
        tags=["whatsapp"],
    )

    return api_router
