"""Rotas HTTP da API do back-office.

Responsabilidades:
- Definir endpoints HTTP (CRUD interno, pagamentos, WhatsApp, health)
- Validação inicial de request (corpo, query params)
- Delegação para os serviços de app/services
- Tradução de exceções em respostas HTTP (errors.py)

Agregação:
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.errors import register_exception_handlers
from api.routes.router import create_api_router

__all__ = ["create_api_router", "register_exception_handlers"]
