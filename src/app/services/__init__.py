"""Serviços de aplicação.

Orquestração sobre protocolos (gateways e stores).
Implementações concretas de IO ficam em app/infra/ e api/connectors/.
"""

from app.services.financing_calculator import (
    FinancingValuation,
    PortfolioSummary,
    ValuationInputs,
    compute_valuation,
    summarize_portfolio,
)
from app.services.financing_service import FinancingService
from app.services.messaging_service import MessagingService
from app.services.payment_service import PaymentService

__all__ = [
    "FinancingService",
    "FinancingValuation",
    "MessagingService",
    "PaymentService",
    "PortfolioSummary",
    "ValuationInputs",
    "compute_valuation",
    "summarize_portfolio",
]
