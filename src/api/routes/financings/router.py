"""Endpoints de propostas de financiamento.

Endpoints:
- GET /api/financings: lista com nome atual do agente
- GET /api/financings/summary: totais da carteira
- GET /api/financings/{financing_id}
- POST /api/financings
- PATCH /api/financings/{financing_id}: atualização genérica (qualquer status)
- PATCH /api/financings/{financing_id}/status: atalho, apenas paid/analysis
- DELETE /api/financings/{financing_id}
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from api.routes.financings.schemas import (
    FinancingCreate,
    FinancingUpdate,
    PortfolioSummaryResponse,
    StatusToggle,
)
from app.bootstrap import get_financing_service
from app.domain.financing import FinancingProposal
from app.services.financing_service import FinancingService
from fsm.states.financing import FinancingStatus

router = APIRouter()


@router.get("")
async def list_financings(
    service: FinancingService = Depends(get_financing_service),
) -> list[FinancingProposal]:
    return await service.list_proposals()


@router.get("/summary")
async def financing_summary(
    service: FinancingService = Depends(get_financing_service),
) -> PortfolioSummaryResponse:
    summary = await service.summary()
    return PortfolioSummaryResponse(
        count_by_status={
            state.value: summary.count_by_status.get(state, 0) for state in FinancingStatus
        },
        total_released=summary.total_released,
        total_net_profit=summary.total_net_profit,
        total_paid_margin=summary.total_paid_margin,
    )


@router.get("/{financing_id}")
async def get_financing(
    financing_id: str,
    service: FinancingService = Depends(get_financing_service),
) -> FinancingProposal:
    return await service.get(financing_id)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_financing(
    body: FinancingCreate,
    service: FinancingService = Depends(get_financing_service),
) -> FinancingProposal:
    return await service.create(body.to_fields())


@router.patch("/{financing_id}")
async def update_financing(
    financing_id: str,
    body: FinancingUpdate,
    service: FinancingService = Depends(get_financing_service),
) -> FinancingProposal:
    return await service.update(financing_id, body.to_changes())


@router.patch("/{financing_id}/status")
async def toggle_financing_status(
    financing_id: str,
    body: StatusToggle,
    service: FinancingService = Depends(get_financing_service),
) -> FinancingProposal:
    return await service.change_status(financing_id, body.status, quick_toggle=True)


@router.delete("/{financing_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_financing(
    financing_id: str,
    service: FinancingService = Depends(get_financing_service),
) -> Response:
    await service.delete(financing_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
