"""
Status canônicos de uma proposta de financiamento.

Fluxo: analysis → approved | rejected; approved → paid.
"""

from enum import StrEnum


class FinancingStatus(StrEnum):
    """
    Status de uma proposta de financiamento.

    Não-terminais:
        - ANALYSIS: Proposta enviada ao banco, aguardando parecer
        - APPROVED: Crédito aprovado, aguardando liberação

    Terminais:
        - PAID: Valor liberado/pago (sucesso)
        - REJECTED: Crédito recusado (falha)
    """

    ANALYSIS = "analysis"
    APPROVED = "approved"
    PAID = "paid"
    REJECTED = "rejected"

    def __str__(self) -> str:
        return self.value


TERMINAL_STATUSES: frozenset[FinancingStatus] = frozenset({
    FinancingStatus.PAID,
    FinancingStatus.REJECTED,
})

DEFAULT_INITIAL_STATUS: FinancingStatus = FinancingStatus.ANALYSIS

# Status aceitos pelo atalho PATCH /{id}/status (alternância pago/em análise)
QUICK_TOGGLE_STATUSES: frozenset[FinancingStatus] = frozenset({
    FinancingStatus.PAID,
    FinancingStatus.ANALYSIS,
})


def is_terminal(status: FinancingStatus) -> bool:
    """
    Verifica se o status é terminal.

    Args:
        status: Status a ser verificado

    Returns:
        True se o status é terminal
    """
    return status in TERMINAL_STATUSES
