"""
Grafo de transições de status.

Define as transições esperadas para propostas de financiamento e para
sessões do gateway de mensagens.
"""

from fsm.states.connection import SessionStatus
from fsm.states.financing import TERMINAL_STATUSES, FinancingStatus

TransitionMap = dict[FinancingStatus, frozenset[FinancingStatus]]

VALID_TRANSITIONS: TransitionMap = {
    # ANALYSIS: parecer do banco
    FinancingStatus.ANALYSIS: frozenset({
        FinancingStatus.APPROVED,
        FinancingStatus.REJECTED,
    }),

    # APPROVED: liberação do crédito
    FinancingStatus.APPROVED: frozenset({
        FinancingStatus.PAID,
    }),

    # Terminais
    FinancingStatus.PAID: frozenset(),
    FinancingStatus.REJECTED: frozenset(),
}

# Sessão: STARTING → QRCODE → CONNECTED; DISCONNECTED e ERROR de qualquer estado
SESSION_TRANSITIONS: dict[SessionStatus, frozenset[SessionStatus]] = {
    SessionStatus.STARTING: frozenset({
        SessionStatus.QRCODE,
        SessionStatus.CONNECTED,
        SessionStatus.DISCONNECTED,
        SessionStatus.ERROR,
    }),
    SessionStatus.QRCODE: frozenset({
        SessionStatus.CONNECTED,
        SessionStatus.DISCONNECTED,
        SessionStatus.ERROR,
    }),
    SessionStatus.CONNECTED: frozenset({
        SessionStatus.DISCONNECTED,
        SessionStatus.ERROR,
    }),
    SessionStatus.DISCONNECTED: frozenset({
        SessionStatus.STARTING,
        SessionStatus.ERROR,
    }),
    SessionStatus.ERROR: frozenset({
        SessionStatus.STARTING,
        SessionStatus.DISCONNECTED,
    }),
}


def get_valid_targets(status: FinancingStatus) -> frozenset[FinancingStatus]:
    """
    Retorna os status de destino válidos a partir de um status.

    Args:
        status: Status de origem

    Returns:
        Conjunto de destinos permitidos (vazio se terminal)
    """
    return VALID_TRANSITIONS.get(status, frozenset())


def is_transition_valid(from_status: FinancingStatus, to_status: FinancingStatus) -> bool:
    """
    Verifica se uma transição de financiamento segue o grafo.

    Args:
        from_status: Status de origem
        to_status: Status de destino

    Returns:
        True se a transição é permitida
    """
    if from_status in TERMINAL_STATUSES:
        return False

    return to_status in get_valid_targets(from_status)


def is_session_transition_expected(
    from_status: SessionStatus,
    to_status: SessionStatus,
) -> bool:
    """Verifica se a mudança de status da sessão segue o fluxo de pareamento."""
    if from_status == to_status:
        return True
    return to_status in SESSION_TRANSITIONS.get(from_status, frozenset())


def validate_transition_map() -> list[str]:
    """
    Valida a integridade dos mapas de transição.

    Verifica:
    - Todos os status do enum estão no mapa
    - Status terminais têm conjunto vazio
    - DISCONNECTED e ERROR são alcançáveis de qualquer status de sessão

    Returns:
        Lista de erros encontrados (vazia se válido)
    """
    errors: list[str] = []

    for status in FinancingStatus:
        if status not in VALID_TRANSITIONS:
            errors.append(f"Status {status.name} ausente em VALID_TRANSITIONS")

    for status in TERMINAL_STATUSES:
        targets = VALID_TRANSITIONS.get(status, frozenset())
        if targets:
            errors.append(
                f"Status terminal {status.name} não deveria ter transições: {targets}"
            )

    for from_status, targets in VALID_TRANSITIONS.items():
        for target in targets:
            if not isinstance(target, FinancingStatus):
                errors.append(
                    f"Transição {from_status.name} → {target}: destino inválido"
                )

    for status in SessionStatus:
        targets = SESSION_TRANSITIONS.get(status)
        if targets is None:
            errors.append(f"Status de sessão {status.name} ausente em SESSION_TRANSITIONS")
            continue
        for always_reachable in (SessionStatus.DISCONNECTED, SessionStatus.ERROR):
            if status != always_reachable and always_reachable not in targets:
                errors.append(
                    f"{always_reachable.name} deveria ser alcançável de {status.name}"
                )

    return errors
