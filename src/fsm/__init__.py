"""
Módulo FSM: status de financiamento e de sessões de mensagens.

Estrutura:
    - states/: enums de status (FinancingStatus, SessionStatus, ConnectionStatus)
    - transitions/: grafo de transições (VALID_TRANSITIONS, SESSION_TRANSITIONS)
    - types/: registro de transição para auditoria (StatusTransition)
"""

from fsm.states import (
    DEFAULT_INITIAL_STATUS,
    QUICK_TOGGLE_STATUSES,
    TERMINAL_STATUSES,
    ConnectionStatus,
    FinancingStatus,
    SessionStatus,
    connection_status_for,
    is_terminal,
)
from fsm.transitions import (
    SESSION_TRANSITIONS,
    VALID_TRANSITIONS,
    get_valid_targets,
    is_session_transition_expected,
    is_transition_valid,
    validate_transition_map,
)
from fsm.types import StatusTransition

__all__ = [
    "DEFAULT_INITIAL_STATUS",
    "QUICK_TOGGLE_STATUSES",
    "SESSION_TRANSITIONS",
    "TERMINAL_STATUSES",
    "VALID_TRANSITIONS",
    "ConnectionStatus",
    "FinancingStatus",
    "SessionStatus",
    "StatusTransition",
    "connection_status_for",
    "get_valid_targets",
    "is_session_transition_expected",
    "is_terminal",
    "is_transition_valid",
    "validate_transition_map",
]
