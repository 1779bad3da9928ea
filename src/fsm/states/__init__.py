"""Estados de financiamento e de conexão de mensagens."""

from fsm.states.connection import (
    ConnectionStatus,
    SessionStatus,
    connection_status_for,
)
from fsm.states.financing import (
    DEFAULT_INITIAL_STATUS,
    QUICK_TOGGLE_STATUSES,
    TERMINAL_STATUSES,
    FinancingStatus,
    is_terminal,
)

__all__ = [
    "DEFAULT_INITIAL_STATUS",
    "QUICK_TOGGLE_STATUSES",
    "TERMINAL_STATUSES",
    "ConnectionStatus",
    "FinancingStatus",
    "SessionStatus",
    "connection_status_for",
    "is_terminal",
]
