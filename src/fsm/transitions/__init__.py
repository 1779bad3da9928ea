"""
Exports públicos do módulo fsm/transitions.
"""

from fsm.transitions.rules import (
    SESSION_TRANSITIONS,
    VALID_TRANSITIONS,
    TransitionMap,
    get_valid_targets,
    is_session_transition_expected,
    is_transition_valid,
    validate_transition_map,
)

__all__ = [
    "SESSION_TRANSITIONS",
    "VALID_TRANSITIONS",
    "TransitionMap",
    "get_valid_targets",
    "is_session_transition_expected",
    "is_transition_valid",
    "validate_transition_map",
]
