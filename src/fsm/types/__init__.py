"""
Exports públicos do módulo fsm/types.
"""

from fsm.types.transition import StatusTransition

__all__ = ["StatusTransition"]
