"""
Registro de uma mudança de status de financiamento para auditoria em log.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

from fsm.states.financing import FinancingStatus


@dataclass(frozen=True, slots=True)
class StatusTransition:
    """
    Mudança de status aplicada a uma proposta.

    Attributes:
        financing_id: Identificador da proposta
        from_status: Status de origem
        to_status: Status de destino
        trigger: Origem da mudança (ex: 'status_toggle', 'generic_update')
        on_graph: Se a mudança segue VALID_TRANSITIONS
        timestamp: Momento da mudança (UTC)
    """

    financing_id: str
    from_status: FinancingStatus
    to_status: FinancingStatus
    trigger: str
    on_graph: bool
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        if not self.trigger or not self.trigger.strip():
            raise ValueError("trigger não pode ser vazio")

    def to_log_dict(self) -> dict[str, Any]:
        """Representação segura para logs (sem PII)."""
        return {
            "financing_id": self.financing_id,
            "from_status": self.from_status.value,
            "to_status": self.to_status.value,
            "trigger": self.trigger,
            "on_graph": self.on_graph,
            "timestamp": self.timestamp.isoformat(),
        }
