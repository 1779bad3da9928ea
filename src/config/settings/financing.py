"""Settings do fluxo de financiamentos."""

from __future__ import annotations

import os
from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field


class FinancingSettings(BaseModel):
    """Regras configuráveis do fluxo de status de financiamento."""

    model_config = ConfigDict(frozen=True)

    strict_transitions: bool = Field(
        default=False,
        description=(
            "Quando ativo, transições fora do grafo de status são rejeitadas; "
            "caso contrário são apenas registradas em log."
        ),
    )


def _parse_bool(raw: str | None, default: bool = False) -> bool:
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in ("true", "1", "yes")


@lru_cache(maxsize=1)
def get_financing_settings() -> FinancingSettings:
    """Retorna instância cacheada de FinancingSettings."""
    return FinancingSettings(
        strict_transitions=_parse_bool(os.getenv("FINANCING_STRICT_TRANSITIONS")),
    )
