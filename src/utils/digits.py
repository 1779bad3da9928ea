"""Normalização de documentos, CEPs e telefones."""

from __future__ import annotations

import re

_NON_DIGITS = re.compile(r"\D")


def only_digits(value: str | None) -> str:
    """Remove todo caractere não numérico ("(11) 98765-4321" → "11987654321")."""
    if not value:
        return ""
    return _NON_DIGITS.sub("", value)
