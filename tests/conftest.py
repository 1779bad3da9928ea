"""Configuração do pytest para o back-office."""

import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Settings são cacheadas por lru_cache; cada teste lê o env do zero."""
    from config.settings import (
        get_base_settings,
        get_financing_settings,
        get_messaging_gateway_settings,
        get_payment_gateway_settings,
    )

    getters = (
        get_base_settings,
        get_financing_settings,
        get_messaging_gateway_settings,
        get_payment_gateway_settings,
    )
    for getter in getters:
        getter.cache_clear()
    yield
    for getter in getters:
        getter.cache_clear()
