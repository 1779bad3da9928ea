"""Testes das settings carregadas do ambiente."""

from __future__ import annotations

from decimal import Decimal

import pytest

from app.bootstrap import validate_runtime_settings
from config.settings import (
    ASAAS_PRODUCTION_URL,
    ASAAS_SANDBOX_URL,
    DEFAULT_WPPCONNECT_URL,
    MessagingGatewaySettings,
    PaymentGatewaySettings,
    get_base_settings,
    get_financing_settings,
    get_messaging_gateway_settings,
    get_payment_gateway_settings,
)


class TestBaseSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("ENVIRONMENT", raising=False)
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        settings = get_base_settings()
        assert settings.environment == "development"
        assert settings.service_name == "aprove_backoffice"
        assert settings.log_level == "INFO"
        assert settings.validate() == []

    def test_environment_aliases(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "prod")
        assert get_base_settings().is_production is True


class TestPaymentGatewaySettings:
    def test_without_key_is_not_configured(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Sem chave o gateway opera em modo demo."""
        monkeypatch.delenv("ASAAS_API_KEY", raising=False)
        settings = get_payment_gateway_settings()
        assert settings.is_configured is False
        assert settings.base_url == ASAAS_SANDBOX_URL
        assert settings.timeout_seconds == 15.0
        assert settings.boleto_fee == Decimal("1.99")

    def test_production_environment_and_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ASAAS_API_KEY", "key")
        monkeypatch.setenv("ASAAS_ENVIRONMENT", "production")
        assert get_payment_gateway_settings().base_url == ASAAS_PRODUCTION_URL

        override = PaymentGatewaySettings(api_key="key", base_url_override="http://mock/v3/")
        assert override.base_url == "http://mock/v3"

    def test_invalid_boleto_fee_falls_back_to_default(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("ASAAS_BOLETO_FEE", "abc")
        assert get_payment_gateway_settings().boleto_fee == Decimal("1.99")

    def test_production_requires_key(self) -> None:
        errors = PaymentGatewaySettings().validate("production")
        assert "ASAAS_API_KEY obrigatório em production" in errors
        assert PaymentGatewaySettings().validate("development") == []


class TestMessagingGatewaySettings:
    def test_defaults_have_no_secret(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("WPPCONNECT_SECRET_KEY", raising=False)
        monkeypatch.delenv("WPPCONNECT_BASE_URL", raising=False)
        settings = get_messaging_gateway_settings()
        assert settings.base_url == DEFAULT_WPPCONNECT_URL
        assert settings.secret_key == ""
        assert "WPPCONNECT_SECRET_KEY não configurado" in settings.validate()

    def test_api_base_embeds_secret(self) -> None:
        settings = MessagingGatewaySettings(base_url="http://wpp:21465/", secret_key="s3cr3t")
        assert settings.api_base == "http://wpp:21465/api/s3cr3t"
        assert settings.validate() == []


class TestFinancingSettings:
    def test_strict_transitions_flag(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("FINANCING_STRICT_TRANSITIONS", raising=False)
        assert get_financing_settings().strict_transitions is False

        get_financing_settings.cache_clear()
        monkeypatch.setenv("FINANCING_STRICT_TRANSITIONS", "true")
        assert get_financing_settings().strict_transitions is True


class TestValidateRuntimeSettings:
    def test_development_only_warns(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "development")
        monkeypatch.delenv("WPPCONNECT_SECRET_KEY", raising=False)
        validate_runtime_settings()

    def test_production_fails_fast(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.delenv("ASAAS_API_KEY", raising=False)
        monkeypatch.delenv("WPPCONNECT_SECRET_KEY", raising=False)
        with pytest.raises(RuntimeError, match="Configuração inválida para production"):
            validate_runtime_settings()
