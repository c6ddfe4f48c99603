"""Unit tests — StorefrontSettings (environment aliases and validation)."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from storefront_client.core.application.exceptions import ConfigurationError
from storefront_client.infrastructure.configuration import StorefrontSettings


class TestStorefrontSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in ("STOREFRONT_API_URL", "STOREFRONT_API_TOKEN", "FREE_SHIPPING_THRESHOLD"):
            monkeypatch.delenv(name, raising=False)

        settings = StorefrontSettings(_env_file=None)

        assert settings.api_url == "http://localhost:5000/api"
        assert settings.fetch_max_attempts == 1
        assert settings.free_shipping_threshold == Decimal("100")
        assert settings.chat_greeting.startswith("Hello!")

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("STOREFRONT_API_URL", "https://shop.example.com/api")
        monkeypatch.setenv("STOREFRONT_API_TOKEN", "env-token")
        monkeypatch.setenv("FLAT_SHIPPING_COST", "7.5")

        settings = StorefrontSettings(_env_file=None)

        assert settings.api_url == "https://shop.example.com/api"
        assert settings.api_token.get_secret_value() == "env-token"
        assert settings.flat_shipping_cost == Decimal("7.5")

    def test_attempts_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            StorefrontSettings(_env_file=None, STOREFRONT_FETCH_MAX_ATTEMPTS=0)

    def test_validate_credentials_requires_token(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("STOREFRONT_API_TOKEN", raising=False)

        with pytest.raises(ConfigurationError):
            StorefrontSettings(_env_file=None).validate_credentials()

    def test_token_is_not_exposed_in_repr(self, settings: StorefrontSettings) -> None:
        assert "mock_storefront_token" not in repr(settings)

    def test_observability_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_ENV", "staging")
        monkeypatch.setenv("STOREFRONT_TRACING_ENABLED", "true")
        monkeypatch.delenv("SERVICE_NAME", raising=False)

        settings = StorefrontSettings(_env_file=None)

        assert settings.app_env == "staging"
        assert settings.tracing_enabled is True
        assert settings.service_name == "storefront-client"
