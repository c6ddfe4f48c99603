from decimal import Decimal

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from storefront_client.core.application.exceptions import ConfigurationError

DEFAULT_GREETING = (
    "Hello! I'm here to help you find the perfect shoes. You can ask me to show you "
    "products, add items to your cart, or help with checkout!"
)


class StorefrontSettings(BaseSettings):
    """Settings for the storefront API connection and session behaviour."""

    # ── API connection ──
    api_url: str = Field(default="http://localhost:5000/api", alias="STOREFRONT_API_URL")
    api_token: SecretStr | None = Field(default=None, alias="STOREFRONT_API_TOKEN")
    http_timeout_seconds: float = Field(default=10.0, alias="STOREFRONT_HTTP_TIMEOUT_SECONDS")
    fetch_max_attempts: int = Field(default=1, alias="STOREFRONT_FETCH_MAX_ATTEMPTS")

    # ── Chat ──
    chat_greeting: str = Field(default=DEFAULT_GREETING, alias="CHAT_GREETING")

    # ── Checkout ──
    free_shipping_threshold: Decimal = Field(default=Decimal("100"), alias="FREE_SHIPPING_THRESHOLD")
    flat_shipping_cost: Decimal = Field(default=Decimal("10"), alias="FLAT_SHIPPING_COST")

    # ── Observability ──
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_format: str = Field(default="", alias="LOG_FORMAT")
    service_name: str = Field(default="storefront-client", alias="SERVICE_NAME")
    app_env: str = Field(default="local", alias="APP_ENV")
    tracing_enabled: bool = Field(default=False, alias="STOREFRONT_TRACING_ENABLED")

    @field_validator("fetch_max_attempts")
    @classmethod
    def at_least_one_attempt(cls, value: int) -> int:
        if value < 1:
            raise ValueError("STOREFRONT_FETCH_MAX_ATTEMPTS must be >= 1")
        return value

    def validate_credentials(self) -> None:
        if self.api_token is None or not self.api_token.get_secret_value().strip():
            raise ConfigurationError("STOREFRONT_API_TOKEN is required for an authenticated session.")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)
