"""
Name: Application Configuration (Settings)

Responsibilities:
  - Centralized, typed configuration using pydantic-settings
  - Validate environment variables at startup
  - Provide local-development defaults (decorationDB, local origins)

Collaborators:
  - api/main.py: reads settings for CORS, store and startup validation
  - container.py: picks store / identity / payment adapters from settings
  - infrastructure/services/retry.py: reads retry policy

Constraints:
  - No business logic — pure configuration

Notes:
  - Singleton via lru_cache
  - FB_SERVICE_KEY carries the Firebase service account as base64 JSON
"""

from functools import lru_cache

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_INSECURE_SECRETS = {"dev-secret", "changeme", "change-me", "password"}


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes:
        app_env: Application environment (development/test/production)
        mongodb_uri: MongoDB connection string
        mongodb_db_name: Database holding the four collections
        mongodb_timeout_ms: Server selection timeout for the client
        allowed_origins: Comma-separated CORS origins
        cors_allow_credentials: Allow cookies cross-origin
        identity_provider: "firebase" (ID tokens) or "jwt" (HS256, dev/test)
        fb_service_key: Firebase service account JSON, base64 encoded
        jwt_secret: Secret for HS256 bearer tokens when identity_provider=jwt
        jwt_access_ttl_minutes: TTL used by the dev token helper
        stripe_secret_key: Stripe API key
        stripe_success_url: Checkout redirect on success
        stripe_cancel_url: Checkout redirect on cancel
        payment_currency: ISO currency for line items (lowercase)
        fake_payments: Use the in-memory payment gateway
        log_level / log_json: Logger configuration
        retry_*: Follow-up write retry policy
    """

    # Environment
    app_env: str = "development"

    # Store
    mongodb_uri: str = "mongodb://localhost:27017"
    mongodb_db_name: str = "decorationDB"
    mongodb_timeout_ms: int = 5000

    # CORS configuration
    allowed_origins: str = (
        "http://localhost:5173,http://localhost:5174,https://b12-m11-session.web.app"
    )
    cors_allow_credentials: bool = True

    # Identity
    identity_provider: str = "firebase"
    fb_service_key: str = ""
    jwt_secret: str = "dev-secret"
    jwt_access_ttl_minutes: int = 60

    # Payments
    stripe_secret_key: str = ""
    stripe_success_url: str = "http://localhost:5173/payment-success"
    stripe_cancel_url: str = "http://localhost:5173/decorations"
    payment_currency: str = "usd"
    fake_payments: bool = False

    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    # Retry/Resilience
    retry_max_attempts: int = 3
    retry_base_delay_seconds: float = 0.2
    retry_max_delay_seconds: float = 5.0

    @field_validator("identity_provider")
    @classmethod
    def identity_provider_valid(cls, v: str) -> str:
        provider = (v or "firebase").strip().lower()
        if provider not in {"firebase", "jwt"}:
            raise ValueError("identity_provider must be firebase or jwt")
        return provider

    @field_validator("payment_currency")
    @classmethod
    def payment_currency_valid(cls, v: str) -> str:
        currency = (v or "").strip().lower()
        if len(currency) != 3 or not currency.isalpha():
            raise ValueError("payment_currency must be a 3-letter ISO code")
        return currency

    @field_validator("retry_max_attempts")
    @classmethod
    def retry_attempts_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("retry_max_attempts must be greater than 0")
        return v

    @model_validator(mode="after")
    def validate_security_requirements(self):
        if not self.is_production():
            return self

        if self.identity_provider == "jwt":
            secret = (self.jwt_secret or "").strip()
            if not secret or secret in _INSECURE_SECRETS or len(secret) < 32:
                raise ValueError(
                    "JWT_SECRET must be a strong, non-default value (>= 32 chars) "
                    "in production"
                )
        if self.identity_provider == "firebase" and not self.fb_service_key.strip():
            raise ValueError("FB_SERVICE_KEY is required in production")
        if not self.fake_payments and not self.stripe_secret_key.strip():
            raise ValueError("STRIPE_SECRET_KEY is required unless FAKE_PAYMENTS=1")
        return self

    def get_allowed_origins_list(self) -> list[str]:
        """Parse comma-separated origins into a list."""
        return [
            origin.strip()
            for origin in self.allowed_origins.split(",")
            if origin.strip()
        ]

    def is_production(self) -> bool:
        return self.app_env.strip().lower() == "production"

    def is_test(self) -> bool:
        return self.app_env.strip().lower() in {"test", "testing", "ci"}

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore unknown env vars
    )


@lru_cache
def get_settings() -> Settings:
    """
    Get singleton Settings instance.

    Raises:
        ValidationError: If env vars are invalid
    """
    return Settings()
