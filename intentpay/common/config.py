"""Environment-driven settings for the payment-intent handler.

The process loads this once at startup. Behavior is controlled by
environment variables (see `.env.example`).
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class CommonSettings(BaseSettings):
    """Typed view of runtime configuration from environment variables."""

    service_name: str = "payment-intent"
    log_level: str = "INFO"
    stripe_secret_key: str
    stripe_api_version: str = "2024-06-20"
    otel_exporter_otlp_endpoint: str = "http://otel-collector:4318/v1/traces"
    tracing_enabled: bool = True
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = CommonSettings()
