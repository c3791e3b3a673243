from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict

from packet_ack.domain.value_objects.enums import AppEnv


class Settings(BaseSettings):
    HOST: str = "0.0.0.0"
    PORT: int = 8080

    APP_ENV: AppEnv = AppEnv.DEVELOPMENT

    SSL_KEY: str | None = None
    SSL_CERT: str | None = None

    LOG_LEVEL: str = "INFO"

    WS_PATH: str = "/"

    GRACEFUL_SHUTDOWN_SECONDS: float = 5.0

    @property
    def is_production(self) -> bool:
        return self.APP_ENV == AppEnv.PRODUCTION

    @property
    def tls_enabled(self) -> bool:
        """TLS is terminated here only in production with both key and cert."""
        return self.is_production and bool(self.SSL_KEY) and bool(self.SSL_CERT)

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )


settings = Settings()
