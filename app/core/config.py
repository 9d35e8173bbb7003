from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="APP_",
        case_sensitive=False,
    )

    env: str = Field(default="development")
    debug: bool = Field(default=False)
    docs_enabled: bool = Field(default=True)
    log_level: str = Field(default="INFO")

    database_url: str = Field(default="sqlite:///./usage.db", min_length=1)
    database_echo: bool = Field(default=False)
    create_schema: bool = Field(default=True)

    cors_origins: list[str] = Field(default_factory=list)
    trusted_hosts: list[str] = Field(default_factory=lambda: ["localhost", "127.0.0.1"])

    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8081, ge=1, le=65535)
    ssl_certfile: str | None = Field(default=None)
    ssl_keyfile: str | None = Field(default=None)

    @property
    def is_production(self) -> bool:
        return self.env.lower() == "production"

    @property
    def tls_enabled(self) -> bool:
        return bool(self.ssl_certfile and self.ssl_keyfile)


def load_settings() -> Settings:
    settings = Settings()
    if not settings.cors_origins:
        settings.cors_origins = ["http://localhost:3000", "http://localhost:8081"]
    return settings
