"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache), one instance per process
    - database_path unset means the default for the current environment:
      the packaged location in production, the working directory otherwise

Design Decisions:
    - NODE_ENV accepted as an alias of ENVIRONMENT so existing deployment
      manifests keep working
"""

from functools import lru_cache

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

PRODUCTION_DATABASE_PATH = "/app/data/database.sqlite"
LOCAL_DATABASE_PATH = "./database.sqlite"


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    environment: str = Field(
        "development",
        validation_alias=AliasChoices("environment", "node_env"),
    )

    # Server
    host: str = "0.0.0.0"
    port: int = 4000

    # Database
    database_path: str | None = None

    @field_validator("database_path", mode="before")
    @classmethod
    def blank_path_is_unset(cls, v: str | None) -> str | None:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    # API
    cors_origins: list[str] = ["*"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    @property
    def resolved_database_path(self) -> str:
        if self.database_path:
            return self.database_path
        if self.is_production:
            return PRODUCTION_DATABASE_PATH
        return LOCAL_DATABASE_PATH


@lru_cache
def get_settings() -> Settings:
    return Settings()
