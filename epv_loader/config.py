"""
Configuration settings for the EPV loader.

Uses Pydantic Settings to load environment variables for the database
connection, logging, and the default record count. Command-line flags never
mutate these settings; they are merged into an explicit, immutable
`ConnectionConfig` through `connection_config_from`.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Optional

from psycopg.conninfo import make_conninfo
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Database
    db_host: str = Field("localhost", alias="DB_HOST")
    db_port: int = Field(5432, alias="DB_PORT")
    db_user: str = Field("postgres", alias="DB_USER")
    db_password: Optional[str] = Field(None, alias="DB_PASSWORD")
    db_name: str = Field("informer", alias="DB_NAME")

    # Application
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    # Load defaults
    records: int = Field(100, alias="EPV_RECORDS")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


class ConnectionConfig(BaseModel):
    """
    Immutable connection parameters handed to the database driver.
    """

    user: str
    password: Optional[str] = None
    host: str
    port: int
    database: str

    model_config = {"frozen": True}

    def conninfo(self) -> str:
        """Render a libpq conninfo string, omitting an unset password."""
        return make_conninfo(
            user=self.user,
            password=self.password,
            host=self.host,
            port=self.port,
            dbname=self.database,
        )

    def masked(self) -> str:
        """Human-readable target with the password hidden."""
        secret = ":***" if self.password else ""
        return f"{self.user}{secret}@{self.host}:{self.port}/{self.database}"


def connection_config_from(
    settings: Settings,
    *,
    user: Optional[str] = None,
    password: Optional[str] = None,
    host: Optional[str] = None,
    port: Optional[int] = None,
    database: Optional[str] = None,
) -> ConnectionConfig:
    """
    Merge explicit overrides (typically CLI flags) over settings.

    Any override left as None falls back to the corresponding setting.
    """
    return ConnectionConfig(
        user=user if user is not None else settings.db_user,
        password=password if password is not None else settings.db_password,
        host=host if host is not None else settings.db_host,
        port=port if port is not None else settings.db_port,
        database=database if database is not None else settings.db_name,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["ConnectionConfig", "Settings", "connection_config_from", "get_settings"]
