"""
Configuration Schemas.

One strict pydantic model per file in config/settings/. AppConfig validates
each YAML file against its model on load, so a typo, a missing key or an
out-of-range value stops startup with the offending file named.

    ApplicationSchema  → application.yaml
    DatabaseSchema     → database.yaml
    LoggingSchema      → logging.yaml
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LogFormat = Literal["json", "console"]


class _StrictBase(BaseModel):
    """Unknown keys are errors."""

    model_config = ConfigDict(extra="forbid")


# =============================================================================
# application.yaml
# =============================================================================


class ServerSchema(_StrictBase):
    """Address uvicorn binds to when started through run.py."""

    host: str
    port: int = Field(ge=1, le=65535)


class CorsSchema(_StrictBase):
    """Browser origins allowed to call the API. Empty disables CORS."""

    origins: list[str] = Field(default_factory=list)


class ApplicationSchema(_StrictBase):
    name: str
    version: str
    description: str = ""
    environment: Literal["development", "test", "staging", "production"]
    debug: bool = False
    api_prefix: str = Field(pattern=r"^/")
    docs_enabled: bool = True
    server: ServerSchema
    cors: CorsSchema


# =============================================================================
# database.yaml
# =============================================================================


class DatabaseSchema(_StrictBase):
    """Connection target and pool sizing. The password comes from .env."""

    driver: str
    host: str
    port: int = Field(ge=1, le=65535)
    name: str
    user: str
    pool_size: int = Field(ge=1)
    max_overflow: int = Field(ge=0)
    pool_timeout: int = Field(ge=1, description="Seconds to wait for a connection")
    pool_recycle: int = Field(ge=-1, description="Seconds; -1 never recycles")
    echo: bool = False


# =============================================================================
# logging.yaml
# =============================================================================


class ConsoleHandlerSchema(_StrictBase):
    enabled: bool


class FileHandlerSchema(_StrictBase):
    enabled: bool
    path: str = Field(description="Relative to the project root")
    max_bytes: int = Field(gt=0)
    backup_count: int = Field(ge=0)


class HandlersSchema(_StrictBase):
    console: ConsoleHandlerSchema
    file: FileHandlerSchema


class LoggingSchema(_StrictBase):
    level: LogLevel
    format: LogFormat
    handlers: HandlersSchema
