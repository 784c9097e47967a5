"""
Centralized Logging Configuration.

structlog on top of the stdlib logging module. Every module gets its logger
from get_logger(__name__); setup_logging() is called once per process, by
the FastAPI lifespan or by run.py.

Settings come from config/settings/logging.yaml (validated as LoggingSchema).
Arguments to setup_logging() override them.

Fields on every JSON record:
    timestamp   - ISO 8601 UTC
    level       - debug, info, warning, error, critical
    logger      - module path, e.g. notekeeper.backend.services.note
    event       - the message
    func_name   - emitting function
    lineno      - emitting line
    source      - web (HTTP requests) or cli (run.py); set explicitly
    request_id  - inside an HTTP request

Usage:
    from notekeeper.backend.core.logging import get_logger, setup_logging

    setup_logging(level="DEBUG", format_type="console")

    logger = get_logger(__name__)
    logger.info("Note created", extra={"note_id": note.id})
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

import structlog
from structlog.typing import Processor

from notekeeper.backend.core.config import find_project_root, get_app_config
from notekeeper.backend.core.config_schema import FileHandlerSchema, LoggingSchema

VALID_SOURCES = frozenset({"web", "cli", "internal", "unknown"})

# Libraries that are too chatty at INFO
_QUIET_LOGGERS = ("uvicorn.access", "sqlalchemy.engine")


def _load_logging_config() -> LoggingSchema:
    """The validated logging.yaml section of the cached AppConfig."""
    return get_app_config().logging


def _resolve_log_path(configured_path: str) -> Path:
    return find_project_root() / configured_path


def _shared_processors() -> list[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FUNC_NAME,
                structlog.processors.CallsiteParameter.LINENO,
            ],
        ),
    ]


def _file_handler(
    file_config: FileHandlerSchema,
    formatter: logging.Formatter,
) -> RotatingFileHandler:
    log_path = _resolve_log_path(file_config.path)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    handler = RotatingFileHandler(
        filename=str(log_path),
        maxBytes=file_config.max_bytes,
        backupCount=file_config.backup_count,
        encoding="utf-8",
    )
    handler.setFormatter(formatter)
    return handler


def setup_logging(
    level: str | None = None,
    format_type: str | None = None,
    enable_console: bool | None = None,
    enable_file_logging: bool | None = None,
) -> None:
    """
    Configure structlog and the root logger.

    Replaces any handlers already on the root logger, so calling it
    again reconfigures rather than duplicates output.

    Args:
        level: DEBUG, INFO, WARNING, ERROR or CRITICAL
        format_type: 'json' or 'console'
        enable_console: Write records to stdout
        enable_file_logging: Write JSON records to the rotating log file
    """
    config = _load_logging_config()
    handlers = config.handlers

    level = level or config.level
    format_type = format_type or config.format
    if enable_console is None:
        enable_console = handlers.console.enabled
    if enable_file_logging is None:
        enable_file_logging = handlers.file.enabled

    processors = _shared_processors()

    structlog.configure(
        processors=processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    json_formatter = structlog.stdlib.ProcessorFormatter(
        processor=structlog.processors.JSONRenderer(),
        foreign_pre_chain=processors,
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper()))
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    if enable_console:
        if format_type == "console":
            console_formatter = structlog.stdlib.ProcessorFormatter(
                processor=structlog.dev.ConsoleRenderer(colors=True),
                foreign_pre_chain=processors,
            )
        else:
            console_formatter = json_formatter
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(console_formatter)
        root_logger.addHandler(console_handler)

    if enable_file_logging:
        root_logger.addHandler(_file_handler(handlers.file, json_formatter))

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> Any:
    """Get a structlog logger, typically for __name__."""
    return structlog.get_logger(name)


def log_with_source(logger: Any, source: str, level: str, message: str, **kwargs: Any) -> None:
    """
    Log with an explicit source field.

    For code outside an HTTP request, where the middleware does not bind
    one, such as run.py.

    Raises:
        ValueError: If source is not one of VALID_SOURCES
        AttributeError: If level is not a logger method

    Example:
        log_with_source(logger, "cli", "info", "Tables created")
    """
    if source not in VALID_SOURCES:
        raise ValueError(f"Unknown log source: {source}")
    log_method = getattr(logger, level.lower())
    log_method(message, source=source, **kwargs)
