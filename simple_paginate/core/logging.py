"""Structured JSON logging configuration."""

import logging

from pythonjsonlogger.json import JsonFormatter as _JsonFormatter

from simple_paginate.config import Settings, settings as default_settings


class _PaginateJsonFormatter(_JsonFormatter):
    """Adds library-level metadata to every JSON record."""

    def __init__(self, *args: object, app_settings: Settings, **kwargs: object) -> None:
        super().__init__(*args, **kwargs)  # type: ignore[arg-type]
        self._settings = app_settings

    def add_fields(
        self,
        log_record: dict[str, object],
        record: logging.LogRecord,
        message_dict: dict[str, object],
    ) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record.setdefault("service", self._settings.app_name)
        log_record.setdefault("version", self._settings.app_version)
        log_record.setdefault("env", self._settings.env)


def configure_logging(app_settings: Settings | None = None) -> None:
    """Set up structured JSON logging on the root logger.

    Applications embedding the paginator may skip this and keep their own
    handlers; every module logs through ``logging.getLogger(__name__)``.

    Log levels:
        DEBUG  : one record per paginated fetch, defaulted page/limit values
        WARNING: rejected pagination input (strict mode)
        ERROR  : unhandled exceptions reaching the FastAPI handlers
    """
    app_settings = app_settings or default_settings
    log_level = logging.DEBUG if app_settings.debug else logging.INFO

    handler = logging.StreamHandler()
    handler.setFormatter(
        _PaginateJsonFormatter(
            fmt="%(asctime)s %(name)s %(levelname)s %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%SZ",
            app_settings=app_settings,
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(log_level)

    # Suppress noisy third-party loggers
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
