from __future__ import annotations

import logging
import logging.config
from typing import Any, Dict

from pythonjsonlogger import jsonlogger

from calculator_web.core.config import get_settings
from calculator_web.core.context import get_request_id

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s %(request_id)s"
LOG_DATEFMT = "%Y-%m-%dT%H:%M:%S%z"


class RequestContextFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = get_request_id() or "-"
        return True


def _build_logging_config(level: str) -> Dict[str, Any]:
    handler_names = ["default"]

    def _logger(logger_level: str) -> Dict[str, Any]:
        return {"handlers": handler_names, "level": logger_level, "propagate": False}

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {
            "request_context": {
                "()": RequestContextFilter,
            }
        },
        "formatters": {
            "json": {
                "()": jsonlogger.JsonFormatter,
                "fmt": LOG_FORMAT,
                "datefmt": LOG_DATEFMT,
            },
        },
        "handlers": {
            "default": {
                "class": "logging.StreamHandler",
                "formatter": "json",
                "filters": ["request_context"],
            }
        },
        "loggers": {
            "uvicorn": _logger("INFO"),
            "uvicorn.error": _logger("INFO"),
            "uvicorn.access": _logger("INFO"),
            "calculator_web": _logger(level),
        },
        "root": {"handlers": handler_names, "level": "INFO"},
    }


def configure_logging(level: str | None = None) -> None:
    resolved = (level or get_settings().log_level).upper()
    logging.config.dictConfig(_build_logging_config(resolved))
