"""Structured JSON logging for the Zuri client."""

import inspect
import logging
import os

from pythonjsonlogger import jsonlogger

LOGGER_NAME = "zurichat"

# keyword arguments consumed by logging itself; everything else is a JSON field
_LOGGING_KWARGS = ("exc_info", "stack_info", "stacklevel")


def _resolve_level(level_name: str | None) -> int:
    level = logging.getLevelName((level_name or "INFO").upper())
    return level if isinstance(level, int) else logging.INFO


def _json_handler() -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setFormatter(
        jsonlogger.JsonFormatter(
            "%(asctime)s %(levelname)s %(name)s %(message)s",
            rename_fields={"asctime": "@timestamp", "levelname": "log_level"},
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    return handler


def _caller_location() -> str:
    # skip this helper and the Logger method that called it
    frame = inspect.currentframe()
    caller = frame.f_back.f_back if frame and frame.f_back else None
    if caller is None:
        return "unknown:0"
    return f"{caller.f_code.co_filename}:{caller.f_lineno}"


class Logger(logging.LoggerAdapter):
    """Process-wide adapter writing JSON records to stderr.

    Keyword arguments passed to the logging methods become fields of the
    JSON record, e.g. ``logger.info("Fetched", org_id="org-1")``. The level
    comes from the ``LOG_LEVEL`` environment variable.
    """

    _instance = None

    def __new__(cls) -> "Logger":
        if cls._instance is None:
            base = logging.getLogger(LOGGER_NAME)
            base.setLevel(_resolve_level(os.getenv("LOG_LEVEL")))
            base.addHandler(_json_handler())

            instance = super().__new__(cls)
            logging.LoggerAdapter.__init__(instance, base)
            cls._instance = instance
        return cls._instance

    def __init__(self) -> None:
        # configured once in __new__
        pass

    def error(self, msg: str, *args: tuple, **kwargs: dict) -> None:
        """Log at ERROR level, tagged with the caller's file and line."""
        self.log(logging.ERROR, msg, *args, file=_caller_location(), **kwargs)

    def exception(
        self, msg: str, *args: tuple, exc_info: bool = True, **kwargs: dict
    ) -> None:
        """Log at ERROR level with the active traceback and the caller's location."""
        self.log(
            logging.ERROR,
            msg,
            *args,
            exc_info=exc_info,
            file=_caller_location(),
            **kwargs,
        )

    def process(self, msg: str, kwargs: dict) -> tuple[str, dict]:
        logging_kwargs = {
            key: kwargs.pop(key) for key in _LOGGING_KWARGS if key in kwargs
        }
        if kwargs:
            logging_kwargs["extra"] = kwargs
        return msg, logging_kwargs


logger = Logger()
logger.debug(
    "Logging configured",
    level=logging.getLevelName(logger.logger.getEffectiveLevel()),
)
