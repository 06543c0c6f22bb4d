"""
Logging setup shared by the two kiosk processes.

The API server and the touchscreen UI run side by side on the same box, so
each one names itself and, when LOG_FILE is set, writes next to it
(``kiosk.log`` -> ``kiosk-api.log`` / ``kiosk-ui.log``). Production files are
JSON lines for the log shipper; the console stays human readable.
"""

import logging
import logging.config
import sys
from pathlib import Path
from typing import Optional

from config.config import settings

CONSOLE_FORMAT = "%(asctime)s - %(component)s - %(name)s - %(levelname)s - %(message)s"
JSON_FORMAT = "%(asctime)s %(component)s %(name)s %(levelname)s %(message)s"

# Third-party loggers that flood DEBUG while scanning sidecars or calling providers
QUIET_LOGGERS = ("PIL", "docx", "httpx", "httpcore", "urllib3", "google", "openai")


class ComponentFilter(logging.Filter):
    """Stamps every record with the process it came from."""

    def __init__(self, component: str):
        super().__init__()
        self.component = component

    def filter(self, record: logging.LogRecord) -> bool:
        record.component = self.component
        return True


def component_log_file(log_file: Optional[str], component: str) -> Optional[str]:
    if not log_file:
        return None
    path = Path(log_file)
    return str(path.with_name(f"{path.stem}-{component}{path.suffix or '.log'}"))


def setup_logging(component: str = "api", log_file: Optional[str] = None, log_level: Optional[str] = None) -> None:
    """
    Configure the root logger for one process.

    Args:
        component: "api" or "ui"; shows up in every record and in the file name.
        log_file: Base log file; defaults to settings.LOG_FILE. None logs to stderr only.
        log_level: Defaults to settings.LOG_LEVEL.
    """
    log_level = (log_level or settings.LOG_LEVEL).upper()
    log_file = component_log_file(log_file or settings.LOG_FILE, component)

    handlers = {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "default",
            "filters": ["component"],
            "stream": sys.stderr,
            "level": log_level,
        },
    }
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "formatter": "json" if settings.ENVIRONMENT == "production" else "default",
            "filters": ["component"],
            "filename": log_file,
            "maxBytes": 5 * 1024 * 1024,
            "backupCount": 3,
            "level": log_level,
            "encoding": "utf-8",
        }

    loggers = {
        "": {"handlers": list(handlers), "level": log_level},
    }
    for name in QUIET_LOGGERS:
        loggers[name] = {"level": "WARNING"}
    if component == "api":
        loggers["uvicorn.error"] = {"handlers": list(handlers), "level": "INFO", "propagate": False}
        loggers["uvicorn.access"] = {"handlers": list(handlers), "level": "WARNING", "propagate": False}

    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {
            "component": {"()": ComponentFilter, "component": component},
        },
        "formatters": {
            "default": {"format": CONSOLE_FORMAT, "datefmt": "%Y-%m-%d %H:%M:%S"},
            "json": {"()": "pythonjsonlogger.jsonlogger.JsonFormatter", "format": JSON_FORMAT},
        },
        "handlers": handlers,
        "loggers": loggers,
    })
    logging.getLogger(__name__).debug(f"Logging ready for {component} at {log_level}")
