from __future__ import annotations

import logging
import sys
import uuid
from logging.handlers import RotatingFileHandler
from pathlib import Path

from onemd_editor.settings import APP_NAME, LOG_FILENAME, log_dir

SESSION_ID = uuid.uuid4().hex[:8]

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s | sid=%(session)s"

# Set on handlers added by setup_logging; other handlers on the logger are ignored.
_OWNED_ATTR = "_onemd_editor_owned"


class EnsureSessionFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "session"):
            record.session = SESSION_ID
        return True


class SessionAdapter(logging.LoggerAdapter):
    def process(self, msg, kwargs):
        extra = kwargs.setdefault("extra", {})
        extra.setdefault("session", SESSION_ID)
        return msg, kwargs


def app_handlers(logger: logging.Logger) -> list[logging.Handler]:
    return [h for h in logger.handlers if getattr(h, _OWNED_ATTR, False)]


def setup_logging(*, verbose: bool = False, directory: Path | None = None) -> logging.Logger:
    """
    Attach file + console handlers to the application logger.

    Idempotent: a second call returns the already configured logger.
    The console handler writes to stderr because stdout carries command output.
    """
    logger = logging.getLogger(APP_NAME)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    if app_handlers(logger):
        return logger

    fmt = logging.Formatter(LOG_FORMAT)
    session_filter = EnsureSessionFilter()

    target_dir = Path(directory) if directory is not None else log_dir()
    target_dir.mkdir(parents=True, exist_ok=True)
    log_path = target_dir / LOG_FILENAME

    fh = RotatingFileHandler(
        log_path, maxBytes=2 * 1024 * 1024, backupCount=5, encoding="utf-8"
    )
    fh.setLevel(logging.DEBUG)
    fh.setFormatter(fmt)
    fh.addFilter(session_filter)

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(logging.INFO if verbose else logging.WARNING)
    ch.setFormatter(fmt)
    ch.addFilter(session_filter)

    for handler in (fh, ch):
        setattr(handler, _OWNED_ATTR, True)
        logger.addHandler(handler)

    logger.info("Logging initialized. log_file=%s", log_path)
    return logger


log = SessionAdapter(logging.getLogger(APP_NAME), {})


def install_global_exception_hooks() -> None:
    def _excepthook(exc_type, exc, tb):
        log.critical("Uncaught exception", exc_info=(exc_type, exc, tb))
        sys.__excepthook__(exc_type, exc, tb)

    sys.excepthook = _excepthook
