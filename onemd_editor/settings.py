from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from PySide6.QtCore import QSettings

APP_NAME = "onemd-editor"

ROOT_ENV_VAR = "ONEMD_EDITOR_ROOT"
LOG_DIR_ENV_VAR = "ONEMD_EDITOR_LOG_DIR"

LOG_DIR = Path.home() / f".{APP_NAME}" / "logs"
LOG_FILENAME = f"{APP_NAME}.log"

# ───────────────────────── on-disk layout ─────────────────────────

NOTEBOOKS_DIRNAME = "notebooks"
RECOVERY_DIRNAME = "recovery"
NOTE_FILENAME = "note.md"
IMAGES_DIRNAME = "images"
DEFAULT_IMAGE_NAME = "image.png"

DEFAULT_NOTE_TEXT = "# New Note\n\nStart writing here."


@dataclass(frozen=True)
class SettingsKeys:
    STORAGE_ROOT: str = "storage/root_dir"


def log_dir() -> Path:
    override = os.environ.get(LOG_DIR_ENV_VAR, "").strip()
    return Path(override) if override else LOG_DIR


def open_settings() -> QSettings:
    # QSettings picks the right per-OS location by itself.
    return QSettings(APP_NAME, APP_NAME)


def get_str(settings: QSettings, key: str, default: str) -> str:
    try:
        val = settings.value(key, default)
        return str(val) if val is not None else default
    except Exception:
        return default
