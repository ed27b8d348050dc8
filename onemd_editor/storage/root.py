from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from PySide6.QtCore import QStandardPaths

from onemd_editor.settings import APP_NAME, NOTEBOOKS_DIRNAME, RECOVERY_DIRNAME, ROOT_ENV_VAR
from onemd_editor.storage.filesystem import ensure_dir


def platform_data_dir() -> Path:
    """
    Per-OS application data directory (e.g. ~/.local/share/onemd-editor).
    Falls back to the current working directory when Qt reports none.
    """
    base = QStandardPaths.writableLocation(QStandardPaths.StandardLocation.GenericDataLocation)
    if not base:
        return Path.cwd()
    return Path(base) / APP_NAME


@dataclass(frozen=True)
class RootResolver:
    """
    Locates the directory that holds every notebook.

    Nothing is cached: each call re-reads the override and the platform
    location, so a relocated data directory is picked up on the next call.
    """

    root_dir: Path | None = None

    def resolve(self) -> Path:
        if self.root_dir is not None:
            return Path(self.root_dir).absolute()
        override = os.environ.get(ROOT_ENV_VAR, "").strip()
        if override:
            return Path(override).absolute()
        return platform_data_dir() / NOTEBOOKS_DIRNAME

    def ensure(self) -> Path:
        return ensure_dir(self.resolve(), action="create notebooks root")

    def recovery_dir(self) -> Path:
        return self.resolve().parent / RECOVERY_DIRNAME
