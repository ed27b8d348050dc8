from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from onemd_editor.core.filenames import safe_asset_name
from onemd_editor.logging_setup import log
from onemd_editor.settings import IMAGES_DIRNAME
from onemd_editor.storage.filesystem import ensure_dir, write_bytes


@dataclass(frozen=True)
class AssetStore:
    def images_dir(self, note_path: Path | str) -> Path:
        return Path(note_path) / IMAGES_DIRNAME

    def save_image(self, note_path: Path | str, file_name: str, data: bytes) -> str:
        """
        Store `data` as images/<name> inside the note and return that relative
        reference for embedding in note.md. Same name means overwrite.
        """
        log.info("save_image file=%r note=%s bytes=%d", file_name, note_path, len(data))
        target_dir = ensure_dir(self.images_dir(note_path), action="create images folder")
        safe = safe_asset_name(file_name)
        write_bytes(target_dir / safe, data, action="save image")
        return f"{IMAGES_DIRNAME}/{safe}"
