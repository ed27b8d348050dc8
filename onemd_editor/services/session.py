from __future__ import annotations

from pathlib import Path

from onemd_editor.core.errors import StorageError
from onemd_editor.core.links import to_display_markdown, to_relative_markdown
from onemd_editor.logging_setup import log
from onemd_editor.storage import NotebookStorage
from onemd_editor.storage.filesystem import write_recovery_copy


class NoteSession:
    """
    Keeps the note that is open in the editor and its in-memory markdown.

    The editor works on display markdown (image links as file:// URIs);
    what reaches note.md is always the relative form.
    """

    def __init__(self, storage: NotebookStorage):
        self._storage = storage
        self._path: Path | None = None
        self._content = ""

    @property
    def path(self) -> Path | None:
        return self._path

    @property
    def content(self) -> str:
        return self._content

    def open(self, note_path: Path | str) -> str:
        text = self._storage.read_note(note_path)
        self._path = Path(note_path)
        self._content = to_display_markdown(text, self._path)
        return self._content

    def update(self, markdown_text: str) -> None:
        self._content = markdown_text

    def flush(self) -> None:
        if self._path is None:
            return
        stored = to_relative_markdown(self._content, self._path)
        try:
            self._storage.save_note(self._path, stored)
        except StorageError:
            try:
                rec = write_recovery_copy(self._storage.resolver.recovery_dir(), self._path, stored)
                log.warning("Save failed, recovery copy written: %s", rec)
            except StorageError:
                log.exception("Recovery copy failed for %s", self._path)
            raise

    def close(self) -> None:
        self._path = None
        self._content = ""
