from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from onemd_editor.core.errors import InvalidInput
from onemd_editor.core.filenames import is_usable_name, sanitize_name
from onemd_editor.core.models import Note
from onemd_editor.logging_setup import log
from onemd_editor.settings import DEFAULT_NOTE_TEXT, NOTE_FILENAME
from onemd_editor.storage.filesystem import (
    ensure_dir,
    list_child_dirs,
    read_text,
    write_if_absent,
    write_text,
)


def note_file(note_path: Path | str) -> Path:
    return Path(note_path) / NOTE_FILENAME


@dataclass(frozen=True)
class NoteStore:
    """
    Notes are the immediate subdirectories of a notebook; each one holds note.md.

    Paths are taken as given: callers pass back Notebook.path / Note.path
    values obtained from earlier calls.
    """

    default_text: str = DEFAULT_NOTE_TEXT

    def list_notes(self, notebook_path: Path | str) -> list[Note]:
        log.info("list_notes notebook=%s", notebook_path)
        return [Note.from_path(p) for p in list_child_dirs(Path(notebook_path), action="list notes")]

    def create_note(self, notebook_path: Path | str, name: str) -> Note:
        log.info("create_note name=%r notebook=%s", name, notebook_path)
        safe = sanitize_name(name)
        if not is_usable_name(safe):
            raise InvalidInput(f"Invalid note name: {name!r}", path=notebook_path)
        note_dir = ensure_dir(Path(notebook_path) / safe, action="create note")
        # An existing note.md is never overwritten.
        write_if_absent(note_file(note_dir), self.default_text.encode("utf-8"), action="create note")
        return Note.from_path(note_dir)

    def read_note(self, note_path: Path | str) -> str:
        log.info("read_note note=%s", note_path)
        return read_text(note_file(note_path), action="read note")

    def save_note(self, note_path: Path | str, content: str) -> None:
        log.info("save_note note=%s chars=%d", note_path, len(content))
        write_text(note_file(note_path), content, action="save note")
