"""Filesystem-backed notebook storage.

Layout under the root directory:

    <root>/<notebook>/<note>/note.md
    <root>/<notebook>/<note>/images/<file>
"""
from __future__ import annotations

from pathlib import Path

from onemd_editor.core.models import Note, Notebook
from onemd_editor.storage.assets import AssetStore
from onemd_editor.storage.demo import DemoSeeder
from onemd_editor.storage.notebooks import NotebookStore
from onemd_editor.storage.notes import NoteStore
from onemd_editor.storage.root import RootResolver


class NotebookStorage:
    """Single entry point for every storage operation the application calls."""

    def __init__(self, root_dir: Path | str | None = None):
        self.resolver = RootResolver(Path(root_dir) if root_dir is not None else None)
        self.notebooks = NotebookStore(self.resolver)
        self.notes = NoteStore()
        self.assets = AssetStore()
        self.demo = DemoSeeder(self.resolver)

    @property
    def root(self) -> Path:
        return self.resolver.resolve()

    def ensure_demo_data(self) -> None:
        self.demo.ensure_demo_data()

    def list_notebooks(self) -> list[Notebook]:
        return self.notebooks.list_notebooks()

    def create_notebook(self, name: str) -> Notebook:
        return self.notebooks.create_notebook(name)

    def list_notes(self, notebook_path: Path | str) -> list[Note]:
        return self.notes.list_notes(notebook_path)

    def create_note(self, notebook_path: Path | str, name: str) -> Note:
        return self.notes.create_note(notebook_path, name)

    def read_note(self, note_path: Path | str) -> str:
        return self.notes.read_note(note_path)

    def save_note(self, note_path: Path | str, content: str) -> None:
        self.notes.save_note(note_path, content)

    def save_image(self, note_path: Path | str, file_name: str, data: bytes) -> str:
        return self.assets.save_image(note_path, file_name, data)


__all__ = ["NotebookStorage",
           "RootResolver",
           "NotebookStore",
           "NoteStore",
           "AssetStore",
           "DemoSeeder"
           ]
