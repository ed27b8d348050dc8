from __future__ import annotations

from dataclasses import dataclass, field

from onemd_editor.core.errors import InvalidInput
from onemd_editor.core.filenames import is_usable_name, sanitize_name
from onemd_editor.core.models import Notebook
from onemd_editor.logging_setup import log
from onemd_editor.storage.filesystem import ensure_dir, list_child_dirs
from onemd_editor.storage.root import RootResolver


@dataclass(frozen=True)
class NotebookStore:
    """Notebooks are the immediate subdirectories of the root."""

    resolver: RootResolver = field(default_factory=RootResolver)

    def list_notebooks(self) -> list[Notebook]:
        root = self.resolver.ensure()
        log.info("list_notebooks root=%s", root)
        return [Notebook.from_path(p) for p in list_child_dirs(root, action="list notebooks")]

    def create_notebook(self, name: str) -> Notebook:
        root = self.resolver.ensure()
        log.info("create_notebook name=%r root=%s", name, root)
        safe = sanitize_name(name)
        if not is_usable_name(safe):
            raise InvalidInput(f"Invalid notebook name: {name!r}", path=root)
        # Creating an existing notebook again returns the same notebook.
        path = ensure_dir(root / safe, action="create notebook")
        return Notebook.from_path(path)
