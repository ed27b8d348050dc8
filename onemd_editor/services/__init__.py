from .markdown_renderer import MarkdownRenderer
from .session import NoteSession

__all__ = ["MarkdownRenderer", "NoteSession"]
