from __future__ import annotations

import re
from pathlib import Path
from urllib.parse import unquote

IMAGE_LINK_RE = re.compile(r"!\[(.*?)\]\((.*?)\)")

_EXTERNAL_PREFIXES = ("http", "file:")


def _normalize(path: str) -> str:
    return path.replace("\\", "/")


def _with_slash(path: str) -> str:
    path = _normalize(path)
    return path if path.endswith("/") else f"{path}/"


def to_display_markdown(markdown_text: str, note_path: Path | str) -> str:
    """
    Point relative image links (images/foo.png) at absolute file:// URIs
    inside the note directory, so a viewer outside the note folder can load them.
    """
    note_dir = Path(note_path).absolute()

    def repl(m: re.Match) -> str:
        alt, src = m.group(1), m.group(2)
        if src.startswith(_EXTERNAL_PREFIXES):
            return m.group(0)
        target = note_dir.joinpath(*[p for p in unquote(_normalize(src)).split("/") if p])
        return f"![{alt}]({target.as_uri()})"

    return IMAGE_LINK_RE.sub(repl, markdown_text or "")


def to_relative_markdown(markdown_text: str, note_path: Path | str) -> str:
    """Inverse of to_display_markdown: strip the note directory prefix again."""
    note_dir = Path(note_path).absolute()
    uri_base = _with_slash(note_dir.as_uri())
    plain_base = _with_slash(str(note_dir))

    def repl(m: re.Match) -> str:
        alt, src = m.group(1), m.group(2)
        normalized = _normalize(src)
        if normalized.startswith(uri_base):
            src = normalized[len(uri_base):]
        elif normalized.startswith(plain_base):
            src = normalized[len(plain_base):]
        return f"![{alt}]({src})"

    return IMAGE_LINK_RE.sub(repl, markdown_text or "")
