# onemd_editor/core/filenames.py

from __future__ import annotations

import re
from pathlib import PurePosixPath

from onemd_editor.settings import DEFAULT_IMAGE_NAME

SEPARATORS_RE = re.compile(r"[/\\]")

# Names that would resolve to the parent directory itself (or above it).
UNUSABLE_NAMES = {"", ".", ".."}


def sanitize_name(name: str) -> str:
    """
    Turn a human-entered notebook / note title into one directory segment.

    Only trims surrounding whitespace and replaces both slash styles with "_".
    Empty, unicode and OS-reserved results are passed through unchanged.
    """
    return SEPARATORS_RE.sub("_", str(name).strip())


def is_usable_name(safe_name: str) -> bool:
    return safe_name not in UNUSABLE_NAMES


def safe_asset_name(file_name: str | None) -> str:
    """
    Keep only the final path component of a caller-supplied file name.

    Both slash styles count as separators. Falls back to DEFAULT_IMAGE_NAME
    when nothing usable remains ("", "..", "dir/", ...).
    """
    if not file_name:
        return DEFAULT_IMAGE_NAME
    name = PurePosixPath(str(file_name).replace("\\", "/")).name
    if name in UNUSABLE_NAMES:
        return DEFAULT_IMAGE_NAME
    return name
