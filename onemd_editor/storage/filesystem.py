# onemd_editor/storage/filesystem.py

from __future__ import annotations

import os
import uuid
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import Iterator

from onemd_editor.core.errors import InvalidInput, IoFailure, NotFound
from onemd_editor.logging_setup import log

# ───────────────────────── error translation ─────────────────────────


@contextmanager
def translate_os_errors(action: str, path: Path) -> Iterator[None]:
    """
    Convert OSError, UTF-8 decode errors and unusable paths (NUL bytes)
    raised inside the block into a StorageError
    with a readable message, the path and the original cause.
    """
    try:
        yield
    except FileNotFoundError as exc:
        log.error("%s failed: not found path=%s", action, path)
        raise NotFound(f"{action} failed: {path} does not exist", path=path, cause=exc) from exc
    except OSError as exc:
        log.error("%s failed: path=%s err=%s", action, path, exc)
        reason = exc.strerror or str(exc)
        raise IoFailure(f"{action} failed for {path}: {reason}", path=path, cause=exc) from exc
    except UnicodeDecodeError as exc:
        log.error("%s failed: not UTF-8 path=%s", action, path)
        raise IoFailure(f"{action} failed for {path}: not valid UTF-8 text", path=path, cause=exc) from exc
    except ValueError as exc:
        # pathlib rejects embedded NUL bytes before any syscall
        log.error("%s failed: unusable path=%r err=%s", action, str(path), exc)
        raise InvalidInput(f"{action} failed for {str(path)!r}: {exc}", path=path, cause=exc) from exc


# ───────────────────────── public API ─────────────────────────


def ensure_dir(path: Path, *, action: str = "create directory") -> Path:
    """mkdir -p; an already existing directory is not an error."""
    path = Path(path)
    with translate_os_errors(action, path):
        path.mkdir(parents=True, exist_ok=True)
    return path


def list_child_dirs(path: Path, *, action: str = "list directory") -> list[Path]:
    """
    Immediate subdirectories of `path`, sorted by name (code point order,
    which matches UTF-8 byte order). Files and symlinks are skipped.
    """
    path = Path(path)
    with translate_os_errors(action, path):
        with os.scandir(path) as it:
            names = [e.name for e in it if e.is_dir(follow_symlinks=False)]
    return [path / name for name in sorted(names)]


def read_text(path: Path, *, action: str = "read file") -> str:
    path = Path(path)
    with translate_os_errors(action, path):
        # bytes + decode: no newline translation, content comes back verbatim
        return path.read_bytes().decode("utf-8")


def atomic_write_bytes(path: Path, data: bytes) -> None:
    """
    Atomic-ish file write:
    - write to temp file in same directory
    - fsync
    - replace()

    The parent directory must already exist.
    """
    path = Path(path)
    tmp_path = path.parent / f".{path.name}.tmp-{uuid.uuid4().hex}"

    f = None
    try:
        f = open(tmp_path, "wb")
        f.write(data)
        f.flush()
        os.fsync(f.fileno())
        f.close()
        f = None

        tmp_path.replace(path)

    finally:
        if f is not None:
            f.close()
        try:
            tmp_path.unlink(missing_ok=True)
        except OSError:
            log.warning("Failed to remove temp file %s", tmp_path)


def write_bytes(path: Path, data: bytes, *, action: str = "write file") -> None:
    path = Path(path)
    with translate_os_errors(action, path):
        atomic_write_bytes(path, bytes(data))


def write_text(path: Path, text: str, *, action: str = "write file") -> None:
    write_bytes(path, text.encode("utf-8"), action=action)


def write_if_absent(path: Path, data: bytes, *, action: str = "write file") -> bool:
    """Write `data` only when nothing exists at `path`. Returns True if written."""
    path = Path(path)
    if path.exists():
        return False
    write_bytes(path, data, action=action)
    return True


def write_recovery_copy(recovery_dir: Path, note_path: Path, text: str) -> Path:
    """
    Best-effort emergency save when normal save fails.

    Writes a timestamped copy into `recovery_dir`, named after the note directory.
    """
    note_path = Path(note_path)
    stem = note_path.name or "Untitled"
    ts = datetime.now().strftime("%Y%m%d-%H%M%S")

    recovery_path = ensure_dir(recovery_dir) / f"{stem}.recovery.{ts}.md"
    write_text(recovery_path, text, action="write recovery copy")
    return recovery_path
