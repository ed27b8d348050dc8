"""Errors raised by the notebook storage.

Every filesystem failure is converted where it happens into a StorageError
that keeps the kind, the path involved and the underlying cause.
"""
from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any


class ErrorKind(Enum):
    IO_FAILURE = "io_failure"
    NOT_FOUND = "not_found"
    INVALID_INPUT = "invalid_input"


class StorageError(Exception):
    """Base class for storage errors.

    Attributes:
        message: Human-readable error message
        kind: Machine-readable error kind
        path: Filesystem path the operation was working on, if any
        cause: The original exception, if any
    """

    kind = ErrorKind.IO_FAILURE

    def __init__(
        self,
        message: str,
        *,
        path: Path | str | None = None,
        cause: BaseException | None = None,
    ):
        self.message = message
        self.path = str(path) if path is not None else None
        self.cause = cause
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "message": self.message,
            "path": self.path,
            "cause": repr(self.cause) if self.cause is not None else None,
        }


class IoFailure(StorageError):
    """A directory or file could not be read, written or created."""

    kind = ErrorKind.IO_FAILURE


class NotFound(IoFailure):
    """An expected file or directory is absent."""

    kind = ErrorKind.NOT_FOUND


class InvalidInput(StorageError):
    kind = ErrorKind.INVALID_INPUT
