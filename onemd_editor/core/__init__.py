from .errors import ErrorKind, InvalidInput, IoFailure, NotFound, StorageError
from .filenames import safe_asset_name, sanitize_name
from .links import to_display_markdown, to_relative_markdown
from .models import Note, Notebook

__all__ = ["ErrorKind",
           "InvalidInput",
           "IoFailure",
           "NotFound",
           "StorageError",
           "safe_asset_name",
           "sanitize_name",
           "to_display_markdown",
           "to_relative_markdown",
           "Note",
           "Notebook"
           ]
