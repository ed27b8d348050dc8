from .core.errors import ErrorKind, InvalidInput, IoFailure, NotFound, StorageError
from .core.models import Note, Notebook
from .storage import NotebookStorage

__version__ = "0.1.0"

__all__ = ["ErrorKind",
           "InvalidInput",
           "IoFailure",
           "NotFound",
           "StorageError",
           "Note",
           "Notebook",
           "NotebookStorage"
           ]
