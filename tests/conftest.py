import sys
import os
import logging

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import pytest

from onemd_editor.logging_setup import app_handlers
from onemd_editor.settings import APP_NAME, LOG_DIR_ENV_VAR, ROOT_ENV_VAR
from onemd_editor.storage import NotebookStorage


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    monkeypatch.setenv(LOG_DIR_ENV_VAR, str(tmp_path / "logs"))
    monkeypatch.delenv(ROOT_ENV_VAR, raising=False)
    yield
    logger = logging.getLogger(APP_NAME)
    for handler in app_handlers(logger):
        logger.removeHandler(handler)
        handler.close()


@pytest.fixture
def root(tmp_path):
    return tmp_path / "notebooks"


@pytest.fixture
def storage(root):
    return NotebookStorage(root)


@pytest.fixture
def notebook(storage):
    return storage.create_notebook("Work")


@pytest.fixture
def note(storage, notebook):
    return storage.create_note(notebook.path, "Ideas")
