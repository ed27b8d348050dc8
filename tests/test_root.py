from pathlib import Path

from onemd_editor.settings import ROOT_ENV_VAR
from onemd_editor.storage import root as root_mod
from onemd_editor.storage.root import RootResolver, platform_data_dir


def test_explicit_root_is_not_created_by_resolve(tmp_path):
    target = tmp_path / "nb"
    assert RootResolver(target).resolve() == target
    assert not target.exists()


def test_ensure_creates_and_is_idempotent(tmp_path):
    target = tmp_path / "a" / "b" / "nb"
    resolver = RootResolver(target)
    assert resolver.ensure() == target
    assert resolver.ensure() == target
    assert target.is_dir()


def test_default_root_ends_with_notebooks():
    assert RootResolver().resolve() == platform_data_dir() / "notebooks"


def test_env_override_read_on_every_call(tmp_path, monkeypatch):
    resolver = RootResolver()
    monkeypatch.setenv(ROOT_ENV_VAR, str(tmp_path / "one"))
    assert resolver.resolve() == tmp_path / "one"
    monkeypatch.setenv(ROOT_ENV_VAR, str(tmp_path / "two"))
    assert resolver.resolve() == tmp_path / "two"


def test_explicit_root_beats_env(tmp_path, monkeypatch):
    monkeypatch.setenv(ROOT_ENV_VAR, str(tmp_path / "env"))
    assert RootResolver(tmp_path / "explicit").resolve() == tmp_path / "explicit"


class _NoLocation:
    class StandardLocation:
        GenericDataLocation = 0

    @staticmethod
    def writableLocation(_location):
        return ""


def test_falls_back_to_cwd(tmp_path, monkeypatch):
    monkeypatch.setattr(root_mod, "QStandardPaths", _NoLocation)
    monkeypatch.chdir(tmp_path)
    assert platform_data_dir() == Path.cwd()
    assert RootResolver().resolve() == Path.cwd() / "notebooks"


def test_recovery_dir_is_sibling_of_root(tmp_path):
    assert RootResolver(tmp_path / "notebooks").recovery_dir() == tmp_path / "recovery"
