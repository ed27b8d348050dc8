from __future__ import annotations

from dataclasses import asdict, dataclass
from pathlib import Path


@dataclass(frozen=True)
class Notebook:
    name: str
    path: str

    @classmethod
    def from_path(cls, path: Path) -> "Notebook":
        path = Path(path)
        return cls(name=path.name, path=str(path))

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


@dataclass(frozen=True)
class Note:
    name: str
    path: str

    @classmethod
    def from_path(cls, path: Path) -> "Note":
        path = Path(path)
        return cls(name=path.name, path=str(path))

    def to_dict(self) -> dict[str, str]:
        return asdict(self)
