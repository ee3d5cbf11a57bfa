"""Identity-keyed cache of assembled modules."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from codescope.ir.models import Module


@dataclass(frozen=True)
class FileKey:
    """Content identity of a file: path, size and modification time."""

    path: str
    size: int
    mtime_ns: int

    @classmethod
    def from_path(cls, path: Path) -> FileKey:
        """Build a key from file metadata.

        Raises:
            OSError: If the file cannot be stat'ed.
        """
        stat = path.stat()
        return cls(path=str(path), size=stat.st_size, mtime_ns=stat.st_mtime_ns)

    def digest(self) -> str:
        payload = f"{self.path}:{self.size}:{self.mtime_ns}"
        return hashlib.sha256(payload.encode("utf-8")).hexdigest()


class AnalysisCache:
    """Flat in-memory mapping of key digest -> Module.

    Eviction is left to the owner; the cache never expires entries itself.
    """

    def __init__(self) -> None:
        self._entries: dict[str, Module] = {}

    def get(self, digest: str) -> Module | None:
        return self._entries.get(digest)

    def insert(self, digest: str, module: Module) -> None:
        self._entries[digest] = module

    def contains(self, digest: str) -> bool:
        return digest in self._entries

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)


__all__ = ["AnalysisCache", "FileKey"]
