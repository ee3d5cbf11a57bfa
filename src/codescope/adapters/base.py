"""Language adapter interface and extension-based registry."""

from __future__ import annotations

from pathlib import PurePath
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Iterator

    from codescope.ir.models import Module

_EXTENSION_LANGUAGES = {
    "ts": "typescript",
    "mts": "typescript",
    "cts": "typescript",
    "tsx": "tsx",
    "js": "javascript",
    "jsx": "javascript",
    "mjs": "javascript",
    "cjs": "javascript",
}


class ParseError(Exception):
    """Raised when a grammar parser fails to produce a tree for a file."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class LanguageAdapter(Protocol):
    """Turns the source text of one file into a Module."""

    def match_extensions(self) -> frozenset[str]:
        """Extensions handled by this adapter, without the leading dot."""
        ...

    def parse(self, path: str, source: str) -> Module:
        """Parse one file.

        Raises:
            ParseError: If no syntax tree could be produced.
        """
        ...


def file_extension(path: str | PurePath) -> str:
    return PurePath(path).suffix.lstrip(".").lower()


def detect_language(path: str | PurePath) -> str | None:
    """Derive the language name from a file extension.

    Returns None for paths without an extension and ``"unknown"`` for
    unrecognized extensions.
    """
    ext = file_extension(path)
    if not ext:
        return None
    return _EXTENSION_LANGUAGES.get(ext, "unknown")


class AdapterRegistry:
    """Dispatches files to language adapters by extension.

    Later registrations win when two adapters claim the same extension.
    """

    def __init__(self) -> None:
        self._adapters: list[LanguageAdapter] = []
        self._by_extension: dict[str, LanguageAdapter] = {}

    def register(self, adapter: LanguageAdapter) -> None:
        self._adapters.append(adapter)
        for ext in adapter.match_extensions():
            self._by_extension[ext.lower()] = adapter

    def extensions(self) -> frozenset[str]:
        return frozenset(self._by_extension)

    def for_path(self, path: str | PurePath) -> LanguageAdapter | None:
        return self._by_extension.get(file_extension(path))

    def supports(self, path: str | PurePath) -> bool:
        return self.for_path(path) is not None

    def __iter__(self) -> Iterator[LanguageAdapter]:
        return iter(self._adapters)


__all__ = [
    "AdapterRegistry",
    "LanguageAdapter",
    "ParseError",
    "detect_language",
    "file_extension",
]
