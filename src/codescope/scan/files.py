"""Source file discovery for TypeScript and JavaScript trees."""

from __future__ import annotations

import os
from contextlib import suppress
from dataclasses import dataclass
from fnmatch import fnmatch
from functools import partial
from pathlib import Path
from typing import TYPE_CHECKING, cast

from gitignore_parser import parse_gitignore  # type: ignore[import-untyped]

if TYPE_CHECKING:
    from collections.abc import Callable, Collection, Iterator

DEFAULT_SKIP_DIRS = frozenset({"node_modules", ".git", "dist", "build"})

# Declaration files carry no implementation.
_DECLARATION_SUFFIXES = (".d.ts", ".d.mts", ".d.cts")


@dataclass(frozen=True)
class _SourceFilter:
    """Per-file acceptance test applied during the walk."""

    extensions: frozenset[str]
    gitignore_matches: Callable[[str], bool] | None
    include_patterns: tuple[str, ...]
    exclude_patterns: tuple[str, ...]

    def accepts(self, path: Path, rel_path: str) -> bool:
        if path.suffix.lstrip(".").lower() not in self.extensions:
            return False
        if path.name.endswith(_DECLARATION_SUFFIXES):
            return False
        if path.is_symlink() or not path.is_file():
            return False
        if self.gitignore_matches is not None and self.gitignore_matches(str(path)):
            return False
        if self.include_patterns and not any(
            fnmatch(rel_path, pat) for pat in self.include_patterns
        ):
            return False
        return not any(fnmatch(rel_path, pat) for pat in self.exclude_patterns)


def _gitignore_files(root: Path, *, nested: bool) -> list[Path]:
    """Regular .gitignore files that apply below root, shallowest first.

    Without ``nested`` only the root file is considered. Symlinked files are
    skipped in both modes.
    """
    candidates = [root / ".gitignore"]
    if nested:
        candidates.extend(root.rglob(".gitignore"))
    found = {p for p in candidates if p.is_file() and not p.is_symlink()}
    return sorted(found, key=lambda p: (len(p.relative_to(root).parts), p.as_posix()))


def _any_gitignore_matches(
    matchers: tuple[Callable[[str], bool], ...], path_str: str
) -> bool:
    for matcher in matchers:
        # A nested matcher rejects paths outside its own directory.
        with suppress(ValueError):
            if matcher(path_str):
                return True
    return False


def _build_gitignore_matcher(
    root: Path,
    *,
    nested_gitignore: bool,
) -> Callable[[str], bool] | None:
    """Compose the applicable .gitignore files into one path predicate."""
    matchers = tuple(
        cast("Callable[[str], bool]", parse_gitignore(path))
        for path in _gitignore_files(root, nested=nested_gitignore)
    )
    if not matchers:
        return None
    return partial(_any_gitignore_matches, matchers)


def _walk(root: Path, skip_dirs: Collection[str]) -> Iterator[Path]:
    """Yield regular entries below root without entering skipped or linked dirs."""
    for dirpath, dirnames, filenames in os.walk(root, followlinks=False):
        current = Path(dirpath)
        dirnames[:] = [
            d
            for d in dirnames
            if d not in skip_dirs and not (current / d).is_symlink()
        ]
        for filename in filenames:
            yield current / filename


def find_source_files(
    directory: Path,
    extensions: Collection[str],
    *,
    include_patterns: list[str] | None = None,
    exclude_patterns: list[str] | None = None,
    nested_gitignore: bool = False,
    skip_dirs: Collection[str] = DEFAULT_SKIP_DIRS,
) -> Iterator[Path]:
    """Find source files with the given extensions, respecting .gitignore.

    Skipped directories (``node_modules`` and build output by default) and
    symlinked directories are never entered; symlinked files and TypeScript
    declaration files are ignored.

    Args:
        directory: Directory to search
        extensions: File extensions to match, without the leading dot
        include_patterns: Optional fnmatch patterns over posix relative
            paths; when given, a file must match at least one
        exclude_patterns: Optional fnmatch patterns; matching files are dropped
        nested_gitignore: Also honor .gitignore files below the root
        skip_dirs: Directory names never descended into

    Yields:
        Matching files sorted by relative posix path.
    """
    source_filter = _SourceFilter(
        extensions=frozenset(ext.lower() for ext in extensions),
        gitignore_matches=_build_gitignore_matcher(
            directory, nested_gitignore=nested_gitignore
        ),
        include_patterns=tuple(include_patterns or ()),
        exclude_patterns=tuple(exclude_patterns or ()),
    )

    matched: list[tuple[str, Path]] = []
    for path in _walk(directory, skip_dirs):
        rel_path = path.relative_to(directory).as_posix()
        if source_filter.accepts(path, rel_path):
            matched.append((rel_path, path))

    matched.sort()
    for _, path in matched:
        yield path


__all__ = ["DEFAULT_SKIP_DIRS", "find_source_files"]
