"""Resolution of relative import specifiers to analyzed module paths."""

from __future__ import annotations

import posixpath
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Collection

RESOLVE_EXTENSIONS = (".ts", ".tsx", ".mts", ".cts", ".js", ".jsx", ".mjs", ".cjs")


def is_relative_specifier(specifier: str) -> bool:
    return specifier in {".", ".."} or specifier.startswith(("./", "../"))


def _candidates(base: str) -> list[str]:
    candidates = [base]
    candidates.extend(f"{base}{ext}" for ext in RESOLVE_EXTENSIONS)
    candidates.extend(posixpath.join(base, f"index{ext}") for ext in RESOLVE_EXTENSIONS)

    # `./util.js` may name the TypeScript source `./util.ts`.
    stem, ext = posixpath.splitext(base)
    if ext in RESOLVE_EXTENSIONS:
        candidates.extend(f"{stem}{other}" for other in RESOLVE_EXTENSIONS)
    return candidates


def resolve_import(
    source_path: str,
    specifier: str,
    known_paths: Collection[str],
) -> str | None:
    """Resolve an import specifier against the set of analyzed module paths.

    Only relative specifiers (``./x``, ``../y``) resolve; bare package names
    such as ``react`` stay unresolved.

    Args:
        source_path: Posix path of the importing module
        specifier: Raw import text with quotes stripped
        known_paths: Posix paths of all analyzed modules

    Returns:
        The matching module path, or None when nothing matches.

    Examples:
        >>> resolve_import("src/app.ts", "./util", {"src/util.ts"})
        'src/util.ts'
        >>> resolve_import("src/a/b.ts", "../index", {"src/index.ts"})
        'src/index.ts'
        >>> resolve_import("src/app.ts", "react", {"src/util.ts"}) is None
        True
    """
    if not is_relative_specifier(specifier):
        return None

    directory = posixpath.dirname(source_path)
    base = posixpath.normpath(posixpath.join(directory, specifier))

    for candidate in _candidates(base):
        if candidate in known_paths:
            return candidate
    return None


__all__ = ["RESOLVE_EXTENSIONS", "is_relative_specifier", "resolve_import"]
