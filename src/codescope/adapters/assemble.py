"""Module assembly from classifier, extractor and scorer output."""

from __future__ import annotations

from typing import TYPE_CHECKING

from codescope.adapters.base import detect_language
from codescope.ir.models import Module
from codescope.parse.complexity import module_composite_score
from codescope.parse.lines import classify_lines
from codescope.parse.treesitter_imports import extract_imports
from codescope.parse.treesitter_symbols import extract_symbols

if TYPE_CHECKING:
    from tree_sitter import Node


def assemble_module(
    path: str,
    source: str,
    root: Node,
    *,
    language: str | None = None,
) -> Module:
    """Combine line counts, symbols, imports and scores into one Module.

    Args:
        path: Module path recorded in the IR
        source: Original source text
        root: Root node of the parsed syntax tree
        language: Language name; derived from the extension when omitted

    Returns:
        A Module with empty metrics and incoming edges.
    """
    lines = classify_lines(source)
    symbols = extract_symbols(root)
    outgoing = extract_imports(root)

    return Module(
        path=path,
        language=language if language is not None else detect_language(path),
        loc=lines.code,
        comment_lines=lines.comment,
        blank_lines=lines.blank,
        composite_score=module_composite_score(lines.code, len(symbols)),
        symbols=symbols,
        outgoing=outgoing,
    )


__all__ = ["assemble_module"]
