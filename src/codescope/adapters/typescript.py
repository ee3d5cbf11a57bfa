"""TypeScript, TSX and JavaScript adapter backed by Tree-sitter grammars."""

from __future__ import annotations

import logging

from codescope.adapters.assemble import assemble_module
from codescope.adapters.base import AdapterRegistry, ParseError
from codescope.ir.models import Module
from codescope.parse.treesitter_symbols import Dialect, get_parser

log = logging.getLogger(__name__)

_DIALECT_EXTENSIONS: dict[Dialect, frozenset[str]] = {
    "typescript": frozenset({"ts", "mts", "cts"}),
    "tsx": frozenset({"tsx"}),
    "javascript": frozenset({"js", "jsx", "mjs", "cjs"}),
}


class TypeScriptAdapter:
    """Parses one dialect of the TypeScript/JavaScript family."""

    def __init__(self, dialect: Dialect = "typescript") -> None:
        self.dialect = dialect

    @classmethod
    def typescript(cls) -> TypeScriptAdapter:
        return cls("typescript")

    @classmethod
    def tsx(cls) -> TypeScriptAdapter:
        return cls("tsx")

    @classmethod
    def javascript(cls) -> TypeScriptAdapter:
        return cls("javascript")

    def match_extensions(self) -> frozenset[str]:
        return _DIALECT_EXTENSIONS[self.dialect]

    def parse(self, path: str, source: str) -> Module:
        """Parse source text into a Module.

        Syntax errors inside an otherwise parseable file do not fail the
        parse; the grammar recovers and extraction works on what it produced.

        Raises:
            ParseError: If the parser could not produce a tree.
        """
        parser = get_parser(self.dialect)
        try:
            tree = parser.parse(source.encode("utf8"))
        except (ValueError, TypeError, RuntimeError) as exc:
            raise ParseError(path, str(exc)) from exc

        if tree is None or tree.root_node is None:
            raise ParseError(path, "parser produced no syntax tree")

        if tree.root_node.has_error:
            log.debug("Syntax errors in %s; extracting from recovered tree", path)

        return assemble_module(path, source, tree.root_node)


def default_adapters() -> AdapterRegistry:
    """Registry with the TypeScript, TSX and JavaScript adapters."""
    registry = AdapterRegistry()
    registry.register(TypeScriptAdapter.typescript())
    registry.register(TypeScriptAdapter.tsx())
    registry.register(TypeScriptAdapter.javascript())
    return registry


__all__ = ["TypeScriptAdapter", "default_adapters"]
