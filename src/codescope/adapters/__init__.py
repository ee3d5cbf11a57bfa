"""Language adapters turning source files into Module IR."""

from codescope.adapters.assemble import assemble_module
from codescope.adapters.base import (
    AdapterRegistry,
    LanguageAdapter,
    ParseError,
    detect_language,
)
from codescope.adapters.typescript import TypeScriptAdapter, default_adapters

__all__ = [
    "AdapterRegistry",
    "LanguageAdapter",
    "ParseError",
    "TypeScriptAdapter",
    "assemble_module",
    "default_adapters",
    "detect_language",
]
