"""JSON serialization for Module IR records."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import orjson

from codescope.ir.models import Module

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path


def module_to_dict(module: Module) -> dict[str, Any]:
    """Dump a module, omitting absent optional fields.

    Collections are always present, even when empty.
    """
    return module.model_dump(mode="json", exclude_none=True)


def module_to_json(module: Module, *, indent: bool = False) -> bytes:
    opts = orjson.OPT_SORT_KEYS
    if indent:
        opts |= orjson.OPT_INDENT_2
    return orjson.dumps(module_to_dict(module), option=opts)


def module_from_json(data: bytes | str) -> Module:
    return Module.model_validate(orjson.loads(data))


def write_modules_jsonl(path: Path, modules: Iterable[Module]) -> None:
    with path.open("wb") as f:
        for module in modules:
            f.write(module_to_json(module))
            f.write(b"\n")


def load_modules_jsonl(path: Path) -> list[Module]:
    """Load modules from a JSONL file, skipping blank lines."""
    modules: list[Module] = []
    with path.open("rb") as handle:
        for line in handle:
            line = line.strip()
            if line:
                modules.append(module_from_json(line))
    return modules


__all__ = [
    "load_modules_jsonl",
    "module_from_json",
    "module_to_dict",
    "module_to_json",
    "write_modules_jsonl",
]
