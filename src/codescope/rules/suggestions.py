"""Refactoring suggestions derived from module size and coupling."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from codescope.ir.models import Module

LARGE_FILE_LOC = 500
HIGH_FAN_OUT = 10
HIGH_FAN_IN = 10
LARGE_SYMBOL_LOC = 80


def generate_suggestions(module: Module, fan_in: int, fan_out: int) -> list[str]:
    """Return human-readable refactoring hints for a module.

    Args:
        module: Assembled module
        fan_in: Incoming dependency count from the dependency graph
        fan_out: Outgoing dependency count

    Returns:
        Suggestions in a stable order: file size, coupling, then symbols in
        source order.
    """
    suggestions: list[str] = []

    if module.loc > LARGE_FILE_LOC:
        suggestions.append(
            "Large file detected - consider splitting into smaller modules"
        )

    if fan_out > HIGH_FAN_OUT:
        suggestions.append(
            f"High fan-out ({fan_out}) - consider reducing dependencies"
        )

    if fan_in > HIGH_FAN_IN:
        suggestions.append(
            f"High fan-in ({fan_in}) - consider extracting shared utilities"
        )

    for symbol in module.symbols:
        if symbol.loc > LARGE_SYMBOL_LOC:
            suggestions.append(
                f"Large {symbol.kind} '{symbol.name}' ({symbol.loc} LOC)"
                " - consider splitting"
            )

    return suggestions


__all__ = ["generate_suggestions"]
