"""Named symbols defined in configuration files."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


@dataclass
class Symbol:
    """A defined variable or group: its name, string value and attribute value."""

    name: str
    value: str | None = None
    ival: int = 0


def find_symbol(name: str, symbols: Iterable[Symbol]) -> Symbol | None:
    """Return the first symbol called ``name``, or None."""
    return next((symbol for symbol in symbols if symbol.name == name), None)