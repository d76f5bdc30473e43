"""Selection rules: file-type restrictions, rule types and compiled regexes."""

from __future__ import annotations

import enum
import stat
from dataclasses import dataclass, field

import regex


class Restriction(enum.IntFlag):
    NONE = 0
    REG = 1 << 0
    DIR = 1 << 1
    FIFO = 1 << 2
    LNK = 1 << 3
    BLK = 1 << 4
    CHR = 1 << 5
    SOCK = 1 << 6
    DOOR = 1 << 7
    PORT = 1 << 8


def _build_table() -> list[tuple[str, Restriction, int]]:
    candidates = [
        ("f", Restriction.REG, stat.S_IFREG),
        ("d", Restriction.DIR, stat.S_IFDIR),
        ("p", Restriction.FIFO, stat.S_IFIFO),
        ("l", Restriction.LNK, stat.S_IFLNK),
        ("b", Restriction.BLK, stat.S_IFBLK),
        ("c", Restriction.CHR, stat.S_IFCHR),
        ("s", Restriction.SOCK, stat.S_IFSOCK),
        ("D", Restriction.DOOR, getattr(stat, "S_IFDOOR", 0)),
        ("P", Restriction.PORT, getattr(stat, "S_IFPORT", 0)),
    ]
    # File types the platform does not have are reported as 0 and left out.
    return [entry for entry in candidates if entry[2]]


_RESTRICTIONS = _build_table()
_S_IFMT = 0o170000


class RuleType(enum.IntEnum):
    NEGATIVE = 0
    SELECTIVE = 1
    EQUAL = 2


_RULE_TYPE_LONG = {
    RuleType.SELECTIVE: "selective rule",
    RuleType.EQUAL: "equal rule",
    RuleType.NEGATIVE: "negative rule",
}

_RULE_TYPE_CHAR = {
    RuleType.SELECTIVE: "",
    RuleType.EQUAL: "=",
    RuleType.NEGATIVE: "!",
}


@dataclass
class RxRule:
    """A path rule; ``pattern`` is compiled from ``rx`` and raises regex.error if invalid."""

    rx: str
    restriction: Restriction = Restriction.NONE
    attr: int = 0
    config_filename: str | None = None
    config_linenumber: int = -1
    config_line: str | None = None
    prefix: str | None = None
    pattern: regex.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.pattern = regex.compile(self.rx)


def restriction_from_perm(mode: int) -> Restriction:
    """Return the restriction matching the file type in ``mode``."""
    file_type = mode & _S_IFMT
    for _, restriction, ft in _RESTRICTIONS:
        if ft == file_type:
            return restriction
    return Restriction.NONE


def file_type_char_from_perm(mode: int) -> str:
    """Return the restriction character for the file type in ``mode``, or '?'."""
    file_type = mode & _S_IFMT
    for c, _, ft in _RESTRICTIONS:
        if ft == file_type:
            return c
    return "?"


def restriction_from_char(c: str) -> Restriction:
    """Return the restriction named by the character ``c``."""
    for char, restriction, _ in _RESTRICTIONS:
        if char == c:
            return restriction
    return Restriction.NONE


def restriction_char(restriction: int) -> str:
    """Return the character of a single restriction, or '?'."""
    for c, r, _ in _RESTRICTIONS:
        if r == restriction:
            return c
    return "?"


def restriction_string(restriction: int) -> str:
    """Return the comma separated characters of ``restriction``, or '(none)'."""
    if restriction == Restriction.NONE:
        return "(none)"
    return ",".join(c for c, r, _ in _RESTRICTIONS if r & restriction)


def rule_type_long_string(rule_type: int) -> str | None:
    """Return the descriptive name of a rule type."""
    try:
        return _RULE_TYPE_LONG[RuleType(rule_type)]
    except ValueError:
        return None


def rule_type_char(rule_type: int) -> str | None:
    """Return the config-file prefix of a rule type."""
    try:
        return _RULE_TYPE_CHAR[RuleType(rule_type)]
    except ValueError:
        return None