"""Report levels, report formats, actions and the report summary line."""

from __future__ import annotations

import enum


class ReportLevel(enum.IntEnum):
    """How much a report shows; higher levels include everything below them."""

    MINIMAL = 1
    SUMMARY = 2
    DATABASE_ATTRIBUTES = 3
    LIST_ENTRIES = 4
    CHANGED_ATTRIBUTES = 5
    ADDED_REMOVED_ATTRIBUTES = 6
    ADDED_REMOVED_ENTRIES = 7


class ReportFormat(enum.IntEnum):
    PLAIN = 1
    JSON = 2


class Action(enum.IntFlag):
    """What a run is supposed to do."""

    NONE = 0
    INIT = 1 << 0
    COMPARE = 1 << 1
    DIFF = 1 << 2
    DRY_RUN = 1 << 3


DEFAULT_REPORT_LEVEL = ReportLevel.CHANGED_ATTRIBUTES
DEFAULT_REPORT_FORMAT = ReportFormat.PLAIN

_REPORT_LEVEL_NAMES = {
    ReportLevel.MINIMAL: "minimal",
    ReportLevel.SUMMARY: "summary",
    ReportLevel.DATABASE_ATTRIBUTES: "database_attributes",
    ReportLevel.LIST_ENTRIES: "list_entries",
    ReportLevel.CHANGED_ATTRIBUTES: "changed_attributes",
    ReportLevel.ADDED_REMOVED_ATTRIBUTES: "added_removed_attributes",
    ReportLevel.ADDED_REMOVED_ENTRIES: "added_removed_entries",
}
_NAME_TO_REPORT_LEVEL = {name: level for level, name in _REPORT_LEVEL_NAMES.items()}

_REPORT_FORMAT_NAMES = {
    ReportFormat.PLAIN: "plain",
    ReportFormat.JSON: "json",
}
_NAME_TO_REPORT_FORMAT = {name: fmt for fmt, name in _REPORT_FORMAT_NAMES.items()}


def get_report_level(name: str) -> ReportLevel | None:
    """Return the report level called ``name``, or None if there is none."""
    return _NAME_TO_REPORT_LEVEL.get(name)


def get_report_level_string(level: int) -> str:
    """Return the name of a report level; raise ValueError for an invalid level."""
    return _REPORT_LEVEL_NAMES[ReportLevel(level)]


def get_report_format(name: str) -> ReportFormat | None:
    """Return the report format called ``name``, or None if there is none."""
    return _NAME_TO_REPORT_FORMAT.get(name)


def get_report_format_string(report_format: int) -> str:
    """Return the name of a report format; raise ValueError for an invalid format."""
    return _REPORT_FORMAT_NAMES[ReportFormat(report_format)]


def get_summary_string(action: int, nadd: int, nrem: int, nchg: int) -> str:
    """Return the one-line outcome of a run for the report's outline."""
    action = Action(action)
    if action & (Action.COMPARE | Action.DIFF):
        if nadd or nrem or nchg:
            if action & Action.COMPARE:
                return "AIDE found differences between database and filesystem!!"
            return "AIDE found differences between the two databases!!"
        if action & Action.COMPARE:
            return "AIDE found NO differences between database and filesystem. Looks okay!!"
        return "AIDE found NO differences between the two databases. Looks okay!!"
    return "AIDE successfully initialized database."