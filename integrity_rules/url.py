"""URL types understood by database and report locations."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any


class UrlType(enum.IntEnum):
    FILE = 1
    STDOUT = 2
    STDIN = 3
    STDERR = 4
    FD = 5
    FTP = 6
    HTTP = 7
    HTTPS = 8
    SYSLOG = 9


_URL_TYPE_NAMES = {
    UrlType.FILE: "file",
    UrlType.STDOUT: "stdout",
    UrlType.STDIN: "stdin",
    UrlType.STDERR: "stderr",
    UrlType.FD: "fd",
    UrlType.FTP: "ftp",
    UrlType.HTTP: "http",
    UrlType.HTTPS: "https",
    UrlType.SYSLOG: "syslog",
}

_NAME_TO_URL_TYPE = {name: url_type for url_type, name in _URL_TYPE_NAMES.items()}


@dataclass
class Url:
    """A location: its type (everything before the first ':') and its value."""

    type: UrlType
    value: str | None
    data: Any = field(default=None, compare=False)


def get_url_type(name: str) -> UrlType | None:
    """Return the URL type for ``name``, or None if it is unknown."""
    return _NAME_TO_URL_TYPE.get(name)


def get_url_type_string(url_type: int) -> str:
    """Return the name of a URL type; raise ValueError for an invalid type."""
    return _URL_TYPE_NAMES[UrlType(url_type)]