"""Text forms of entry values as they appear in reports."""

from __future__ import annotations

import stat
from datetime import datetime

_TIME_FORMAT = "%Y-%m-%d %H:%M:%S %z"
_S_IFMT = 0o170000


def _build_file_types() -> dict[int, str]:
    candidates = [
        (stat.S_IFREG, "File"),
        (stat.S_IFDIR, "Directory"),
        (stat.S_IFIFO, "FIFO"),
        (stat.S_IFLNK, "Link"),
        (stat.S_IFBLK, "Block device"),
        (stat.S_IFCHR, "Character device"),
        (stat.S_IFSOCK, "Socket"),
        (getattr(stat, "S_IFDOOR", 0), "Door"),
        (getattr(stat, "S_IFPORT", 0), "Port"),
    ]
    # File types the platform does not have are reported as 0 and left out.
    return {file_type: name for file_type, name in candidates if file_type}


_FILE_TYPES = _build_file_types()


def get_file_type_string(mode: int) -> str | None:
    """Return the name of the file type in ``mode``.

    Returns None when ``mode`` carries no file type bits and
    'Unknown file type' for a type that is not recognised.
    """
    file_type = mode & _S_IFMT
    if file_type == 0:
        return None
    return _FILE_TYPES.get(file_type, "Unknown file type")


def byte_to_base16(data: bytes) -> str:
    """Return ``data`` as lower-case hexadecimal digits."""
    return bytes(data).hex()


def get_time_string(timestamp: float) -> str:
    """Return ``timestamp`` as local time in the form 'YYYY-MM-DD HH:MM:SS +HHMM'."""
    return datetime.fromtimestamp(timestamp).astimezone().strftime(_TIME_FORMAT)