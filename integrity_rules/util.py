"""Small helpers: URL-style escaping, permission strings, path and syslog lookups."""

from __future__ import annotations

import logging
import os
import stat
from typing import Sequence

_log = logging.getLogger(__name__)

_URL_UNSAFE = frozenset(b" <>\"#%{}|\\^~[]`@:\033'")
_HEX_DIGITS = frozenset(b"0123456789abcdefABCDEF")
_ENCODING = "utf-8"
_ERRORS = "surrogateescape"

# Standard syslog facility codes (facility number shifted left by three).
SYSLOG_FACILITIES: dict[str, int] = {
    "LOG_KERN": 0 << 3,
    "LOG_USER": 1 << 3,
    "LOG_MAIL": 2 << 3,
    "LOG_DAEMON": 3 << 3,
    "LOG_AUTH": 4 << 3,
    "LOG_SYSLOG": 5 << 3,
    "LOG_LPR": 6 << 3,
    "LOG_NEWS": 7 << 3,
    "LOG_UUCP": 8 << 3,
    "LOG_CRON": 9 << 3,
    "LOG_LOCAL0": 16 << 3,
    "LOG_LOCAL1": 17 << 3,
    "LOG_LOCAL2": 18 << 3,
    "LOG_LOCAL3": 19 << 3,
    "LOG_LOCAL4": 20 << 3,
    "LOG_LOCAL5": 21 << 3,
    "LOG_LOCAL6": 22 << 3,
    "LOG_LOCAL7": 23 << 3,
}

DEFAULT_SYSLOG_FACILITY = SYSLOG_FACILITIES["LOG_LOCAL0"]


def btoa(b: object) -> str:
    """Return 'true' or 'false' for the truth value of ``b``."""
    return str(bool(b)).lower()


def _is_unsafe(byte: int) -> bool:
    return byte in _URL_UNSAFE or not 0x20 <= byte <= 0x7E


def _to_bytes(s: str) -> bytes:
    return s.encode(_ENCODING, _ERRORS)


def contains_unsafe(s: str) -> bool:
    """Return True if ``s`` holds a URL-unsafe or non-printable character."""
    return any(_is_unsafe(b) for b in _to_bytes(s))


def decode_string(s: str) -> str:
    """Replace each ``%xy`` hex escape with its byte; malformed escapes stay literal."""
    data = _to_bytes(s)
    out = bytearray()
    i = 0
    while i < len(data):
        if (
            data[i] == ord("%")
            and i + 2 < len(data)
            and data[i + 1] in _HEX_DIGITS
            and data[i + 2] in _HEX_DIGITS
        ):
            out.append(int(data[i + 1 : i + 3], 16))
            i += 3
        else:
            out.append(data[i])
            i += 1
    return out.decode(_ENCODING, _ERRORS)


def encode_string(s: str) -> str:
    """Escape every unsafe or non-printable byte of ``s`` as ``%XX``."""
    return "".join(
        f"%{b:02X}" if _is_unsafe(b) else chr(b) for b in _to_bytes(s)
    )


def perm_to_char(perm: int) -> str:
    """Return the ten-character ``ls``-style representation of a mode."""
    pc = ["-"] * 10

    if stat.S_ISDIR(perm):
        pc[0] = "d"
    if stat.S_ISFIFO(perm):
        pc[0] = "p"
    if stat.S_ISLNK(perm):
        pc[0] = "l"
    if stat.S_ISBLK(perm):
        pc[0] = "b"
    if stat.S_ISCHR(perm):
        pc[0] = "c"
    if stat.S_ISDOOR(perm):
        pc[0] = "|"
    if stat.S_ISSOCK(perm):
        pc[0] = "s"

    bits = (
        (1, stat.S_IRUSR, "r"),
        (2, stat.S_IWUSR, "w"),
        (3, stat.S_IXUSR, "x"),
        (4, stat.S_IRGRP, "r"),
        (5, stat.S_IWGRP, "w"),
        (6, stat.S_IXGRP, "x"),
        (7, stat.S_IROTH, "r"),
        (8, stat.S_IWOTH, "w"),
        (9, stat.S_IXOTH, "x"),
    )
    for index, mask, char in bits:
        if perm & mask == mask:
            pc[index] = char

    if perm & stat.S_ISUID:
        pc[3] = "s" if perm & stat.S_IXUSR else "S"
    if perm & stat.S_ISGID:
        pc[6] = "s" if perm & stat.S_IXGRP else "l"
    if perm & stat.S_ISVTX:
        pc[9] = "t" if perm & stat.S_IXOTH else "T"

    result = "".join(pc)
    _log.debug("perm_to_char: %i -> %s", perm, result)
    return result


def expand_tilde(path: str | None) -> str | None:
    """Replace a leading '~' with $HOME; a leading '\\~' yields a literal '~'."""
    if path is None:
        return None
    if path.startswith("~"):
        home = os.environ.get("HOME")
        if home is None:
            _log.warning(
                "Variable name 'HOME' not found in environment. '~' cannot be expanded"
            )
            return path
        full = home + path[1:]
        _log.debug("expanded '~' in '%s' to '%s'", path, full)
        return full
    if path.startswith("\\~"):
        return path[1:]
    return path


def strnstr(haystack: Sequence, needle: Sequence, n: int) -> int | None:
    """Search the first ``n`` items of ``haystack`` for ``needle``.

    Returns the start index of the match, or None. The scan does not
    backtrack: after a partial match fails, matching restarts at the next
    item rather than re-examining the one that broke the match.
    """
    limit = min(n, len(haystack))
    slen = len(needle)
    matched = 0
    i = 0
    while i < limit:
        if matched == slen:
            return i - slen
        if needle[matched] == haystack[i]:
            matched += 1
        else:
            matched = 0
        i += 1
    if matched == slen:
        return i - slen
    return None


def pipe_to_string(fd: int) -> str | None:
    """Read ``fd`` until end of file; return the text, or None if nothing was read."""
    chunks = []
    while True:
        chunk = os.read(fd, 1024)
        if not chunk:
            break
        chunks.append(chunk)
    if not chunks:
        return None
    return b"".join(chunks).decode(_ENCODING, _ERRORS)


def syslog_facility_lookup(name: str | None) -> int:
    """Return the syslog facility named (case-insensitively) by ``name``."""
    if not name:
        return DEFAULT_SYSLOG_FACILITY
    facility = SYSLOG_FACILITIES.get(name.upper())
    if facility is None:
        _log.warning('Syslog facility "%s" is unknown, using default', name)
        return DEFAULT_SYSLOG_FACILITY
    return facility