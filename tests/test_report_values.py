import re
import stat
from datetime import datetime

import pytest

from integrity_rules.report_values import (
    byte_to_base16,
    get_file_type_string,
    get_time_string,
)


@pytest.mark.parametrize(
    "file_type, expected",
    [
        (stat.S_IFREG, "File"),
        (stat.S_IFDIR, "Directory"),
        (stat.S_IFIFO, "FIFO"),
        (stat.S_IFLNK, "Link"),
        (stat.S_IFBLK, "Block device"),
        (stat.S_IFCHR, "Character device"),
        (stat.S_IFSOCK, "Socket"),
    ],
)
def test_file_type_names(file_type, expected):
    assert get_file_type_string(file_type | 0o755) == expected


def test_permission_bits_do_not_affect_type():
    assert get_file_type_string(stat.S_IFREG) == get_file_type_string(
        stat.S_IFREG | 0o7777
    )


def test_no_file_type_bits_gives_none():
    assert get_file_type_string(0) is None
    assert get_file_type_string(0o644) is None


def test_unknown_file_type():
    assert get_file_type_string(0o170000) == "Unknown file type"


def test_base16_pinned_value():
    assert byte_to_base16(b"\x00\xff") == "00ff"


def test_base16_empty():
    assert byte_to_base16(b"") == ""


@pytest.mark.parametrize("data", [b"a", bytes(range(256)), b"\x10\x20\x30"])
def test_base16_round_trip(data):
    encoded = byte_to_base16(data)
    assert len(encoded) == 2 * len(data)
    assert encoded == encoded.lower()
    assert bytes.fromhex(encoded) == data


_TIME_RE = re.compile(r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2} [+-]\d{4}$")


@pytest.mark.parametrize("timestamp", [0, 1_000_000_000, 1_700_000_000])
def test_time_string_format_and_round_trip(timestamp):
    text = get_time_string(timestamp)
    assert _TIME_RE.match(text)
    assert len(text) == len("1979-01-01 01:00:00 +0100")
    parsed = datetime.strptime(text, "%Y-%m-%d %H:%M:%S %z")
    assert parsed.timestamp() == timestamp


def test_time_string_orders_with_time():
    earlier = datetime.strptime(get_time_string(100), "%Y-%m-%d %H:%M:%S %z")
    later = datetime.strptime(get_time_string(200), "%Y-%m-%d %H:%M:%S %z")
    assert (later - earlier).total_seconds() == 100