import re

import pytest

from hostfetch.formatting import decode_lossy, format_duration


@pytest.mark.parametrize(
    ("seconds", "expected"),
    [
        (0, "0m"),
        (59, "0m"),
        (60, "1m"),
        (3599, "59m"),
        (3600, "1h 0m"),
        (3661, "1h 1m"),
        (86399, "23h 59m"),
        (86400, "1d 0h 0m"),
        (90000, "1d 1h 0m"),
        (10 * 86400 + 5 * 3600 + 7 * 60 + 30, "10d 5h 7m"),
    ],
)
def test_format_duration(seconds, expected):
    assert format_duration(seconds) == expected


_PATTERN = re.compile(r"^(?:(\d+)d (\d+)h (\d+)m|(\d+)h (\d+)m|(\d+)m)$")


@pytest.mark.parametrize("seconds", [0, 1, 61, 3599, 7322, 86399, 86461, 1234567, 98765432])
def test_format_duration_preserves_total_minutes(seconds):
    match = _PATTERN.match(format_duration(seconds))
    assert match is not None

    days, hours, minutes = 0, 0, 0
    if match.group(1) is not None:
        days, hours, minutes = (int(g) for g in match.group(1, 2, 3))
    elif match.group(4) is not None:
        hours, minutes = int(match.group(4)), int(match.group(5))
    else:
        minutes = int(match.group(6))

    assert days * 1440 + hours * 60 + minutes == seconds // 60


def test_decode_lossy_replaces_invalid_bytes():
    assert decode_lossy(b"ext\xff4") == "ext�4"


def test_decode_lossy_recovers_surrogate_escaped_str():
    assert decode_lossy("mnt\udcff") == "mnt�"


def test_decode_lossy_passes_plain_text():
    assert decode_lossy("ext4") == "ext4"
    assert decode_lossy("/média") == "/média"


def test_decode_lossy_replaces_lone_surrogate():
    result = decode_lossy("a\ud800b")

    assert result.startswith("a") and result.endswith("b")
    middle = result[1:-1]
    assert middle and set(middle) == {"�"}
