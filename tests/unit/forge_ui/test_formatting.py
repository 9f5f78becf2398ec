"""Unit tests for formatting helpers."""

from datetime import UTC, datetime, timedelta, timezone

import pytest

from forge_ui.exceptions import TemplateHelperException
from forge_ui.helpers import formatting


@pytest.mark.parametrize(
    "size,expected",
    [
        (0, "0 B"),
        (9, "9 B"),
        (1023, "1023 B"),
        (1024, "1.0 KiB"),
        (1536, "1.5 KiB"),
        (10 * 1024, "10 KiB"),
        (1024 * 1024, "1.0 MiB"),
        (5 * 1024**3, "5.0 GiB"),
    ],
)
def test_file_size(size, expected):
    """Test byte counts use IEC units with one decimal below ten."""
    assert formatting.file_size(size) == expected


def test_pretty_number():
    assert formatting.pretty_number(1234567) == "1,234,567"
    assert formatting.pretty_number(12) == "12"


@pytest.mark.parametrize(
    "value,expected",
    [(999, "999"), (1000, "1.0k"), (1500, "1.5k"), (1_500_000, "1.5M"), (2_000_000_000, "2.0G"), ("42", "42")],
)
def test_format_number_si(value, expected):
    assert formatting.format_number_si(value) == expected


def test_format_number_si_rejects_non_integers():
    """Test non-numeric input renders as an empty string."""
    assert formatting.format_number_si("many") == ""
    assert formatting.format_number_si(1.5) == ""
    assert formatting.format_number_si(True) == ""


def test_date_fmt_long_uses_numeric_zone():
    t = datetime(2006, 1, 2, 15, 4, 5, tzinfo=timezone(timedelta(hours=-7)))
    assert formatting.date_fmt_long(t) == "Mon, 02 Jan 2006 15:04:05 -0700"


def test_date_fmt_long_naive_is_utc():
    assert formatting.date_fmt_long(datetime(2021, 3, 4, 5, 6, 7)) == "Thu, 04 Mar 2021 05:06:07 +0000"


def test_date_fmt_short():
    assert formatting.date_fmt_short(datetime(2006, 1, 2)) == "Jan 02, 2006"


def test_load_times():
    start = datetime(2021, 1, 1, tzinfo=UTC)
    assert formatting.load_times(start, start + timedelta(milliseconds=250)) == "250ms"


def test_arithmetic_helpers():
    assert formatting.add(1, 2, 3) == 6
    assert formatting.mul(2, 3, 4) == 24
    assert formatting.subtract(5, 7) == -2
    assert formatting.subtract(1.5, 1) == 0.5
    assert formatting.subtract("x", 3) == -3


def test_percentage():
    assert formatting.percentage(1, 1, 3) == 25.0
    assert formatting.percentage(5, 0, 0) == 0.0


@pytest.mark.parametrize(
    "s,start,length,expected",
    [
        ("abcdef", 1, 3, "bcd"),
        ("abcdef", 2, -1, "cdef"),
        ("abc", 1, 10, "abc"),
        ("", 0, 3, ""),
    ],
)
def test_sub_str(s, start, length, expected):
    assert formatting.sub_str(s, start, length) == expected


def test_ellipsis_string():
    assert formatting.ellipsis_string("hello world", 8) == "hello..."
    assert formatting.ellipsis_string("short", 10) == "short"
    assert formatting.ellipsis_string("anything", 2) == "..."


def test_short_sha_and_hashes():
    assert formatting.short_sha("commit 0123456789abcdef") == "0123456789"
    assert formatting.sha1("abc") == "a9993e364706816aba3e25717850c26c9cd0d89d"
    assert formatting.md5("abc") == "900150983cd24fb0d6963f7d28e17f72"


def test_path_escaping():
    assert formatting.path_escape("a b/c") == "a%20b%2Fc"
    assert formatting.escape_pound("a#b?c d%") == "a%23b%3Fc%20d%25"
    assert formatting.path_escape_segments("dir name/file#1") == "dir%20name/file%231"


def test_url_join():
    assert formatting.url_join("https://example.com/sub", "alice", "demo") == "https://example.com/sub/alice/demo"
    assert formatting.url_join("https://example.com/sub/", "a", "..", "b") == "https://example.com/sub/b"
    assert formatting.url_join("https://example.com/") == "https://example.com/"


def test_sub_jumpable_path():
    assert formatting.sub_jumpable_path("a/b/c") == ["a/b/", "c"]
    assert formatting.sub_jumpable_path("file") == ["file"]


def test_parse_deadline():
    assert formatting.parse_deadline("2021-01-01|12:00") == ["2021-01-01", "12:00"]


@pytest.mark.parametrize("seconds,expected", [(3723, "1h 2min 3s"), (60, "1min"), (0, ""), (7200, "2h")])
def test_sec_to_time(seconds, expected):
    assert formatting.sec_to_time(seconds) == expected


def test_to_json():
    assert formatting.to_json({"a": [1, 2]}) == '{"a":[1,2]}'


def test_to_json_failure_renders_empty():
    """Test unencodable values render as an empty string."""
    assert formatting.to_json(object()) == ""
    assert formatting.to_json(float("nan")) == ""


def test_to_json_strict_raises():
    with pytest.raises(TemplateHelperException):
        formatting.to_json(object(), strict=True)


def test_json_pretty_print():
    assert formatting.json_pretty_print('{"a":1}') == '{\n  "a": 1\n}'
    assert formatting.json_pretty_print("{not json") == ""


def test_filename_is_image():
    assert formatting.filename_is_image("logo.png") is True
    assert formatting.filename_is_image("README.md") is False


def test_diff_type_names():
    assert formatting.diff_type_to_str(1) == "add"
    assert formatting.diff_type_to_str(99) == ""
    assert formatting.diff_line_type_to_str(3) == "del"
    assert formatting.diff_line_type_to_str(1) == "same"


def test_printf():
    assert formatting.printf("%s has %d stars", "demo", 3) == "demo has 3 stars"
    assert formatting.printf("100%") == "100%"
