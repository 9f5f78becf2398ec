"""Formatting helpers converting primitive values to display strings."""

import hashlib
import json
import math
import mimetypes
import posixpath
from datetime import UTC, datetime
from typing import Any
from urllib.parse import quote, urljoin

from forge_ui.exceptions import TemplateHelperException
from forge_ui.logging_config import get_logger, log_with_context

logger = get_logger(__name__)

_IEC_SIZES = ["B", "KiB", "MiB", "GiB", "TiB", "PiB", "EiB"]
_WEEKDAYS = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
_MONTHS = ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]

_DIFF_TYPES = {1: "add", 2: "modify", 3: "del", 4: "rename", 5: "copy"}
_DIFF_LINE_TYPES = {2: "add", 3: "del", 4: "tag"}


def file_size(size: int) -> str:
    """Render a byte count with IEC units, e.g. ``1.0 KiB``.

    Values below ten units keep one decimal; larger values are rounded to a
    whole number.
    """
    if size < 10:
        return f"{size} B"
    exponent = 0
    while exponent < len(_IEC_SIZES) - 1 and size >= 1024 ** (exponent + 1):
        exponent += 1
    value = math.floor(size / 1024**exponent * 10 + 0.5) / 10
    if value < 10:
        return f"{value:.1f} {_IEC_SIZES[exponent]}"
    return f"{value:.0f} {_IEC_SIZES[exponent]}"


def pretty_number(value: int | float) -> str:
    """Group digits with commas: ``1234567`` -> ``1,234,567``."""
    return f"{value:,}"


def format_number_si(value: Any) -> str:
    """Abbreviate a count with an SI suffix: ``1500`` -> ``1.5k``.

    Anything that is not an integer (or a string holding one) renders as an
    empty string.
    """
    if isinstance(value, bool):
        return ""
    if isinstance(value, str):
        try:
            value = int(value)
        except ValueError:
            return ""
    if not isinstance(value, int):
        return ""

    if value < 1_000:
        return str(value)
    if value < 1_000_000:
        return f"{value / 1_000:.1f}k"
    if value < 1_000_000_000:
        return f"{value / 1_000_000:.1f}M"
    return f"{value / 1_000_000_000:.1f}G"


def _as_utc(t: datetime) -> datetime:
    return t.replace(tzinfo=UTC) if t.tzinfo is None else t


def date_fmt_long(t: datetime) -> str:
    """RFC 1123 with a numeric zone: ``Mon, 02 Jan 2006 15:04:05 -0700``."""
    t = _as_utc(t)
    return (
        f"{_WEEKDAYS[t.weekday()]}, {t.day:02d} {_MONTHS[t.month - 1]} {t.year:04d} "
        f"{t.hour:02d}:{t.minute:02d}:{t.second:02d} {t.strftime('%z')}"
    )


def date_fmt_short(t: datetime) -> str:
    """Short calendar date: ``Jan 02, 2006``."""
    return f"{_MONTHS[t.month - 1]} {t.day:02d}, {t.year:04d}"


def load_times(start_time: datetime, now: datetime | None = None) -> str:
    """Milliseconds elapsed since the request started rendering."""
    now = now or datetime.now(start_time.tzinfo)
    return f"{int((now - start_time).total_seconds() * 1000)}ms"


def add(*values: int) -> int:
    return sum(values)


def mul(*values: int) -> int:
    return math.prod(values)


def subtract(left: Any, right: Any) -> int | float:
    """Difference of two numbers; integers stay integers.

    Non-numeric operands count as zero.
    """

    def _number(value: Any) -> int | float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return 0
        return value

    left, right = _number(left), _number(right)
    if isinstance(left, int) and isinstance(right, int):
        return left - right
    return float(left) - float(right)


def percentage(n: int, *values: int) -> float:
    """Share of ``n`` in the sum of ``values`` as a percentage."""
    total = sum(values)
    if total == 0:
        return 0.0
    return n * 100 / total


def sub_str(s: str, start: int, length: int) -> str:
    """Substring of ``length`` characters from ``start``.

    ``length == -1`` means "to the end". A string shorter than the requested
    end is returned whole.
    """
    if not s:
        return ""
    end = start + length
    if length == -1:
        end = len(s)
    if len(s) < end:
        return s
    return s[start:end]


def ellipsis_string(s: str, length: int) -> str:
    """Truncate to ``length`` characters, ending with ``...`` when cut."""
    if length <= 3:
        return "..."
    if len(s) <= length:
        return s
    return s[: length - 3] + "..."


def short_sha(sha: str) -> str:
    """First ten characters of a commit id, ``commit `` prefix removed."""
    sha = sha.removeprefix("commit ")
    return sha[:10]


def sha1(s: str) -> str:
    return hashlib.sha1(s.encode("utf-8")).hexdigest()  # nosec B324


def md5(s: str) -> str:
    return hashlib.md5(s.encode("utf-8")).hexdigest()  # nosec B324


def path_escape(s: str) -> str:
    """Escape a string for use as a single URL path segment."""
    return quote(s, safe="")


def escape_pound(s: str) -> str:
    """Escape the characters that break a path when used in a link."""
    for old, new in (("%", "%25"), ("#", "%23"), (" ", "%20"), ("?", "%3F")):
        s = s.replace(old, new)
    return s


def path_escape_segments(path: str) -> str:
    """Escape each segment of a slash separated path."""
    return "/".join(path_escape(segment) for segment in path.split("/"))


def url_join(base: str, *elems: str) -> str:
    """Join path elements onto a base URL, resolving ``.`` and ``..``."""
    if not base.endswith("/"):
        base += "/"
    parts = [e for e in elems if e]
    joined = posixpath.normpath("/".join(parts)) if parts else ""
    if joined == ".":
        joined = ""
    return urljoin(base, joined)


def sub_jumpable_path(path: str) -> list[str]:
    """Split a path into parent (with trailing slash) and last component."""
    index = path.rfind("/")
    if index != -1 and index != len(path):
        return [path[: index + 1], path[index + 1 :]]
    return [path]


def parse_deadline(deadline: str) -> list[str]:
    return deadline.split("|")


def sec_to_time(duration: int) -> str:
    """Human duration like ``1h 2min 3s`` from a number of seconds."""
    seconds = duration % 60
    minutes = (duration // 60) % 60
    hours = duration // 3600

    parts = []
    if hours > 0:
        parts.append(f"{hours}h")
    if minutes > 0:
        parts.append(f"{minutes}min")
    if seconds > 0:
        parts.append(f"{seconds}s")
    return " ".join(parts)


def to_json(value: Any, strict: bool = False) -> str:
    """Serialise a value to compact JSON.

    Templates get an empty string when the value cannot be encoded; pass
    ``strict=True`` to get a ``TemplateHelperException`` instead.
    """
    try:
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as e:
        if strict:
            raise TemplateHelperException(
                f"Cannot encode value as JSON: {e}", details={"value_type": type(value).__name__}
            ) from e
        log_with_context(
            logger,
            "warning",
            "JSON encoding failed",
            error=str(e),
            value_type=type(value).__name__,
            event_type="json_encode_error",
        )
        return ""


def json_pretty_print(text: str) -> str:
    """Re-indent a JSON document with two spaces; invalid JSON renders empty."""
    try:
        return json.dumps(json.loads(text), indent=2, ensure_ascii=False)
    except ValueError as e:
        log_with_context(
            logger,
            "warning",
            "JSON pretty print failed",
            error=str(e),
            event_type="json_indent_error",
        )
        return ""


def filename_is_image(filename: str) -> bool:
    mime_type, _ = mimetypes.guess_type(filename)
    return bool(mime_type and mime_type.startswith("image/"))


def diff_type_to_str(diff_type: int) -> str:
    return _DIFF_TYPES.get(diff_type, "")


def diff_line_type_to_str(diff_type: int) -> str:
    return _DIFF_LINE_TYPES.get(diff_type, "same")


def printf(fmt: str, *args: Any) -> str:
    """printf-style formatting (``%s``, ``%d``) for templates."""
    return fmt % args if args else fmt
