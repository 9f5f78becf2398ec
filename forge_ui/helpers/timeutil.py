"""Relative time rendering ("3 minutes ago")."""

from datetime import UTC, datetime

from markupsafe import Markup

from forge_ui.helpers.formatting import date_fmt_long
from forge_ui.protocols import Translator

MINUTE = 60
HOUR = 60 * MINUTE
DAY = 24 * HOUR
WEEK = 7 * DAY
MONTH = 30 * DAY
YEAR = 12 * MONTH

# (upper bound in seconds, singular key, plural key, unit length)
_UNITS = [
    (MINUTE, "tool.1s", "tool.seconds", 1),
    (HOUR, "tool.1m", "tool.minutes", MINUTE),
    (DAY, "tool.1h", "tool.hours", HOUR),
    (WEEK, "tool.1d", "tool.days", DAY),
    (MONTH, "tool.1w", "tool.weeks", WEEK),
    (YEAR, "tool.1mon", "tool.months", MONTH),
]


def _now() -> datetime:
    return datetime.now(UTC)


def _as_utc(t: datetime) -> datetime:
    return t.replace(tzinfo=UTC) if t.tzinfo is None else t


def _time_diff(seconds: int, i18n: Translator) -> str:
    if seconds <= 0:
        return i18n.tr("tool.now")
    for bound, key1, key_n, unit in _UNITS:
        if seconds < bound:
            count = seconds // unit
            if count < 2:
                return i18n.tr(key1)
            return i18n.tr(key_n, count)
    count = seconds // YEAR
    if count < 2:
        return i18n.tr("tool.1y")
    return i18n.tr("tool.years", count)


def raw_time_since(then: datetime, i18n: Translator, now: datetime | None = None) -> str:
    """Relative description of ``then``, e.g. ``3 minutes ago``."""
    now = _as_utc(now or _now())
    diff = int((now - _as_utc(then)).total_seconds())
    if diff == 0:
        return i18n.tr("tool.now")
    if diff > 0:
        return i18n.tr("tool.ago", _time_diff(diff, i18n))
    return i18n.tr("tool.from_now", _time_diff(-diff, i18n))


def time_since(then: datetime, i18n: Translator, now: datetime | None = None) -> Markup:
    """Relative time wrapped in a span whose tooltip holds the full date."""
    return Markup('<span class="time-since" title="{}">{}</span>').format(
        date_fmt_long(then), raw_time_since(then, i18n, now)
    )


def time_since_unix(timestamp: int, i18n: Translator, now: datetime | None = None) -> Markup:
    return time_since(datetime.fromtimestamp(timestamp, UTC), i18n, now)


def raw_time_since_unix(timestamp: int, i18n: Translator, now: datetime | None = None) -> str:
    return raw_time_since(datetime.fromtimestamp(timestamp, UTC), i18n, now)
