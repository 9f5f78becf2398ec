"""Plural form selection for translated strings.

Each rule maps a count to a form index: 0 selects the singular key, 1 the
plural key. The rules encode linguistic facts and must stay exactly as they
are for each locale.
"""

from collections.abc import Callable
from types import MappingProxyType
from typing import Any

DEFAULT_PLURAL_LOCALE = "en-US"


def _rem(count: int, divisor: int) -> int:
    """Remainder carrying the sign of the dividend (``-21 rem 10 == -1``)."""
    r = abs(count) % divisor
    return -r if count < 0 else r


def _english(count: int) -> int:
    return 0 if count == 1 else 1


def _baltic_slavic(count: int) -> int:
    return 0 if _rem(count, 10) == 1 and _rem(count, 100) != 11 else 1


def _single_form(count: int) -> int:
    return 0


def _french(count: int) -> int:
    return 0 if -2 < count < 2 else 1


PLURAL_RULES: MappingProxyType[str, Callable[[int], int]] = MappingProxyType(
    {
        "en-US": _english,
        "lv-LV": _baltic_slavic,
        "ru-RU": _baltic_slavic,
        "zh-CN": _single_form,
        "zh-HK": _single_form,
        "zh-TW": _single_form,
        "fr-FR": _french,
    }
)


def plural_rule(lang: str) -> Callable[[int], int]:
    """Rule for ``lang``, falling back to the default locale's rule."""
    return PLURAL_RULES.get(lang, PLURAL_RULES[DEFAULT_PLURAL_LOCALE])


def tr_n(lang: str, count: Any, key1: str, key_n: str) -> str:
    """Pick the translation key for ``count`` items in ``lang``.

    Args:
        lang: Locale tag such as ``ru-RU``
        count: Item count; anything other than an integer selects ``key_n``
        key1: Key used when the rule selects the singular form
        key_n: Key used otherwise

    Returns:
        ``key1`` or ``key_n``
    """
    if isinstance(count, bool) or not isinstance(count, int):
        return key_n
    if plural_rule(lang)(count) == 0:
        return key1
    return key_n
