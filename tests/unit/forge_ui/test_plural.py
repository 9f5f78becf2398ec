"""Unit tests for plural form selection."""

import pytest

from forge_ui.helpers.plural import PLURAL_RULES, plural_rule, tr_n

ONE, MANY = "key1", "keyN"


@pytest.mark.parametrize(
    "count,expected",
    [(0, MANY), (1, ONE), (2, MANY), (-1, MANY)],
)
def test_english(count, expected):
    assert tr_n("en-US", count, ONE, MANY) == expected


@pytest.mark.parametrize("lang", ["ru-RU", "lv-LV"])
@pytest.mark.parametrize(
    "count,expected",
    [(1, ONE), (11, MANY), (21, ONE), (101, ONE), (111, MANY), (2, MANY), (0, MANY), (-21, MANY), (-11, MANY)],
)
def test_baltic_slavic(lang, count, expected):
    """Test counts ending in 1 (but not 11) use the singular form."""
    assert tr_n(lang, count, ONE, MANY) == expected


@pytest.mark.parametrize("lang", ["zh-CN", "zh-HK", "zh-TW"])
@pytest.mark.parametrize("count", [0, 1, 2, 100])
def test_chinese_single_form(lang, count):
    assert tr_n(lang, count, ONE, MANY) == ONE


@pytest.mark.parametrize(
    "count,expected",
    [(-2, MANY), (-1, ONE), (0, ONE), (1, ONE), (2, MANY)],
)
def test_french(count, expected):
    assert tr_n("fr-FR", count, ONE, MANY) == expected


def test_unknown_locale_uses_english():
    assert tr_n("xx-XX", 1, ONE, MANY) == ONE
    assert tr_n("xx-XX", 2, ONE, MANY) == MANY
    assert plural_rule("xx-XX") is PLURAL_RULES["en-US"]


@pytest.mark.parametrize("count", [1.0, "1", None, True])
def test_non_integer_counts_use_plural_key(count):
    assert tr_n("en-US", count, ONE, MANY) == MANY


def test_rules_table_is_read_only():
    with pytest.raises(TypeError):
        PLURAL_RULES["de-DE"] = PLURAL_RULES["en-US"]
