"""Unit tests for the template helper registries."""

import pytest
from markupsafe import Markup

from forge_ui.exceptions import HelperRegistryException
from forge_ui.registry import build_html_helpers, build_text_helpers, missing_helpers, validate_templates
from forge_ui.views.mail_renderer import MailRenderer
from forge_ui.views.template_renderer import TemplateRenderer, build_environment

SHARED_HELPERS = {
    "PyVer",
    "AppName",
    "AppSubUrl",
    "AppUrl",
    "AppVer",
    "AppBuiltWith",
    "AppDomain",
    "RawTimeSince",
    "DateFmtLong",
    "DateFmtShort",
    "List",
    "SubStr",
    "EllipsisString",
    "URLJoin",
    "Dict",
    "dict",
    "Printf",
    "Sec2Time",
    "ParseDeadline",
    "percentage",
    "Add",
    "Mul",
    "TimeSince",
    "TimeSinceUnix",
    "Escape",
}

HTML_ONLY_HELPERS = {
    "Safe",
    "SafeJS",
    "Str2html",
    "FileSize",
    "PrettyNumber",
    "TrN",
    "RenderCommitMessage",
    "RenderCommitMessageLink",
    "RenderCommitMessageLinkSubject",
    "RenderCommitBody",
    "RenderNote",
    "RenderEmoji",
    "ReactionToEmoji",
    "ActionIcon",
    "MigrationIcon",
    "EntryIcon",
    "CommitType",
    "svg",
    "SortArrow",
    "MirrorAddress",
    "NotificationSettings",
}


def test_html_registry_contents(html_helpers):
    assert SHARED_HELPERS | HTML_ONLY_HELPERS <= set(html_helpers)
    assert all(callable(fn) for fn in html_helpers.values())


def test_text_registry_is_markup_free(text_helpers):
    assert set(text_helpers) == SHARED_HELPERS
    assert not HTML_ONLY_HELPERS & set(text_helpers)


def test_registries_are_read_only(html_helpers, text_helpers):
    with pytest.raises(TypeError):
        html_helpers["Safe"] = str
    with pytest.raises(TypeError):
        text_helpers["Extra"] = str


def test_site_helpers_read_settings(html_helpers, text_helpers):
    assert html_helpers["AppName"]() == text_helpers["AppName"]() == "Forge Test"
    assert html_helpers["AppUrl"]() == "https://forge.example.com/"
    assert html_helpers["AppSubUrl"]() == "/sub"
    assert html_helpers["StaticUrlPrefix"]() == "/sub"
    assert html_helpers["AppDomain"]() == "forge.example.com"
    assert html_helpers["UseHTTPS"]() is True
    assert html_helpers["DisableGravatar"]() is False
    assert html_helpers["PyVer"]().split()[0] in {"CPython", "PyPy"}


def test_bound_helpers_use_site_settings(html_helpers):
    assert html_helpers["ReactionToEmoji"]("gitea") == '<img alt=":gitea:" src="/sub/img/emoji/gitea.png"></img>'
    assert html_helpers["AvatarLink"]("") == "/sub/img/avatar_default.png"
    html = html_helpers["RenderCommitMessage"]("thanks @bob", "/alice/demo")
    assert '<a href="/sub/bob" class="mention">@bob</a>' in html


def test_text_variants_return_plain_strings(text_helpers, i18n):
    from datetime import UTC, datetime

    assert type(text_helpers["Escape"]("<b>")) is str
    assert not isinstance(text_helpers["TimeSince"](datetime.now(UTC), i18n), Markup)


def test_custom_markup_engine(mock_settings, failing_renderer):
    helpers = build_html_helpers(mock_settings, renderer=failing_renderer)
    assert helpers["RenderEmoji"]("Hello :wave:") == ""


def test_each_build_returns_a_new_registry(mock_settings):
    assert build_text_helpers(mock_settings) is not build_text_helpers(mock_settings)


def test_missing_helpers(html_helpers):
    env = build_environment(html_helpers)
    source = (
        "{% macro row(x) %}{{ x }}{% endmacro %}"
        "{% set title = AppName() %}"
        "{{ row(title) }}{{ range(2) | list }}{{ Unknown(1) }}{{ x | nofilter }}"
        "{% if x is defined %}{% endif %}{% if x is odder %}{% endif %}{{ i18n.tr('k') }}"
    )

    assert missing_helpers(env.parse(source), html_helpers, env) == {"Unknown", "|nofilter", "is odder"}


def test_shipped_page_templates_validate(html_helpers):
    renderer = TemplateRenderer(html_helpers)
    names = renderer.page_template_names()

    assert set(names) == {"repo/settings/options.html", "org/header.html"}
    assert validate_templates(renderer.env, html_helpers, names) == 2


def test_shipped_mail_templates_validate(html_helpers, text_helpers):
    assert MailRenderer(html_helpers, text_helpers).validate() == {}


def test_validate_templates_fails_fast(tmp_path, html_helpers, caplog):
    (tmp_path / "ok.html").write_text("{{ AppName() }}", encoding="utf-8")
    (tmp_path / "bad.html").write_text("{{ NoSuchHelper() }}{{ 1 | nofilter }}", encoding="utf-8")
    env = build_environment(html_helpers, tmp_path)

    with pytest.raises(HelperRegistryException) as exc_info:
        validate_templates(env, html_helpers)

    assert exc_info.value.details == {"templates": {"bad.html": ["NoSuchHelper", "|nofilter"]}}
    assert "Templates reference unregistered helpers" in caplog.text


def test_text_registry_rejects_html_helpers(tmp_path, text_helpers):
    (tmp_path / "subject.txt").write_text("{{ Safe(x) }}", encoding="utf-8")
    env = build_environment(text_helpers, tmp_path)

    with pytest.raises(HelperRegistryException):
        validate_templates(env, text_helpers)
