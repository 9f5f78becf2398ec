"""Template helper registries.

Two registries map stable helper names to functions: one for HTML templates
and a smaller one for plain-text templates (mail subjects). They are built
once at startup, frozen, and handed to the renderers that install them.
``validate_templates`` checks every template against its registry so a
missing helper fails at startup instead of at first render.
"""

import platform
from collections.abc import Callable, Mapping
from functools import partial
from types import MappingProxyType
from typing import Any

from jinja2 import Environment, nodes
from jinja2.defaults import DEFAULT_NAMESPACE

from forge_ui.config import Settings
from forge_ui.exceptions import HelperRegistryException
from forge_ui.helpers import formatting, icons, plural, rendering, safe, structures, timeutil
from forge_ui.helpers.activity import action_content_to_commits
from forge_ui.helpers.avatar import avatar_link
from forge_ui.logging_config import get_logger, log_with_context
from forge_ui.protocols import MarkupRenderer
from forge_ui.services import mirror_service
from forge_ui.services.markup_service import CommitMessageRenderer, render_markdown

logger = get_logger(__name__)

HelperRegistry = Mapping[str, Callable[..., Any]]


def _runtime_version() -> str:
    return f"{platform.python_implementation()} {platform.python_version()}"


def _site_helpers(settings: Settings) -> dict[str, Callable[..., Any]]:
    """Helpers shared by both registries that expose site settings."""
    return {
        "PyVer": _runtime_version,
        "AppName": lambda: settings.app_name,
        "AppSubUrl": lambda: settings.app_sub_url,
        "AppUrl": lambda: settings.app_url,
        "AppVer": lambda: settings.app_ver,
        "AppBuiltWith": lambda: settings.app_built_with,
        "AppDomain": lambda: settings.domain,
    }


def _value_helpers() -> dict[str, Callable[..., Any]]:
    """Pure helpers shared by both registries."""
    return {
        "RawTimeSince": timeutil.raw_time_since,
        "DateFmtLong": formatting.date_fmt_long,
        "DateFmtShort": formatting.date_fmt_short,
        "List": structures.iter_list,
        "SubStr": formatting.sub_str,
        "EllipsisString": formatting.ellipsis_string,
        "URLJoin": formatting.url_join,
        "Dict": structures.make_dict,
        "dict": structures.merge_dict,
        "Printf": formatting.printf,
        "Sec2Time": formatting.sec_to_time,
        "ParseDeadline": formatting.parse_deadline,
        "percentage": formatting.percentage,
        "Add": formatting.add,
        "Mul": formatting.mul,
    }


def build_html_helpers(settings: Settings, renderer: MarkupRenderer | None = None) -> HelperRegistry:
    """Build the frozen registry for HTML templates.

    Args:
        settings: Site settings exposed through the getter helpers
        renderer: Markup engine for the content renderers (defaults to the
            commit message linker rooted at the site sub path)

    Returns:
        Read-only mapping of helper name to function
    """
    renderer = renderer or CommitMessageRenderer(user_link_prefix=settings.app_sub_url)

    helpers: dict[str, Callable[..., Any]] = {
        **_site_helpers(settings),
        **_value_helpers(),
        # Site settings
        "UseHTTPS": lambda: settings.use_https,
        "StaticUrlPrefix": lambda: settings.static_url_prefix,
        "DisableGravatar": lambda: settings.disable_gravatar,
        "DefaultShowFullName": lambda: settings.default_show_full_name,
        "ShowFooterTemplateLoadTime": lambda: settings.show_footer_template_load_time,
        "AllowedReactions": lambda: list(settings.reactions),
        "ThemeColorMetaTag": lambda: settings.theme_color_meta_tag,
        "MetaAuthor": lambda: settings.meta_author,
        "MetaDescription": lambda: settings.meta_description,
        "MetaKeywords": lambda: settings.meta_keywords,
        "UseServiceWorker": lambda: settings.use_service_worker,
        "DefaultTheme": lambda: settings.default_theme,
        "DisableGitHooks": lambda: settings.disable_git_hooks,
        "DisableWebhooks": lambda: settings.disable_webhooks,
        "DisableImportLocal": lambda: not settings.import_local_paths,
        "DisableSSH": lambda: settings.ssh_disabled,
        "DisableOAuth2": lambda: not settings.oauth2_enabled,
        "Disable2FA": lambda: settings.disable_2fa,
        "NotificationSettings": lambda: settings.notification_settings,
        # Formatting
        "LoadTimes": formatting.load_times,
        "TimeSince": timeutil.time_since,
        "TimeSinceUnix": timeutil.time_since_unix,
        "FileSize": formatting.file_size,
        "SizeFmt": formatting.file_size,
        "PrettyNumber": formatting.pretty_number,
        "CountFmt": formatting.format_number_si,
        "Subtract": formatting.subtract,
        "DiffTypeToStr": formatting.diff_type_to_str,
        "DiffLineTypeToStr": formatting.diff_line_type_to_str,
        "Sha1": formatting.sha1,
        "ShortSha": formatting.short_sha,
        "MD5": formatting.md5,
        "PathEscape": formatting.path_escape,
        "EscapePound": formatting.escape_pound,
        "PathEscapeSegments": formatting.path_escape_segments,
        "SubJumpablePath": formatting.sub_jumpable_path,
        "FilenameIsImage": formatting.filename_is_image,
        "Json": formatting.to_json,
        "JsonPrettyPrint": formatting.json_pretty_print,
        "contain": structures.contain,
        "TrN": plural.tr_n,
        # Safe markup
        "Safe": safe.safe,
        "SafeJS": safe.safe_js,
        "Str2html": safe.str2html,
        "Escape": safe.escape,
        # Content
        "RenderCommitMessage": partial(rendering.render_commit_message, renderer=renderer),
        "RenderCommitMessageLink": partial(rendering.render_commit_message_link, renderer=renderer),
        "RenderCommitMessageLinkSubject": partial(rendering.render_commit_message_link_subject, renderer=renderer),
        "RenderCommitBody": partial(rendering.render_commit_body, renderer=renderer),
        "RenderNote": partial(rendering.render_note, renderer=renderer),
        "RenderEmoji": partial(rendering.render_emoji, renderer=renderer),
        "RenderEmojiPlain": rendering.render_emoji_plain,
        "RenderMarkdown": render_markdown,
        "ReactionToEmoji": partial(rendering.reaction_to_emoji, static_url_prefix=settings.static_url_prefix),
        "IsMultilineCommitMessage": rendering.is_multiline_commit_message,
        "ActionContent2Commits": action_content_to_commits,
        # Icons
        "AvatarLink": partial(
            avatar_link,
            static_url_prefix=settings.static_url_prefix,
            disable_gravatar=settings.disable_gravatar,
        ),
        "ActionIcon": icons.action_icon,
        "MigrationIcon": icons.migration_icon,
        "EntryIcon": icons.entry_icon,
        "CommitType": icons.commit_type,
        "svg": icons.svg,
        "SortArrow": icons.sort_arrow,
        # Mirror
        "MirrorAddress": mirror_service.address,
        "MirrorFullAddress": mirror_service.address_no_credentials,
        "MirrorUserName": mirror_service.username,
        "MirrorPassword": mirror_service.password,
    }
    return MappingProxyType(helpers)


def build_text_helpers(settings: Settings) -> HelperRegistry:
    """Build the frozen registry for plain-text templates.

    A subset of the HTML registry whose helpers never return markup.
    """
    helpers: dict[str, Callable[..., Any]] = {
        **_site_helpers(settings),
        **_value_helpers(),
        "TimeSince": timeutil.raw_time_since,
        "TimeSinceUnix": timeutil.raw_time_since_unix,
        "Escape": safe.escape_text,
    }
    return MappingProxyType(helpers)


def missing_helpers(template: nodes.Template, registry: HelperRegistry, env: Environment) -> set[str]:
    """Names called, filtered or tested in ``template`` that nothing resolves.

    Called names must be registry helpers, Jinja2 builtins or macros defined
    in the template; filters and tests must exist on ``env``.
    """
    macros = {macro.name for macro in template.find_all(nodes.Macro)}
    stored = {name.name for name in template.find_all(nodes.Name) if name.ctx in ("store", "param")}
    resolvable = set(registry) | set(DEFAULT_NAMESPACE) | macros | stored

    missing = set()
    for call in template.find_all(nodes.Call):
        if isinstance(call.node, nodes.Name) and call.node.name not in resolvable:
            missing.add(call.node.name)
    for flt in template.find_all(nodes.Filter):
        if flt.name not in env.filters:
            missing.add(f"|{flt.name}")
    for test in template.find_all(nodes.Test):
        if test.name not in env.tests:
            missing.add(f"is {test.name}")
    return missing


def validate_templates(env: Environment, registry: HelperRegistry, names: list[str] | None = None) -> int:
    """Check templates of ``env`` against ``registry``.

    Args:
        env: Environment whose loader provides the templates
        registry: Helpers installed as globals of ``env``
        names: Templates to check (default: every template of ``env``)

    Returns:
        Number of templates checked

    Raises:
        HelperRegistryException: If any template references an unknown helper
    """
    problems: dict[str, list[str]] = {}
    if names is None:
        names = env.list_templates()
    for name in names:
        source, _, _ = env.loader.get_source(env, name)
        missing = missing_helpers(env.parse(source), registry, env)
        if missing:
            problems[name] = sorted(missing)

    if problems:
        log_with_context(
            logger,
            "critical",
            "Templates reference unregistered helpers",
            problems=problems,
            event_type="helper_registry_error",
        )
        raise HelperRegistryException("Templates reference unregistered helpers", details={"templates": problems})

    log_with_context(
        logger,
        "info",
        "Template helpers validated",
        template_count=len(names),
        helper_count=len(registry),
        event_type="helper_registry_ready",
    )
    return len(names)
