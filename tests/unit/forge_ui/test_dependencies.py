"""Unit tests for FastAPI dependencies."""

from unittest.mock import MagicMock

import pytest

from forge_ui.dependencies import get_locale, get_mail_renderer, get_repository_store, get_template_renderer
from forge_ui.security import get_cors_origins, get_trusted_hosts, get_viewer_name


def _request(state=None, headers=None, cookies=None):
    request = MagicMock()
    request.app.state = state or MagicMock(spec=[])
    request.headers = headers or {}
    request.cookies = cookies or {}
    request.url.path = "/alice/demo/settings"
    return request


@pytest.mark.asyncio
@pytest.mark.parametrize("dependency", [get_template_renderer, get_mail_renderer, get_repository_store])
async def test_missing_state_raises(dependency):
    with pytest.raises(RuntimeError):
        await dependency(_request())


@pytest.mark.asyncio
async def test_state_is_returned():
    state = MagicMock()
    request = _request(state=state)

    assert await get_template_renderer(request) is state.template_renderer
    assert await get_mail_renderer(request) is state.mail_renderer
    assert await get_repository_store(request) is state.repository_store


@pytest.mark.asyncio
async def test_get_viewer_name(mock_settings):
    assert await get_viewer_name(_request(headers={"X-WEBAUTH-USER": " alice "}), mock_settings) == "alice"
    assert await get_viewer_name(_request(), mock_settings) is None


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "cookie,lang",
    [("ru-RU", "ru-RU"), ("xx-XX", "en-US"), ("../../etc/passwd", "en-US"), ("", "en-US")],
)
async def test_get_locale(mock_settings, cookie, lang):
    locale = await get_locale(_request(cookies={"lang": cookie}), mock_settings)
    assert locale.lang == lang


def test_host_and_origin_lists(mock_settings):
    settings = mock_settings.model_copy(update={"cors_origins": "https://a.example, ,https://b.example"})

    assert get_cors_origins(settings) == ["https://a.example", "https://b.example"]
    assert "testserver" in get_trusted_hosts(mock_settings)
