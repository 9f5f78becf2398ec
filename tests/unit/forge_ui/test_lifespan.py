"""Unit tests for application startup."""

import json

import pytest
from fastapi import FastAPI

from forge_ui.core.lifespan import build_renderers, lifespan
from forge_ui.exceptions import ConfigurationException, HelperRegistryException
from forge_ui.views.mail_renderer import MailRenderer
from forge_ui.views.template_renderer import TemplateRenderer


def test_build_renderers(mock_settings):
    template_renderer, mail_renderer = build_renderers(mock_settings)

    assert isinstance(template_renderer, TemplateRenderer)
    assert isinstance(mail_renderer, MailRenderer)
    assert mail_renderer.html_helpers is template_renderer.helpers


def test_build_renderers_fails_fast(mock_settings, monkeypatch):
    """Test a template calling an unregistered helper stops startup."""
    from types import MappingProxyType

    from forge_ui.core import lifespan as lifespan_module

    real_build = lifespan_module.build_html_helpers

    def without_svg(settings):
        helpers = dict(real_build(settings))
        del helpers["svg"]
        return MappingProxyType(helpers)

    monkeypatch.setattr(lifespan_module, "build_html_helpers", without_svg)

    with pytest.raises(HelperRegistryException) as exc_info:
        build_renderers(mock_settings)

    assert "svg" in exc_info.value.details["templates"]["repo/settings/options.html"]


@pytest.mark.asyncio
async def test_lifespan_sets_state_and_cleans_up(mock_settings, repository_store):
    app = FastAPI()
    app.state.settings = mock_settings
    app.state.repository_store = repository_store

    async with lifespan(app):
        assert app.state.request_count == 0
        assert app.state.template_renderer is not None
        assert app.state.mail_renderer is not None
        assert (await repository_store.count())["repositories"] == 2

    assert (await repository_store.count())["repositories"] == 0


@pytest.mark.asyncio
async def test_lifespan_loads_seed_file(mock_settings, tmp_path):
    seed = tmp_path / "seed.json"
    seed.write_text(json.dumps({"repositories": [{"owner_name": "bob", "name": "tools"}]}), encoding="utf-8")
    app = FastAPI()
    app.state.settings = mock_settings.model_copy(update={"seed_file": seed})

    async with lifespan(app):
        repo = await app.state.repository_store.get_repository("bob", "tools")
        assert repo is not None


@pytest.mark.asyncio
async def test_lifespan_rejects_bad_seed_file(mock_settings, tmp_path):
    app = FastAPI()
    app.state.settings = mock_settings.model_copy(update={"seed_file": tmp_path / "missing.json"})

    with pytest.raises(ConfigurationException):
        async with lifespan(app):
            pass
