"""Unit tests for the page controllers."""

import pytest

from forge_ui.exceptions import (
    OrganizationNotFoundException,
    PermissionDeniedException,
    RepositoryNotFoundException,
)
from forge_ui.models.organization import OrganizationSnapshot, Visibility
from forge_ui.services.repository_service import get_org_header_view, get_repo_settings_view, is_site_admin


def test_is_site_admin(mock_settings):
    assert is_site_admin("root", mock_settings) is True
    assert is_site_admin("ROOT", mock_settings) is True
    assert is_site_admin("alice", mock_settings) is False
    assert is_site_admin(None, mock_settings) is False


@pytest.mark.asyncio
async def test_repository_owner_gets_settings(repository_store, mock_settings):
    await repository_store.initialize()

    view = await get_repo_settings_view(repository_store, "alice", "demo", "alice", mock_settings)

    assert view.is_owner is True
    assert view.is_admin is False
    assert view.viewer_name == "alice"
    assert view.repo.full_name == "alice/demo"


@pytest.mark.asyncio
async def test_site_admin_owns_every_repository(repository_store, mock_settings):
    await repository_store.initialize()

    view = await get_repo_settings_view(repository_store, "alice", "demo", "root", mock_settings)

    assert view.is_owner is True
    assert view.is_admin is True


@pytest.mark.asyncio
async def test_organization_owner_owns_its_repositories(repository_store, mock_settings):
    await repository_store.initialize()

    view = await get_repo_settings_view(repository_store, "acme", "upstream", "Carol", mock_settings)

    assert view.is_owner is True


@pytest.mark.asyncio
@pytest.mark.parametrize("viewer", [None, "dave", "bob"])
async def test_non_owners_are_denied(repository_store, mock_settings, viewer):
    await repository_store.initialize()

    with pytest.raises(PermissionDeniedException):
        await get_repo_settings_view(repository_store, "acme", "upstream", viewer, mock_settings)


@pytest.mark.asyncio
async def test_unknown_repository(repository_store, mock_settings):
    await repository_store.initialize()

    with pytest.raises(RepositoryNotFoundException) as exc_info:
        await get_repo_settings_view(repository_store, "alice", "missing", "alice", mock_settings)

    assert exc_info.value.details == {"owner": "alice", "repo": "missing"}


@pytest.mark.asyncio
async def test_force_private_is_passed_to_view(repository_store, mock_settings):
    await repository_store.initialize()
    settings = mock_settings.model_copy(update={"force_private": True})

    view = await get_repo_settings_view(repository_store, "alice", "demo", "alice", settings)

    assert view.force_private is True


@pytest.mark.asyncio
async def test_public_org_header_for_anonymous(repository_store, mock_settings):
    await repository_store.initialize()

    view = await get_org_header_view(repository_store, "acme", None, mock_settings)

    assert view.is_member is False
    assert view.is_owner is False
    assert view.avatar_link == (
        "https://secure.gravatar.com/avatar/04fdf7a0c96daa60840b3e54e457d81d?d=identicon&s=100"
    )


@pytest.mark.asyncio
async def test_org_roles(repository_store, mock_settings):
    await repository_store.initialize()

    owner = await get_org_header_view(repository_store, "acme", "carol", mock_settings)
    member = await get_org_header_view(repository_store, "acme", "erin", mock_settings)

    assert owner.is_owner is True and owner.is_member is True
    assert member.is_owner is False and member.is_member is True


@pytest.mark.asyncio
@pytest.mark.parametrize("viewer", [None, "dave"])
async def test_private_org_hidden_from_non_members(repository_store, mock_settings, viewer):
    await repository_store.initialize()

    with pytest.raises(OrganizationNotFoundException):
        await get_org_header_view(repository_store, "secret", viewer, mock_settings)


@pytest.mark.asyncio
async def test_private_org_visible_to_site_admin(repository_store, mock_settings):
    await repository_store.initialize()

    view = await get_org_header_view(repository_store, "secret", "root", mock_settings)

    assert view.is_owner is True


@pytest.mark.asyncio
async def test_limited_org_requires_sign_in(repository_store, mock_settings):
    await repository_store.initialize()
    await repository_store.put_organization(OrganizationSnapshot(name="guild", visibility=Visibility.LIMITED))

    with pytest.raises(OrganizationNotFoundException):
        await get_org_header_view(repository_store, "guild", None, mock_settings)

    view = await get_org_header_view(repository_store, "guild", "bob", mock_settings)
    assert view.is_member is False
    assert view.avatar_link == "/sub/img/avatar_default.png"


@pytest.mark.asyncio
async def test_unknown_org(repository_store, mock_settings):
    await repository_store.initialize()

    with pytest.raises(OrganizationNotFoundException):
        await get_org_header_view(repository_store, "nobody", "alice", mock_settings)
