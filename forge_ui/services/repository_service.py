"""Page controllers: assemble view models from data layer snapshots."""

from forge_ui.config import Settings, get_settings
from forge_ui.exceptions import (
    OrganizationNotFoundException,
    PermissionDeniedException,
    RepositoryNotFoundException,
)
from forge_ui.helpers.avatar import avatar_link
from forge_ui.logging_config import get_logger, log_with_context
from forge_ui.models.organization import Visibility
from forge_ui.models.views import OrgHeaderView, RepoSettingsView
from forge_ui.protocols import RepositorySource

logger = get_logger(__name__)


def is_site_admin(viewer: str | None, settings: Settings) -> bool:
    if not viewer:
        return False
    return viewer.lower() in {admin.lower() for admin in settings.site_admins}


async def get_repo_settings_view(
    source: RepositorySource,
    owner: str,
    name: str,
    viewer: str | None,
    settings: Settings | None = None,
) -> RepoSettingsView:
    """Build the settings page view for ``viewer``.

    The viewer owns the repository when they are its owner, an owner of the
    organization that holds it, or a site admin.

    Args:
        source: Data layer access
        owner: Repository owner name
        name: Repository name
        viewer: Name of the signed in viewer (None for anonymous)
        settings: Settings instance (defaults to singleton)

    Returns:
        RepoSettingsView for the viewer

    Raises:
        RepositoryNotFoundException: If the repository does not exist
        PermissionDeniedException: If the viewer may not manage the repository
    """
    if settings is None:
        settings = get_settings()

    repo = await source.get_repository(owner, name)
    if repo is None:
        raise RepositoryNotFoundException(owner, name)

    is_admin = is_site_admin(viewer, settings)
    is_owner = is_admin
    if viewer and not is_owner:
        if viewer.lower() == repo.owner_name.lower():
            is_owner = True
        else:
            org = await source.get_organization(repo.owner_name)
            is_owner = org is not None and viewer.lower() in {o.lower() for o in org.owners}

    if not is_owner:
        log_with_context(
            logger,
            "warning",
            "Viewer may not manage repository",
            repository=repo.full_name,
            viewer=viewer or "anonymous",
            event_type="permission_denied",
        )
        raise PermissionDeniedException(
            "Viewer may not manage this repository",
            details={"repository": repo.full_name, "viewer": viewer},
        )

    return RepoSettingsView(
        repo=repo,
        viewer_name=viewer or "",
        is_owner=is_owner,
        is_admin=is_admin,
        force_private=settings.force_private,
    )


async def get_org_header_view(
    source: RepositorySource,
    org_name: str,
    viewer: str | None,
    settings: Settings | None = None,
) -> OrgHeaderView:
    """Build the organization header view for ``viewer``.

    Raises:
        OrganizationNotFoundException: If the organization does not exist or
            is hidden from the viewer
    """
    if settings is None:
        settings = get_settings()

    org = await source.get_organization(org_name)
    if org is None:
        raise OrganizationNotFoundException(org_name)

    viewer_key = (viewer or "").lower()
    is_admin = is_site_admin(viewer, settings)
    is_owner = is_admin or viewer_key in {o.lower() for o in org.owners}
    is_member = is_owner or viewer_key in {m.lower() for m in org.members}

    if org.visibility == Visibility.PRIVATE and not is_member:
        # Private organizations are indistinguishable from missing ones
        raise OrganizationNotFoundException(org_name)
    if org.visibility == Visibility.LIMITED and not viewer:
        raise OrganizationNotFoundException(org_name)

    return OrgHeaderView(
        org=org,
        avatar_link=avatar_link(
            org.email,
            static_url_prefix=settings.static_url_prefix,
            disable_gravatar=settings.disable_gravatar,
            size=100,
        ),
        is_owner=is_owner,
        is_member=is_member,
    )
