"""Mirror remote address accessors for the settings page.

The remote address of a pull mirror may embed credentials. The page shows a
redacted address, and fills the username/password fields separately.
"""

from urllib.parse import unquote, urlsplit, urlunsplit

from forge_ui.models.repository import MirrorConfig

CREDENTIALS_PLACEHOLDER = "<credentials>"


def _split(mirror: MirrorConfig | None):
    if mirror is None or not mirror.remote_address:
        return None
    try:
        parts = urlsplit(mirror.remote_address)
        parts.port  # raises on a malformed port
    except ValueError:
        return None
    return parts


def _with_userinfo(parts, userinfo: str) -> str:
    host = parts.hostname or ""
    if ":" in host:
        host = f"[{host}]"
    if parts.port is not None:
        host = f"{host}:{parts.port}"
    netloc = f"{userinfo}@{host}" if userinfo else host
    return urlunsplit((parts.scheme, netloc, parts.path, parts.query, parts.fragment))


def address(mirror: MirrorConfig | None) -> str:
    """Remote address with any credentials replaced by a placeholder."""
    parts = _split(mirror)
    if parts is None:
        return mirror.remote_address if mirror else ""
    if parts.username is None and parts.password is None:
        return mirror.remote_address
    return _with_userinfo(parts, CREDENTIALS_PLACEHOLDER)


def address_no_credentials(mirror: MirrorConfig | None) -> str:
    """Remote address with the user info removed entirely."""
    parts = _split(mirror)
    if parts is None:
        return mirror.remote_address if mirror else ""
    if not parts.netloc:
        return mirror.remote_address
    return _with_userinfo(parts, "")


def username(mirror: MirrorConfig | None) -> str:
    parts = _split(mirror)
    if parts is None or parts.username is None:
        return ""
    return unquote(parts.username)


def password(mirror: MirrorConfig | None) -> str:
    parts = _split(mirror)
    if parts is None or parts.password is None:
        return ""
    return unquote(parts.password)
