"""Avatar URLs."""

from urllib.parse import urlencode

from forge_ui.helpers.formatting import md5

GRAVATAR_SOURCE = "https://secure.gravatar.com/avatar/"
DEFAULT_AVATAR_PATH = "/img/avatar_default.png"


def avatar_link(email: str, static_url_prefix: str = "", disable_gravatar: bool = False, size: int = 0) -> str:
    """Gravatar URL for an email, or the bundled default avatar.

    The default avatar is used when gravatar is disabled or no email is known.
    """
    email = email.strip().lower()
    if disable_gravatar or not email:
        return static_url_prefix + DEFAULT_AVATAR_PATH
    query = {"d": "identicon"}
    if size > 0:
        query["s"] = str(size)
    return f"{GRAVATAR_SOURCE}{md5(email)}?{urlencode(query)}"
