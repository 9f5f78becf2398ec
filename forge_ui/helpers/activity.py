"""Helpers for activity feed entries."""

from pydantic import ValidationError

from forge_ui.logging_config import get_logger, log_with_context
from forge_ui.models.action import Action, PushCommits

logger = get_logger(__name__)


def action_content_to_commits(action: Action) -> PushCommits:
    """Decode the JSON commit list stored in a push action.

    Malformed content is logged and yields an empty commit list.
    """
    try:
        return PushCommits.model_validate_json(action.content)
    except ValidationError as e:
        log_with_context(
            logger,
            "error",
            "Cannot decode push commits of action",
            content=action.content,
            error=str(e),
            event_type="action_content_decode_error",
        )
        return PushCommits()
