"""Custom exceptions for Forge UI with proper HTTP status codes."""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Error codes for structured error responses."""

    # Generic errors
    FORGE_UI_ERROR = "FORGE_UI_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # Template errors
    TEMPLATE_ERROR = "TEMPLATE_ERROR"
    HELPER_ARGUMENT_ERROR = "HELPER_ARGUMENT_ERROR"
    HELPER_REGISTRY_ERROR = "HELPER_REGISTRY_ERROR"
    MARKUP_RENDER_ERROR = "MARKUP_RENDER_ERROR"

    # Data errors
    REPOSITORY_NOT_FOUND = "REPOSITORY_NOT_FOUND"
    ORGANIZATION_NOT_FOUND = "ORGANIZATION_NOT_FOUND"
    PERMISSION_DENIED = "PERMISSION_DENIED"

    # Configuration errors
    CONFIG_ERROR = "CONFIG_ERROR"


class ForgeUIException(Exception):
    """Base exception for presentation layer errors with HTTP status code support.

    All custom exceptions inherit from this class so the error handlers can
    turn them into consistent responses.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.FORGE_UI_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        """Initialize exception.

        Args:
            message: Human-readable error message
            code: Error code from ErrorCode enum
            status_code: HTTP status code (default 500)
            details: Additional error context/details
        """
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


class TemplateHelperException(ForgeUIException):
    """A template helper was called with arguments it cannot handle."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(
            message,
            code=ErrorCode.HELPER_ARGUMENT_ERROR,
            status_code=400,
            details=details,
        )


class HelperRegistryException(ForgeUIException):
    """A template references a helper that is not registered."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(
            message,
            code=ErrorCode.HELPER_REGISTRY_ERROR,
            status_code=500,
            details=details,
        )


class MarkupRenderException(ForgeUIException):
    """The markup engine failed to render user content."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(
            message,
            code=ErrorCode.MARKUP_RENDER_ERROR,
            status_code=500,
            details=details,
        )


class MailTemplateNotFoundException(ForgeUIException):
    """No usable mail template is registered under the requested name."""

    def __init__(self, name: str):
        super().__init__(
            f"Mail template {name} is not available",
            code=ErrorCode.TEMPLATE_ERROR,
            status_code=500,
            details={"template": name},
        )


class RepositoryNotFoundException(ForgeUIException):
    """Repository does not exist."""

    def __init__(self, owner: str, repo: str):
        super().__init__(
            f"Repository {owner}/{repo} does not exist",
            code=ErrorCode.REPOSITORY_NOT_FOUND,
            status_code=404,
            details={"owner": owner, "repo": repo},
        )


class OrganizationNotFoundException(ForgeUIException):
    """Organization does not exist."""

    def __init__(self, org: str):
        super().__init__(
            f"Organization {org} does not exist",
            code=ErrorCode.ORGANIZATION_NOT_FOUND,
            status_code=404,
            details={"org": org},
        )


class PermissionDeniedException(ForgeUIException):
    """Viewer lacks the capability the page requires."""

    def __init__(self, message: str = "Permission denied", details: dict[str, Any] | None = None):
        super().__init__(
            message,
            code=ErrorCode.PERMISSION_DENIED,
            status_code=403,
            details=details,
        )


class ConfigurationException(ForgeUIException):
    """Configuration errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.CONFIG_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, status_code, details)
