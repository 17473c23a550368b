"""Exceptions raised by the Jira REST client."""


class JiraClientError(Exception):
    """Base class for all errors raised by this package."""


class JiraTransportError(JiraClientError):
    """Raised when a request cannot be built or sent to Jira."""


class JiraReadError(JiraClientError):
    """Raised when a response body cannot be read completely."""


class JiraDecodeError(JiraClientError):
    """Raised when a response payload cannot be decoded.

    The original payload is kept on ``raw`` so callers can inspect what the
    server actually returned.
    """

    def __init__(self, message: str, raw: bytes | str | None = None) -> None:
        super().__init__(message)
        self.raw = raw


class JiraValidationError(JiraClientError, ValueError):
    """Raised when a write payload is missing a required field."""

    def __init__(self, message: str, field_name: str | None = None) -> None:
        super().__init__(message)
        self.field_name = field_name


class JiraInvalidArgumentError(JiraClientError, ValueError):
    """Raised when a caller passes arguments that make a computation undefined."""
