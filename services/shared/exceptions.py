"""Error taxonomy shared by services and the HTTP layer."""


class QuickHireError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code = 500
    default_message = "An unexpected error occurred. Please try again later."

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(QuickHireError, ValueError):
    """Missing or malformed input."""

    status_code = 400
    default_message = "Email and password are required."


class DuplicateUserError(QuickHireError):
    """A user with this email already exists."""

    status_code = 409
    default_message = "User already exists."


class InvalidCredentialsError(QuickHireError):
    """Unknown email or wrong password.

    The two cases share one message so a caller cannot tell which emails
    are registered.
    """

    status_code = 401
    default_message = "Invalid email or password."


class UnauthorizedError(QuickHireError):
    """No valid session for a route that requires one."""

    status_code = 401
    default_message = "Authentication required."


class UpstreamUnavailableError(QuickHireError):
    """The job-search API failed, timed out or returned a non-success status."""

    status_code = 502
    default_message = "Job search service is unavailable. Please try again later."


class MisconfiguredError(QuickHireError):
    """A required server-side setting is missing."""

    status_code = 500
    default_message = "Job search is not configured on this server."


class InternalError(QuickHireError):
    """Persistence or other unexpected failure."""

    status_code = 500
