"""Custom exceptions for the Zoom meeting launcher."""


class ZoomMeetingError(Exception):
    """Base exception for Zoom meeting launcher errors."""

    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__(message)
        self.cause = cause


class ConfigurationError(ZoomMeetingError):
    """Raised when the credentials file is missing, malformed or incomplete."""

    pass


class AuthenticationError(ZoomMeetingError):
    """Raised when no access token could be obtained from the token endpoint."""

    def __init__(self, message: str | None = None, cause: Exception | None = None):
        default_msg = "Failed to retrieve access token"
        super().__init__(message or default_msg, cause)


class NetworkError(ZoomMeetingError):
    """Raised when a request cannot be built or sent."""

    pass


class ResponseParseError(ZoomMeetingError):
    """Raised when a Zoom endpoint returns a body that cannot be decoded."""

    pass


class ZoomAPIError(ZoomMeetingError):
    """Raised when a Zoom endpoint answers with a non-2xx status."""

    def __init__(
        self, message: str, status_code: int | None = None, cause: Exception | None = None
    ):
        super().__init__(message, cause)
        self.status_code = status_code


class MeetingCreationError(ZoomMeetingError):
    """Raised when the meeting could not be created.

    The specific failure (network, status or parse) is kept in ``cause``.
    """

    pass


class OutputError(ZoomMeetingError):
    """Raised when the join link cannot be handed to the desktop."""

    pass


class ClipboardError(OutputError):
    """Raised when copying to the system clipboard fails."""

    pass


class BrowserOpenError(OutputError):
    """Raised when the default URL handler cannot be invoked."""

    def __init__(self, url: str, cause: Exception | None = None):
        super().__init__(f"Error opening URL: {url}", cause)
        self.url = url
