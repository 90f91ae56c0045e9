"""Zoom Meeting - create a Zoom meeting and open its join link.

Uses Server-to-Server OAuth (account credentials grant) with credentials
read from ~/.zoom-meeting.config.json:

- Fetches a fresh access token
- Creates a scheduled meeting for the authenticated user
- Prints the join link, copies it to the clipboard and opens it
"""

from .auth import TokenFetcher, basic_auth_header, fetch_access_token
from .config import Settings, get_settings
from .credentials import Credentials, default_config_path, load_credentials
from .exceptions import (
    ZoomMeetingError,
    ConfigurationError,
    AuthenticationError,
    NetworkError,
    ResponseParseError,
    ZoomAPIError,
    MeetingCreationError,
    OutputError,
    ClipboardError,
    BrowserOpenError,
)
from .launcher import MeetingLauncher
from .meetings import MeetingRequest, MeetingResult, MeetingType, create_meeting
from .output import BrowserOpener, Clipboard, LinkOpener, SystemClipboard, get_clipboard

__all__ = [
    # Launcher
    "MeetingLauncher",
    # Credentials
    "Credentials",
    "default_config_path",
    "load_credentials",
    # Auth
    "TokenFetcher",
    "basic_auth_header",
    "fetch_access_token",
    # Meetings
    "MeetingRequest",
    "MeetingResult",
    "MeetingType",
    "create_meeting",
    # Output
    "Clipboard",
    "LinkOpener",
    "BrowserOpener",
    "SystemClipboard",
    "get_clipboard",
    # Config
    "Settings",
    "get_settings",
    # Exceptions
    "ZoomMeetingError",
    "ConfigurationError",
    "AuthenticationError",
    "NetworkError",
    "ResponseParseError",
    "ZoomAPIError",
    "MeetingCreationError",
    "OutputError",
    "ClipboardError",
    "BrowserOpenError",
]

__version__ = "0.1.0"
