"""Linear meeting launch: credentials, meeting, clipboard, browser."""

import logging
from collections.abc import Callable
from datetime import datetime
from typing import Any

import requests

from .auth import TokenFetcher
from .config import Settings, get_settings
from .credentials import Credentials, load_credentials
from .meetings import MeetingRequest, MeetingResult, MeetingType, create_meeting, scheduled_meeting
from .output import BrowserOpener, Clipboard, LinkOpener, distribute_link, get_clipboard

logger = logging.getLogger(__name__)


class MeetingLauncher:
    """Creates a Zoom meeting and hands its join link to the desktop."""

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        credentials: Credentials | None = None,
        session: Any = None,
        clipboard: Clipboard | None = None,
        opener: LinkOpener | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        """Initialize the launcher.

        Args:
            settings: Optional settings override.
            credentials: Preloaded credentials; loaded from the config file
                on ``run()`` when omitted.
            session: requests-compatible session used for both endpoints.
            clipboard: Clipboard capability (platform default if omitted).
            opener: URL opener capability (default browser if omitted).
            clock: Returns the meeting start time.
        """
        self._settings = settings or get_settings()
        self._credentials = credentials
        self._session = session
        self._clipboard = clipboard
        self._opener = opener
        self._clock = clock or (lambda: datetime.now().astimezone())

    def load_credentials(self) -> Credentials:
        if self._credentials is None:
            self._credentials = load_credentials(self._settings.config_path)
        return self._credentials

    def build_request(self) -> MeetingRequest:
        return scheduled_meeting(
            topic=self._settings.meeting_topic,
            start_time=self._clock(),
            duration=self._settings.meeting_duration,
            meeting_type=MeetingType(self._settings.meeting_type),
        )

    def create(self, request: MeetingRequest | None = None) -> MeetingResult:
        """Create the meeting without touching clipboard or browser.

        Raises:
            ConfigurationError: If credentials cannot be loaded.
            AuthenticationError: If no token could be obtained.
            MeetingCreationError: If the meeting request fails.
        """
        credentials = self.load_credentials()
        request = request or self.build_request()

        if self._session is not None:
            return self._create(credentials, request, self._session)
        with requests.Session() as session:
            return self._create(credentials, request, session)

    def _create(self, credentials: Credentials, request: MeetingRequest, session: Any) -> MeetingResult:
        token_provider = TokenFetcher(
            credentials,
            session=session,
            token_url=self._settings.token_url,
            timeout=self._settings.request_timeout,
        )
        return create_meeting(
            request,
            token_provider,
            session=session,
            api_url=self._settings.api_url,
            timeout=self._settings.request_timeout,
        )

    def distribute(self, result: MeetingResult) -> None:
        """Copy the join link and open it, as enabled in settings.

        Raises:
            OutputError: If the clipboard or the browser step fails.
        """
        clipboard = None
        if self._settings.copy_link:
            clipboard = self._clipboard or get_clipboard()
        opener = None
        if self._settings.open_link:
            opener = self._opener or BrowserOpener()
        distribute_link(result.join_url, clipboard, opener)

    def run(self, on_created: Callable[[MeetingResult], None] | None = None) -> MeetingResult:
        """Run the whole launch sequence.

        Args:
            on_created: Called with the result before the link is distributed.

        Returns:
            The created meeting.
        """
        result = self.create()
        if on_created is not None:
            on_created(result)
        self.distribute(result)
        return result
