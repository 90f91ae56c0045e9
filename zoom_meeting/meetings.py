"""Meeting creation through the Zoom REST API."""

import json
import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from enum import IntEnum
from typing import Any

import requests

from .config import MEETINGS_URL
from .exceptions import (
    MeetingCreationError,
    NetworkError,
    ResponseParseError,
    ZoomAPIError,
)

logger = logging.getLogger(__name__)

DEFAULT_TOPIC = "My Meeting"
DEFAULT_DURATION = 60


class MeetingType(IntEnum):
    """Zoom meeting types supported by the launcher."""

    INSTANT = 1
    SCHEDULED = 2


@dataclass
class MeetingRequest:
    """Body of a meeting creation request."""

    topic: str
    type: MeetingType = MeetingType.SCHEDULED
    start_time: datetime | None = None
    duration: int | None = None

    def to_payload(self) -> dict[str, Any]:
        """Serialize to the JSON object expected by the meetings endpoint.

        Unset optional fields are left out of the payload.
        """
        payload: dict[str, Any] = {"topic": self.topic, "type": int(self.type)}
        if self.start_time is not None:
            payload["start_time"] = format_start_time(self.start_time)
        if self.duration:
            payload["duration"] = self.duration
        return payload


@dataclass
class MeetingResult:
    """Created meeting as returned by Zoom."""

    join_url: str
    id: int | None = None
    start_url: str | None = None
    password: str | None = None


def format_start_time(value: datetime) -> str:
    """Render a start time as RFC 3339 with the local offset for naive values."""
    if value.tzinfo is None:
        value = value.astimezone()
    return value.isoformat(timespec="seconds")


def scheduled_meeting(
    topic: str = DEFAULT_TOPIC,
    start_time: datetime | None = None,
    duration: int = DEFAULT_DURATION,
    meeting_type: MeetingType = MeetingType.SCHEDULED,
) -> MeetingRequest:
    """Build the default meeting request: starting now, one hour long."""
    return MeetingRequest(
        topic=topic,
        type=MeetingType(meeting_type),
        start_time=start_time or datetime.now().astimezone(),
        duration=duration,
    )


def _parse_meeting(body: bytes) -> MeetingResult:
    try:
        data = json.loads(body)
    except ValueError as e:
        raise ResponseParseError(f"Error decoding meeting response: {e}", cause=e)

    if not isinstance(data, dict):
        raise ResponseParseError("Error decoding meeting response: expected a JSON object")

    join_url = data.get("join_url")
    if not join_url or not isinstance(join_url, str):
        raise ResponseParseError("Meeting response does not contain a join_url")

    return MeetingResult(
        join_url=join_url,
        id=data.get("id"),
        start_url=data.get("start_url"),
        password=data.get("password"),
    )


def create_meeting(
    request: MeetingRequest,
    token_provider: Callable[[], str],
    *,
    session: Any = None,
    api_url: str = MEETINGS_URL,
    timeout: float | None = None,
) -> MeetingResult:
    """Create a meeting and return its join link.

    A new access token is requested from ``token_provider`` for every call.

    Args:
        request: Meeting to create.
        token_provider: Callable returning a bearer token.
        session: Object with a requests-compatible ``post`` method. Defaults
            to the ``requests`` module itself.
        api_url: Meetings endpoint of the user.
        timeout: Request timeout in seconds, None for no timeout.

    Returns:
        MeetingResult with the join URL.

    Raises:
        MeetingCreationError: If the request fails or the response cannot be
            parsed. The underlying error is available as ``cause``.
        AuthenticationError: Propagated from the token provider.
    """
    http = session if session is not None else requests
    payload = request.to_payload()

    # Token errors keep their own classification
    token = token_provider()
    headers = {
        "Authorization": f"Bearer {token}",
        "Content-Type": "application/json",
    }

    logger.info(f"Creating meeting: {payload}")
    try:
        with http.post(api_url, data=json.dumps(payload), headers=headers, timeout=timeout) as resp:
            body = resp.content
            if not resp.ok:
                raise ZoomAPIError(
                    f"Meeting request failed with HTTP {resp.status_code}: {resp.text[:200]}",
                    status_code=resp.status_code,
                )
        result = _parse_meeting(body)
    except requests.RequestException as e:
        cause = NetworkError(f"Error sending meeting request: {e}", cause=e)
        raise MeetingCreationError(f"Error creating meeting: {cause}", cause=cause)
    except (ZoomAPIError, ResponseParseError) as e:
        raise MeetingCreationError(f"Error creating meeting: {e}", cause=e)

    logger.info(f"Meeting created: {result.join_url}")
    return result
