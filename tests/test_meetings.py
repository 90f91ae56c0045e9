import json
from datetime import datetime, timedelta, timezone

import pytest

from conftest import FakeResponse, FakeSession
from zoom_meeting.auth import TokenFetcher
from zoom_meeting.config import MEETINGS_URL
from zoom_meeting.exceptions import (
    AuthenticationError,
    MeetingCreationError,
    NetworkError,
    ResponseParseError,
    ZoomAPIError,
)
from zoom_meeting.meetings import (
    MeetingRequest,
    MeetingType,
    create_meeting,
    format_start_time,
    scheduled_meeting,
)

START = datetime(2026, 10, 18, 9, 30, tzinfo=timezone(timedelta(hours=2)))


def test_payload_includes_every_set_field():
    request = MeetingRequest("My Meeting", MeetingType.SCHEDULED, START, 60)

    assert request.to_payload() == {
        "topic": "My Meeting",
        "type": 2,
        "start_time": "2026-10-18T09:30:00+02:00",
        "duration": 60,
    }


def test_payload_omits_unset_optional_fields():
    request = MeetingRequest("Quick sync", MeetingType.INSTANT)

    assert request.to_payload() == {"topic": "Quick sync", "type": 1}


def test_format_start_time_drops_microseconds():
    value = datetime(2026, 1, 2, 3, 4, 5, 678901, tzinfo=timezone.utc)

    assert format_start_time(value) == "2026-01-02T03:04:05+00:00"


def test_format_start_time_localizes_naive_values():
    rendered = format_start_time(datetime(2026, 1, 2, 3, 4, 5))

    assert rendered.startswith("2026-01-02T03:04:05")
    assert datetime.fromisoformat(rendered).tzinfo is not None


def test_scheduled_meeting_defaults():
    request = scheduled_meeting(start_time=START)

    assert request.topic == "My Meeting"
    assert request.type is MeetingType.SCHEDULED
    assert request.duration == 60
    assert request.start_time == START


def test_scheduled_meeting_starts_now_by_default():
    before = datetime.now().astimezone()
    request = scheduled_meeting()

    assert request.start_time >= before - timedelta(seconds=1)
    assert request.start_time.tzinfo is not None


def test_create_meeting_returns_join_url():
    session = FakeSession(
        FakeResponse(201, {"id": 999, "join_url": "https://provider.example/j/999", "password": "x1"})
    )
    request = MeetingRequest("My Meeting", MeetingType.SCHEDULED, START, 60)

    result = create_meeting(request, lambda: "tok123", session=session)

    assert result.join_url == "https://provider.example/j/999"
    assert result.id == 999
    assert result.password == "x1"

    [call] = session.calls
    assert call["url"] == MEETINGS_URL
    assert call["headers"]["Authorization"] == "Bearer tok123"
    assert call["headers"]["Content-Type"] == "application/json"
    assert json.loads(call["data"]) == request.to_payload()


def test_create_meeting_fetches_token_inline(credentials):
    session = FakeSession(
        FakeResponse(200, {"access_token": "tok123"}),
        FakeResponse(201, {"join_url": "https://provider.example/j/999"}),
    )
    fetcher = TokenFetcher(credentials, session=session)

    result = create_meeting(MeetingRequest("My Meeting"), fetcher, session=session)

    assert result.join_url == "https://provider.example/j/999"
    assert [call["url"] for call in session.calls] == [
        "https://zoom.us/oauth/token?grant_type=account_credentials",
        MEETINGS_URL,
    ]
    assert session.calls[1]["headers"]["Authorization"] == "Bearer tok123"


def test_each_meeting_uses_a_new_token():
    tokens = iter(["t1", "t2"])
    session = FakeSession(
        FakeResponse(201, {"join_url": "https://provider.example/j/1"}),
        FakeResponse(201, {"join_url": "https://provider.example/j/2"}),
    )

    create_meeting(MeetingRequest("a"), lambda: next(tokens), session=session)
    create_meeting(MeetingRequest("b"), lambda: next(tokens), session=session)

    assert [c["headers"]["Authorization"] for c in session.calls] == ["Bearer t1", "Bearer t2"]


def test_invalid_json_response_is_a_creation_error():
    response = FakeResponse(201, raw=b"{invalid")

    with pytest.raises(MeetingCreationError) as exc_info:
        create_meeting(MeetingRequest("x"), lambda: "tok", session=FakeSession(response))

    assert isinstance(exc_info.value.cause, ResponseParseError)
    assert response.closed


def test_missing_join_url_is_a_creation_error():
    session = FakeSession(FakeResponse(201, {"id": 1}))

    with pytest.raises(MeetingCreationError) as exc_info:
        create_meeting(MeetingRequest("x"), lambda: "tok", session=session)

    assert isinstance(exc_info.value.cause, ResponseParseError)


def test_error_status_is_a_creation_error():
    response = FakeResponse(400, {"code": 300, "message": "Invalid start_time"})

    with pytest.raises(MeetingCreationError) as exc_info:
        create_meeting(MeetingRequest("x"), lambda: "tok", session=FakeSession(response))

    assert isinstance(exc_info.value.cause, ZoomAPIError)
    assert exc_info.value.cause.status_code == 400
    assert response.closed


def test_transport_failure_is_a_creation_error(network_error):
    with pytest.raises(MeetingCreationError) as exc_info:
        create_meeting(MeetingRequest("x"), lambda: "tok", session=FakeSession(network_error))

    assert isinstance(exc_info.value.cause, NetworkError)
    assert exc_info.value.cause.cause is network_error


def test_token_failure_propagates_without_meeting_request():
    session = FakeSession()

    def failing_provider():
        raise AuthenticationError()

    with pytest.raises(AuthenticationError):
        create_meeting(MeetingRequest("x"), failing_provider, session=session)

    assert session.calls == []
