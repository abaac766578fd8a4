from __future__ import annotations

import threading
import uuid

import pytest
from rest_framework.test import APIClient

from meetings.broker import MeetingBroker, get_broker
from meetings.errors import UpstreamError
from meetings.store import MemoryMeetingStore
from meetings.views import load_index_page


class FakeMeetingService:
    """Records every hosting-service call; fails on demand."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, dict]] = []
        self.fail_with: str | None = None
        self.before_create = None
        self._lock = threading.Lock()

    def create_meeting(self, client_request_token: str, media_region: str, external_meeting_id: str) -> dict:
        self._record(
            "create_meeting",
            client_request_token=client_request_token,
            media_region=media_region,
            external_meeting_id=external_meeting_id,
        )
        if self.before_create:
            self.before_create()
        return {
            "Meeting": {
                "MeetingId": str(uuid.uuid4()),
                "ExternalMeetingId": external_meeting_id,
                "MediaRegion": media_region,
                "MediaPlacement": {"AudioHostUrl": "audio.example.test:3478"},
            }
        }

    def create_attendee(self, meeting_id: str, external_user_id: str) -> dict:
        self._record("create_attendee", meeting_id=meeting_id, external_user_id=external_user_id)
        return {
            "Attendee": {
                "AttendeeId": str(uuid.uuid4()),
                "ExternalUserId": external_user_id,
                "JoinToken": "join-token",
            }
        }

    def delete_meeting(self, meeting_id: str) -> None:
        self._record("delete_meeting", meeting_id=meeting_id)

    def names(self) -> list[str]:
        return [name for name, _ in self.calls]

    def _record(self, name: str, **params) -> None:
        with self._lock:
            self.calls.append((name, params))
        if self.fail_with:
            raise UpstreamError(self.fail_with)


@pytest.fixture(autouse=True)
def _clear_caches():
    get_broker.cache_clear()
    load_index_page.cache_clear()
    yield
    get_broker.cache_clear()
    load_index_page.cache_clear()


@pytest.fixture
def service() -> FakeMeetingService:
    return FakeMeetingService()


@pytest.fixture
def store() -> MemoryMeetingStore:
    return MemoryMeetingStore()


@pytest.fixture
def broker(service, store) -> MeetingBroker:
    return MeetingBroker(service=service, store=store)


@pytest.fixture
def api(monkeypatch, broker) -> APIClient:
    monkeypatch.setattr("meetings.views.get_broker", lambda: broker)
    return APIClient()
