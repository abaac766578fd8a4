import logging
import threading
import uuid
from functools import lru_cache

from django.conf import settings

from .chime import build_service
from .errors import NotFoundError, ValidationError
from .store import build_store

logger = logging.getLogger(__name__)

EXTERNAL_ID_MAX_LENGTH = 64


def external_meeting_id(title: str) -> str:
    return title[:EXTERNAL_ID_MAX_LENGTH]


def external_user_id(name: str) -> str:
    # random prefix keeps ids unique; the name is used for the roster
    return f"{uuid.uuid4().hex[:8]}#{name}"[:EXTERNAL_ID_MAX_LENGTH]


class MeetingBroker:
    """
    Maps meeting titles to hosted meetings and issues attendee credentials.

    The check-then-create in join() is not atomic unless lock_creates is set:
    two first joins for the same title can each create a hosted meeting, and
    the last one stored wins. With the lock, one lock is held per created
    title; a failed create releases its lock.
    """

    def __init__(self, service, store, lock_creates: bool = False):
        self.service = service
        self.store = store
        self.lock_creates = lock_creates
        self._title_locks: dict[str, threading.Lock] = {}
        self._title_locks_guard = threading.Lock()

    def join(self, title: str, name: str, region: str) -> dict:
        if not title or not name or not region:
            raise ValidationError("Need parameters: title, name, region")

        if self.lock_creates:
            with self._title_lock(title):
                try:
                    meeting = self._ensure_meeting(title, region)
                except Exception:
                    self._drop_title_lock(title)
                    raise
        else:
            meeting = self._ensure_meeting(title, region)

        attendee = self.service.create_attendee(
            meeting_id=meeting["Meeting"]["MeetingId"],
            external_user_id=external_user_id(name),
        )
        return {"JoinInfo": {"Meeting": meeting, "Attendee": attendee}}

    def end(self, title: str) -> dict:
        meeting = self.store.get(title) if title else None
        if meeting is None:
            raise NotFoundError(f"Meeting not found: {title}")
        self.service.delete_meeting(meeting_id=meeting["Meeting"]["MeetingId"])
        # title stays in the store; a later join reuses the deleted meeting
        return {}

    def _ensure_meeting(self, title: str, region: str) -> dict:
        meeting = self.store.get(title)
        if meeting is not None:
            return meeting

        meeting = self.service.create_meeting(
            client_request_token=str(uuid.uuid4()),
            media_region=region,
            external_meeting_id=external_meeting_id(title),
        )
        logger.info("Meeting %s created for %r", meeting["Meeting"]["MeetingId"], title)
        if self.lock_creates:
            return self.store.set_if_absent(title, meeting)
        self.store.set(title, meeting)
        return meeting

    def _title_lock(self, title: str) -> threading.Lock:
        with self._title_locks_guard:
            return self._title_locks.setdefault(title, threading.Lock())

    def _drop_title_lock(self, title: str) -> None:
        with self._title_locks_guard:
            self._title_locks.pop(title, None)


@lru_cache(maxsize=1)
def get_broker() -> MeetingBroker:
    return MeetingBroker(
        service=build_service(),
        store=build_store(),
        lock_creates=settings.MEETING_LOCK_CREATES,
    )
