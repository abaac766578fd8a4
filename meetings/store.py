import json
import threading

import redis
from django.conf import settings

DEFAULT_TABLE_KEY = "meetings:table"


class MemoryMeetingStore:
    """Meeting table held in process memory, keyed by meeting title."""

    def __init__(self):
        self._meetings: dict[str, dict] = {}
        self._lock = threading.Lock()

    def get(self, title: str) -> dict | None:
        with self._lock:
            return self._meetings.get(title)

    def set(self, title: str, meeting: dict) -> None:
        with self._lock:
            self._meetings[title] = meeting

    def set_if_absent(self, title: str, meeting: dict) -> dict:
        with self._lock:
            return self._meetings.setdefault(title, meeting)

    def titles(self) -> list[str]:
        with self._lock:
            return list(self._meetings)


class RedisMeetingStore:
    """Meeting table kept as JSON values in one Redis hash."""

    def __init__(self, client: redis.Redis, key: str = DEFAULT_TABLE_KEY):
        self.client = client
        self.key = key

    def get(self, title: str) -> dict | None:
        raw = self.client.hget(self.key, title)
        if raw is None:
            return None
        return json.loads(raw)

    def set(self, title: str, meeting: dict) -> None:
        self.client.hset(self.key, title, json.dumps(meeting))

    def set_if_absent(self, title: str, meeting: dict) -> dict:
        if self.client.hsetnx(self.key, title, json.dumps(meeting)):
            return meeting
        return self.get(title)

    def titles(self) -> list[str]:
        return sorted(self.client.hkeys(self.key))


def build_store():
    backend = settings.MEETING_STORE_BACKEND
    if backend == "memory":
        return MemoryMeetingStore()
    if backend == "redis":
        client = redis.Redis.from_url(settings.REDIS_URL, decode_responses=True)
        return RedisMeetingStore(client, key=settings.MEETING_STORE_KEY)
    raise ValueError(f"Unknown meeting store backend: {backend}")
