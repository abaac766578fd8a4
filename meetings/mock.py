"""
In-process hosting service for local development.

Hands out meeting and attendee records shaped like the Chime SDK responses so
the browser client can be exercised without AWS credentials. Media URLs point
nowhere.
"""

import secrets
import threading
import uuid

from .errors import UpstreamError


class MockMeetingService:
    def __init__(self, media_host: str = "mock.chime.invalid"):
        self.media_host = media_host
        self._meetings: dict[str, dict] = {}
        self._tokens: dict[str, str] = {}
        self._lock = threading.Lock()

    def create_meeting(self, client_request_token: str, media_region: str, external_meeting_id: str) -> dict:
        with self._lock:
            meeting_id = self._tokens.get(client_request_token)
            if meeting_id is None:
                meeting_id = str(uuid.uuid4())
                self._tokens[client_request_token] = meeting_id
                self._meetings[meeting_id] = self._meeting(meeting_id, media_region, external_meeting_id)
            return {"Meeting": dict(self._meetings[meeting_id])}

    def create_attendee(self, meeting_id: str, external_user_id: str) -> dict:
        with self._lock:
            if meeting_id not in self._meetings:
                raise UpstreamError(f"The meeting {meeting_id} was not found")
        return {
            "Attendee": {
                "ExternalUserId": external_user_id,
                "AttendeeId": str(uuid.uuid4()),
                "JoinToken": secrets.token_urlsafe(48),
            }
        }

    def delete_meeting(self, meeting_id: str) -> None:
        with self._lock:
            if self._meetings.pop(meeting_id, None) is None:
                raise UpstreamError(f"The meeting {meeting_id} was not found")

    def _meeting(self, meeting_id: str, media_region: str, external_meeting_id: str) -> dict:
        base = f"{meeting_id}.{self.media_host}"
        return {
            "MeetingId": meeting_id,
            "ExternalMeetingId": external_meeting_id,
            "MediaRegion": media_region,
            "MediaPlacement": {
                "AudioHostUrl": f"{base}:3478",
                "AudioFallbackUrl": f"wss://{base}/calls/{meeting_id}",
                "SignalingUrl": f"wss://signal.{self.media_host}/control/{meeting_id}",
                "TurnControlUrl": f"https://turn.{self.media_host}/v2/turn_sessions",
                "ScreenDataUrl": f"wss://{base}/v2/screen/{meeting_id}",
                "ScreenViewingUrl": f"wss://{base}/ws/connect?passcode=null&viewer_uuid=null&X-BitHub-Call-Id={meeting_id}",
                "ScreenSharingUrl": f"wss://{base}/v2/screen/{meeting_id}",
                "EventIngestionUrl": f"https://data.{self.media_host}/v1/client-events",
            },
        }
