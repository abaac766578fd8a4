import logging

import boto3
from botocore.exceptions import BotoCoreError, ClientError
from django.conf import settings

from .errors import UpstreamError

logger = logging.getLogger(__name__)


class ChimeMeetingService:
    """Amazon Chime SDK meetings, reached through a boto3 client."""

    def __init__(self, client):
        self.client = client

    def create_meeting(self, client_request_token: str, media_region: str, external_meeting_id: str) -> dict:
        logger.info("Creating meeting %s in %s", external_meeting_id, media_region)
        return self._call(
            "create_meeting",
            ClientRequestToken=client_request_token,
            MediaRegion=media_region,
            ExternalMeetingId=external_meeting_id,
        )

    def create_attendee(self, meeting_id: str, external_user_id: str) -> dict:
        logger.info("Creating attendee %s for meeting %s", external_user_id, meeting_id)
        return self._call(
            "create_attendee",
            MeetingId=meeting_id,
            ExternalUserId=external_user_id,
        )

    def delete_meeting(self, meeting_id: str) -> None:
        logger.info("Deleting meeting %s", meeting_id)
        self._call("delete_meeting", MeetingId=meeting_id)

    def _call(self, operation: str, **params) -> dict:
        try:
            resp = getattr(self.client, operation)(**params)
        except ClientError as exc:
            message = exc.response.get("Error", {}).get("Message") or str(exc)
            raise UpstreamError(message) from exc
        except BotoCoreError as exc:
            raise UpstreamError(str(exc)) from exc
        resp.pop("ResponseMetadata", None)
        return resp


def build_chime_client():
    kwargs = {"region_name": settings.CHIME_CONTROL_REGION}
    if settings.CHIME_ENDPOINT:
        kwargs["endpoint_url"] = settings.CHIME_ENDPOINT
    return boto3.client("chime-sdk-meetings", **kwargs)


def build_service():
    backend = settings.MEETING_SERVICE_BACKEND
    if backend == "chime":
        return ChimeMeetingService(build_chime_client())
    if backend == "mock":
        from .mock import MockMeetingService

        return MockMeetingService()
    raise ValueError(f"Unknown meeting service backend: {backend}")
