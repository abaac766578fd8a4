import json
import logging
from functools import lru_cache
from pathlib import Path

from django.conf import settings
from django.http import HttpResponse, HttpResponseNotFound, JsonResponse
from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import APIView

from .broker import get_broker
from .errors import BrokerError
from .serializers import EndSerializer, JoinSerializer

logger = logging.getLogger(__name__)


def not_found_response():
    return HttpResponseNotFound("404 Not Found", content_type="text/html")


def page_not_found(request, exception=None):
    return not_found_response()


@lru_cache(maxsize=None)
def load_index_page(path: str) -> bytes:
    return Path(path).read_bytes()


def _error_message(exc) -> str:
    if isinstance(exc, exceptions.APIException):
        detail = exc.detail
        while isinstance(detail, (dict, list)) and detail:
            detail = next(iter(detail.values())) if isinstance(detail, dict) else detail[0]
        return str(detail)
    return str(exc)


class BrokerView(APIView):
    """
    Every failure below a view becomes a 400 with {"error": message};
    methods a view does not implement fall through to 404.
    """

    http_method_names = ["post"]

    def handle_exception(self, exc):
        if isinstance(exc, exceptions.MethodNotAllowed):
            return not_found_response()

        message = _error_message(exc)
        if isinstance(exc, (BrokerError, exceptions.ValidationError)):
            logger.warning("%s %s failed: %s", self.request.method, self.request.path, message)
        else:
            logger.exception("%s %s failed", self.request.method, self.request.path)
        return Response({"error": message}, status=status.HTTP_400_BAD_REQUEST)

    def json_response(self, payload: dict, status_code: int) -> Response:
        logger.debug(json.dumps(payload, indent=2))
        return Response(payload, status=status_code)


def index(request):
    if request.method != "GET":
        return not_found_response()
    page = Path(settings.MEETING_INDEX_DIR) / f"{settings.MEETING_APP}.html"
    try:
        content = load_index_page(str(page))
    except OSError as exc:
        logger.error("Index page unavailable: %s", exc)
        return JsonResponse({"error": str(exc)}, status=status.HTTP_400_BAD_REQUEST)
    return HttpResponse(content, content_type="text/html")


class JoinView(BrokerView):
    def post(self, request):
        s = JoinSerializer(data=request.query_params)
        s.is_valid(raise_exception=True)

        join_info = get_broker().join(
            title=s.validated_data["title"],
            name=s.validated_data["name"],
            region=s.validated_data["region"],
        )
        return self.json_response(join_info, status.HTTP_201_CREATED)


class EndView(BrokerView):
    def post(self, request):
        s = EndSerializer(data=request.query_params)
        s.is_valid(raise_exception=True)

        get_broker().end(title=s.validated_data["title"])
        return self.json_response({}, status.HTTP_200_OK)
