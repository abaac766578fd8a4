import logging

logger = logging.getLogger(__name__)


class RequestLogMiddleware:
    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        line = f"{request.method} {request.get_full_path()}"
        logger.info("%s BEGIN", line)
        response = self.get_response(request)
        logger.info("%s END", line)
        return response
