"""Middleware binding per-request logging context."""

import uuid
from collections.abc import Callable

from django.http import HttpRequest, HttpResponse

from core.logging import bind_context, clear_context


class RequestContextMiddleware:
    """Attach a request ID and path to every log line of a request."""

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex
        clear_context()
        bind_context(request_id=request_id, method=request.method, path=request.path)
        try:
            response = self.get_response(request)
        finally:
            clear_context()
        response["X-Request-ID"] = request_id
        return response
