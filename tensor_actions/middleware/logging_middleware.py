"""Request logging middleware."""

import time
import uuid

import structlog

from tensor_actions.logging_config import get_logger

REQUEST_ID_HEADER = b"x-request-id"


class LoggingMiddleware:
    """ASGI middleware that logs each HTTP request with a request id.

    The id is bound to the structlog context, so every event logged while the
    request is handled carries it, and it is echoed in the `X-Request-ID`
    response header.
    """

    def __init__(self, app):
        """Initialize middleware.

        Args:
            app: ASGI application
        """
        self.app = app
        self.logger = get_logger("tensor_actions.requests")

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        request_id = str(uuid.uuid4())
        method = scope.get("method", "unknown")
        path = scope.get("path", "unknown")
        start_time = time.perf_counter()

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(request_id=request_id)
        self.logger.info("Request received", method=method, path=path)

        async def wrapped_send(message):
            if message["type"] == "http.response.start":
                duration_ms = (time.perf_counter() - start_time) * 1000
                headers = list(message.get("headers", []))
                headers.append((REQUEST_ID_HEADER, request_id.encode("latin-1")))
                message = {**message, "headers": headers}
                self.logger.info(
                    "Response sent",
                    method=method,
                    path=path,
                    status=message.get("status", 0),
                    duration_ms=round(duration_ms, 2),
                )
            await send(message)

        try:
            await self.app(scope, receive, wrapped_send)
        finally:
            structlog.contextvars.clear_contextvars()
