"""ASGI middleware for the Tensor actions API."""

from tensor_actions.middleware.logging_middleware import LoggingMiddleware

__all__ = ["LoggingMiddleware"]
