"""
Route boundary for action handlers.

`handle_action_errors` is the single place where an error kind becomes an
HTTP status and an `{"message": ...}` body.
"""

import inspect
from functools import wraps
from typing import Any, Callable

from fastapi import status
from fastapi.responses import JSONResponse

from tensor_actions.logging_config import get_logger
from tensor_actions.utils.errors import ActionError, ActionErrorKind, ErrorResponse

logger = get_logger(__name__)


def error_response(message: str, status_code: int) -> JSONResponse:
    """Render an Actions error body."""
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(message=message).model_dump(),
    )


def handle_action_errors(operation: str, failure_message: str) -> Callable:
    """Decorator mapping action errors to protocol error responses.

    `NOT_FOUND` and `NOT_LISTED` are reported with their own message and 422.
    Every other error, including exceptions that are not `ActionError`, is
    logged with the mint and operation and reported as `failure_message`
    with 500.

    Args:
        operation: Operation name bound to log events ("discover", "bid", ...)
        failure_message: Message shown to the caller for internal failures
    """
    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        @wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            log = logger.bind(operation=operation, mint=kwargs.get("nft_mint"))
            try:
                return await func(*args, **kwargs)
            except ActionError as e:
                if e.kind.user_correctable:
                    log.info("Action request rejected", kind=e.kind.value, reason=e.message)
                    return error_response(e.message, e.status_code)
                log.error(
                    f"Failed to prepare {operation} response",
                    kind=e.kind.value,
                    error=e.message,
                    details=e.details,
                    exc_info=True,
                )
                return error_response(failure_message, status.HTTP_500_INTERNAL_SERVER_ERROR)
            except Exception as e:
                log.error(
                    f"Failed to prepare {operation} response",
                    kind=ActionErrorKind.UNEXPECTED.value,
                    error=str(e),
                    exc_info=True,
                )
                return error_response(failure_message, status.HTTP_500_INTERNAL_SERVER_ERROR)

        # Preserve signature for FastAPI
        wrapper.__signature__ = inspect.signature(func)
        return wrapper
    return decorator
