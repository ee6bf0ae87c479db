"""Shared error-handling helpers for Jira operations and agent tools."""

from typing import Awaitable, Callable, TypeVar

T = TypeVar("T")


class ApiOperationError(Exception):
    """A failed API operation, qualified with what the caller was doing.

    ``cause`` is the original exception object, untouched.
    """

    def __init__(self, context_message: str, cause: BaseException):
        self.context_message = context_message
        self.cause = cause
        super().__init__(f"{context_message}: {cause}")


async def handle_api_operation(
    operation: Callable[[], Awaitable[T]], context_message: str
) -> T:
    """Await *operation* and return its result unchanged.

    Any exception is re-raised as ``ApiOperationError`` carrying
    *context_message* and the original exception as its cause.
    """
    try:
        return await operation()
    except Exception as e:
        raise ApiOperationError(context_message, e) from e


def truncate_error(message: str, max_length: int = 300) -> str:
    """Truncate an error message if it exceeds *max_length*."""
    if len(message) <= max_length:
        return message
    return message[: max_length - 3] + "..."
