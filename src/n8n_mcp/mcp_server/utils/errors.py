"""Translate client failures into MCP protocol errors.

The services are the only place where exceptions raised by ``N8nClient``
become protocol-level errors. Everything the client raises is reported as
``INTERNAL_ERROR``; errors that already carry an MCP error code pass through.
"""

import logging
from functools import wraps
from typing import Any, Callable, NoReturn, TypeVar

from mcp.shared.exceptions import McpError
from mcp.types import INTERNAL_ERROR, INVALID_PARAMS, INVALID_REQUEST, METHOD_NOT_FOUND, ErrorData

from n8n_mcp.core.exceptions import N8nAPIError

T = TypeVar("T")

logger = logging.getLogger(__name__)


def extract_error_message(error: BaseException) -> str:
    """Pick the most useful message from a failed call.

    Prefers the ``message`` field from the n8n response body, then the raw
    error text.
    """
    if isinstance(error, N8nAPIError) and error.remote_message:
        return error.remote_message
    return str(error) or "Unknown error"


def raise_mcp_error(code: int, message: str) -> NoReturn:
    raise McpError(ErrorData(code=code, message=message))


def method_not_found(message: str) -> NoReturn:
    raise_mcp_error(METHOD_NOT_FOUND, message)


def invalid_params(message: str) -> NoReturn:
    raise_mcp_error(INVALID_PARAMS, message)


def invalid_request(message: str) -> NoReturn:
    raise_mcp_error(INVALID_REQUEST, message)


def translate_api_errors(func: Callable[..., T]) -> Callable[..., T]:
    """Decorator turning any client failure into an ``INTERNAL_ERROR`` McpError."""

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> T:
        try:
            return func(*args, **kwargs)
        except McpError:
            raise
        except Exception as e:
            message = extract_error_message(e)
            logger.warning(f"{func.__name__} failed: {message}")
            raise McpError(ErrorData(code=INTERNAL_ERROR, message=message)) from e

    return wrapper
