"""Base service layer shared by workflow and execution services.

Services keep no state between calls: the n8n client is passed into every
method, and each call issues its own HTTP request.
"""

import json
import logging
from functools import wraps
from typing import Any, Callable, TypeVar

T = TypeVar("T")

logger = logging.getLogger(__name__)


class BaseService:
    """Base class for all MCP services.

    Methods are classmethods; instances are never created or reused.
    """

    @staticmethod
    def format_json(data: Any) -> str:
        """Pretty-print a JSON-ready value the way every tool result is rendered."""
        return json.dumps(data, indent=2, ensure_ascii=False)


def log_service_call(func: Callable[..., T]) -> Callable[..., T]:
    """Decorator that logs entry and exit of a service call."""

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> T:
        logger.debug(f"Executing {func.__name__}")
        result = func(*args, **kwargs)
        logger.debug(f"Completed {func.__name__}")
        return result

    return wrapper
