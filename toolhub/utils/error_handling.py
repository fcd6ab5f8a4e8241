"""
Error handling for toolhub.

This module provides the package exception hierarchy and a decorator that
logs failures consistently across components.
"""

import asyncio
import functools
import logging
import time
import traceback
from typing import Any, Callable, Dict, List, Optional, Type, Union

logger = logging.getLogger(__name__)


class ToolhubError(Exception):
    """Base exception class for all toolhub errors."""
    def __init__(self, message: str, component: str = "unknown", details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.component = component
        self.details = details or {}
        self.timestamp = time.time()


class RegistryError(ToolhubError):
    """Error raised when the tool registry cannot honour a request."""
    pass


def catch_and_log(
    component: str,
    exceptions: Union[Type[Exception], List[Type[Exception]]] = Exception,
    default_return: Any = None,
    raise_toolhub_error: bool = False,
    toolhub_error_class: Type[ToolhubError] = ToolhubError
) -> Callable:
    """
    Decorator to catch exceptions, log them, and optionally convert to toolhub errors.

    Args:
        component: Component name reported in logs and raised errors
        exceptions: Exception(s) to catch
        default_return: Default return value if an exception is caught
        raise_toolhub_error: Whether to raise a toolhub error after catching
        toolhub_error_class: Error class to use if raising

    Returns:
        Decorated function
    """
    if isinstance(exceptions, list):
        exceptions = tuple(exceptions)

    def handle(func, e):
        stack_trace = traceback.format_exc()

        logger.error(f"Error in {func.__name__} ({component}): {e}")
        logger.debug(f"Stack trace: {stack_trace}")

        if raise_toolhub_error:
            raise toolhub_error_class(
                message=str(e),
                component=component,
                details={"original_error": e.__class__.__name__, "function": func.__name__}
            ) from e

        return default_return

    def decorator(func):
        @functools.wraps(func)
        def sync_wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except exceptions as e:
                return handle(func, e)

        @functools.wraps(func)
        async def async_wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except exceptions as e:
                return handle(func, e)

        # Return the appropriate wrapper based on whether the function is async
        if asyncio.iscoroutinefunction(func):
            return async_wrapper
        return sync_wrapper

    return decorator
