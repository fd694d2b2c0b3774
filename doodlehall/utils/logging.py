"""Logging helpers that attach request context and debug tracebacks."""

import logging
import traceback
from os import getenv
from typing import Optional, Any

# Check if debug mode is enabled
DEBUG = getenv("APP_DEBUG", "false").lower() == "true"

# Get the main logger
logger = logging.getLogger("Doodlehall")


def error_log(
    message: str,
    exc: Optional[BaseException] = None,
    context: Optional[dict] = None,
    level: int = logging.ERROR,
) -> None:
    """
    Log an error with context and, in debug mode, the full traceback.

    Args:
        message: Error message
        exc: Optional exception object
        context: Optional dictionary with additional context (path, lobby id, etc.)
        level: Log level, ERROR unless the failure is fatal
    """
    parts = [message]

    if context:
        context_str = ", ".join(f"{k}={v}" for k, v in context.items())
        parts.append(f"Context: {context_str}")

    if exc:
        parts.append(f"Exception: {type(exc).__name__}: {exc}")
        if DEBUG:
            parts.append(f"Traceback:\n{''.join(traceback.format_exception(type(exc), exc, exc.__traceback__))}")

    full_message = " | ".join(parts)

    if exc:
        logger.log(level, full_message, exc_info=exc)
    else:
        logger.log(level, full_message)


def log_exception_with_context(
    exc: BaseException,
    context: Optional[dict] = None,
    message: Optional[str] = None,
    level: int = logging.ERROR,
) -> None:
    """Log an exception with a default message derived from its type."""
    msg = message or f"Unhandled exception: {type(exc).__name__}"
    error_log(msg, exc=exc, context=context, level=level)


def request_context(request: Any) -> dict:
    """Extract path, method and user agent from a request, best effort."""
    context = {}
    url = getattr(request, "url", None)
    if url is not None:
        context["path"] = getattr(url, "path", str(url))
    method = getattr(request, "method", None)
    if method:
        context["method"] = method
    headers = getattr(request, "headers", None)
    if headers is not None:
        context["user_agent"] = headers.get("user-agent", "unknown")
    return context


def log_request_error(
    request: Any,
    exc: BaseException,
    message: Optional[str] = None,
    level: int = logging.ERROR,
) -> None:
    """
    Log an error with request context.

    Args:
        request: Request object (should have url, method, headers)
        exc: The exception
        message: Optional custom message
        level: Log level
    """
    log_exception_with_context(exc, context=request_context(request), message=message, level=level)
