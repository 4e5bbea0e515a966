"""Scoped context fields for structured logging.

Fields pushed here are attached to every log record emitted inside the scope
by ContextualFilter. Storage uses contextvars, so scopes never leak between
threads.
"""

from contextvars import ContextVar, Token
from typing import Any, Dict, Optional

LogContextVar: ContextVar[Dict[str, Any]] = ContextVar("log_context", default={})


def get_log_context() -> Dict[str, Any]:
    """Return a copy of the current logging context."""
    return LogContextVar.get().copy()


def clear_log_context() -> None:
    """Drop all context fields. Used by tests."""
    LogContextVar.set({})


class log_context:
    """Context manager that adds fields to the logging context for its scope.

    Example:
        >>> with log_context(recipient="jane@example.com"):
        ...     logger.info("Sending notification")  # includes recipient
    """

    def __init__(self, **kwargs):
        self.kwargs = kwargs
        self.token: Optional[Token] = None

    def __enter__(self):
        self.token = LogContextVar.set({**LogContextVar.get(), **self.kwargs})
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.token is not None:
            LogContextVar.reset(self.token)
        return False
