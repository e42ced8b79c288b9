"""Structured logging utilities with context support."""

import functools
import logging
import threading
from typing import Any, Callable, Dict, Optional, Tuple, Type

# Thread-local storage for log context
_thread_local = threading.local()


class LogContext:
    """
    Context manager for adding structured fields to log records.

    Fields live in thread-local storage and are copied onto every record
    emitted within the block by ``_ContextFilter``.

    Example:
        with LogContext(command="by-day", source="sample"):
            logger.info("Grouping timesheet lines")
            # Record carries command and source fields
    """

    def __init__(self, **kwargs):
        self.fields = kwargs
        self.previous_context: Optional[Dict[str, Any]] = None

    def __enter__(self):
        if not hasattr(_thread_local, "context"):
            _thread_local.context = {}

        self.previous_context = _thread_local.context.copy()
        _thread_local.context.update(self.fields)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        _thread_local.context = (
            self.previous_context if self.previous_context is not None else {}
        )


def get_log_context() -> Dict[str, Any]:
    """Return a copy of the fields active on the current thread."""
    return dict(getattr(_thread_local, "context", {}))


class _ContextFilter(logging.Filter):
    """Logging filter that adds context fields to log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        for key, value in get_log_context().items():
            setattr(record, key, value)
        return True


def log_function_call(
    func: Optional[Callable] = None,
    *,
    include_args: bool = False,
    level: str = "DEBUG",
    expected: Tuple[Type[Exception], ...] = (),
) -> Callable:
    """
    Decorator to log function entry and exit.

    Exceptions are logged with traceback and re-raised. Exceptions listed in
    ``expected`` are normal outcomes for the caller to handle; they get a
    single WARNING line without traceback.

    Args:
        func: Function to decorate (when used without arguments)
        include_args: Whether to include function arguments in logs
        level: Log level to use for entry and exit messages
        expected: Exception types logged as warnings instead of errors

    Returns:
        Decorated function

    Example:
        @log_function_call(expected=(RepresentativeConflictError,))
        def group_by_rate_code(lines, strict=False):
            ...

        @log_function_call(include_args=True, level="INFO")
        def write_report(path):
            ...
    """

    def decorator(f: Callable) -> Callable:
        @functools.wraps(f)
        def wrapper(*args, **kwargs):
            logger = logging.getLogger(f.__module__)
            log_level = getattr(logging, level.upper())

            if include_args:
                signature = ", ".join(
                    [repr(a) for a in args] + [f"{k}={v!r}" for k, v in kwargs.items()]
                )
                logger.log(log_level, f"Entering {f.__name__} with args: {signature}")
            else:
                logger.log(log_level, f"Entering {f.__name__}")

            try:
                result = f(*args, **kwargs)
            except expected as e:
                logger.warning(f"{f.__name__} rejected its input: {e}")
                raise
            except Exception as e:
                logger.error(
                    f"Exception in {f.__name__}: {type(e).__name__}: {e}",
                    exc_info=True,
                )
                raise

            logger.log(log_level, f"Exiting {f.__name__}")
            return result

        return wrapper

    if func is None:
        return decorator
    return decorator(func)
