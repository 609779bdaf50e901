# ABOUTME: Logger utilities with context binding and operation tracking decorators
# ABOUTME: Provides get_logger function and decorators for consistent structured logging

import functools
import time
import uuid
from collections.abc import Callable
from typing import Any, TypeVar

import structlog

# Type variable for decorated functions
F = TypeVar("F", bound=Callable[..., Any])


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a logger instance with automatic module detection.

    Args:
        name: Logger name, auto-detected from caller if None

    Returns:
        Configured structlog logger instance
    """
    if name is None:
        import inspect

        frame = inspect.currentframe()
        if frame and frame.f_back:
            # Get the module name of the caller
            caller_module = frame.f_back.f_globals.get("__name__", "unknown")
            name = caller_module

    return structlog.get_logger(name or "design_intel")


def generate_operation_id() -> str:
    """Generate a unique operation ID for tracking requests."""
    return str(uuid.uuid4())[:8]


def with_operation_context(operation: str, **context) -> Callable[[F], F]:
    """Decorator to add operation context to function logging.

    Args:
        operation: Operation name for logging
        **context: Additional context to bind to logger

    Returns:
        Decorated function with operation logging
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            logger = get_logger(func.__module__)
            operation_id = generate_operation_id()

            bound_logger = logger.bind(
                operation=operation, operation_id=operation_id, function=func.__name__, **context
            )

            bound_logger.info(f"Starting {operation}")
            start_time = time.time()

            try:
                result = func(*args, **kwargs)
                duration = time.time() - start_time
                bound_logger.info(f"Completed {operation}", duration_seconds=round(duration, 3), success=True)
                return result

            except Exception as e:
                duration = time.time() - start_time
                bound_logger.error(
                    f"Failed {operation}",
                    duration_seconds=round(duration, 3),
                    error=str(e),
                    error_type=type(e).__name__,
                    success=False,
                )
                raise

        return wrapper  # type: ignore[return-value]

    return decorator


def log_extraction_step(step_name: str) -> Callable[[F], F]:
    """Decorator to log a domain extraction step.

    The domain is taken from the first string positional argument (after
    ``self``) or the ``domain`` keyword.

    Args:
        step_name: Name of the extraction step

    Returns:
        Decorated function with extraction step logging
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            logger = get_logger(func.__module__)

            domain = kwargs.get("domain")
            if domain is None:
                domain = next((arg for arg in args if isinstance(arg, str)), None)

            bound_logger = logger.bind(step=step_name, domain=domain, pipeline="bundle_extraction")

            bound_logger.debug(f"Starting extraction step: {step_name}")
            start_time = time.time()

            try:
                result = func(*args, **kwargs)
                duration = time.time() - start_time

                result_info = {}
                if hasattr(result, "__len__"):
                    result_info["result_count"] = len(result)

                bound_logger.info(
                    f"Completed extraction step: {step_name}",
                    duration_seconds=round(duration, 3),
                    success=True,
                    **result_info,
                )
                return result

            except Exception as e:
                duration = time.time() - start_time
                bound_logger.error(
                    f"Failed extraction step: {step_name}",
                    duration_seconds=round(duration, 3),
                    error=str(e),
                    error_type=type(e).__name__,
                    success=False,
                )
                raise

        return wrapper  # type: ignore[return-value]

    return decorator


class LogContext:
    """Context manager for binding logger context."""

    def __init__(self, logger: structlog.stdlib.BoundLogger, **context):
        self.logger = logger
        self.context = context
        self.bound_logger = None

    def __enter__(self) -> structlog.stdlib.BoundLogger:
        self.bound_logger = self.logger.bind(**self.context)
        return self.bound_logger

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is not None and self.bound_logger is not None:
            self.bound_logger.error("Context operation failed", error=str(exc_val), error_type=exc_type.__name__)


def with_domain_context(domain: str) -> LogContext:
    """Create a logging context for work on a single target domain.

    Args:
        domain: Target domain identifier

    Returns:
        LogContext manager with domain context
    """
    logger = get_logger()
    return LogContext(logger, domain=domain, entity_type="domain")


def with_pipeline_context(pipeline_name: str, **context) -> LogContext:
    """Create a logging context for pipeline operations.

    Args:
        pipeline_name: Name of the pipeline
        **context: Additional context to bind

    Returns:
        LogContext manager with pipeline context
    """
    logger = get_logger()
    operation_id = generate_operation_id()
    return LogContext(logger, pipeline=pipeline_name, operation_id=operation_id, **context)
