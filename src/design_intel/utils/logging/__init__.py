# ABOUTME: Logging configuration and structured logger helpers
# ABOUTME: Provides loguru sinks plus structlog loggers bound to pipeline context

from .config import LoggingMode, configure_logging, detect_logging_mode, get_logging_status
from .utils import (
    LogContext,
    get_logger,
    log_extraction_step,
    with_domain_context,
    with_operation_context,
    with_pipeline_context,
)

__all__ = [
    # Configuration
    "LoggingMode",
    "configure_logging",
    "detect_logging_mode",
    "get_logging_status",
    # Utilities
    "LogContext",
    "get_logger",
    "log_extraction_step",
    "with_domain_context",
    "with_operation_context",
    "with_pipeline_context",
]
