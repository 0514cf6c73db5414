"""Structured logging module using structlog."""

from .structured_logger import LoggerMixin, configure_logging, get_logger, log_context

__all__ = ["LoggerMixin", "configure_logging", "get_logger", "log_context"]
