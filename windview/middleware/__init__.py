"""Middleware and logging exports."""

from .logging import RequestLogMiddleware, log_error, log_info, log_warning

__all__ = ["RequestLogMiddleware", "log_info", "log_warning", "log_error"]
