"""
Recipe Service Middleware
Custom middleware for request logging
"""

from .logging import LoggingMiddleware, get_request_id

__all__ = [
    "LoggingMiddleware",
    "get_request_id",
]
