"""
Recipe Service Logging Middleware
Structured logging with request/response tracking and timing
"""

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
import structlog
import time
import uuid
from typing import Dict, Any
from contextvars import ContextVar

logger = structlog.get_logger()

# Context variable for request tracking
request_id_var: ContextVar[str] = ContextVar('request_id', default='')

SLOW_REQUEST_SECONDS = 2.0


class LoggingMiddleware(BaseHTTPMiddleware):
    """
    Logging middleware that provides:
    - Request/response logging with unique IDs
    - Slow request warnings
    - Error tracking
    """

    def __init__(self, app):
        super().__init__(app)

        # Paths logged at debug level only
        self.quiet_paths = ("/health", "/favicon.ico")

        # Sensitive headers to mask in logs
        self.sensitive_headers = {
            "authorization", "cookie", "x-api-key", "x-auth-token"
        }

    async def dispatch(self, request: Request, call_next):
        """Process request with logging"""
        start_time = time.perf_counter()
        request_id = request.headers.get("x-request-id") or str(uuid.uuid4())

        request_id_var.set(request_id)
        structlog.contextvars.bind_contextvars(request_id=request_id)

        try:
            if request.url.path.startswith(self.quiet_paths):
                response = await call_next(request)
                response.headers["X-Request-ID"] = request_id
                logger.debug("Probe request", path=request.url.path, status_code=response.status_code)
                return response

            request_info = self._extract_request_info(request)
            logger.info("Request started", **request_info, event_type="request_start")

            response = await call_next(request)

            process_time = time.perf_counter() - start_time
            logger.log(
                self._determine_log_level(response.status_code),
                "Request completed",
                **request_info,
                status_code=response.status_code,
                process_time=round(process_time, 4),
                event_type="request_complete"
            )

            if process_time > SLOW_REQUEST_SECONDS:
                logger.warning(
                    "Slow request detected",
                    endpoint=f"{request.method} {request.url.path}",
                    response_time=process_time,
                    event_type="slow_request"
                )

            response.headers["X-Request-ID"] = request_id
            return response

        except Exception as e:
            logger.error(
                "Request failed",
                method=request.method,
                path=request.url.path,
                client_ip=self._get_client_ip(request),
                process_time=round(time.perf_counter() - start_time, 4),
                error=str(e),
                error_type=type(e).__name__,
                event_type="request_error"
            )
            raise

        finally:
            structlog.contextvars.unbind_contextvars("request_id")

    def _extract_request_info(self, request: Request) -> Dict[str, Any]:
        """Extract request information for logging"""
        return {
            "method": request.method,
            "path": request.url.path,
            "query_params": dict(request.query_params),
            "client_ip": self._get_client_ip(request),
            "user_agent": request.headers.get("user-agent", ""),
            "headers": self._filter_headers(dict(request.headers)),
        }

    def _get_client_ip(self, request: Request) -> str:
        """Extract client IP address"""
        forwarded = request.headers.get("x-forwarded-for")
        if forwarded:
            return forwarded.split(",")[0].strip()

        forwarded = request.headers.get("x-real-ip")
        if forwarded:
            return forwarded

        return request.client.host if request.client else "unknown"

    def _filter_headers(self, headers: Dict[str, str]) -> Dict[str, str]:
        """Filter sensitive headers from logs"""
        return {
            key: "***MASKED***" if key.lower() in self.sensitive_headers else value
            for key, value in headers.items()
        }

    def _determine_log_level(self, status_code: int) -> int:
        """Determine appropriate log level based on status code"""
        if status_code >= 500:
            return 40  # ERROR
        elif status_code >= 400:
            return 30  # WARNING
        return 20  # INFO


def get_request_id() -> str:
    """Get current request ID from context"""
    return request_id_var.get()
