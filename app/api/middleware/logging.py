# 📄 File: app/api/middleware/logging.py
# 🧭 Purpose (Layman Explanation):
# Keeps a diary of every request made to our plant care app: what was asked for, how long it took
# and whether it worked, with a tracking number so one request's log lines can be found together.
# 🧪 Purpose (Technical Summary):
# Request logging middleware that assigns/propagates X-Request-ID, binds it to the logging context
# for the duration of the request and records method, path, status and latency via the
# structured PerformanceLogger. Slow requests are logged at warning level.
# 🔗 Dependencies:
# starlette BaseHTTPMiddleware, app.shared.utils.logging, uuid, time
# 🔄 Connected Modules / Calls From:
# app.main.py (middleware registration), all API endpoints

import time
import uuid

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from app.shared.utils.logging import get_logger, log_context

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"

# Paths that would only add noise
EXCLUDED_PATHS = {"/favicon.ico", "/api/v1/health"}


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Request logging middleware for API monitoring.

    Features:
    - Request ID propagation (incoming header or a fresh UUID)
    - Request/response timing
    - Slow request warnings
    """

    def __init__(self, app: ASGIApp, slow_request_threshold: float = 2.0):
        super().__init__(app)
        self.slow_request_threshold = slow_request_threshold

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = self._get_or_create_request_id(request)

        with log_context(request_id=request_id):
            if request.url.path in EXCLUDED_PATHS:
                response = await call_next(request)
                response.headers[REQUEST_ID_HEADER] = request_id
                return response

            start_time = time.perf_counter()
            try:
                response = await call_next(request)
            except Exception:
                duration = time.perf_counter() - start_time
                logger.error(
                    f"Unhandled error on {request.method} {request.url.path}",
                    extra={"duration_ms": round(duration * 1000, 2)},
                    exc_info=True
                )
                raise

            duration = time.perf_counter() - start_time
            logger.performance.log_request(
                method=request.method,
                path=request.url.path,
                status_code=response.status_code,
                duration_ms=round(duration * 1000, 2),
                extra={"client": request.client.host if request.client else None}
            )
            if duration > self.slow_request_threshold:
                logger.warning(
                    "Slow request",
                    extra={"path": request.url.path, "duration_s": round(duration, 3)}
                )

            response.headers[REQUEST_ID_HEADER] = request_id
            return response

    @staticmethod
    def _get_or_create_request_id(request: Request) -> str:
        request_id = request.headers.get(REQUEST_ID_HEADER.lower()) or str(uuid.uuid4())
        request.state.request_id = request_id
        return request_id
