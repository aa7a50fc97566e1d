import logging
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from skillnest.core.config import settings
from skillnest.core.logging import request_id_var

logger = logging.getLogger(__name__)


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """
    Tags every request with a correlation id (incoming X-Request-ID or a new uuid4)
    and logs one line per request with its status and timing.
    """

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get(settings.request_id_header) or str(uuid.uuid4())
        token = request_id_var.set(request_id)
        start = time.perf_counter()
        try:
            response = await call_next(request)
            elapsed = time.perf_counter() - start
            response.headers[settings.request_id_header] = request_id
            response.headers["X-Process-Time"] = f"{elapsed:.4f}"
            logger.info(
                f"{request.method} {request.url.path} -> {response.status_code}",
                extra={"duration_ms": round(elapsed * 1000, 2)},
            )
            return response
        finally:
            request_id_var.reset(token)
