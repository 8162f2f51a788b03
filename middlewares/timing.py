import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

logger = logging.getLogger(__name__)


class TimingMiddleware(BaseHTTPMiddleware):
    """응답 헤더에 X-Latency-Ms 추가 + DEBUG 요청 로그"""

    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        latency_ms = int((time.perf_counter() - start) * 1000)
        response.headers["X-Latency-Ms"] = str(latency_ms)
        logger.debug(
            "%s %s -> %s (%d ms)",
            request.method, request.url.path, response.status_code, latency_ms,
        )
        return response
