"""FastAPI middleware for request tracing and metrics"""

import uuid
import time
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from expensify_gateway.infrastructure.observability.metrics import request_duration_histogram

# Label for requests that match no route (404s)
UNMATCHED_ENDPOINT = "unmatched"


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Attach a request ID, reusing the caller's X-Request-ID when present"""

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request.state.request_id = request_id

        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        return response


class MetricsMiddleware(BaseHTTPMiddleware):
    """Record HTTP request latency labelled by route template"""

    async def dispatch(self, request: Request, call_next) -> Response:
        start_time = time.perf_counter()

        response = await call_next(request)

        # Route template keeps user ids out of label values
        route = request.scope.get("route")
        endpoint = getattr(route, "path", UNMATCHED_ENDPOINT)

        request_duration_histogram.labels(
            method=request.method,
            endpoint=endpoint,
            status=response.status_code,
        ).observe(time.perf_counter() - start_time)

        return response
