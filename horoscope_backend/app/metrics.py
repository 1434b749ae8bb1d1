"""
Exposition de métriques Prometheus et middleware de mesure.

Fournit `/metrics`, un middleware mesurant la latence des requêtes HTTP par route, et le compteur
métier des actions.
"""

import time
from collections.abc import Callable
from typing import Any, TypeVar

from fastapi import APIRouter, Request
from prometheus_client import (
    CONTENT_TYPE_LATEST,
    Counter,
    Histogram,
    generate_latest,
)
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from horoscope_backend.domain.errors import ActionError

T = TypeVar("T")

metrics_router = APIRouter(tags=["metrics"])

REQUEST_COUNT = Counter(
    "http_requests_total", "Total HTTP requests", ["method", "route", "status"]
)
REQUEST_LATENCY = Histogram(
    "http_request_duration_seconds", "Latency of HTTP requests", ["route"]
)

# Business metrics: one increment per action call, outcome = "ok" or an error code
ACTIONS_TOTAL = Counter(
    "horoscope_actions_total",
    "Total action calls by outcome",
    ["action", "outcome"],
)


def normalize_route(request: Request) -> str:
    """Gabarit de route (ex: `/actions/createProfile`) pour borner la cardinalité."""
    route = request.scope.get("route")
    path = getattr(route, "path", None)
    return path or "unmatched"


@metrics_router.get("/metrics")
def metrics():
    """Expose les métriques Prometheus au format texte."""
    return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)


class PrometheusMiddleware(BaseHTTPMiddleware):
    """Middleware Prometheus pour mesurer le comptage et la latence des requêtes par route."""

    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        response: Response = await call_next(request)
        route = normalize_route(request)
        REQUEST_COUNT.labels(request.method, route, str(response.status_code)).inc()
        REQUEST_LATENCY.labels(route).observe(time.perf_counter() - start)
        return response


def observe_action(action: str, handler: Callable[..., T], *args: Any) -> T:
    """Exécute une action et compte son issue (`ok` ou code d'erreur)."""
    try:
        result = handler(*args)
    except ActionError as exc:
        ACTIONS_TOTAL.labels(action, exc.code).inc()
        raise
    ACTIONS_TOTAL.labels(action, "ok").inc()
    return result
