"""
Метрики Prometheus для сервиса.

Назначение:
- экспорт /metrics
- счётчики HTTP-запросов и результатов декодирования по адаптерам
"""

from __future__ import annotations

import time

from fastapi import FastAPI, Request
from fastapi.responses import Response
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest

from versioned_greeter.common.config import get_settings

REQUESTS_TOTAL = Counter(
    "greeter_requests_total",
    "Общее количество HTTP запросов",
    ["service", "route", "method", "status"],
)

HTTP_REQUEST_LATENCY_MS = Histogram(
    "greeter_http_request_latency_ms",
    "Задержка HTTP запроса (мс)",
    ["service", "route", "method"],
    buckets=(1, 2.5, 5, 10, 25, 50, 100, 250, 500, 1000),
)

# adapter: имя адаптера (v1|current), а не сырой тег из пути
DECODE_TOTAL = Counter(
    "greeter_decode_total",
    "Результаты декодирования тела запроса",
    ["adapter", "result"],  # result: ok|error
)


def record_decode_result(*, adapter: str, ok: bool) -> None:
    DECODE_TOTAL.labels(adapter=adapter, result="ok" if ok else "error").inc()


def _route_label(request: Request) -> str:
    route = request.scope.get("route")
    path = getattr(route, "path", None)
    return str(path) if path else "unmatched"


def setup_metrics_endpoint(app: FastAPI) -> None:
    """
    Регистрирует middleware HTTP-метрик и endpoint /metrics для Prometheus.
    """
    service = get_settings().service_name

    @app.middleware("http")
    async def http_metrics(request: Request, call_next):
        method = request.method
        started = time.perf_counter()

        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        route = _route_label(request)

        REQUESTS_TOTAL.labels(
            service=service,
            route=route,
            method=method,
            status=str(response.status_code),
        ).inc()
        HTTP_REQUEST_LATENCY_MS.labels(
            service=service,
            route=route,
            method=method,
        ).observe(elapsed_ms)
        return response

    @app.get("/metrics")
    def metrics() -> Response:
        return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)
