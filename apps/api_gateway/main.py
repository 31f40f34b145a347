"""
API Gateway (FastAPI).

Функции:
- /health
- /metrics
- POST /{version}/greet: один обработчик для всех версий формы запроса
"""

from __future__ import annotations

from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from apps.api_gateway.routers.greet import router as greet_router
from versioned_greeter.common.config import get_settings
from versioned_greeter.common.logging import get_project_logger
from versioned_greeter.common.metrics import setup_metrics_endpoint
from versioned_greeter.common.observability import setup_observability
from versioned_greeter.versioning.decoder import DEFAULT_DECODER

log = get_project_logger()


def _parse_origins(raw: str) -> list[str]:
    origins = [o.strip() for o in (raw or "").split(",") if o.strip()]
    return origins or ["*"]


def _is_prod_env(app_env: str | None) -> bool:
    env = (app_env or "").strip().lower()
    return env in {"prod", "production"}


def _cors_params() -> tuple[list[str], bool]:
    settings = get_settings()
    allow_origins = _parse_origins(settings.cors_allowed_origins)
    allow_credentials = bool(settings.cors_allow_credentials)

    if _is_prod_env(settings.app_env) and "*" in allow_origins:
        raise RuntimeError("CORS wildcard '*' запрещён в APP_ENV=prod")

    # '*' нельзя использовать вместе с credentials=true
    if "*" in allow_origins:
        allow_credentials = False

    return allow_origins, allow_credentials


def _create_app() -> FastAPI:
    app = FastAPI(title="Versioned Greeter", version="0.1.0")
    allow_origins, allow_credentials = _cors_params()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
        allow_credentials=allow_credentials,
    )

    setup_metrics_endpoint(app)

    @app.get("/health")
    def health() -> dict[str, Any]:
        return {"ok": True}

    app.include_router(greet_router)

    log.info(
        "app_ready",
        extra={
            "payload": {
                "versions": DEFAULT_DECODER.versions(),
                "strict_versions": get_settings().greet_strict_versions,
            }
        },
    )
    return app


setup_observability()

app = _create_app()
