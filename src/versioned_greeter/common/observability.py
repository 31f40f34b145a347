"""
Старт процесса api-gateway: логирование в stdout до создания приложения.

HTTP-метрики и /metrics вешаются на приложение в _create_app
(common.metrics.setup_metrics_endpoint).
"""

from __future__ import annotations

from versioned_greeter.common.config import get_settings
from versioned_greeter.common.logging import get_project_logger, setup_logging

log = get_project_logger()


def setup_observability() -> None:
    setup_logging()
    s = get_settings()
    log.info(
        "observability_ready",
        extra={"payload": {"service": s.service_name, "log_format": s.log_format}},
    )
