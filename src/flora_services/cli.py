"""Ponto de entrada para subir um dos serviços com uvicorn.

Uso:
    flora-services analytics
    flora-services notification --port 8080
    python -m flora_services analytics
"""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence

import uvicorn
from fastapi import FastAPI

from flora_services.api.analytics_app import SERVICE_NAME as ANALYTICS_SERVICE_NAME
from flora_services.api.analytics_app import create_analytics_app
from flora_services.api.notification_app import SERVICE_NAME as NOTIFICATION_SERVICE_NAME
from flora_services.api.notification_app import create_notification_app
from flora_services.config.settings import get_settings
from flora_services.observability.logging import get_logger

logger = get_logger(__name__)

_SERVICES: dict[str, tuple[str, Callable[..., FastAPI], str]] = {
    "analytics": (ANALYTICS_SERVICE_NAME, create_analytics_app, "analytics_port"),
    "notification": (NOTIFICATION_SERVICE_NAME, create_notification_app, "notification_port"),
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="flora-services",
        description="Sobe o serviço de analytics ou de notificações da floricultura.",
    )
    parser.add_argument("service", choices=sorted(_SERVICES))
    parser.add_argument("--host", default=None, help="Sobrescreve HOST")
    parser.add_argument("--port", type=int, default=None, help="Sobrescreve a porta do serviço")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()

    service_name, factory, port_field = _SERVICES[args.service]
    host = args.host if args.host is not None else settings.host
    if args.port is not None:
        # A app anuncia em servers a mesma porta em que o uvicorn escuta
        settings = settings.model_copy(update={port_field: args.port})
    port = getattr(settings, port_field)

    app = factory(settings)
    logger.info(f"{service_name} running on port {port}")
    logger.info(f"Swagger docs available at http://localhost:{port}{settings.docs_url}")

    # log_config=None mantém o formatter JSON instalado pela aplicação
    uvicorn.run(app, host=host, port=port, log_config=None)
    return 0
