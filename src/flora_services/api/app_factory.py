"""Montagem comum das aplicações FastAPI dos serviços."""

from __future__ import annotations

from collections.abc import Iterable

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from flora_services.api.errors import register_error_handlers
from flora_services.api.health import router as health_router
from flora_services.config.settings import Settings
from flora_services.observability.logging import configure_logging
from flora_services.observability.middleware import CORRELATION_ID_HEADER, CorrelationIdMiddleware
from flora_services.utils.clock import Clock, utc_now


def validate_settings(settings: Settings) -> None:
    """Falha no boot se a configuração for inválida."""
    validation_errors: list[str] = []
    validation_errors.extend(settings.validate_record_store_config())
    validation_errors.extend(settings.validate_ports())
    validation_errors.extend(settings.validate_docs_url())
    validation_errors.extend(settings.validate_logging())

    if validation_errors:
        error_msg = "; ".join(validation_errors)
        raise ValueError(f"Configuração inválida: {error_msg}")


def build_service_app(
    settings: Settings,
    *,
    service_name: str,
    title: str,
    description: str,
    port: int,
    routers: Iterable[APIRouter],
    openapi_tags: list[dict[str, str]],
    clock: Clock | None = None,
) -> FastAPI:
    """Cria a aplicação com docs, CORS, correlation id e healthcheck."""
    validate_settings(settings)
    configure_logging(settings.log_level.upper(), service_name, settings.log_format)

    app = FastAPI(
        title=title,
        version=settings.version,
        description=description,
        docs_url=settings.docs_url,
        openapi_tags=openapi_tags,
        servers=[{"url": f"http://localhost:{port}", "description": "Development server"}],
    )
    app.add_middleware(CorrelationIdMiddleware, log_requests=settings.enable_request_logging)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[CORRELATION_ID_HEADER],
    )
    register_error_handlers(app)

    for router in routers:
        app.include_router(router)
    app.include_router(health_router)

    app.state.settings = settings
    app.state.service_name = service_name
    app.state.clock = clock or utc_now
    return app
