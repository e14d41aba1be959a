"""Fábrica da aplicação FastAPI do serviço de analytics."""

from __future__ import annotations

from fastapi import FastAPI

from flora_services.api.app_factory import build_service_app
from flora_services.api.routes_analytics import router
from flora_services.config.settings import Settings, get_settings
from flora_services.domain.models import Sale
from flora_services.domain.protocols.record_store import RecordStore
from flora_services.infra.record_store import create_sales_store
from flora_services.utils.clock import Clock

SERVICE_NAME = "Analytics Service"


def create_analytics_app(
    settings: Settings | None = None,
    store: RecordStore[Sale] | None = None,
    clock: Clock | None = None,
) -> FastAPI:
    """Cria a aplicação de analytics; ``store`` e ``clock`` podem ser injetados."""
    settings = settings or get_settings()

    app = build_service_app(
        settings,
        service_name=SERVICE_NAME,
        title="Analytics Service API",
        description="Микросервис для аналитики продаж цветочного магазина",
        port=settings.analytics_port,
        routers=[router],
        openapi_tags=[{"name": "Analytics"}, {"name": "Health"}],
        clock=clock,
    )
    app.state.sales_store = store if store is not None else create_sales_store(settings)
    return app


# Instância padrão para uvicorn
app = create_analytics_app()
