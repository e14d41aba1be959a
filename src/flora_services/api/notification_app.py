"""Fábrica da aplicação FastAPI do serviço de notificações."""

from __future__ import annotations

from fastapi import FastAPI

from flora_services.api.app_factory import build_service_app
from flora_services.api.routes_notifications import router
from flora_services.config.settings import Settings, get_settings
from flora_services.domain.models import Notification
from flora_services.domain.protocols.record_store import RecordStore
from flora_services.infra.record_store import create_notification_store
from flora_services.utils.clock import Clock

SERVICE_NAME = "Notification Service"


def create_notification_app(
    settings: Settings | None = None,
    store: RecordStore[Notification] | None = None,
    clock: Clock | None = None,
) -> FastAPI:
    """Cria a aplicação de notificações; ``store`` e ``clock`` podem ser injetados."""
    settings = settings or get_settings()

    app = build_service_app(
        settings,
        service_name=SERVICE_NAME,
        title="Notification Service API",
        description="Микросервис для управления уведомлениями цветочного магазина",
        port=settings.notification_port,
        routers=[router],
        openapi_tags=[{"name": "Notifications"}, {"name": "Health"}],
        clock=clock,
    )
    app.state.notification_store = (
        store if store is not None else create_notification_store(settings)
    )
    return app


# Instância padrão para uvicorn
app = create_notification_app()
