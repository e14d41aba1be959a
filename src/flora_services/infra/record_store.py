"""Factories dos record stores de cada serviço.

Cada serviço recebe o próprio store, criado no boot da aplicação e
injetado nas rotas via ``app.state``. Com ``seed_fixtures`` habilitado o
store nasce com os registros de exemplo do catálogo da floricultura.
"""

from __future__ import annotations

import datetime as dt
import logging
from typing import TYPE_CHECKING

from flora_services.domain.enums import NotificationType
from flora_services.domain.models import Notification, Sale
from flora_services.infra.record_store_memory import InMemoryRecordStore
from flora_services.observability.logging import get_logger

if TYPE_CHECKING:
    from flora_services.config.settings import Settings
    from flora_services.domain.protocols.record_store import RecordStore

logger: logging.Logger = get_logger(__name__)


SALES_FIXTURES: tuple[Sale, ...] = (
    Sale(id=1, product="Розы", quantity=15, amount=7500, date=dt.date(2024, 1, 15)),
)

NOTIFICATION_FIXTURES: tuple[Notification, ...] = (
    Notification(
        id=1,
        message="Новая поставка роз",
        type=NotificationType.SUPPLY,
        timestamp=dt.datetime(2024, 1, 15, 10, 30, tzinfo=dt.UTC),
    ),
)


def _ensure_backend(settings: Settings) -> None:
    backend = settings.record_store_backend.lower()
    if backend != "memory":
        raise ValueError(f"RECORD_STORE_BACKEND '{backend}' não suportado")


def create_sales_store(settings: Settings) -> RecordStore[Sale]:
    """Cria o store de vendas do serviço de analytics."""
    _ensure_backend(settings)
    fixtures = SALES_FIXTURES if settings.seed_fixtures else ()
    store: InMemoryRecordStore[Sale] = InMemoryRecordStore(fixtures)
    logger.info("sales_store_created", extra={"seeded": len(fixtures)})
    return store


def create_notification_store(settings: Settings) -> RecordStore[Notification]:
    """Cria o store de notificações."""
    _ensure_backend(settings)
    fixtures = NOTIFICATION_FIXTURES if settings.seed_fixtures else ()
    store: InMemoryRecordStore[Notification] = InMemoryRecordStore(fixtures)
    logger.info("notification_store_created", extra={"seeded": len(fixtures)})
    return store
