"""Caminho de escrita: transforma payloads validados em registros."""

from __future__ import annotations

import logging

from flora_services.domain.models import Notification, NotificationCreate, Sale, SaleCreate
from flora_services.domain.protocols.record_store import RecordStore
from flora_services.observability.logging import get_logger
from flora_services.utils.clock import Clock, utc_now

logger: logging.Logger = get_logger(__name__)


def record_sale(
    store: RecordStore[Sale],
    payload: SaleCreate,
    clock: Clock = utc_now,
) -> Sale:
    """Registra uma venda com a data (UTC) do momento da chamada."""
    sale_date = clock().date()

    sale = store.append(
        lambda sale_id: Sale(
            id=sale_id,
            product=payload.product,
            quantity=payload.quantity,
            amount=payload.amount,
            date=sale_date,
        )
    )

    logger.info(
        "sale_recorded",
        extra={"sale_id": sale.id, "quantity": sale.quantity, "amount": sale.amount},
    )
    return sale


def create_notification(
    store: RecordStore[Notification],
    payload: NotificationCreate,
    clock: Clock = utc_now,
) -> Notification:
    """Registra uma notificação com o instante atual.

    O texto da mensagem não vai para o log.
    """
    timestamp = clock()

    notification = store.append(
        lambda notification_id: Notification(
            id=notification_id,
            message=payload.message,
            type=payload.type,
            timestamp=timestamp,
        )
    )

    logger.info(
        "notification_created",
        extra={"notification_id": notification.id, "notification_type": str(notification.type)},
    )
    return notification
