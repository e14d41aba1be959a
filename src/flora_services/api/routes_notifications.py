"""Rotas HTTP do serviço de notificações."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from flora_services.api.dependencies import get_clock, get_notification_store
from flora_services.application.ledger import create_notification
from flora_services.domain.models import Notification, NotificationCreate
from flora_services.domain.protocols.record_store import RecordStore
from flora_services.utils.clock import Clock

router = APIRouter(prefix="/notifications", tags=["Notifications"])


@router.get(
    "",
    response_model=list[Notification],
    summary="Получить все уведомления",
    response_description="Список уведомлений",
)
def list_notifications(
    store: RecordStore[Notification] = Depends(get_notification_store),
) -> list[Notification]:
    """Lista completa em ordem de criação (sem filtro nem paginação)."""
    return store.list()


@router.post(
    "",
    response_model=Notification,
    status_code=status.HTTP_201_CREATED,
    summary="Создать новое уведомление",
    response_description="Уведомление создано",
)
def post_notification(
    payload: NotificationCreate,
    store: RecordStore[Notification] = Depends(get_notification_store),
    clock: Clock = Depends(get_clock),
) -> Notification:
    return create_notification(store, payload, clock)
