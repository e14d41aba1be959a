"""Dependências injetadas nas rotas."""

from __future__ import annotations

from fastapi import Request

from flora_services.config.settings import Settings
from flora_services.domain.models import Notification, Sale
from flora_services.domain.protocols.record_store import RecordStore
from flora_services.utils.clock import Clock


def get_settings(request: Request) -> Settings:
    """Retorna settings da aplicação."""

    return request.app.state.settings


def get_service_name(request: Request) -> str:
    """Nome público do serviço (usado no healthcheck)."""

    return request.app.state.service_name


def get_clock(request: Request) -> Clock:
    """Relógio usado para datar registros novos."""

    return request.app.state.clock


def get_sales_store(request: Request) -> RecordStore[Sale]:
    """Retorna o store de vendas ativo."""

    return request.app.state.sales_store


def get_notification_store(request: Request) -> RecordStore[Notification]:
    """Retorna o store de notificações ativo."""

    return request.app.state.notification_store
