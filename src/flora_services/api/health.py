"""Healthcheck compartilhado pelos dois serviços."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from flora_services.api.dependencies import get_service_name
from flora_services.domain.models import HealthStatus

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthStatus, summary="Проверка здоровья сервиса")
def health(service_name: str = Depends(get_service_name)) -> HealthStatus:
    """Sempre 200, independente do conteúdo do store."""
    return HealthStatus(status="OK", service=service_name)
