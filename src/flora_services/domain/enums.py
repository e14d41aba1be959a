"""Enums de domínio."""

from __future__ import annotations

from enum import StrEnum


class NotificationType(StrEnum):
    """Tipos de notificação aceitos pelo serviço."""

    SALE = "sale"
    SUPPLY = "supply"
    SYSTEM = "system"
    ALERT = "alert"
