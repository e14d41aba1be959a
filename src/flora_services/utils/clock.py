"""Relógio de parede e formatação de instantes."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Instante atual em UTC (timezone-aware)."""

    return datetime.now(tz=UTC)


def format_instant(moment: datetime) -> str:
    """Formata instante em ISO-8601 UTC com milissegundos e sufixo ``Z``.

    Ex.: ``2024-01-15T10:30:00.000Z``. Datetimes naive são tratados como UTC.
    """

    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    moment = moment.astimezone(UTC)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"
