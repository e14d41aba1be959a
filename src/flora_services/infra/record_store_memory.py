"""Implementação de RecordStore em memória."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterable

from flora_services.domain.protocols.record_store import RecordStore, RecordT
from flora_services.observability.logging import get_logger

logger: logging.Logger = get_logger(__name__)


class RecordStoreError(Exception):
    """Registro construído viola o contrato do store."""

    pass


class InMemoryRecordStore(RecordStore[RecordT]):
    """Store append-only em memória (perde tudo ao reiniciar o processo).

    Handlers síncronos do FastAPI rodam em thread pool, então append e
    leitura são serializados por um lock.
    """

    def __init__(self, records: Iterable[RecordT] = ()) -> None:
        self._lock = threading.Lock()
        self._records: list[RecordT] = []
        self._last_id = 0
        for record in records:
            self._insert(record)

    def _insert(self, record: RecordT) -> None:
        if record.id <= self._last_id:
            raise RecordStoreError(
                f"id {record.id} não é maior que o último id ({self._last_id})"
            )
        self._records.append(record)
        self._last_id = record.id

    def append(self, build: Callable[[int], RecordT]) -> RecordT:
        with self._lock:
            next_id = self._last_id + 1
            record = build(next_id)
            if record.id != next_id:
                raise RecordStoreError(f"registro com id {record.id}, esperado {next_id}")
            self._insert(record)

        logger.debug(
            "Record appended (in-memory)",
            extra={"record_id": record.id, "record_type": type(record).__name__},
        )
        return record

    def list(self) -> list[RecordT]:  # noqa: A003
        with self._lock:
            return self._records.copy()

    def count(self) -> int:
        with self._lock:
            return len(self._records)

    @property
    def last_id(self) -> int:
        """Último id atribuído (marca d'água do contador)."""
        return self._last_id
