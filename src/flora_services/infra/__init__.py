"""Camada de infraestrutura — armazenamento dos registros.

Uso típico:
    from flora_services.infra import create_sales_store, create_notification_store
"""

from flora_services.infra.record_store import (
    NOTIFICATION_FIXTURES,
    SALES_FIXTURES,
    create_notification_store,
    create_sales_store,
)
from flora_services.infra.record_store_memory import InMemoryRecordStore, RecordStoreError

__all__ = [
    "InMemoryRecordStore",
    "RecordStoreError",
    "SALES_FIXTURES",
    "NOTIFICATION_FIXTURES",
    "create_sales_store",
    "create_notification_store",
]
