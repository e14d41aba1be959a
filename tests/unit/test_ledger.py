"""Testes unitários para application/ledger.py."""

from __future__ import annotations

import datetime as dt
from unittest.mock import patch

from flora_services.application.ledger import create_notification, record_sale
from flora_services.domain.enums import NotificationType
from flora_services.domain.models import NotificationCreate, SaleCreate
from flora_services.infra.record_store import NOTIFICATION_FIXTURES, SALES_FIXTURES
from flora_services.infra.record_store_memory import InMemoryRecordStore

NOW = dt.datetime(2025, 3, 8, 23, 59, 59, 999000, tzinfo=dt.UTC)


def _clock() -> dt.datetime:
    return NOW


class TestRecordSale:
    """Testes para record_sale."""

    def test_assigns_next_id_after_fixture(self) -> None:
        store = InMemoryRecordStore(SALES_FIXTURES)

        sale = record_sale(store, SaleCreate(product="Розы", quantity=15, amount=7500), _clock)

        assert sale.id == 2
        assert store.list()[-1] == sale

    def test_date_comes_from_clock(self) -> None:
        store = InMemoryRecordStore()

        sale = record_sale(store, SaleCreate(product="Пионы", quantity=1, amount=300), _clock)

        assert sale.date == dt.date(2025, 3, 8)

    def test_copies_payload_fields(self) -> None:
        store = InMemoryRecordStore()

        sale = record_sale(store, SaleCreate(product="Лилии", quantity=4, amount=1999.9), _clock)

        assert (sale.product, sale.quantity, sale.amount) == ("Лилии", 4, 1999.9)

    def test_id_is_previous_count_plus_one(self) -> None:
        store = InMemoryRecordStore(SALES_FIXTURES)

        for _ in range(5):
            previous = store.count()
            sale = record_sale(store, SaleCreate(product="Розы", quantity=1, amount=1), _clock)
            assert sale.id == previous + 1

    def test_logs_sale_recorded(self) -> None:
        store = InMemoryRecordStore()

        with patch("flora_services.application.ledger.logger") as mock_logger:
            record_sale(store, SaleCreate(product="Розы", quantity=2, amount=10), _clock)

        mock_logger.info.assert_called_once()
        args, kwargs = mock_logger.info.call_args
        assert args[0] == "sale_recorded"
        assert kwargs["extra"]["sale_id"] == 1


class TestCreateNotification:
    """Testes para create_notification."""

    def test_alert_gets_next_id_and_timestamp(self) -> None:
        store = InMemoryRecordStore(NOTIFICATION_FIXTURES)
        previous = store.count()

        notification = create_notification(
            store,
            NotificationCreate(message="Заканчиваются тюльпаны", type=NotificationType.ALERT),
            _clock,
        )

        assert notification.id == previous + 1
        assert notification.type is NotificationType.ALERT
        assert notification.timestamp == NOW

    def test_message_is_not_logged(self) -> None:
        """Texto da notificação não pode aparecer no log."""
        store = InMemoryRecordStore()
        secret_text = "Клиент Иванов, телефон 555-0101"

        with patch("flora_services.application.ledger.logger") as mock_logger:
            create_notification(
                store,
                NotificationCreate(message=secret_text, type=NotificationType.SALE),
                _clock,
            )

        args, kwargs = mock_logger.info.call_args
        assert args[0] == "notification_created"
        assert secret_text not in repr(args) + repr(kwargs)
        assert kwargs["extra"]["notification_type"] == "sale"
