"""Testes para os modelos de domínio."""

from __future__ import annotations

import datetime as dt

import pytest
from pydantic import ValidationError

from flora_services.domain.enums import NotificationType
from flora_services.domain.models import (
    MAX_SALE_AMOUNT,
    HealthStatus,
    Notification,
    NotificationCreate,
    ProductTotals,
    Sale,
    SaleCreate,
    SalesStats,
)


class TestSaleCreate:
    """Validação dos campos de uma venda nova."""

    @pytest.mark.parametrize(
        "payload",
        [
            {"quantity": 1, "amount": 10},
            {"product": "", "quantity": 1, "amount": 10},
            {"product": "Розы", "quantity": -1, "amount": 10},
            {"product": "Розы", "quantity": 1, "amount": -0.01},
            {"product": "Розы", "quantity": 1, "amount": "abc"},
            {"product": "Розы", "quantity": 1, "amount": float("nan")},
            {"product": "Розы", "quantity": 1.5, "amount": 10},
            {"product": "Розы", "quantity": True, "amount": False},
            {"product": "Розы", "quantity": "15", "amount": 10},
            {"product": "Розы", "quantity": 15, "amount": "7500"},
            {"product": "Розы", "quantity": 1, "amount": 1e308},
        ],
    )
    def test_rejects_malformed_payload(self, payload: dict) -> None:
        with pytest.raises(ValidationError):
            SaleCreate.model_validate(payload)

    def test_accepts_zero_quantity_and_amount(self) -> None:
        sale = SaleCreate(product="Розы", quantity=0, amount=0)
        assert sale.quantity == 0
        assert sale.amount == 0

    def test_accepts_integer_amount(self) -> None:
        assert SaleCreate(product="Розы", quantity=15, amount=7500).amount == 7500

    def test_accepts_amount_at_ceiling(self) -> None:
        sale = SaleCreate(product="Розы", quantity=1, amount=MAX_SALE_AMOUNT)
        assert sale.amount == MAX_SALE_AMOUNT


class TestSale:
    """Registro de venda armazenado."""

    def test_is_immutable(self) -> None:
        sale = Sale(id=1, product="Розы", quantity=1, amount=1, date=dt.date(2024, 1, 15))
        with pytest.raises(ValidationError):
            sale.amount = 2  # type: ignore[misc]

    def test_id_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            Sale(id=0, product="Розы", quantity=1, amount=1, date=dt.date(2024, 1, 15))

    def test_integral_amount_serializes_without_fraction(self) -> None:
        sale = Sale(id=1, product="Розы", quantity=15, amount=7500, date=dt.date(2024, 1, 15))

        payload = sale.model_dump(mode="json")

        assert payload["amount"] == 7500
        assert isinstance(payload["amount"], int)

    def test_fractional_amount_is_kept(self) -> None:
        sale = Sale(id=2, product="Розы", quantity=1, amount=99.5, date=dt.date(2024, 1, 15))
        assert sale.model_dump(mode="json")["amount"] == 99.5


class TestAggregates:
    """Totais agregados nunca viram infinito."""

    def test_product_totals_reject_infinite_amount(self) -> None:
        with pytest.raises(ValidationError):
            ProductTotals(total_quantity=2, total_amount=float("inf"))

    def test_sales_stats_reject_infinite_total(self) -> None:
        with pytest.raises(ValidationError):
            SalesStats(
                total_sales=float("inf"),
                total_quantity=2,
                average_sale=None,
                sales_count=2,
                sales_data=[],
            )

    def test_schema_documents_response_fields(self) -> None:
        sale_props = Sale.model_json_schema()["properties"]
        stats_props = SalesStats.model_json_schema(by_alias=True)["properties"]

        assert sale_props["id"]["description"] == "ID продажи"
        assert sale_props["date"]["description"] == "Дата продажи"
        assert stats_props["totalSales"]["description"] == "Общая сумма продаж"
        assert stats_props["averageSale"]["description"] == "Средний чек"


class TestNotification:
    """Notificações e seu tipo."""

    def test_accepts_all_known_types(self) -> None:
        for value in ("sale", "supply", "system", "alert"):
            payload = NotificationCreate.model_validate({"message": "x", "type": value})
            assert payload.type == NotificationType(value)

    def test_rejects_unknown_type(self) -> None:
        with pytest.raises(ValidationError):
            NotificationCreate.model_validate({"message": "x", "type": "promo"})

    def test_rejects_missing_message(self) -> None:
        with pytest.raises(ValidationError):
            NotificationCreate.model_validate({"type": "alert"})

    def test_timestamp_serializes_as_utc_millis(self) -> None:
        notification = Notification(
            id=1,
            message="Новая поставка роз",
            type=NotificationType.SUPPLY,
            timestamp=dt.datetime(2024, 1, 15, 10, 30, tzinfo=dt.UTC),
        )

        payload = notification.model_dump(mode="json")

        assert payload == {
            "id": 1,
            "message": "Новая поставка роз",
            "type": "supply",
            "timestamp": "2024-01-15T10:30:00.000Z",
        }

    def test_parses_iso_timestamp_with_z(self) -> None:
        notification = Notification.model_validate(
            {
                "id": 1,
                "message": "m",
                "type": "system",
                "timestamp": "2024-01-15T10:30:00.000Z",
            }
        )
        assert notification.timestamp == dt.datetime(2024, 1, 15, 10, 30, tzinfo=dt.UTC)


def test_health_status_defaults_to_ok() -> None:
    assert HealthStatus(service="Analytics Service").model_dump() == {
        "status": "OK",
        "service": "Analytics Service",
    }
