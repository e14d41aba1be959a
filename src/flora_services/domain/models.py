"""Modelos de domínio (registros, payloads de entrada e relatórios)."""

from __future__ import annotations

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field, field_serializer
from pydantic.alias_generators import to_camel

from flora_services.domain.enums import NotificationType
from flora_services.utils.clock import format_instant


class Record(BaseModel):
    """Base dos registros armazenados: imutáveis e identificados por ``id``."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(ge=1)


# -----------------------------------------------------------------------------
# Vendas (analytics)
# -----------------------------------------------------------------------------

# Teto por venda; mantém qualquer soma de vendas finita
MAX_SALE_AMOUNT = 1_000_000_000


def _compact_number(value: float | None) -> int | float | None:
    """Valores inteiros saem sem ``.0`` no JSON (7500, não 7500.0)."""
    if value is not None and float(value).is_integer():
        return int(value)
    return value


class SaleCreate(BaseModel):
    """Campos informados pelo cliente ao registrar uma venda.

    ``quantity`` e ``amount`` são estritos: booleanos e strings numéricas
    são recusados em vez de convertidos.
    """

    product: str = Field(min_length=1, description="Название продукта")
    quantity: int = Field(ge=0, strict=True, description="Количество")
    amount: float = Field(
        ge=0,
        le=MAX_SALE_AMOUNT,
        strict=True,
        allow_inf_nan=False,
        description="Сумма продажи",
    )


class Sale(Record):
    """Venda registrada; ``date`` é derivada do relógio no momento do append."""

    id: int = Field(ge=1, description="ID продажи")
    product: str = Field(min_length=1, description="Название продукта")
    quantity: int = Field(ge=0, description="Количество")
    amount: float = Field(
        ge=0, le=MAX_SALE_AMOUNT, allow_inf_nan=False, description="Сумма продажи"
    )
    date: dt.date = Field(description="Дата продажи")

    @field_serializer("amount", when_used="json")
    def _serialize_amount(self, value: float) -> int | float:
        return _compact_number(value)


class ProductTotals(BaseModel):
    """Totais acumulados de um produto."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    total_quantity: int = Field(default=0, description="Общее количество")
    total_amount: float = Field(default=0, allow_inf_nan=False, description="Общая сумма")

    @field_serializer("total_amount", when_used="json")
    def _serialize_total_amount(self, value: float) -> int | float:
        return _compact_number(value)


class SalesStats(BaseModel):
    """Estatística agregada sobre todas as vendas registradas.

    ``average_sale`` é ``None`` quando não há vendas (sem dados para média).
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    total_sales: float = Field(allow_inf_nan=False, description="Общая сумма продаж")
    total_quantity: int = Field(description="Общее количество проданных товаров")
    average_sale: float | None = Field(description="Средний чек")
    sales_count: int = Field(description="Количество продаж")
    sales_data: list[Sale] = Field(description="Список всех продаж")

    @field_serializer("total_sales", "average_sale", when_used="json")
    def _serialize_totals(self, value: float | None) -> int | float | None:
        return _compact_number(value)


# -----------------------------------------------------------------------------
# Notificações
# -----------------------------------------------------------------------------


class NotificationCreate(BaseModel):
    """Campos informados pelo cliente ao criar uma notificação."""

    message: str = Field(min_length=1, description="Текст уведомления")
    type: NotificationType = Field(description="Тип уведомления")  # noqa: A003


class Notification(Record):
    """Notificação registrada; ``timestamp`` é o instante UTC de criação."""

    message: str = Field(min_length=1)
    type: NotificationType  # noqa: A003
    timestamp: dt.datetime

    @field_serializer("timestamp")
    def _serialize_timestamp(self, value: dt.datetime) -> str:
        return format_instant(value)


class HealthStatus(BaseModel):
    """Resposta do healthcheck."""

    status: str = "OK"
    service: str
