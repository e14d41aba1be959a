"""Rotas HTTP do serviço de analytics de vendas."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from flora_services.api.dependencies import get_clock, get_sales_store
from flora_services.application.analytics import compute_product_report, compute_sales_stats
from flora_services.application.ledger import record_sale
from flora_services.domain.models import ProductTotals, Sale, SaleCreate, SalesStats
from flora_services.domain.protocols.record_store import RecordStore
from flora_services.observability.timing import timed
from flora_services.utils.clock import Clock

router = APIRouter(prefix="/analytics", tags=["Analytics"])


@router.get(
    "/sales",
    response_model=SalesStats,
    summary="Получить статистику продаж",
    response_description="Статистика продаж",
)
def get_sales_stats(store: RecordStore[Sale] = Depends(get_sales_store)) -> SalesStats:
    sales = store.list()
    with timed("sales_stats", records=len(sales)):
        return compute_sales_stats(sales)


@router.post(
    "/sales",
    response_model=Sale,
    status_code=status.HTTP_201_CREATED,
    summary="Добавить новую продажу",
    response_description="Продажа добавлена",
)
def post_sale(
    payload: SaleCreate,
    store: RecordStore[Sale] = Depends(get_sales_store),
    clock: Clock = Depends(get_clock),
) -> Sale:
    return record_sale(store, payload, clock)


@router.get(
    "/products",
    response_model=dict[str, ProductTotals],
    summary="Получить отчет по продуктам",
    response_description="Статистика по продуктам",
)
def get_product_report(
    store: RecordStore[Sale] = Depends(get_sales_store),
) -> dict[str, ProductTotals]:
    sales = store.list()
    with timed("product_report", records=len(sales)):
        return compute_product_report(sales)
