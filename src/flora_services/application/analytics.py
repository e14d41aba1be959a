"""Agregações sobre o histórico de vendas.

Funções puras: recebem a sequência completa de vendas e recalculam tudo a
cada leitura, sem cache nem manutenção incremental.
"""

from __future__ import annotations

from collections.abc import Sequence

from flora_services.domain.models import ProductTotals, Sale, SalesStats


def compute_sales_stats(sales: Sequence[Sale]) -> SalesStats:
    """Soma valores e quantidades de todas as vendas.

    A média fica ``None`` quando não há vendas.
    """
    total_sales = sum(sale.amount for sale in sales)
    total_quantity = sum(sale.quantity for sale in sales)
    sales_count = len(sales)

    return SalesStats(
        total_sales=total_sales,
        total_quantity=total_quantity,
        average_sale=total_sales / sales_count if sales_count else None,
        sales_count=sales_count,
        sales_data=list(sales),
    )


def compute_product_report(sales: Sequence[Sale]) -> dict[str, ProductTotals]:
    """Agrupa vendas por nome exato do produto (sem normalização).

    As chaves seguem a ordem em que cada produto aparece pela primeira vez.
    """
    quantities: dict[str, int] = {}
    amounts: dict[str, float] = {}

    for sale in sales:
        quantities[sale.product] = quantities.get(sale.product, 0) + sale.quantity
        amounts[sale.product] = amounts.get(sale.product, 0) + sale.amount

    return {
        product: ProductTotals(total_quantity=quantity, total_amount=amounts[product])
        for product, quantity in quantities.items()
    }
