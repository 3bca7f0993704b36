# Overview: Service-layer operations for reporting; read-only aggregations.

from __future__ import annotations

from .. import gateway
from ..time_utils import range_bounds


class ReportError(ValueError):
    """Raised when report generation fails."""


PERIOD_FORMATS = {
    "day": "%Y-%m-%d",
    "week": "%Y-W%W",
    "month": "%Y-%m",
}


def _period_format(group_by: str) -> str:
    try:
        return PERIOD_FORMATS[group_by]
    except KeyError:
        raise ReportError("group_by must be day, week, or month") from None


def sales_by_period(
    *,
    group_by: str = "day",
    date_from: str | None = None,
    date_to: str | None = None,
) -> list[dict]:
    """
    Completed sales bucketed by completion day, week or month.

    Each row: period, order_count, total_cents, tax_cents, avg_order_cents.
    date_to is inclusive through the end of that day.
    """
    fmt = _period_format(group_by)
    start, end = range_bounds(date_from, date_to)

    sql = (
        "SELECT strftime(:fmt, completed_at) AS period, "
        "COUNT(*) AS order_count, "
        "SUM(total_cents) AS total_cents, "
        "SUM(tax_total_cents) AS tax_cents, "
        "CAST(ROUND(AVG(total_cents)) AS INTEGER) AS avg_order_cents "
        "FROM orders "
        "WHERE status = 'completed' AND deleted_at IS NULL AND completed_at IS NOT NULL"
    )
    params: dict = {"fmt": fmt}

    if start:
        sql += " AND completed_at >= :date_from"
        params["date_from"] = start
    if end:
        sql += " AND completed_at <= :date_to"
        params["date_to"] = end

    sql += " GROUP BY period ORDER BY period"
    return gateway.query(sql, params)


def product_metrics(
    *,
    date_from: str | None = None,
    date_to: str | None = None,
    limit: int | None = None,
) -> list[dict]:
    """
    Per-product quantity, revenue and tax over completed orders, best sellers first.

    Grouped by the sold snapshot (product_id, product_name), so a product that
    was renamed shows up once per name.
    """
    start, end = range_bounds(date_from, date_to)

    sql = (
        "SELECT oi.product_id, oi.product_name, oi.product_sku, "
        "SUM(oi.quantity) AS total_quantity, "
        "SUM(oi.line_subtotal_cents) AS total_revenue_cents, "
        "SUM(oi.line_tax_cents) AS total_tax_cents, "
        "COUNT(DISTINCT oi.order_id) AS order_count "
        "FROM order_items oi "
        "JOIN orders o ON o.id = oi.order_id "
        "WHERE o.status = 'completed' AND o.deleted_at IS NULL"
    )
    params: dict = {}

    if start:
        sql += " AND o.completed_at >= :date_from"
        params["date_from"] = start
    if end:
        sql += " AND o.completed_at <= :date_to"
        params["date_to"] = end

    sql += " GROUP BY oi.product_id, oi.product_name ORDER BY total_revenue_cents DESC"

    if limit:
        sql += " LIMIT :limit"
        params["limit"] = limit

    return gateway.query(sql, params)


def inventory_summary() -> list[dict]:
    """Active products with their category name, lowest stock first."""
    return gateway.query(
        "SELECT p.id, p.name, p.sku, p.stock_quantity, p.low_stock_threshold, "
        "p.cost_price_cents, p.sale_price_cents, c.name AS category_name "
        "FROM products p "
        "LEFT JOIN categories c ON c.id = p.category_id "
        "WHERE p.deleted_at IS NULL AND p.is_active = 1 "
        "ORDER BY p.stock_quantity ASC, p.name"
    )


def low_stock_products() -> list[dict]:
    """inventory_summary() rows at or below their low-stock threshold."""
    return [
        row for row in inventory_summary()
        if row["stock_quantity"] <= row["low_stock_threshold"]
    ]
