# Overview: Service-layer operations for products and stock.

"""
Products Service

Listing is soft-delete aware and, by default, limited to active products so
the register only shows sellable items. The back office passes
active_only=False to see everything.

STOCK: adjust_stock applies a signed delta in a single UPDATE so concurrent
sales and restocks never overwrite each other. Negative stock is allowed.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass

from .. import gateway
from .patching import UNSET, Patch, apply_patch, soft_delete


@dataclass
class ProductPatch(Patch):
    TABLE = "products"
    BOOL_FIELDS = frozenset({"is_active"})

    name: str = UNSET
    description: str | None = UNSET
    sku: str | None = UNSET
    barcode: str | None = UNSET
    category_id: int | None = UNSET
    cost_price_cents: int = UNSET
    sale_price_cents: int = UNSET
    tax_rate_bps: int = UNSET
    stock_quantity: int = UNSET
    low_stock_threshold: int = UNSET
    image_path: str | None = UNSET
    is_active: bool = UNSET
    sort_order: int = UNSET


def list_products(
    *,
    category_id: int | None = None,
    search: str | None = None,
    active_only: bool = True,
) -> list[dict]:
    """
    Products ordered by sort_order, then name.

    Args:
        category_id: Exact category filter
        search: Substring matched against name, sku or barcode
        active_only: Hide products with is_active = 0 (default True)
    """
    sql = "SELECT * FROM products WHERE deleted_at IS NULL"
    params: dict = {}

    if active_only:
        sql += " AND is_active = 1"
    if category_id:
        sql += " AND category_id = :category_id"
        params["category_id"] = category_id
    if search:
        sql += " AND (name LIKE :term OR sku LIKE :term OR barcode LIKE :term)"
        params["term"] = f"%{search}%"

    sql += " ORDER BY sort_order, name"
    return gateway.query(sql, params)


def get_product(product_id: int) -> dict | None:
    return gateway.query_one(
        "SELECT * FROM products WHERE id = :id AND deleted_at IS NULL",
        {"id": product_id},
    )


def find_by_barcode(code: str) -> dict | None:
    """
    Scanner lookup: exact barcode match first, then exact SKU.

    Only active, non-deleted products are considered.
    """
    return gateway.query_one(
        "SELECT * FROM products "
        "WHERE deleted_at IS NULL AND is_active = 1 AND (barcode = :code OR sku = :code) "
        "ORDER BY CASE WHEN barcode = :code THEN 0 ELSE 1 END, id "
        "LIMIT 1",
        {"code": code.strip()},
    )


def create_product(
    *,
    name: str,
    sale_price_cents: int,
    description: str | None = None,
    sku: str | None = None,
    barcode: str | None = None,
    category_id: int | None = None,
    cost_price_cents: int = 0,
    tax_rate_bps: int = 0,
    stock_quantity: int = 0,
    low_stock_threshold: int = 0,
    image_path: str | None = None,
    is_active: bool = True,
    sort_order: int = 0,
) -> int:
    result = gateway.execute(
        "INSERT INTO products (uuid, name, description, sku, barcode, category_id, "
        "cost_price_cents, sale_price_cents, tax_rate_bps, stock_quantity, low_stock_threshold, "
        "image_path, is_active, sort_order) "
        "VALUES (:uuid, :name, :description, :sku, :barcode, :category_id, "
        ":cost_price_cents, :sale_price_cents, :tax_rate_bps, :stock_quantity, :low_stock_threshold, "
        ":image_path, :is_active, :sort_order)",
        {
            "uuid": str(uuid.uuid4()),
            "name": name,
            "description": description,
            "sku": sku,
            "barcode": barcode,
            "category_id": category_id,
            "cost_price_cents": cost_price_cents,
            "sale_price_cents": sale_price_cents,
            "tax_rate_bps": tax_rate_bps,
            "stock_quantity": stock_quantity,
            "low_stock_threshold": low_stock_threshold,
            "image_path": image_path,
            "is_active": 1 if is_active else 0,
            "sort_order": sort_order,
        },
    )
    return result.last_insert_id


def update_product(product_id: int, patch: ProductPatch) -> bool:
    return apply_patch(patch, product_id)


def delete_product(product_id: int) -> bool:
    """Soft delete. Order items keep their snapshot and product_id."""
    return soft_delete("products", product_id)


def adjust_stock(product_id: int, delta: int) -> None:
    """Add delta (negative to deduct) to stock_quantity."""
    gateway.execute(
        "UPDATE products SET stock_quantity = stock_quantity + :delta, updated_at = datetime('now') "
        "WHERE id = :id",
        {"delta": delta, "id": product_id},
    )
