# Overview: Service-layer operations for orders and order items.

"""
Order Service

Orders move through draft -> completed, and from completed to refunded or
void. Status helpers below are single UPDATEs; they do not check the current
status.

TOTALS: subtotal/discount/tax/total are supplied by the caller (normally
from the cart) and stored as given. Nothing here recomputes them.

ORDER NUMBERS: "<order_number_prefix><sequence padded to 5 digits>", e.g.
"ORD-00042". The sequence lives in the next_order_number setting and is
advanced with a single UPDATE before it is read back, inside one
transaction, so two registers can never draw the same number.
"""

from __future__ import annotations

import uuid

from .. import gateway
from ..state.cart import Cart
from ..time_utils import range_bounds
from .patching import soft_delete


DEFAULT_ORDER_PREFIX = "ORD-"
ORDER_NUMBER_PAD = 5


class OrderError(ValueError):
    """Raised when an order cannot be built from the given input."""


def list_orders(
    *,
    status: str | None = None,
    customer_id: int | None = None,
    user_id: int | None = None,
    date_from: str | None = None,
    date_to: str | None = None,
) -> list[dict]:
    """
    Orders, newest first.

    date_from/date_to bound created_at; a bare date as date_to includes the
    whole day.
    """
    sql = "SELECT * FROM orders WHERE deleted_at IS NULL"
    params: dict = {}

    if status:
        sql += " AND status = :status"
        params["status"] = status
    if customer_id:
        sql += " AND customer_id = :customer_id"
        params["customer_id"] = customer_id
    if user_id:
        sql += " AND user_id = :user_id"
        params["user_id"] = user_id

    start, end = range_bounds(date_from, date_to)
    if start:
        sql += " AND created_at >= :date_from"
        params["date_from"] = start
    if end:
        sql += " AND created_at <= :date_to"
        params["date_to"] = end

    sql += " ORDER BY created_at DESC, id DESC"
    return gateway.query(sql, params)


def get_order(order_id: int) -> dict | None:
    return gateway.query_one(
        "SELECT * FROM orders WHERE id = :id AND deleted_at IS NULL",
        {"id": order_id},
    )


def get_order_items(order_id: int) -> list[dict]:
    return gateway.query(
        "SELECT * FROM order_items WHERE order_id = :order_id ORDER BY id",
        {"order_id": order_id},
    )


def get_order_payments(order_id: int) -> list[dict]:
    return gateway.query(
        "SELECT * FROM payments WHERE order_id = :order_id ORDER BY id",
        {"order_id": order_id},
    )


def next_order_number() -> str:
    """
    Allocate the next order number and advance the stored sequence.

    A missing next_order_number setting starts the sequence at 1.
    """
    with gateway.transaction():
        bumped = gateway.execute(
            "UPDATE settings SET value = CAST(value AS INTEGER) + 1, updated_at = datetime('now') "
            "WHERE key = 'next_order_number'"
        )
        if bumped.rows_affected:
            row = gateway.query_one("SELECT value FROM settings WHERE key = 'next_order_number'")
            sequence = int(row["value"]) - 1
        else:
            gateway.execute(
                "INSERT INTO settings (key, value, value_type, group_name, description) "
                "VALUES ('next_order_number', '2', 'integer', 'orders', 'Next order sequence number')"
            )
            sequence = 1

        prefix_row = gateway.query_one("SELECT value FROM settings WHERE key = 'order_number_prefix'")

    prefix = prefix_row["value"] if prefix_row is not None else DEFAULT_ORDER_PREFIX
    return f"{prefix}{sequence:0{ORDER_NUMBER_PAD}d}"


def create_order(
    *,
    order_number: str,
    user_id: int,
    subtotal_cents: int,
    discount_cents: int,
    tax_total_cents: int,
    total_cents: int,
    customer_id: int | None = None,
    notes: str | None = None,
    status: str = "draft",
) -> int:
    result = gateway.execute(
        "INSERT INTO orders (uuid, order_number, status, customer_id, user_id, "
        "subtotal_cents, discount_cents, tax_total_cents, total_cents, notes) "
        "VALUES (:uuid, :order_number, :status, :customer_id, :user_id, "
        ":subtotal_cents, :discount_cents, :tax_total_cents, :total_cents, :notes)",
        {
            "uuid": str(uuid.uuid4()),
            "order_number": order_number,
            "status": status,
            "customer_id": customer_id,
            "user_id": user_id,
            "subtotal_cents": subtotal_cents,
            "discount_cents": discount_cents,
            "tax_total_cents": tax_total_cents,
            "total_cents": total_cents,
            "notes": notes,
        },
    )
    return result.last_insert_id


def add_order_item(
    *,
    order_id: int,
    product_id: int | None,
    product_name: str,
    quantity: int,
    unit_price_cents: int,
    tax_rate_bps: int,
    line_subtotal_cents: int,
    line_tax_cents: int,
    line_total_cents: int,
    product_sku: str | None = None,
    notes: str | None = None,
) -> int:
    """Insert an order line carrying a snapshot of the product as sold."""
    result = gateway.execute(
        "INSERT INTO order_items (uuid, order_id, product_id, product_name, product_sku, quantity, "
        "unit_price_cents, tax_rate_bps, line_subtotal_cents, line_tax_cents, line_total_cents, notes) "
        "VALUES (:uuid, :order_id, :product_id, :product_name, :product_sku, :quantity, "
        ":unit_price_cents, :tax_rate_bps, :line_subtotal_cents, :line_tax_cents, :line_total_cents, :notes)",
        {
            "uuid": str(uuid.uuid4()),
            "order_id": order_id,
            "product_id": product_id,
            "product_name": product_name,
            "product_sku": product_sku,
            "quantity": quantity,
            "unit_price_cents": unit_price_cents,
            "tax_rate_bps": tax_rate_bps,
            "line_subtotal_cents": line_subtotal_cents,
            "line_tax_cents": line_tax_cents,
            "line_total_cents": line_total_cents,
            "notes": notes,
        },
    )
    return result.last_insert_id


def save_cart(
    cart: Cart,
    *,
    user_id: int,
    discount_cents: int = 0,
    status: str = "draft",
) -> int:
    """
    Persist the cart as a new order with one item per cart line.

    Order number, order row and items are written in one transaction. The
    new order id is returned; the cart itself is left untouched.

    Raises:
        OrderError: If the cart has no items
    """
    if cart.is_empty:
        raise OrderError("Cannot save an empty cart")

    subtotal = cart.subtotal_cents
    tax = cart.tax_total_cents

    with gateway.transaction():
        order_id = create_order(
            order_number=next_order_number(),
            user_id=user_id,
            customer_id=cart.customer["id"] if cart.customer else None,
            subtotal_cents=subtotal,
            discount_cents=discount_cents,
            tax_total_cents=tax,
            total_cents=subtotal - discount_cents + tax,
            notes=cart.notes or None,
            status=status,
        )
        for line in cart.lines():
            add_order_item(
                order_id=order_id,
                product_id=line.product_id,
                product_name=line.product_name,
                product_sku=line.product_sku,
                quantity=line.quantity,
                unit_price_cents=line.unit_price_cents,
                tax_rate_bps=line.tax_rate_bps,
                line_subtotal_cents=line.line_subtotal_cents,
                line_tax_cents=line.line_tax_cents,
                line_total_cents=line.line_total_cents,
                notes=line.notes,
            )
    return order_id


def _set_status(order_id: int, status: str) -> None:
    gateway.execute(
        "UPDATE orders SET status = :status, updated_at = datetime('now') WHERE id = :id",
        {"status": status, "id": order_id},
    )


def complete_order(order_id: int) -> None:
    gateway.execute(
        "UPDATE orders SET status = 'completed', completed_at = datetime('now'), "
        "updated_at = datetime('now') WHERE id = :id",
        {"id": order_id},
    )


def void_order(order_id: int) -> None:
    _set_status(order_id, "void")


def mark_refunded(order_id: int) -> None:
    _set_status(order_id, "refunded")


def update_order_customer(order_id: int, customer_id: int | None) -> None:
    """Attach, replace or (with None) detach the order's customer."""
    gateway.execute(
        "UPDATE orders SET customer_id = :customer_id, updated_at = datetime('now') WHERE id = :id",
        {"customer_id": customer_id, "id": order_id},
    )


def delete_order(order_id: int) -> bool:
    """Soft delete; items and payments stay attached."""
    return soft_delete("orders", order_id)
