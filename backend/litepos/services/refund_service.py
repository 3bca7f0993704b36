# Overview: Service-layer operations for refunds.

"""
Refund Service

A refund belongs to one order and lists the order items being returned.
restock on a refund item only records intent: call
product_service.adjust_stock for each restocked line (restock_items does
this for a whole refund).
"""

from __future__ import annotations

import uuid

from .. import gateway
from . import order_service, product_service


def list_refunds_by_order(order_id: int) -> list[dict]:
    return gateway.query(
        "SELECT * FROM refunds WHERE order_id = :order_id ORDER BY created_at DESC, id DESC",
        {"order_id": order_id},
    )


def get_refund_items(refund_id: int) -> list[dict]:
    return gateway.query(
        "SELECT * FROM refund_items WHERE refund_id = :refund_id ORDER BY id",
        {"refund_id": refund_id},
    )


def create_refund(
    *,
    order_id: int,
    user_id: int,
    total_refund_cents: int,
    reason: str | None = None,
) -> int:
    result = gateway.execute(
        "INSERT INTO refunds (uuid, order_id, user_id, total_refund_cents, reason) "
        "VALUES (:uuid, :order_id, :user_id, :total_refund_cents, :reason)",
        {
            "uuid": str(uuid.uuid4()),
            "order_id": order_id,
            "user_id": user_id,
            "total_refund_cents": total_refund_cents,
            "reason": reason,
        },
    )
    return result.last_insert_id


def add_refund_item(
    *,
    refund_id: int,
    order_item_id: int,
    quantity: int,
    refund_amount_cents: int,
    restock: bool,
) -> int:
    result = gateway.execute(
        "INSERT INTO refund_items (uuid, refund_id, order_item_id, quantity, refund_amount_cents, restock) "
        "VALUES (:uuid, :refund_id, :order_item_id, :quantity, :refund_amount_cents, :restock)",
        {
            "uuid": str(uuid.uuid4()),
            "refund_id": refund_id,
            "order_item_id": order_item_id,
            "quantity": quantity,
            "refund_amount_cents": refund_amount_cents,
            "restock": 1 if restock else 0,
        },
    )
    return result.last_insert_id


def set_order_refunded(order_id: int) -> None:
    order_service.mark_refunded(order_id)


def restock_items(refund_id: int) -> int:
    """
    Put restocked quantities back on the shelf.

    Lines whose product has since been deleted (soft-deleted, or product_id
    cleared) are skipped.
    Returns the number of units restocked.
    """
    rows = gateway.query(
        "SELECT ri.quantity, oi.product_id "
        "FROM refund_items ri "
        "JOIN order_items oi ON oi.id = ri.order_item_id "
        "JOIN products p ON p.id = oi.product_id AND p.deleted_at IS NULL "
        "WHERE ri.refund_id = :refund_id AND ri.restock = 1 "
        "ORDER BY ri.id",
        {"refund_id": refund_id},
    )
    restocked = 0
    with gateway.transaction():
        for row in rows:
            product_service.adjust_stock(row["product_id"], row["quantity"])
            restocked += row["quantity"]
    return restocked
