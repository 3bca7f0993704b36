# Overview: Service-layer operations for order payments.

"""
Payment Service

An order can carry several payments (split tender). amount_cents is what
the customer handed over for that tender and change_cents what was given
back, so the amount applied to the order is amount_cents - change_cents.
"""

from __future__ import annotations

import uuid

from .. import gateway


def add_payment(
    *,
    order_id: int,
    method: str,
    amount_cents: int,
    change_cents: int = 0,
    reference_number: str | None = None,
) -> int:
    """Record a tender. method is cash, check, credit_card or other."""
    result = gateway.execute(
        "INSERT INTO payments (uuid, order_id, method, amount_cents, change_cents, reference_number) "
        "VALUES (:uuid, :order_id, :method, :amount_cents, :change_cents, :reference_number)",
        {
            "uuid": str(uuid.uuid4()),
            "order_id": order_id,
            "method": method,
            "amount_cents": amount_cents,
            "change_cents": change_cents,
            "reference_number": reference_number,
        },
    )
    return result.last_insert_id


def list_payments(order_id: int) -> list[dict]:
    return gateway.query(
        "SELECT * FROM payments WHERE order_id = :order_id ORDER BY id",
        {"order_id": order_id},
    )


def total_paid(order_id: int) -> int:
    """Net cents applied to the order across all tenders."""
    row = gateway.query_one(
        "SELECT COALESCE(SUM(amount_cents - change_cents), 0) AS paid "
        "FROM payments WHERE order_id = :order_id",
        {"order_id": order_id},
    )
    return int(row["paid"])
