from __future__ import annotations

from ..extensions import db


class Order(db.Model):
    """
    Sale document.

    Totals are supplied by the caller (normally from the cart) and stored
    as-is: total_cents is expected to equal
    subtotal_cents - discount_cents + tax_total_cents.
    """
    __tablename__ = "orders"
    __table_args__ = (
        db.CheckConstraint(
            "status IN ('draft', 'completed', 'refunded', 'void')",
            name="ck_orders_status",
        ),
        db.Index("ix_orders_status_completed", "status", "completed_at"),
        db.Index("ix_orders_created", "created_at"),
        {"sqlite_autoincrement": True},
    )

    id = db.Column(db.Integer, primary_key=True)
    uuid = db.Column(db.String(36), nullable=False, unique=True)

    # Human-readable number (e.g., "ORD-00042")
    order_number = db.Column(db.String(64), nullable=False, unique=True)
    status = db.Column(db.String(16), nullable=False, server_default="draft")

    customer_id = db.Column(db.Integer, db.ForeignKey("customers.id"), nullable=True, index=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)

    subtotal_cents = db.Column(db.Integer, nullable=False, server_default=db.text("0"))
    discount_cents = db.Column(db.Integer, nullable=False, server_default=db.text("0"))
    tax_total_cents = db.Column(db.Integer, nullable=False, server_default=db.text("0"))
    total_cents = db.Column(db.Integer, nullable=False, server_default=db.text("0"))

    notes = db.Column(db.Text, nullable=True)
    completed_at = db.Column(db.DateTime, nullable=True)

    created_at = db.Column(db.DateTime, nullable=False, server_default=db.func.now())
    updated_at = db.Column(db.DateTime, nullable=False, server_default=db.func.now())
    deleted_at = db.Column(db.DateTime, nullable=True)

class OrderItem(db.Model):
    """
    Order line with a snapshot of the product at sale time.

    WHY: product_name/product_sku/unit price/tax rate are copied so later
    product edits or deletion never rewrite history. product_id is nullable
    for the same reason.
    """
    __tablename__ = "order_items"
    __table_args__ = {"sqlite_autoincrement": True}

    id = db.Column(db.Integer, primary_key=True)
    uuid = db.Column(db.String(36), nullable=False, unique=True)

    order_id = db.Column(db.Integer, db.ForeignKey("orders.id"), nullable=False, index=True)
    product_id = db.Column(db.Integer, db.ForeignKey("products.id", ondelete="SET NULL"), nullable=True)

    product_name = db.Column(db.String(255), nullable=False)
    product_sku = db.Column(db.String(64), nullable=True)

    quantity = db.Column(db.Integer, nullable=False)
    unit_price_cents = db.Column(db.Integer, nullable=False)
    tax_rate_bps = db.Column(db.Integer, nullable=False, server_default=db.text("0"))
    line_subtotal_cents = db.Column(db.Integer, nullable=False)
    line_tax_cents = db.Column(db.Integer, nullable=False)
    line_total_cents = db.Column(db.Integer, nullable=False)

    notes = db.Column(db.Text, nullable=True)

    created_at = db.Column(db.DateTime, nullable=False, server_default=db.func.now())
    updated_at = db.Column(db.DateTime, nullable=False, server_default=db.func.now())

class Payment(db.Model):
    """
    Tender applied to an order. Split tender is several rows per order.
    """
    __tablename__ = "payments"
    __table_args__ = (
        db.CheckConstraint(
            "method IN ('cash', 'check', 'credit_card', 'other')",
            name="ck_payments_method",
        ),
        {"sqlite_autoincrement": True},
    )

    id = db.Column(db.Integer, primary_key=True)
    uuid = db.Column(db.String(36), nullable=False, unique=True)

    order_id = db.Column(db.Integer, db.ForeignKey("orders.id"), nullable=False, index=True)
    method = db.Column(db.String(16), nullable=False)
    amount_cents = db.Column(db.Integer, nullable=False)
    change_cents = db.Column(db.Integer, nullable=False, server_default=db.text("0"))
    reference_number = db.Column(db.String(128), nullable=True)

    created_at = db.Column(db.DateTime, nullable=False, server_default=db.func.now())
    updated_at = db.Column(db.DateTime, nullable=False, server_default=db.func.now())
