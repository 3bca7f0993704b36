from __future__ import annotations

from ..extensions import db


class Customer(db.Model):
    """
    Customer master data with separate billing and shipping address blocks.

    WHY: Orders optionally reference a customer so receipts and history can
    be looked up later.
    """
    __tablename__ = "customers"
    __table_args__ = (
        db.Index("ix_customers_name", "last_name", "first_name"),
        {"sqlite_autoincrement": True},
    )

    id = db.Column(db.Integer, primary_key=True)
    uuid = db.Column(db.String(36), nullable=False, unique=True)

    first_name = db.Column(db.String(128), nullable=False)
    last_name = db.Column(db.String(128), nullable=False)
    email = db.Column(db.String(255), nullable=True)
    phone = db.Column(db.String(32), nullable=True)

    billing_address_line1 = db.Column(db.String(255), nullable=True)
    billing_address_line2 = db.Column(db.String(255), nullable=True)
    billing_city = db.Column(db.String(128), nullable=True)
    billing_state = db.Column(db.String(64), nullable=True)
    billing_zip = db.Column(db.String(16), nullable=True)

    shipping_address_line1 = db.Column(db.String(255), nullable=True)
    shipping_address_line2 = db.Column(db.String(255), nullable=True)
    shipping_city = db.Column(db.String(128), nullable=True)
    shipping_state = db.Column(db.String(64), nullable=True)
    shipping_zip = db.Column(db.String(16), nullable=True)

    notes = db.Column(db.Text, nullable=True)

    created_at = db.Column(db.DateTime, nullable=False, server_default=db.func.now())
    updated_at = db.Column(db.DateTime, nullable=False, server_default=db.func.now())
    deleted_at = db.Column(db.DateTime, nullable=True)
