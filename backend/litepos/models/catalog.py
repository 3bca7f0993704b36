from __future__ import annotations

from ..extensions import db


class Category(db.Model):
    """Product grouping shown as a colored tile on the register."""
    __tablename__ = "categories"
    __table_args__ = {"sqlite_autoincrement": True}

    id = db.Column(db.Integer, primary_key=True)
    uuid = db.Column(db.String(36), nullable=False, unique=True)

    name = db.Column(db.String(128), nullable=False)
    description = db.Column(db.Text, nullable=True)
    color = db.Column(db.String(16), nullable=False, server_default="#6366f1")
    icon = db.Column(db.String(64), nullable=True)
    sort_order = db.Column(db.Integer, nullable=False, server_default=db.text("0"))

    created_at = db.Column(db.DateTime, nullable=False, server_default=db.func.now())
    updated_at = db.Column(db.DateTime, nullable=False, server_default=db.func.now())
    deleted_at = db.Column(db.DateTime, nullable=True)


class Product(db.Model):
    """
    Sellable item.

    All money is integer cents and tax is basis points (825 = 8.25%).
    SKU and barcode are lookup aids only; uniqueness is not enforced here.
    Stock may go negative: the register never blocks a sale on stock.
    """
    __tablename__ = "products"
    __table_args__ = (
        db.Index("ix_products_category", "category_id"),
        db.Index("ix_products_barcode", "barcode"),
        db.Index("ix_products_sku", "sku"),
        {"sqlite_autoincrement": True},
    )

    id = db.Column(db.Integer, primary_key=True)
    uuid = db.Column(db.String(36), nullable=False, unique=True)

    name = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=True)
    sku = db.Column(db.String(64), nullable=True)
    barcode = db.Column(db.String(64), nullable=True)
    category_id = db.Column(db.Integer, db.ForeignKey("categories.id"), nullable=True)

    cost_price_cents = db.Column(db.Integer, nullable=False, server_default=db.text("0"))
    sale_price_cents = db.Column(db.Integer, nullable=False, server_default=db.text("0"))
    tax_rate_bps = db.Column(db.Integer, nullable=False, server_default=db.text("0"))

    stock_quantity = db.Column(db.Integer, nullable=False, server_default=db.text("0"))
    low_stock_threshold = db.Column(db.Integer, nullable=False, server_default=db.text("0"))

    image_path = db.Column(db.String(512), nullable=True)
    is_active = db.Column(db.Boolean, nullable=False, server_default=db.text("1"))
    sort_order = db.Column(db.Integer, nullable=False, server_default=db.text("0"))

    created_at = db.Column(db.DateTime, nullable=False, server_default=db.func.now())
    updated_at = db.Column(db.DateTime, nullable=False, server_default=db.func.now())
    deleted_at = db.Column(db.DateTime, nullable=True)
