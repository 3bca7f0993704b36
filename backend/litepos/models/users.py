from __future__ import annotations

from ..extensions import db


USER_ROLES = ("admin", "cashier")


class User(db.Model):
    """
    POS operator.

    WHY: Every order and refund is attributed to the user who rang it up.
    Login is by PIN: pin_hash is compared by equality, so it must be a
    deterministic hash (see auth_service.hash_pin).
    """
    __tablename__ = "users"
    __table_args__ = (
        db.CheckConstraint("role IN ('admin', 'cashier')", name="ck_users_role"),
        db.Index("ix_users_pin_active", "pin_hash", "is_active"),
        {"sqlite_autoincrement": True},
    )

    id = db.Column(db.Integer, primary_key=True)
    uuid = db.Column(db.String(36), nullable=False, unique=True)

    name = db.Column(db.String(128), nullable=False)
    email = db.Column(db.String(255), nullable=True)
    pin_hash = db.Column(db.String(128), nullable=False)
    role = db.Column(db.String(16), nullable=False, default="cashier", server_default="cashier")
    is_active = db.Column(db.Boolean, nullable=False, default=True, server_default=db.text("1"))

    created_at = db.Column(db.DateTime, nullable=False, server_default=db.func.now())
    updated_at = db.Column(db.DateTime, nullable=False, server_default=db.func.now())
    deleted_at = db.Column(db.DateTime, nullable=True)
