from __future__ import annotations

from ..extensions import db


class Setting(db.Model):
    """
    Key-value application setting.

    value is always stored as text; value_type tells readers how to parse it
    (see state.settings_cache.SettingsCache).
    """
    __tablename__ = "settings"
    __table_args__ = (
        db.Index("ix_settings_group", "group_name", "key"),
        {"sqlite_autoincrement": True},
    )

    id = db.Column(db.Integer, primary_key=True)
    key = db.Column(db.String(128), nullable=False, unique=True)
    value = db.Column(db.Text, nullable=False, server_default="")
    value_type = db.Column(db.String(16), nullable=False, server_default="string")
    group_name = db.Column(db.String(64), nullable=False, server_default="general")
    description = db.Column(db.Text, nullable=True)

    created_at = db.Column(db.DateTime, nullable=False, server_default=db.func.now())
    updated_at = db.Column(db.DateTime, nullable=False, server_default=db.func.now())
