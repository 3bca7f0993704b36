# Overview: Service-layer operations for key-value settings.

"""
Settings Service

Settings are rows of (key, value, value_type, group_name, description) with
value always stored as text. Parsing by type happens in
state.settings_cache.SettingsCache.

The core reads two keys itself: order_number_prefix and next_order_number
(see order_service.next_order_number).
"""

from __future__ import annotations

from .. import gateway


DEFAULT_SETTINGS = [
    {"key": "store_name", "value": "Lite POS", "value_type": "string", "group_name": "general",
     "description": "Store name printed on receipts"},
    {"key": "currency_symbol", "value": "$", "value_type": "string", "group_name": "general",
     "description": "Symbol shown before amounts"},
    {"key": "default_tax_rate_bps", "value": "0", "value_type": "integer", "group_name": "tax",
     "description": "Tax rate for new products, in basis points"},
    {"key": "order_number_prefix", "value": "ORD-", "value_type": "string", "group_name": "orders",
     "description": "Prefix for generated order numbers"},
    {"key": "next_order_number", "value": "1", "value_type": "integer", "group_name": "orders",
     "description": "Next order sequence number"},
    {"key": "receipt_footer", "value": "Thank you for your business!", "value_type": "string",
     "group_name": "receipt", "description": "Text printed at the bottom of receipts"},
    {"key": "receipt_show_customer", "value": "true", "value_type": "boolean", "group_name": "receipt",
     "description": "Print the customer name on receipts"},
    {"key": "payment_methods", "value": '["cash", "check", "credit_card", "other"]', "value_type": "json",
     "group_name": "payments", "description": "Tender types offered at checkout"},
]


def list_settings() -> list[dict]:
    return gateway.query("SELECT * FROM settings ORDER BY group_name, key")


def get_setting(key: str) -> dict | None:
    return gateway.query_one("SELECT * FROM settings WHERE key = :key", {"key": key})


def update_setting(key: str, value: str) -> bool:
    """Store value (text) for an existing key. Returns False if the key does not exist."""
    result = gateway.execute(
        "UPDATE settings SET value = :value, updated_at = datetime('now') WHERE key = :key",
        {"value": value, "key": key},
    )
    return result.rows_affected > 0


def list_settings_by_group(group_name: str) -> list[dict]:
    return gateway.query(
        "SELECT * FROM settings WHERE group_name = :group_name ORDER BY key",
        {"group_name": group_name},
    )


def seed_default_settings() -> int:
    """
    Insert any DEFAULT_SETTINGS rows that are missing; existing values are kept.

    Returns the number of rows inserted.
    """
    inserted = 0
    with gateway.transaction():
        for row in DEFAULT_SETTINGS:
            result = gateway.execute(
                "INSERT OR IGNORE INTO settings (key, value, value_type, group_name, description) "
                "VALUES (:key, :value, :value_type, :group_name, :description)",
                row,
            )
            inserted += result.rows_affected
    return inserted
