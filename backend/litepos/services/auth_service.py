# Overview: Service-layer operations for users and PIN login.

"""
Authentication Service

Users log in at the register with a short numeric PIN. The PIN is hashed by
the caller (see hash_pin) and login looks the user up by hash equality, so
the hash has to be deterministic: a keyed HMAC rather than a salted hash.

SECURITY NOTES:
- No lockout or throttling here; repeated wrong PINs are not counted.
- PIN hashes are keyed with PIN_HASH_KEY from the app config.
"""

from __future__ import annotations

import hashlib
import hmac
import uuid
from dataclasses import dataclass

from flask import current_app

from .. import gateway
from .patching import UNSET, Patch, apply_patch, soft_delete


@dataclass
class UserPatch(Patch):
    TABLE = "users"
    BOOL_FIELDS = frozenset({"is_active"})

    name: str = UNSET
    email: str | None = UNSET
    pin_hash: str = UNSET
    role: str = UNSET
    is_active: bool = UNSET


def hash_pin(pin: str) -> str:
    """
    HMAC-SHA256 of the PIN, hex encoded.

    WHY not bcrypt: login() finds the user by hash equality, so the hash must
    be deterministic. The server-side key keeps short PINs from being
    reversed with a plain lookup table.
    """
    key = current_app.config["PIN_HASH_KEY"].encode("utf-8")
    return hmac.new(key, pin.encode("utf-8"), hashlib.sha256).hexdigest()


def login(pin_hash: str) -> dict | None:
    """
    Return the active, non-deleted user whose stored hash matches, or None.
    """
    return gateway.query_one(
        "SELECT * FROM users WHERE pin_hash = :pin_hash AND is_active = 1 AND deleted_at IS NULL LIMIT 1",
        {"pin_hash": pin_hash},
    )


def list_users() -> list[dict]:
    return gateway.query("SELECT * FROM users WHERE deleted_at IS NULL ORDER BY name")


def get_user(user_id: int) -> dict | None:
    return gateway.query_one(
        "SELECT * FROM users WHERE id = :id AND deleted_at IS NULL",
        {"id": user_id},
    )


def create_user(*, name: str, pin_hash: str, role: str, email: str | None = None) -> int:
    """Insert a user and return the new id. role is "admin" or "cashier"."""
    result = gateway.execute(
        "INSERT INTO users (uuid, name, email, pin_hash, role) "
        "VALUES (:uuid, :name, :email, :pin_hash, :role)",
        {
            "uuid": str(uuid.uuid4()),
            "name": name,
            "email": email,
            "pin_hash": pin_hash,
            "role": role,
        },
    )
    return result.last_insert_id


def update_user(user_id: int, patch: UserPatch) -> bool:
    return apply_patch(patch, user_id)


def delete_user(user_id: int) -> bool:
    return soft_delete("users", user_id)
