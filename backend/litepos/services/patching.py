# Overview: Partial-update support shared by the entity repositories.

"""
Partial updates

Each repository declares a patch dataclass whose fields are the columns a
caller may change. Every field defaults to UNSET; only fields the caller
actually sets end up in the generated UPDATE. None is a real value and
writes NULL.

WHY: Column names are interpolated into SQL, so they must come from a fixed
allow-list (the dataclass fields), never from caller-supplied keys.
"""

from __future__ import annotations

from dataclasses import fields
from typing import Any, ClassVar

from .. import gateway


class _Unset:
    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()


class Patch:
    """Base for patch dataclasses. Subclasses set TABLE and BOOL_FIELDS."""
    TABLE: ClassVar[str] = ""
    # Stored as 0/1
    BOOL_FIELDS: ClassVar[frozenset[str]] = frozenset()

    def values(self) -> dict[str, Any]:
        """Supplied fields only, in declaration order, booleans encoded."""
        out: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is UNSET:
                continue
            if f.name in self.BOOL_FIELDS and value is not None:
                value = 1 if value else 0
            out[f.name] = value
        return out

    def is_empty(self) -> bool:
        return not self.values()


def build_update(patch: Patch, row_id: int) -> tuple[str, dict[str, Any]] | None:
    """
    Build "UPDATE <table> SET ... WHERE id = :row_id" for the supplied fields.

    Returns None when nothing was supplied. updated_at is stamped by the store
    on every real update.
    """
    values = patch.values()
    if not values:
        return None

    assignments = [f"{column} = :{column}" for column in values]
    assignments.append("updated_at = datetime('now')")

    params = dict(values)
    params["row_id"] = row_id
    return f"UPDATE {patch.TABLE} SET {', '.join(assignments)} WHERE id = :row_id", params


def apply_patch(patch: Patch, row_id: int) -> bool:
    """
    Run the partial update for row_id.

    An empty patch issues no statement and returns False.
    """
    built = build_update(patch, row_id)
    if built is None:
        return False
    statement, params = built
    gateway.execute(statement, params)
    return True


def soft_delete(table: str, row_id: int) -> bool:
    """
    Stamp deleted_at; the row stays in place and nothing cascades.

    Returns False when the row is missing or already deleted, which keeps
    the original deletion time.
    """
    result = gateway.execute(
        f"UPDATE {table} SET deleted_at = datetime('now') WHERE id = :id AND deleted_at IS NULL",
        {"id": row_id},
    )
    return result.rows_affected > 0
