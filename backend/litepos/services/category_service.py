# Overview: Service-layer operations for product categories.

from __future__ import annotations

import uuid
from dataclasses import dataclass

from .. import gateway
from .patching import UNSET, Patch, apply_patch, soft_delete


DEFAULT_CATEGORY_COLOR = "#6366f1"


@dataclass
class CategoryPatch(Patch):
    TABLE = "categories"

    name: str = UNSET
    description: str | None = UNSET
    color: str = UNSET
    icon: str | None = UNSET
    sort_order: int = UNSET


def list_categories() -> list[dict]:
    return gateway.query(
        "SELECT * FROM categories WHERE deleted_at IS NULL ORDER BY sort_order, name"
    )


def get_category(category_id: int) -> dict | None:
    return gateway.query_one(
        "SELECT * FROM categories WHERE id = :id AND deleted_at IS NULL",
        {"id": category_id},
    )


def create_category(
    *,
    name: str,
    description: str | None = None,
    color: str | None = None,
    icon: str | None = None,
    sort_order: int | None = None,
) -> int:
    result = gateway.execute(
        "INSERT INTO categories (uuid, name, description, color, icon, sort_order) "
        "VALUES (:uuid, :name, :description, :color, :icon, :sort_order)",
        {
            "uuid": str(uuid.uuid4()),
            "name": name,
            "description": description,
            "color": color if color is not None else DEFAULT_CATEGORY_COLOR,
            "icon": icon,
            "sort_order": sort_order if sort_order is not None else 0,
        },
    )
    return result.last_insert_id


def update_category(category_id: int, patch: CategoryPatch) -> bool:
    return apply_patch(patch, category_id)


def delete_category(category_id: int) -> bool:
    """Soft delete. Products keep their category_id."""
    return soft_delete("categories", category_id)
