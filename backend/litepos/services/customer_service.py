# Overview: Service-layer operations for customers.

from __future__ import annotations

import uuid
from dataclasses import dataclass

from .. import gateway
from .patching import UNSET, Patch, apply_patch, soft_delete


CUSTOMER_FIELDS = (
    "first_name", "last_name", "email", "phone",
    "billing_address_line1", "billing_address_line2", "billing_city", "billing_state", "billing_zip",
    "shipping_address_line1", "shipping_address_line2", "shipping_city", "shipping_state", "shipping_zip",
    "notes",
)


@dataclass
class CustomerPatch(Patch):
    TABLE = "customers"

    first_name: str = UNSET
    last_name: str = UNSET
    email: str | None = UNSET
    phone: str | None = UNSET
    billing_address_line1: str | None = UNSET
    billing_address_line2: str | None = UNSET
    billing_city: str | None = UNSET
    billing_state: str | None = UNSET
    billing_zip: str | None = UNSET
    shipping_address_line1: str | None = UNSET
    shipping_address_line2: str | None = UNSET
    shipping_city: str | None = UNSET
    shipping_state: str | None = UNSET
    shipping_zip: str | None = UNSET
    notes: str | None = UNSET


def list_customers(search: str | None = None) -> list[dict]:
    """Customers ordered by last name, then first name; search matches name, email or phone."""
    sql = "SELECT * FROM customers WHERE deleted_at IS NULL"
    params: dict = {}

    if search:
        sql += (
            " AND (first_name LIKE :term OR last_name LIKE :term"
            " OR email LIKE :term OR phone LIKE :term)"
        )
        params["term"] = f"%{search}%"

    sql += " ORDER BY last_name, first_name"
    return gateway.query(sql, params)


def get_customer(customer_id: int) -> dict | None:
    return gateway.query_one(
        "SELECT * FROM customers WHERE id = :id AND deleted_at IS NULL",
        {"id": customer_id},
    )


def create_customer(*, first_name: str, last_name: str, **optional) -> int:
    """
    Insert a customer and return the new id.

    Contact, address and notes columns are optional keyword arguments named
    exactly like their columns; omitted ones are stored as NULL.
    """
    unknown = set(optional) - set(CUSTOMER_FIELDS)
    if unknown:
        raise TypeError(f"Unknown customer fields: {', '.join(sorted(unknown))}")

    params = {column: optional.get(column) for column in CUSTOMER_FIELDS}
    params["first_name"] = first_name
    params["last_name"] = last_name
    params["uuid"] = str(uuid.uuid4())

    columns = ("uuid",) + CUSTOMER_FIELDS
    result = gateway.execute(
        f"INSERT INTO customers ({', '.join(columns)}) "
        f"VALUES ({', '.join(':' + c for c in columns)})",
        params,
    )
    return result.last_insert_id


def update_customer(customer_id: int, patch: CustomerPatch) -> bool:
    return apply_patch(patch, customer_id)


def delete_customer(customer_id: int) -> bool:
    return soft_delete("customers", customer_id)
