# Overview: Pytest coverage for orders, order numbering and cart checkout.

import pytest

from litepos import gateway
from litepos.services import order_service, product_service, settings_service, customer_service
from litepos.services.order_service import OrderError
from litepos.services.product_service import ProductPatch
from litepos.state import Cart


def _order(user_id, number="ORD-00001", **overrides):
    values = dict(
        order_number=number,
        user_id=user_id,
        subtotal_cents=1000,
        discount_cents=0,
        tax_total_cents=83,
        total_cents=1083,
    )
    values.update(overrides)
    return order_service.create_order(**values)


class TestOrderNumbers:
    """next_order_number() formatting and sequence."""

    def test_sequential_numbers_from_seven(self, db_session, default_settings):
        """Starting at 7: ORD-00007, ORD-00008, stored sequence ends at 9."""
        settings_service.update_setting("next_order_number", "7")

        assert order_service.next_order_number() == "ORD-00007"
        assert order_service.next_order_number() == "ORD-00008"
        assert settings_service.get_setting("next_order_number")["value"] == "9"

    def test_custom_prefix(self, db_session, default_settings):
        settings_service.update_setting("order_number_prefix", "POS-")
        assert order_service.next_order_number() == "POS-00001"

    def test_defaults_without_settings_rows(self, db_session):
        """Missing settings fall back to "ORD-" and sequence 1, then continue at 2."""
        assert order_service.next_order_number() == "ORD-00001"
        assert order_service.next_order_number() == "ORD-00002"

    def test_sequence_wider_than_padding(self, db_session, default_settings):
        settings_service.update_setting("next_order_number", "123456")
        assert order_service.next_order_number() == "ORD-123456"


class TestOrderCrud:
    """Orders and their lines."""

    def test_create_defaults_to_draft(self, db_session, cashier):
        order = order_service.get_order(_order(cashier["id"]))
        assert order["status"] == "draft"
        assert order["customer_id"] is None
        assert order["completed_at"] is None
        assert order["total_cents"] == 1083

    def test_get_missing_order_is_none(self, db_session):
        assert order_service.get_order(999) is None

    def test_items_keep_snapshot_after_product_changes(self, db_session, cashier, coffee):
        order_id = _order(cashier["id"])
        order_service.add_order_item(
            order_id=order_id,
            product_id=coffee["id"],
            product_name=coffee["name"],
            product_sku=coffee["sku"],
            quantity=1,
            unit_price_cents=999,
            tax_rate_bps=825,
            line_subtotal_cents=999,
            line_tax_cents=82,
            line_total_cents=1081,
        )
        product_service.update_product(coffee["id"], ProductPatch(name="Decaf", sale_price_cents=1299))
        product_service.delete_product(coffee["id"])

        (item,) = order_service.get_order_items(order_id)
        assert item["product_name"] == "Coffee Beans"
        assert item["unit_price_cents"] == 999
        assert item["product_id"] == coffee["id"]

    def test_status_transitions(self, db_session, cashier):
        order_id = _order(cashier["id"])

        order_service.complete_order(order_id)
        order = order_service.get_order(order_id)
        assert order["status"] == "completed"
        assert order["completed_at"] is not None

        order_service.mark_refunded(order_id)
        assert order_service.get_order(order_id)["status"] == "refunded"

        order_service.void_order(order_id)
        assert order_service.get_order(order_id)["status"] == "void"

    def test_reassign_and_detach_customer(self, db_session, cashier):
        customer_id = customer_service.create_customer(first_name="Sam", last_name="Lee")
        order_id = _order(cashier["id"])

        order_service.update_order_customer(order_id, customer_id)
        assert order_service.get_order(order_id)["customer_id"] == customer_id

        order_service.update_order_customer(order_id, None)
        assert order_service.get_order(order_id)["customer_id"] is None

    def test_soft_delete_hides_order(self, db_session, cashier):
        order_id = _order(cashier["id"])
        order_service.delete_order(order_id)
        assert order_service.get_order(order_id) is None
        assert order_service.list_orders() == []


class TestListOrders:
    """Filters on list_orders."""

    def test_newest_first(self, db_session, cashier):
        first = _order(cashier["id"], "ORD-00001")
        second = _order(cashier["id"], "ORD-00002")
        gateway.execute("UPDATE orders SET created_at = '2026-01-01 09:00:00' WHERE id = :id", {"id": first})
        gateway.execute("UPDATE orders SET created_at = '2026-01-02 09:00:00' WHERE id = :id", {"id": second})

        assert [o["id"] for o in order_service.list_orders()] == [second, first]

    def test_filter_by_status_and_user(self, db_session, cashier, admin):
        mine = _order(cashier["id"], "ORD-00001")
        _order(admin["id"], "ORD-00002")
        order_service.complete_order(mine)

        assert [o["id"] for o in order_service.list_orders(status="completed")] == [mine]
        assert [o["id"] for o in order_service.list_orders(user_id=cashier["id"])] == [mine]

    def test_date_to_includes_whole_day(self, db_session, cashier):
        late = _order(cashier["id"], "ORD-00001")
        next_day = _order(cashier["id"], "ORD-00002")
        gateway.execute("UPDATE orders SET created_at = '2026-03-01 22:15:00' WHERE id = :id", {"id": late})
        gateway.execute("UPDATE orders SET created_at = '2026-03-02 00:00:01' WHERE id = :id", {"id": next_day})

        rows = order_service.list_orders(date_from="2026-03-01", date_to="2026-03-01")
        assert [o["id"] for o in rows] == [late]


class TestSaveCart:
    """save_cart() turns the cart into an order with item snapshots."""

    def test_writes_order_and_items(self, db_session, default_settings, cashier, coffee, mug):
        cart = Cart()
        cart.add_item(coffee)
        cart.add_item(coffee)
        cart.add_item(coffee)
        cart.add_item(mug)
        cart.set_notes("Gift wrap")

        order_id = order_service.save_cart(cart, user_id=cashier["id"])

        order = order_service.get_order(order_id)
        assert order["order_number"] == "ORD-00001"
        assert order["status"] == "draft"
        assert order["subtotal_cents"] == 3097
        assert order["tax_total_cents"] == 248
        assert order["total_cents"] == 3345
        assert order["notes"] == "Gift wrap"

        items = order_service.get_order_items(order_id)
        assert [(i["product_name"], i["quantity"], i["line_tax_cents"]) for i in items] == [
            ("Coffee Beans", 3, 247),
            ("Mug", 1, 1),
        ]
        assert cart.item_count == 4

    def test_discount_reduces_total(self, db_session, cashier, mug):
        cart = Cart()
        cart.add_item(mug)
        order_id = order_service.save_cart(cart, user_id=cashier["id"], discount_cents=50, status="completed")

        order = order_service.get_order(order_id)
        assert order["discount_cents"] == 50
        assert order["total_cents"] == 100 - 50 + 1
        assert order["status"] == "completed"

    def test_records_customer(self, db_session, cashier, mug):
        customer_id = customer_service.create_customer(first_name="Kim", last_name="Park")
        cart = Cart()
        cart.add_item(mug)
        cart.set_customer(customer_service.get_customer(customer_id))

        order_id = order_service.save_cart(cart, user_id=cashier["id"])
        assert order_service.get_order(order_id)["customer_id"] == customer_id

    def test_empty_cart_rejected(self, db_session, cashier):
        with pytest.raises(OrderError):
            order_service.save_cart(Cart(), user_id=cashier["id"])

    def test_failure_leaves_nothing_behind(self, db_session, default_settings, mug):
        """A failed item insert rolls back the order row and the number."""
        cart = Cart()
        cart.add_item(mug)
        cart.add_item({**mug, "id": mug["id"] + 1, "name": None})

        with pytest.raises(Exception):
            order_service.save_cart(cart, user_id=1)

        assert gateway.query("SELECT * FROM orders") == []
        assert settings_service.get_setting("next_order_number")["value"] == "1"
