# Overview: In-memory cart for the order being rung up.

"""
Cart

Holds the lines of the order in progress plus its customer, draft order id
and notes. Totals are derived from the lines on every read, so they can never
drift from the line list.

TAX: computed per line and rounded per line, half away from zero
(ROUND_HALF_UP), then summed. A 100 cent item at 50 bps carries 1 cent of
tax, not 0.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal


def line_tax_cents(line_subtotal_cents: int, tax_rate_bps: int) -> int:
    """round(line_subtotal * bps / 10000), halves rounded away from zero."""
    exact = Decimal(line_subtotal_cents) * Decimal(tax_rate_bps) / Decimal(10000)
    return int(exact.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


@dataclass
class CartItem:
    product: dict
    quantity: int = 1
    notes: str = ""

    @property
    def product_id(self) -> int:
        return self.product["id"]

    @property
    def subtotal_cents(self) -> int:
        return self.product["sale_price_cents"] * self.quantity

    @property
    def tax_cents(self) -> int:
        return line_tax_cents(self.subtotal_cents, self.product["tax_rate_bps"])


@dataclass
class CartLine:
    """Priced snapshot of one cart item, ready to be written as an order item."""
    product_id: int
    product_name: str
    product_sku: str | None
    quantity: int
    unit_price_cents: int
    tax_rate_bps: int
    line_subtotal_cents: int
    line_tax_cents: int
    line_total_cents: int
    notes: str | None


@dataclass
class Cart:
    items: list[CartItem] = field(default_factory=list)
    customer: dict | None = None
    draft_id: int | None = None
    notes: str = ""

    # Derived totals

    @property
    def subtotal_cents(self) -> int:
        return sum(item.subtotal_cents for item in self.items)

    @property
    def tax_total_cents(self) -> int:
        return sum(item.tax_cents for item in self.items)

    @property
    def total_cents(self) -> int:
        return self.subtotal_cents + self.tax_total_cents

    @property
    def item_count(self) -> int:
        return sum(item.quantity for item in self.items)

    @property
    def is_empty(self) -> bool:
        return not self.items

    def lines(self) -> list[CartLine]:
        out = []
        for item in self.items:
            subtotal = item.subtotal_cents
            tax = item.tax_cents
            out.append(
                CartLine(
                    product_id=item.product_id,
                    product_name=item.product["name"],
                    product_sku=item.product.get("sku"),
                    quantity=item.quantity,
                    unit_price_cents=item.product["sale_price_cents"],
                    tax_rate_bps=item.product["tax_rate_bps"],
                    line_subtotal_cents=subtotal,
                    line_tax_cents=tax,
                    line_total_cents=subtotal + tax,
                    notes=item.notes or None,
                )
            )
        return out

    # Mutations

    def _find(self, product_id: int) -> CartItem | None:
        for item in self.items:
            if item.product_id == product_id:
                return item
        return None

    def add_item(self, product: dict) -> None:
        """Add one unit; a product already in the cart gets its quantity bumped."""
        existing = self._find(product["id"])
        if existing:
            existing.quantity += 1
        else:
            self.items.append(CartItem(product=product, quantity=1, notes=""))

    def remove_item(self, product_id: int) -> None:
        self.items = [item for item in self.items if item.product_id != product_id]

    def update_quantity(self, product_id: int, quantity: int) -> None:
        """Set a line's quantity. Zero or less removes the line."""
        item = self._find(product_id)
        if item is None:
            return
        if quantity <= 0:
            self.remove_item(product_id)
        else:
            item.quantity = quantity

    def set_item_notes(self, product_id: int, notes: str) -> None:
        item = self._find(product_id)
        if item is not None:
            item.notes = notes

    def set_customer(self, customer: dict | None) -> None:
        self.customer = customer

    def set_draft_id(self, draft_id: int | None) -> None:
        self.draft_id = draft_id

    def set_notes(self, notes: str) -> None:
        self.notes = notes

    def clear(self) -> None:
        self.items = []
        self.customer = None
        self.draft_id = None
        self.notes = ""
