# Overview: Process-local POS state owned by the application.

"""
POS state

One PosState per Flask app, created in create_app() and kept in
app.extensions["pos_state"]. Code that needs the cart, the logged-in user,
the product filters or the settings snapshot takes it from get_pos_state()
(or receives it as an argument) instead of importing module-level globals.

Single consumer: the register UI drives these objects from one thread, so
there is no locking.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from flask import current_app

from .cart import Cart, CartItem, CartLine, line_tax_cents
from .filters import PosFilters
from .session import UserSession
from .settings_cache import SettingsCache


@dataclass
class PosState:
    cart: Cart = field(default_factory=Cart)
    session: UserSession = field(default_factory=UserSession)
    filters: PosFilters = field(default_factory=PosFilters)
    settings: SettingsCache = field(default_factory=SettingsCache)

    def reset(self) -> None:
        """Logout: drop the user and everything rung up under them."""
        self.session.logout()
        self.cart.clear()
        self.filters.clear()


def get_pos_state() -> PosState:
    return current_app.extensions["pos_state"]


__all__ = [
    "PosState", "get_pos_state",
    "Cart", "CartItem", "CartLine", "line_tax_cents",
    "PosFilters", "UserSession", "SettingsCache",
]
