# Overview: Logged-in user for the register.

from __future__ import annotations


class UserSession:
    """At most one authenticated user. login() replaces, logout() clears."""

    def __init__(self) -> None:
        self.user: dict | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    @property
    def is_admin(self) -> bool:
        return self.user is not None and self.user.get("role") == "admin"

    def login(self, user: dict) -> None:
        self.user = user

    def logout(self) -> None:
        self.user = None
