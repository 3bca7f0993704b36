# Overview: Product grid filters on the register screen.

from __future__ import annotations


class PosFilters:
    def __init__(self) -> None:
        self.search_query: str = ""
        self.selected_category_id: int | None = None

    def set_search(self, query: str) -> None:
        self.search_query = query

    def set_category(self, category_id: int | None) -> None:
        self.selected_category_id = category_id

    def clear_search(self) -> None:
        self.search_query = ""

    def clear_category(self) -> None:
        self.selected_category_id = None

    def clear(self) -> None:
        self.clear_search()
        self.clear_category()

    def as_product_query(self) -> dict:
        """Keyword arguments for product_service.list_products."""
        return {
            "search": self.search_query or None,
            "category_id": self.selected_category_id,
        }
