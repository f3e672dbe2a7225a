"""Product aggregate.

Products are created and hydrated by code outside the domain, with every
field supplied. Price and stock changes go through domain methods so
each one leaves a ``ProductUpdated`` event behind.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from storefront.domain.events import ProductField, ProductUpdated
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.aggregate import AggregateRoot
from storefront.domain.model.value_objects import Price, Stock


@dataclass
class Product(AggregateRoot):
    """A product listed by a user.

    ``id`` is None until the product has been persisted. No validation
    happens here beyond what ``Price`` and ``Stock`` already enforce.
    """

    id: int | None
    name: str
    description: str
    price: Price
    stock: Stock
    image: str
    user_id: int
    created_at: datetime
    updated_at: datetime

    def update_price(self, new_price: Price) -> None:
        self._assert_persisted()
        self.price = new_price
        self._record(ProductUpdated(self.id, ProductField.PRICE, new_price.value))

    def update_stock(self, new_stock: Stock) -> None:
        self._assert_persisted()
        self.stock = new_stock
        self._record(ProductUpdated(self.id, ProductField.STOCK, new_stock.value))

    # --- Internal helpers -----------------------------------------------------

    def _assert_persisted(self) -> None:
        # ProductUpdated needs an integer id to point at.
        if self.id is None:
            raise ValidationError(
                f"Product '{self.name}' has no ID yet; persist it before updating"
            )
