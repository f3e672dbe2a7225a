"""Builders for entities used across the test suite.

Every field has a sensible default so each test only spells out what
it actually cares about.
"""

from __future__ import annotations

from datetime import datetime, timezone

from storefront.domain.model.product import Product
from storefront.domain.model.user import User
from storefront.domain.model.value_objects import Email, Password, Price, Stock

CREATED_AT = datetime(2024, 1, 15, 10, 0, 0, tzinfo=timezone.utc)
UPDATED_AT = datetime(2024, 1, 16, 12, 30, 0, tzinfo=timezone.utc)


def make_product(**overrides) -> Product:
    fields = dict(
        id=1,
        name="Widget",
        description="A small widget",
        price=Price(10.0),
        stock=Stock(5),
        image="images/widget.png",
        user_id=42,
        created_at=CREATED_AT,
        updated_at=UPDATED_AT,
    )
    fields.update(overrides)
    return Product(**fields)


def make_user(**overrides) -> User:
    fields = dict(
        id=7,
        name="Alice",
        email=Email("a@b.com"),
        password=Password("Abcdef1!"),
        created_at=CREATED_AT,
        updated_at=UPDATED_AT,
    )
    fields.update(overrides)
    return User(**fields)
