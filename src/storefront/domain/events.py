"""Domain events: immutable records of facts that already happened.

Entities create these as a side effect of their domain methods and keep
them in a pending buffer until a caller drains it with ``pull_events()``.
Dispatching them is left to whoever pulls them.
"""

from __future__ import annotations

import dataclasses
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Union

from storefront.domain.exceptions import ValidationError

EVENT_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class DomainEvent(ABC):
    """Base class for all domain events.

    ``occurred_on`` is fixed when the event is created, so every
    serialization of the same event carries the same timestamp.
    """

    occurred_on: datetime

    @property
    def name(self) -> str:
        return type(self).__name__

    @abstractmethod
    def serialize(self) -> dict[str, Any]:
        """Return a plain mapping suitable for transport or logging."""

    def _formatted_occurred_on(self) -> str:
        return self.occurred_on.strftime(EVENT_TIMESTAMP_FORMAT)


class ProductField(Enum):
    PRICE = "price"
    STOCK = "stock"


ProductFieldValue = Union[float, int]


@dataclass(frozen=True)
class ProductUpdated(DomainEvent):
    """A product's price or stock was changed.

    ``value`` is tagged by ``field``: a float for PRICE, an int for STOCK.
    """

    product_id: int
    field: ProductField
    value: ProductFieldValue
    occurred_on: datetime = dataclasses.field(default_factory=_utcnow)

    def __post_init__(self) -> None:
        try:
            product_field = ProductField(self.field)
        except ValueError as exc:
            raise ValidationError(f"Unknown product field: {self.field!r}") from exc
        object.__setattr__(self, "field", product_field)

        if isinstance(self.value, bool):
            raise ValidationError(f"Invalid value for {product_field.value}: {self.value!r}")
        if product_field is ProductField.PRICE and not isinstance(self.value, float):
            raise ValidationError(
                f"Price updates carry a float, got {type(self.value).__name__}"
            )
        if product_field is ProductField.STOCK and not isinstance(self.value, int):
            raise ValidationError(
                f"Stock updates carry an int, got {type(self.value).__name__}"
            )

    def serialize(self) -> dict[str, Any]:
        return {
            "id": self.product_id,
            "field": self.field.value,
            "value": self.value,
            "occurredOn": self._formatted_occurred_on(),
        }


@dataclass(frozen=True)
class UserRegistered(DomainEvent):
    """A user finished registering."""

    user_id: int
    email: str
    occurred_on: datetime = dataclasses.field(default_factory=_utcnow)

    def serialize(self) -> dict[str, Any]:
        return {
            "userId": self.user_id,
            "email": self.email,
            "occurredOn": self._formatted_occurred_on(),
        }
