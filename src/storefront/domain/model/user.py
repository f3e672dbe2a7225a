"""User aggregate."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from storefront.domain.events import UserRegistered
from storefront.domain.model.aggregate import AggregateRoot
from storefront.domain.model.value_objects import Email, Password


@dataclass
class User(AggregateRoot):
    """A registered account.

    ``password`` holds the validated plaintext; hashing it before it is
    stored is the caller's responsibility.
    """

    id: int
    name: str
    email: Email
    password: Password
    created_at: datetime
    updated_at: datetime
    is_active: bool = True

    def register(self) -> None:
        """Signal that this user has registered.

        Only records a ``UserRegistered`` event; no field changes.
        """
        self._record(UserRegistered(self.id, self.email.value))
