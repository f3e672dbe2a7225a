"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass

from email_validator import SPECIAL_USE_DOMAIN_NAMES, EmailNotValidError, validate_email

from storefront.domain.exceptions import ValidationError

# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
PASSWORD_MIN_LENGTH = 8

# Checked in this order; only the first failing rule is reported.
_PASSWORD_RULES: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"[A-Z]"), "Password must contain at least one uppercase letter"),
    (re.compile(r"[a-z]"), "Password must contain at least one lowercase letter"),
    (re.compile(r"[0-9]"), "Password must contain at least one digit"),
    (re.compile(r"[^A-Za-z0-9]"), "Password must contain at least one special character"),
)


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _to_float(value: int | float, what: str) -> float:
    try:
        return float(value)
    except OverflowError as exc:
        raise ValidationError(f"{what} is too large to represent as a float") from exc


def _without_reserved_domain(address: str) -> str:
    """Swap a special-use domain suffix (.test, .local, ...) for a neutral one.

    email-validator rejects reserved names even with deliverability checks
    off. Those names are well-formed, so only the rest of the syntax is
    checked.
    """
    local, at, domain = address.rpartition("@")
    if not at or domain.startswith("["):
        return address
    lowered = domain.lower()
    for reserved in SPECIAL_USE_DOMAIN_NAMES:
        if lowered == reserved or lowered.endswith("." + reserved):
            return f"{local}@{domain[:-len(reserved)]}example"
    return address


@dataclass(frozen=True)
class Email:
    """An email address.

    The grammar check is delegated to ``email-validator`` with DNS
    lookups and deliverability policy disabled; quoted local parts and
    domain literals are allowed. The original string is kept as-is.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise ValidationError(
                f"Email must be a string, got {type(self.value).__name__}"
            )
        try:
            validate_email(
                _without_reserved_domain(self.value),
                check_deliverability=False,
                globally_deliverable=False,
                allow_quoted_local=True,
                allow_domain_literal=True,
            )
        except EmailNotValidError as exc:
            raise ValidationError(f"Invalid email address: {self.value!r}") from exc

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Password:
    """A plaintext password that satisfies the strength rules.

    This type only validates the format. It does NOT hash anything:
    callers must hash ``value`` before it is persisted anywhere.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise ValidationError(
                f"Password must be a string, got {type(self.value).__name__}"
            )
        if len(self.value) < PASSWORD_MIN_LENGTH:
            raise ValidationError(
                f"Password must be at least {PASSWORD_MIN_LENGTH} characters long"
            )
        for pattern, message in _PASSWORD_RULES:
            if not pattern.search(self.value):
                raise ValidationError(message)

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return "Password(value='********')"


@dataclass(frozen=True, order=True)
class Price:
    """A strictly positive price.

    Every arithmetic operation builds a new Price, so the result goes
    through the same validation as a freshly constructed one.
    """

    value: float

    def __post_init__(self) -> None:
        if not _is_number(self.value):
            raise ValidationError(
                f"Price must be a number, got {type(self.value).__name__}"
            )
        value = _to_float(self.value, "Price")
        if not math.isfinite(value):
            raise ValidationError(f"Price must be a finite number, got {value}")
        if value <= 0:
            raise ValidationError(f"Price must be greater than zero, got {value}")
        object.__setattr__(self, "value", value)

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Price) -> Price:
        self._assert_price(other)
        return Price(self.value + other.value)

    def __sub__(self, other: Price) -> Price:
        self._assert_price(other)
        return Price(self.value - other.value)

    def __mul__(self, factor: float) -> Price:
        if not _is_number(factor):
            raise TypeError(f"Can only multiply Price by a number, got {type(factor).__name__}")
        return Price(self.value * _to_float(factor, "Factor"))

    def __truediv__(self, divisor: float) -> Price:
        if not _is_number(divisor):
            raise TypeError(f"Can only divide Price by a number, got {type(divisor).__name__}")
        if divisor == 0:
            raise ValidationError("Cannot divide a price by zero")
        return Price(self.value / _to_float(divisor, "Divisor"))

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return str(self.value)

    @staticmethod
    def _assert_price(other: object) -> None:
        if not isinstance(other, Price):
            raise TypeError(f"Expected a Price, got {type(other).__name__}")


@dataclass(frozen=True, order=True)
class Stock:
    """A non-negative count of units on hand.

    Subtracting more than is available is an error; the result is never
    clamped to zero.
    """

    value: int

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise ValidationError(
                f"Stock must be an integer, got {type(self.value).__name__}"
            )
        if self.value < 0:
            raise ValidationError(f"Stock cannot be negative, got {self.value}")

    def __add__(self, other: Stock) -> Stock:
        self._assert_stock(other)
        return Stock(self.value + other.value)

    def __sub__(self, other: Stock) -> Stock:
        self._assert_stock(other)
        return Stock(self.value - other.value)

    def __str__(self) -> str:
        return str(self.value)

    @staticmethod
    def _assert_stock(other: object) -> None:
        if not isinstance(other, Stock):
            raise TypeError(f"Expected a Stock, got {type(other).__name__}")
