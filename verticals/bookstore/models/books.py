"""Book entities for the bookstore inventory.

Book is abstract; the closed set of concrete kinds is PhysicalBook,
DigitalBook and DisplayOnlyBook. Each kind decides whether a purchase is
possible and which fulfillment collaborator handles it. The to_dict()
method provides the serialisation interface used by the router and the
MCP tools.
"""
from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Any

from core.time import Clock, get_default_clock
from verticals.bookstore.errors import (
    InsufficientStockError,
    InvalidArgumentError,
    OutOfStockError,
    UnsupportedOperationError,
)
from verticals.bookstore.fulfillment import (
    MailService,
    ShippingService,
    default_mailer,
    default_shipping,
)


# ---------------------------------------------------------------------------
# Base book
# ---------------------------------------------------------------------------

class Book(ABC):
    """Common attributes and validation shared by every kind of book."""

    kind: str = "book"

    def __init__(
        self,
        isbn: str,
        title: str,
        price: float,
        year_published: int,
        *,
        clock: Clock | None = None,
    ):
        self._clock = clock or get_default_clock()
        if not title or not title.strip():
            raise InvalidArgumentError("Title must not be empty")
        if not (price > 0 and math.isfinite(price)):
            raise InvalidArgumentError(
                f"Invalid price {price}: must be a positive finite number"
            )
        if year_published > self._clock.current_year():
            raise InvalidArgumentError(
                f"Invalid year of publishing {year_published}: "
                f"later than {self._clock.current_year()}"
            )
        self._isbn = isbn
        self._title = title
        self._price = price
        self._year_published = year_published

    @property
    def isbn(self) -> str:
        return self._isbn

    @property
    def title(self) -> str:
        return self._title

    @property
    def price(self) -> float:
        return self._price

    @property
    def year_published(self) -> int:
        return self._year_published

    def is_outdated(self, threshold_years: int) -> bool:
        """True when the book is at least `threshold_years` old this year."""
        return self._clock.current_year() - self._year_published >= threshold_years

    def ensure_available(self, quantity: int) -> None:
        """Raise if `quantity` copies cannot be purchased right now."""
        if not self.is_available_for_purchase(quantity):
            raise UnsupportedOperationError(
                f"{self._title} is not available for purchase"
            )

    @abstractmethod
    def is_available_for_purchase(self, quantity: int) -> bool:
        ...

    @abstractmethod
    def purchase(self, contact: str, address: str, quantity: int) -> None:
        """Run the kind-specific fulfillment for `quantity` copies."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "isbn": self._isbn,
            "title": self._title,
            "price": self._price,
            "year_published": self._year_published,
        }

    def __repr__(self) -> str:
        return f"{type(self).__name__}(isbn={self._isbn!r}, title={self._title!r})"


# ---------------------------------------------------------------------------
# Physical books: stocked and shipped
# ---------------------------------------------------------------------------

class PhysicalBook(Book):
    kind = "physical"

    def __init__(
        self,
        isbn: str,
        title: str,
        price: float,
        year_published: int,
        stock: int,
        *,
        shipping: ShippingService | None = None,
        clock: Clock | None = None,
    ):
        super().__init__(isbn, title, price, year_published, clock=clock)
        if stock <= 0:
            raise InvalidArgumentError(f"Invalid stock {stock}: must be positive")
        self._stock = stock
        self._shipping = shipping or default_shipping

    @property
    def stock(self) -> int:
        return self._stock

    def decrease_stock(self, quantity: int) -> None:
        """Remove `quantity` copies from stock, all or nothing.

        Only BookStore.buy_book calls this, after the availability check.
        """
        if quantity <= 0:
            raise InvalidArgumentError(
                f"Invalid quantity {quantity}: must be positive"
            )
        if self._stock <= 0:
            raise OutOfStockError(f"{self._title} is out of stock")
        if self._stock < quantity:
            raise InsufficientStockError(
                f"Not enough copies of {self._title}: "
                f"{self._stock} in stock, {quantity} requested"
            )
        self._stock -= quantity

    def ensure_available(self, quantity: int) -> None:
        if self._stock <= 0:
            raise OutOfStockError(f"{self._title} is out of stock")
        if not self.is_available_for_purchase(quantity):
            raise InsufficientStockError(
                f"Not enough copies of {self._title}: "
                f"{self._stock} in stock, {quantity} requested"
            )

    def is_available_for_purchase(self, quantity: int) -> bool:
        return self._stock >= quantity

    def purchase(self, contact: str, address: str, quantity: int) -> None:
        self._shipping.ship(self, address, quantity)

    def to_dict(self) -> dict[str, Any]:
        return {**super().to_dict(), "stock": self._stock}


# ---------------------------------------------------------------------------
# Digital books: unlimited copies, delivered by mail
# ---------------------------------------------------------------------------

class DigitalBook(Book):
    kind = "digital"

    def __init__(
        self,
        isbn: str,
        title: str,
        price: float,
        year_published: int,
        file_type: str,
        *,
        mailer: MailService | None = None,
        clock: Clock | None = None,
    ):
        super().__init__(isbn, title, price, year_published, clock=clock)
        self._file_type = file_type
        self._mailer = mailer or default_mailer

    @property
    def file_type(self) -> str:
        return self._file_type

    def is_available_for_purchase(self, quantity: int) -> bool:
        return True

    def purchase(self, contact: str, address: str, quantity: int) -> None:
        self._mailer.send_digital_copy(self, contact, quantity)

    def to_dict(self) -> dict[str, Any]:
        return {**super().to_dict(), "file_type": self._file_type}


# ---------------------------------------------------------------------------
# Display-only books: shown in the store, never sold
# ---------------------------------------------------------------------------

class DisplayOnlyBook(Book):
    kind = "display_only"

    def is_available_for_purchase(self, quantity: int) -> bool:
        return False

    def purchase(self, contact: str, address: str, quantity: int) -> None:
        raise UnsupportedOperationError("Display-only books are not for sale")
