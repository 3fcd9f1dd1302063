"""Fulfillment collaborators invoked when a book is purchased.

Books depend on the two protocols below, never on a concrete service, so
tests can pass recording fakes and a host can plug in a real carrier or
mail gateway. The default implementations only emit a log event.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from core.observability.log_setup import get_logger

if TYPE_CHECKING:
    from verticals.bookstore.models.books import Book

logger = get_logger(__name__)


# ---------------------------------------------------------------------------
# Ports
# ---------------------------------------------------------------------------

class ShippingService(Protocol):
    """Physical fulfillment."""

    def ship(self, book: Book, address: str, quantity: int) -> None:
        ...  # pragma: no cover


class MailService(Protocol):
    """Digital fulfillment."""

    def send_digital_copy(self, book: Book, contact: str, quantity: int) -> None:
        ...  # pragma: no cover


# ---------------------------------------------------------------------------
# Default implementations
# ---------------------------------------------------------------------------

class LoggingShippingService:
    def ship(self, book: Book, address: str, quantity: int) -> None:
        logger.info(
            "book_shipped",
            isbn=book.isbn,
            title=book.title,
            quantity=quantity,
            address=address,
        )


class LoggingMailService:
    def send_digital_copy(self, book: Book, contact: str, quantity: int) -> None:
        logger.info(
            "digital_copy_sent",
            isbn=book.isbn,
            title=book.title,
            quantity=quantity,
            contact=contact,
        )


default_shipping = LoggingShippingService()
default_mailer = LoggingMailService()
