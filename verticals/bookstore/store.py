"""Bookstore inventory — the in-memory store that owns every Book.

Books are keyed by ISBN. The store is the only place that mutates stock:
buy_book validates the request, decrements stock for physical books and
only then triggers fulfillment, so a failing purchase never reaches the
shipping or mail collaborators.

The store has no internal locking. Hosts that share one store between
threads must serialise add_book / buy_book / remove_outdated_books.
"""

from typing import Iterator

from core.observability.log_setup import get_logger
from verticals.bookstore.errors import (
    DuplicateIdentifierError,
    InvalidArgumentError,
    NotFoundError,
)
from verticals.bookstore.models.books import Book, PhysicalBook

logger = get_logger(__name__)


class BookStore:
    """In-memory inventory with add, lookup, purchase and pruning."""

    def __init__(self):
        self._inventory: dict[str, Book] = {}

    def __len__(self) -> int:
        return len(self._inventory)

    def __contains__(self, isbn: object) -> bool:
        return isbn in self._inventory

    def __iter__(self) -> Iterator[Book]:
        return iter(list(self._inventory.values()))

    # -- Add --

    def add_book(self, book: Book) -> None:
        """Insert a book. Raises DuplicateIdentifierError on a known ISBN."""
        if book.isbn in self._inventory:
            raise DuplicateIdentifierError(
                f"A book with ISBN {book.isbn} already exists"
            )
        self._inventory[book.isbn] = book
        logger.info("book_added", isbn=book.isbn, kind=book.kind, title=book.title)

    # -- Lookup --

    def get_book(self, isbn: str) -> Book:
        book = self._inventory.get(isbn)
        if book is None:
            raise NotFoundError(f"The book with identifier {isbn} is not found")
        return book

    def books(self) -> list[Book]:
        return list(self._inventory.values())

    # -- Prune --

    def remove_outdated_books(self, threshold_years: int) -> list[Book]:
        """Remove and return every book at least `threshold_years` old.

        Returned in insertion order.
        """
        outdated = [
            book for book in self._inventory.values()
            if book.is_outdated(threshold_years)
        ]
        for book in outdated:
            del self._inventory[book.isbn]

        logger.info(
            "outdated_books_removed",
            threshold_years=threshold_years,
            removed=[book.isbn for book in outdated],
            remaining=len(self._inventory),
        )
        return outdated

    # -- Purchase --

    def buy_book(self, isbn: str, quantity: int, contact: str, address: str) -> float:
        """Buy `quantity` copies and return the amount to pay.

        Steps:
        1. Look up the book (NotFoundError)
        2. Check availability (UnsupportedOperationError, or the stock
           specific OutOfStockError / InsufficientStockError)
        3. Compute price * quantity
        4. Decrement stock for physical books
        5. Dispatch fulfillment
        """
        book = self.get_book(isbn)
        book.ensure_available(quantity)
        if quantity <= 0:
            raise InvalidArgumentError(
                f"Invalid quantity {quantity}: must be positive"
            )

        total_amount = book.price * quantity

        if isinstance(book, PhysicalBook):
            book.decrease_stock(quantity)

        book.purchase(contact, address, quantity)

        logger.info(
            "book_purchased",
            isbn=isbn,
            kind=book.kind,
            quantity=quantity,
            total_amount=total_amount,
        )
        return total_amount
