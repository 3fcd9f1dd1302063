"""Bookstore MCP Server — 4 inventory tools.

Exposes the in-memory BookStore to MCP clients: adding books, looking
them up, buying copies and pruning outdated titles. Domain errors come
back as {"success": False, "error": kind, "detail": message}.
"""

from typing import Any

from core.mcp.server_template import create_server, error_result
from verticals.bookstore.config import config
from verticals.bookstore.errors import BookstoreError, InvalidArgumentError
from verticals.bookstore.models.books import (
    Book,
    DigitalBook,
    DisplayOnlyBook,
    PhysicalBook,
)
from verticals.bookstore.store import BookStore

# ---------------------------------------------------------------------------
# Store (one per server process)
# ---------------------------------------------------------------------------

_store = BookStore()

bookstore_server = create_server(
    name="bookstore",
    instructions="Bookstore inventory: add, look up, buy and prune books.",
)


def _build_book(
    kind: str,
    isbn: str,
    title: str,
    price: float,
    year_published: int,
    stock: int | None,
    file_type: str | None,
) -> Book:
    if kind == "physical":
        if stock is None:
            raise InvalidArgumentError("Physical books need a stock level")
        return PhysicalBook(isbn, title, price, year_published, stock)
    if kind == "digital":
        if not file_type:
            raise InvalidArgumentError("Digital books need a file type")
        return DigitalBook(isbn, title, price, year_published, file_type)
    if kind == "display_only":
        return DisplayOnlyBook(isbn, title, price, year_published)
    raise InvalidArgumentError(f"Unknown book kind {kind!r}")


# ---------------------------------------------------------------------------
# Tool 1 — add_book
# ---------------------------------------------------------------------------

async def add_book(
    kind: str,
    isbn: str,
    title: str,
    price: float,
    year_published: int,
    stock: int | None = None,
    file_type: str | None = None,
) -> dict[str, Any]:
    """Add a physical, digital or display-only book to the inventory."""
    try:
        book = _build_book(kind, isbn, title, price, year_published, stock, file_type)
        _store.add_book(book)
    except BookstoreError as exc:
        return error_result(exc)
    return {"success": True, "book": book.to_dict(), "inventory_size": len(_store)}


# ---------------------------------------------------------------------------
# Tool 2 — get_book
# ---------------------------------------------------------------------------

async def get_book(isbn: str) -> dict[str, Any]:
    """Look a book up by ISBN."""
    try:
        book = _store.get_book(isbn)
    except BookstoreError as exc:
        return error_result(exc)
    return {"success": True, "book": book.to_dict()}


# ---------------------------------------------------------------------------
# Tool 3 — buy_book
# ---------------------------------------------------------------------------

async def buy_book(
    isbn: str,
    quantity: int = 1,
    contact: str = "",
    address: str = "",
) -> dict[str, Any]:
    """Buy copies of a book and report the amount to pay."""
    try:
        total = _store.buy_book(isbn, quantity, contact, address)
    except BookstoreError as exc:
        return error_result(exc)
    return {
        "success": True,
        "isbn": isbn,
        "quantity": quantity,
        "total_amount": round(total, 2),
    }


# ---------------------------------------------------------------------------
# Tool 4 — remove_outdated_books
# ---------------------------------------------------------------------------

async def remove_outdated_books(threshold_years: int | None = None) -> dict[str, Any]:
    """Prune books at least `threshold_years` old (configured default if omitted)."""
    if threshold_years is None:
        threshold_years = config.inventory.outdated_threshold_years
    removed = _store.remove_outdated_books(threshold_years)
    return {
        "success": True,
        "threshold_years": threshold_years,
        "removed_count": len(removed),
        "removed": [book.to_dict() for book in removed],
        "remaining": len(_store),
    }


for _tool in (add_book, get_book, buy_book, remove_outdated_books):
    bookstore_server.tool()(_tool)


if __name__ == "__main__":
    bookstore_server.run()
