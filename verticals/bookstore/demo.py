"""Bookstore demo — stocks a store, buys books, prunes old titles.

Run with::

    python -m verticals.bookstore.demo
"""

from core.observability.log_setup import configure_logging, get_logger
from verticals.bookstore.config import config
from verticals.bookstore.errors import BookstoreError
from verticals.bookstore.models.books import DigitalBook, DisplayOnlyBook, PhysicalBook
from verticals.bookstore.store import BookStore

logger = get_logger(__name__)

PURCHASES = [
    ("ID1", 2, "omar@email.com", "50 Daqqi street"),
    ("ID2", 1, "ahmed@email.com", "120 Faisal street"),
    ("ID3", 1, "test@email.com", "120 Faisal street"),  # display-only
    ("ID1", 15, "test@email.com", "120 Faisal street"),  # more than in stock
]


def stock_store(store: BookStore) -> None:
    store.add_book(PhysicalBook("ID1", "Book1", 45.50, 2020, stock=10))
    store.add_book(DigitalBook("ID2", "Book2", 30.0, 2023, file_type="PDF"))
    store.add_book(DisplayOnlyBook("ID3", "Book3", 100.0, 2024))
    store.add_book(PhysicalBook("ID4", "Book4", 25.00, 2010, stock=5))
    store.add_book(DigitalBook("ID5", "Book5", 35.50, 2022, file_type="DOCS"))


def run(store: BookStore | None = None) -> BookStore:
    """Play the demo scenario against `store` and return it."""
    store = store if store is not None else BookStore()

    stock_store(store)
    logger.info("inventory_stocked", size=len(store))

    for isbn, quantity, contact, address in PURCHASES:
        try:
            amount = store.buy_book(isbn, quantity, contact, address)
        except BookstoreError as exc:
            logger.warning(
                "purchase_rejected",
                isbn=isbn,
                quantity=quantity,
                error=exc.kind,
                detail=exc.message,
            )
            continue
        logger.info("purchase_paid", isbn=isbn, amount=round(amount, 2))

    threshold = config.inventory.outdated_threshold_years
    removed = store.remove_outdated_books(threshold)
    logger.info(
        "demo_finished",
        threshold_years=threshold,
        removed=len(removed),
        remaining=len(store),
    )
    return store


def main() -> None:
    configure_logging(
        level=config.logging.level,
        json_format=config.logging.json_format,
        service=config.logging.service,
    )
    run()


if __name__ == "__main__":
    main()
