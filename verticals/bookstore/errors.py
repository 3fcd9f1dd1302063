"""Bookstore error taxonomy.

Every failure carries a stable `kind` string so that the HTTP and MCP
surfaces can report it without knowing the class hierarchy.
"""


class BookstoreError(Exception):
    """Base class for all bookstore failures."""

    kind = "bookstore_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidArgumentError(BookstoreError, ValueError):
    """Bad price, year, stock, title or quantity."""

    kind = "invalid_argument"


class DuplicateIdentifierError(BookstoreError):
    kind = "duplicate_identifier"


class NotFoundError(BookstoreError, LookupError):
    kind = "not_found"


class UnsupportedOperationError(BookstoreError):
    """The book cannot be purchased at the requested quantity."""

    kind = "unsupported"


class StockError(UnsupportedOperationError):
    """A physical book lacks the stock for a purchase."""

    kind = "stock_error"


class OutOfStockError(StockError):
    kind = "out_of_stock"


class InsufficientStockError(StockError):
    kind = "insufficient_stock"
