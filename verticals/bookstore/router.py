"""Bookstore API router — inventory and purchase endpoints.

Demonstrates the standard router pattern:
- Store injection via FastAPI Depends (overridable in tests)
- Plain `def` handlers run in the threadpool, so one process-wide lock
  serialises every store call
- Domain errors and request validation failures share one error body:
  {"error": kind, "detail": message}
"""

import threading
from typing import Annotated, Optional, Union

from fastapi import APIRouter, Body, Depends, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from verticals.bookstore.config import config
from verticals.bookstore.errors import BookstoreError
from verticals.bookstore.models.schemas import (
    BookResponse,
    DigitalBookCreate,
    DisplayOnlyBookCreate,
    PhysicalBookCreate,
    PurchaseRequest,
    PurchaseResponse,
    RemovalResponse,
)
from verticals.bookstore.store import BookStore

router = APIRouter()

# ---------------------------------------------------------------------------
# Store dependency
# ---------------------------------------------------------------------------

_store = BookStore()
_store_lock = threading.Lock()


def get_store() -> BookStore:
    """FastAPI dependency for the process-wide BookStore."""
    return _store


# ---------------------------------------------------------------------------
# Error translation
# ---------------------------------------------------------------------------

ERROR_STATUS: dict[str, int] = {
    "invalid_argument": 422,
    "duplicate_identifier": 409,
    "not_found": 404,
    "unsupported": 409,
    "out_of_stock": 409,
    "insufficient_stock": 409,
}


async def bookstore_error_handler(request: Request, exc: BookstoreError) -> JSONResponse:
    """Render a BookstoreError as {"error": kind, "detail": message}."""
    return JSONResponse(
        status_code=ERROR_STATUS.get(exc.kind, 400),
        content={"error": exc.kind, "detail": exc.message},
    )


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render schema rejections in the same shape as InvalidArgumentError."""
    detail = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    )
    return JSONResponse(
        status_code=ERROR_STATUS["invalid_argument"],
        content={"error": "invalid_argument", "detail": detail},
    )


# ============================================================================
# Book Endpoints
# ============================================================================

BookCreateBody = Annotated[
    Union[PhysicalBookCreate, DigitalBookCreate, DisplayOnlyBookCreate],
    Body(discriminator="kind"),
]


@router.post("/books", status_code=201, response_model=BookResponse)
def create_book(
    request: BookCreateBody,
    store: BookStore = Depends(get_store),
):
    """Add a physical, digital or display-only book to the inventory."""
    book = request.build()
    with _store_lock:
        store.add_book(book)
    return BookResponse.from_book(book)


@router.get("/books/{isbn}", response_model=BookResponse)
def get_book(isbn: str, store: BookStore = Depends(get_store)):
    """Look a book up by ISBN."""
    with _store_lock:
        book = store.get_book(isbn)
    return BookResponse.from_book(book)


@router.post("/books/{isbn}/purchase", response_model=PurchaseResponse)
def purchase_book(
    isbn: str,
    request: PurchaseRequest,
    store: BookStore = Depends(get_store),
):
    """Buy copies of a book; fulfillment depends on the book's kind."""
    with _store_lock:
        total = store.buy_book(isbn, request.quantity, request.contact, request.address)
    return PurchaseResponse(isbn=isbn, quantity=request.quantity, total_amount=total)


# ============================================================================
# Inventory Maintenance
# ============================================================================

@router.post("/inventory/outdated-removal", response_model=RemovalResponse)
def remove_outdated_books(
    threshold_years: Optional[int] = Query(None, ge=0),
    store: BookStore = Depends(get_store),
):
    """Prune books older than the threshold (configured default if omitted)."""
    if threshold_years is None:
        threshold_years = config.inventory.outdated_threshold_years
    with _store_lock:
        removed = store.remove_outdated_books(threshold_years)
    return RemovalResponse(
        threshold_years=threshold_years,
        removed_count=len(removed),
        removed=[BookResponse.from_book(b) for b in removed],
    )
