"""Pydantic schemas for API request/response validation."""

from typing import Literal, Optional

from pydantic import BaseModel, Field

from verticals.bookstore.models.books import (
    Book,
    DigitalBook,
    DisplayOnlyBook,
    PhysicalBook,
)


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------

class _BookFields(BaseModel):
    isbn: str = Field(..., min_length=1, max_length=32)
    title: str = Field(..., min_length=1, max_length=500)
    price: float = Field(..., gt=0, allow_inf_nan=False)
    year_published: int


class PhysicalBookCreate(_BookFields):
    kind: Literal["physical"] = "physical"
    stock: int

    def build(self) -> Book:
        return PhysicalBook(
            self.isbn, self.title, self.price, self.year_published, self.stock
        )


class DigitalBookCreate(_BookFields):
    kind: Literal["digital"] = "digital"
    file_type: str = Field(..., min_length=1, max_length=16)

    def build(self) -> Book:
        return DigitalBook(
            self.isbn, self.title, self.price, self.year_published, self.file_type
        )


class DisplayOnlyBookCreate(_BookFields):
    kind: Literal["display_only"] = "display_only"

    def build(self) -> Book:
        return DisplayOnlyBook(self.isbn, self.title, self.price, self.year_published)


class PurchaseRequest(BaseModel):
    quantity: int = Field(1, ge=1)
    contact: str = ""
    address: str = ""


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------

class BookResponse(BaseModel):
    kind: str
    isbn: str
    title: str
    price: float
    year_published: int
    stock: Optional[int] = None
    file_type: Optional[str] = None

    @classmethod
    def from_book(cls, book: Book) -> "BookResponse":
        return cls(**book.to_dict())


class PurchaseResponse(BaseModel):
    isbn: str
    quantity: int
    total_amount: float


class RemovalResponse(BaseModel):
    threshold_years: int
    removed_count: int
    removed: list[BookResponse]
