"""Test the bookstore HTTP API."""
import pytest
from fastapi.testclient import TestClient

from api.main import app
from verticals.bookstore.config import config
from verticals.bookstore.router import get_store
from verticals.bookstore.store import BookStore

PREFIX = "/api/bookstore"


@pytest.fixture
def store(default_clock):
    return BookStore()


@pytest.fixture
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()


def _add(client, **payload):
    return client.post(f"{PREFIX}/books", json=payload)


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_create_and_get_physical_book(client):
    response = _add(client, kind="physical", isbn="ID1", title="Book1",
                    price=45.5, year_published=2020, stock=10)
    assert response.status_code == 201
    assert response.json()["stock"] == 10

    fetched = client.get(f"{PREFIX}/books/ID1").json()
    assert fetched["kind"] == "physical"
    assert fetched["price"] == 45.5


def test_create_duplicate_book(client):
    _add(client, kind="display_only", isbn="ID3", title="Book3", price=100.0, year_published=2024)
    response = _add(client, kind="display_only", isbn="ID3", title="Again", price=1.0, year_published=2024)
    assert response.status_code == 409
    assert response.json()["error"] == "duplicate_identifier"


def test_create_book_with_future_year(client):
    response = _add(client, kind="digital", isbn="ID2", title="Book2",
                    price=30.0, year_published=2030, file_type="PDF")
    assert response.status_code == 422
    assert response.json()["error"] == "invalid_argument"


def test_get_unknown_book(client):
    response = client.get(f"{PREFIX}/books/nope")
    assert response.status_code == 404
    assert response.json()["error"] == "not_found"


def test_purchase_physical_book(client, store):
    _add(client, kind="physical", isbn="ID1", title="Book1", price=45.5, year_published=2020, stock=10)
    response = client.post(
        f"{PREFIX}/books/ID1/purchase",
        json={"quantity": 2, "contact": "omar@email.com", "address": "50 Daqqi street"},
    )
    assert response.status_code == 200
    assert response.json() == {"isbn": "ID1", "quantity": 2, "total_amount": 91.0}
    assert store.get_book("ID1").stock == 8


def test_purchase_exceeding_stock(client, store):
    _add(client, kind="physical", isbn="ID1", title="Book1", price=45.5, year_published=2020, stock=10)
    response = client.post(f"{PREFIX}/books/ID1/purchase", json={"quantity": 15})
    assert response.status_code == 409
    assert response.json()["error"] == "insufficient_stock"
    assert store.get_book("ID1").stock == 10


def test_purchase_display_only_book(client):
    _add(client, kind="display_only", isbn="ID3", title="Book3", price=100.0, year_published=2024)
    response = client.post(f"{PREFIX}/books/ID3/purchase", json={"quantity": 1})
    assert response.status_code == 409
    assert response.json()["error"] == "unsupported"


def test_remove_outdated_books(client, store):
    _add(client, kind="physical", isbn="ID4", title="Book4", price=25.0, year_published=2010, stock=5)
    _add(client, kind="digital", isbn="ID5", title="Book5", price=35.5, year_published=2022, file_type="DOCS")
    response = client.post(f"{PREFIX}/inventory/outdated-removal", params={"threshold_years": 5})
    assert response.status_code == 200
    body = response.json()
    assert body["removed_count"] == 1
    assert [b["isbn"] for b in body["removed"]] == ["ID4"]
    assert "ID5" in store


def test_create_book_with_nan_price(client, store):
    response = client.post(
        f"{PREFIX}/books",
        content='{"kind": "digital", "isbn": "ID2", "title": "Book2", '
                '"price": NaN, "year_published": 2023, "file_type": "PDF"}',
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 422
    assert response.json()["error"] == "invalid_argument"
    assert "ID2" not in store


def test_purchase_zero_quantity_rejected(client, store):
    _add(client, kind="physical", isbn="ID1", title="Book1", price=45.5, year_published=2020, stock=10)
    response = client.post(f"{PREFIX}/books/ID1/purchase", json={"quantity": 0})
    assert response.status_code == 422
    body = response.json()
    assert body["error"] == "invalid_argument"
    assert "quantity" in body["detail"]
    assert store.get_book("ID1").stock == 10


def test_purchase_out_of_stock(client, store):
    _add(client, kind="physical", isbn="ID1", title="Book1", price=45.5, year_published=2020, stock=10)
    assert client.post(f"{PREFIX}/books/ID1/purchase", json={"quantity": 10}).status_code == 200
    response = client.post(f"{PREFIX}/books/ID1/purchase", json={"quantity": 1})
    assert response.status_code == 409
    assert response.json()["error"] == "out_of_stock"
    assert store.get_book("ID1").stock == 0


def test_remove_outdated_books_default_threshold(client, store):
    _add(client, kind="physical", isbn="ID4", title="Book4", price=25.0, year_published=2010, stock=5)
    _add(client, kind="display_only", isbn="ID3", title="Book3", price=100.0, year_published=2025)
    response = client.post(f"{PREFIX}/inventory/outdated-removal")
    assert response.status_code == 200
    body = response.json()
    assert body["threshold_years"] == config.inventory.outdated_threshold_years
    assert [b["isbn"] for b in body["removed"]] == ["ID4"]
    assert "ID3" in store
