"""Test the bookstore MCP tools."""
import pytest

import verticals.bookstore.mcp_servers.bookstore_server as tools
from verticals.bookstore.config import config
from verticals.bookstore.store import BookStore


@pytest.fixture(autouse=True)
def fresh_store(monkeypatch, default_clock):
    store = BookStore()
    monkeypatch.setattr(tools, "_store", store)
    return store


@pytest.mark.asyncio
async def test_add_and_get_book():
    result = await tools.add_book("digital", "ID2", "Book2", 30.0, 2023, file_type="PDF")
    assert result["success"]
    assert result["inventory_size"] == 1

    fetched = await tools.get_book("ID2")
    assert fetched["book"]["file_type"] == "PDF"


@pytest.mark.asyncio
async def test_add_physical_book_without_stock():
    result = await tools.add_book("physical", "ID1", "Book1", 45.5, 2020)
    assert not result["success"]
    assert result["error"] == "invalid_argument"


@pytest.mark.asyncio
async def test_add_unknown_kind():
    result = await tools.add_book("audio", "ID9", "Book9", 5.0, 2020)
    assert result["error"] == "invalid_argument"


@pytest.mark.asyncio
async def test_buy_book(fresh_store):
    await tools.add_book("physical", "ID1", "Book1", 45.5, 2020, stock=10)
    result = await tools.buy_book("ID1", 2, "omar@email.com", "50 Daqqi street")
    assert result["success"]
    assert result["total_amount"] == 91.0
    assert fresh_store.get_book("ID1").stock == 8


@pytest.mark.asyncio
async def test_buy_unknown_book():
    result = await tools.buy_book("missing")
    assert result == {
        "success": False,
        "error": "not_found",
        "detail": "The book with identifier missing is not found",
    }


@pytest.mark.asyncio
async def test_remove_outdated_books():
    await tools.add_book("physical", "ID4", "Book4", 25.0, 2010, stock=5)
    await tools.add_book("display_only", "ID3", "Book3", 100.0, 2024)
    result = await tools.remove_outdated_books(5)
    assert result["removed_count"] == 1
    assert result["removed"][0]["isbn"] == "ID4"
    assert result["remaining"] == 1


@pytest.mark.asyncio
async def test_remove_outdated_books_default_threshold():
    await tools.add_book("physical", "ID4", "Book4", 25.0, 2010, stock=5)
    await tools.add_book("digital", "ID2", "Book2", 30.0, 2025, file_type="PDF")
    result = await tools.remove_outdated_books()
    assert result["threshold_years"] == config.inventory.outdated_threshold_years
    assert [b["isbn"] for b in result["removed"]] == ["ID4"]
    assert result["remaining"] == 1
