"""
Tests for the HTTP API.

The app is built with create_app() against a temporary SQLite file and the
client is used as a context manager so the startup lifespan runs.
"""

import sqlite3

import pytest
from fastapi.testclient import TestClient

from library_catalog.config import Settings
from library_catalog.main import create_app
from library_catalog.seed import SAMPLE_BOOKS


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "catalog.db"


@pytest.fixture
def client(db_path):
    app = create_app(Settings(db_path=db_path, seed_sample_data=False))
    with TestClient(app) as test_client:
        yield test_client


def add(client, name, author, year, price):
    response = client.post(
        "/api/v1/books",
        json={"name": name, "author": author, "year_of_publishing": year, "price": price},
    )
    assert response.status_code == 201, response.text
    return response.json()


# ============================================================================
# Books CRUD
# ============================================================================


class TestBooksCrud:

    def test_add_book_returns_created_book(self, client):
        response = client.post(
            "/api/v1/books",
            json={"name": " Dune ", "author": "Frank Herbert", "year_of_publishing": 1965, "price": "16.99"},
        )

        assert response.status_code == 201
        assert response.json() == {
            "id": 1,
            "name": "Dune",
            "author": "Frank Herbert",
            "year_of_publishing": 1965,
            "price": "16.99",
        }

    def test_add_book_invalid_field_is_400(self, client):
        response = client.post(
            "/api/v1/books",
            json={"name": "", "author": "Frank Herbert", "year_of_publishing": 1965, "price": 16.99},
        )

        assert response.status_code == 400
        assert response.json() == {
            "kind": "invalid_argument",
            "detail": "Book name cannot be empty",
        }

    def test_add_book_non_positive_price_is_400(self, client):
        response = client.post(
            "/api/v1/books",
            json={"name": "Dune", "author": "Frank Herbert", "year_of_publishing": 1965, "price": 0},
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Price must be a positive number"

    def test_add_duplicate_is_409(self, client):
        add(client, "Dune", "Frank Herbert", 1965, 16.99)

        response = client.post(
            "/api/v1/books",
            json={"name": "DUNE", "author": "frank herbert", "year_of_publishing": 1970, "price": 9},
        )

        assert response.status_code == 409
        assert response.json()["kind"] == "duplicate_book"

    def test_get_book(self, client):
        created = add(client, "1984", "George Orwell", 1949, 13.99)

        response = client.get(f"/api/v1/books/{created['id']}")

        assert response.status_code == 200
        assert response.json() == created

    def test_get_missing_book_is_404(self, client):
        response = client.get("/api/v1/books/42")

        assert response.status_code == 404
        assert response.json()["detail"] == "Book with ID 42 not found"

    def test_get_book_with_non_positive_id_is_400(self, client):
        response = client.get("/api/v1/books/0")

        assert response.status_code == 400
        assert response.json()["detail"] == "Book ID must be a positive number"

    def test_list_books_in_insertion_order(self, client):
        add(client, "Dune", "Frank Herbert", 1965, 16.99)
        add(client, "1984", "George Orwell", 1949, 13.99)

        response = client.get("/api/v1/books")

        assert response.status_code == 200
        assert [b["name"] for b in response.json()] == ["Dune", "1984"]

    def test_update_book(self, client):
        created = add(client, "1984", "George Orwell", 1949, 13.99)

        response = client.put(
            f"/api/v1/books/{created['id']}",
            json={"name": "Animal Farm", "author": "George Orwell", "year_of_publishing": 1945, "price": 9.5},
        )

        assert response.status_code == 200
        assert response.json() == {
            "id": created["id"],
            "name": "Animal Farm",
            "author": "George Orwell",
            "year_of_publishing": 1945,
            "price": "9.50",
        }

    def test_update_missing_book_is_404(self, client):
        response = client.put(
            "/api/v1/books/9",
            json={"name": "X", "author": "Y", "year_of_publishing": 2000, "price": 1},
        )

        assert response.status_code == 404
        assert response.json()["kind"] == "not_found"

    def test_update_onto_other_pair_is_409(self, client):
        orwell = add(client, "1984", "George Orwell", 1949, 13.99)
        add(client, "Dune", "Frank Herbert", 1965, 16.99)

        response = client.put(
            f"/api/v1/books/{orwell['id']}",
            json={"name": "dune", "author": "Frank Herbert", "year_of_publishing": 1949, "price": 1},
        )

        assert response.status_code == 409

    def test_delete_book(self, client):
        created = add(client, "1984", "George Orwell", 1949, 13.99)

        first = client.delete(f"/api/v1/books/{created['id']}")
        second = client.delete(f"/api/v1/books/{created['id']}")

        assert first.status_code == 204
        assert second.status_code == 404
        assert client.get("/api/v1/books").json() == []


# ============================================================================
# Queries
# ============================================================================


class TestQueries:

    @pytest.fixture(autouse=True)
    def books(self, client):
        add(client, "1984", "George Orwell", 1949, 13.99)
        add(client, "Dune", "Frank Herbert", 1965, 16.99)
        add(client, "Animal Farm", "George Orwell", 1945, 9.99)

    def test_search_by_name(self, client):
        response = client.get("/api/v1/books/search", params={"name": "DUN"})

        assert response.status_code == 200
        assert [b["name"] for b in response.json()] == ["Dune"]

    def test_search_by_author(self, client):
        response = client.get("/api/v1/books/search", params={"author": "orwell"})

        assert [b["name"] for b in response.json()] == ["1984", "Animal Farm"]

    @pytest.mark.parametrize("params", [{}, {"name": "a", "author": "b"}])
    def test_search_needs_exactly_one_parameter(self, client, params):
        response = client.get("/api/v1/books/search", params=params)

        assert response.status_code == 400

    def test_search_with_blank_text_is_400(self, client):
        response = client.get("/api/v1/books/search", params={"name": "  "})

        assert response.status_code == 400
        assert response.json()["detail"] == "Book name cannot be empty"

    def test_books_newest_first(self, client):
        response = client.get("/api/v1/books/newest")

        assert [b["year_of_publishing"] for b in response.json()] == [1965, 1949, 1945]

    def test_books_by_year(self, client):
        response = client.get("/api/v1/books/by-year/1949")

        assert [b["name"] for b in response.json()] == ["1984"]

    def test_books_by_year_range(self, client):
        response = client.get(
            "/api/v1/books/by-year-range", params={"start_year": 1940, "end_year": 1950}
        )

        assert [b["name"] for b in response.json()] == ["1984", "Animal Farm"]

    def test_books_by_year_range_inverted_is_400(self, client):
        response = client.get(
            "/api/v1/books/by-year-range", params={"start_year": 1950, "end_year": 1940}
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Start year cannot be greater than end year"

    def test_books_by_price_range(self, client):
        response = client.get(
            "/api/v1/books/by-price", params={"min_price": "10", "max_price": "15"}
        )

        assert [b["name"] for b in response.json()] == ["1984"]

    def test_books_by_price_range_inverted_is_400(self, client):
        response = client.get(
            "/api/v1/books/by-price", params={"min_price": "15", "max_price": "10"}
        )

        assert response.status_code == 400
        assert response.json()["kind"] == "invalid_argument"

    def test_stats(self, client):
        response = client.get("/api/v1/stats")

        assert response.status_code == 200
        assert response.json() == {
            "empty": False,
            "total_books": 3,
            "unique_authors": 2,
            "earliest_year": 1945,
            "latest_year": 1965,
            "min_price": "9.99",
            "max_price": "16.99",
        }

    def test_health(self, client):
        response = client.get("/api/v1/health")

        assert response.json() == {"status": "ok", "total_books": 3}


class TestEmptyCatalog:

    def test_stats_on_empty_catalog(self, client):
        response = client.get("/api/v1/stats")

        body = response.json()
        assert body["empty"] is True
        assert body["total_books"] == 0
        assert body["min_price"] == "0.00"


# ============================================================================
# Tools
# ============================================================================


class TestToolEndpoints:

    def test_list_tools(self, client):
        response = client.get("/api/v1/tools")

        assert response.status_code == 200
        names = [tool["name"] for tool in response.json()]
        assert "add_book" in names
        assert len(names) == 11

    def test_invoke_tool(self, client):
        response = client.post(
            "/api/v1/tools/add_book",
            json={"bookName": "Dune", "author": "Frank Herbert", "yearOfPublishing": 1965, "price": 16.99},
        )

        assert response.status_code == 200
        assert response.json() == {
            "tool": "add_book",
            "result": (
                "Successfully added book: 'Dune' by Frank Herbert "
                "(ID: 1, Year: 1965, Price: $16.99)"
            ),
        }

    def test_invoke_tool_without_body(self, client):
        response = client.post("/api/v1/tools/get_all_books")

        assert response.json()["result"] == "No books found in the library"

    def test_tool_errors_are_text_results(self, client):
        response = client.post("/api/v1/tools/get_book_by_id", json={"bookId": 0})

        assert response.status_code == 200
        assert response.json()["result"] == "Error: Book ID must be a positive number"

    def test_unknown_tool_is_404(self, client):
        response = client.post("/api/v1/tools/calculate", json={})

        assert response.status_code == 404


# ============================================================================
# Startup and failures
# ============================================================================


class TestStartup:

    def test_seeds_sample_books_on_empty_catalog(self, db_path):
        app = create_app(Settings(db_path=db_path, seed_sample_data=True))

        with TestClient(app) as client:
            total = client.get("/api/v1/health").json()["total_books"]

        assert total == len(SAMPLE_BOOKS)

    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["health"] == "/api/v1/health"

    def test_store_failure_is_503(self, client, db_path):
        with sqlite3.connect(db_path) as conn:
            conn.execute("DROP TABLE books")

        response = client.get("/api/v1/books")

        assert response.status_code == 503
        assert response.json()["kind"] == "store_failure"
