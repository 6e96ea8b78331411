import pytest

from catalog import Catalog
from models import BookRecord
from stores import BookStore


class FakeProvider:
    """Canned metadata; records every lookup it receives."""

    def __init__(self, by_isbn=None, by_text=None):
        self.by_isbn = by_isbn or {}
        self.by_text = by_text or []
        self.isbn_calls = []
        self.text_calls = []

    def lookup_by_identifier(self, isbn):
        self.isbn_calls.append(isbn)
        return self.by_isbn.get(isbn)

    def lookup_by_text(self, query, limit=5):
        self.text_calls.append((query, limit))
        return list(self.by_text[:limit])


class Ticker:
    def __init__(self):
        self.n = 0

    def __call__(self):
        self.n += 1
        return f"2026-01-01T00:00:{self.n:02d}+00:00"


def make_book(title, isbn="", **kwargs):
    return BookRecord(title=title, isbn=isbn, **kwargs)


@pytest.fixture
def store(tmp_path):
    return BookStore(tmp_path / "books.json")


@pytest.fixture
def provider():
    return FakeProvider()


@pytest.fixture
def catalog(store, provider):
    return Catalog(store, provider, clock=Ticker())


@pytest.fixture
def client(monkeypatch, catalog):
    import blueprints.api as api
    from app import app

    monkeypatch.setattr(api, "catalog", catalog)
    app.config["TESTING"] = True
    return app.test_client()
