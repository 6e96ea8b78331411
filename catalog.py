# catalog.py
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Any, Callable, Protocol

from classifier import ISBN_LENGTHS, MIN_QUERY_LENGTH, isbn_key, normalize_isbn
from config import SEARCH_LIMIT
from models import BookRecord, CatalogError, DuplicateRecord, InvalidInput, NotFound
from stores import BookStore, utc_now_iso

logger = logging.getLogger(__name__)


class MetadataProvider(Protocol):
    def lookup_by_identifier(self, isbn: str) -> BookRecord | None: ...

    def lookup_by_text(self, query: str, limit: int = 5) -> list[BookRecord]: ...


@dataclass(frozen=True)
class Outcome:
    record: BookRecord | None = None
    error: CatalogError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class Catalog:
    """
    Decides what gets saved for each user action.

    Three ways in: an ISBN (looked up, falling back to an incomplete
    placeholder on a miss), a search result picked by the user, and a bare
    title typed by hand. All three refuse a book whose ISBN or title is
    already in the store. Every action reads the store fresh and writes it
    back once, after the record is fully built.

    Removal is by position in the current list (head = most recent). Two
    clients removing at the same time can hit the wrong book; there is no
    locking, the catalog is meant for one user.
    """

    def __init__(
        self,
        store: BookStore,
        provider: MetadataProvider,
        clock: Callable[[], str] = utc_now_iso,
        search_limit: int = SEARCH_LIMIT,
    ):
        self.store = store
        self.provider = provider
        self.clock = clock
        self.search_limit = search_limit

    def list_books(self) -> list[BookRecord]:
        return self.store.load()

    # ========== A. ISBN ==========

    def add_by_identifier(self, raw_isbn: str) -> Outcome:
        try:
            return Outcome(self._add_by_identifier(raw_isbn))
        except CatalogError as e:
            logger.info("ISBN add rejected (%s): %s", type(e).__name__, e.message)
            return Outcome(error=e)

    def _add_by_identifier(self, raw_isbn: str) -> BookRecord:
        isbn = normalize_isbn(raw_isbn)
        if len(isbn) not in ISBN_LENGTHS:
            raise InvalidInput("ISBN inválido. Deve ter 10 ou 13 dígitos.")

        books = self.store.load()
        _check_isbn_free(books, isbn)

        found = self.provider.lookup_by_identifier(isbn)
        if found is not None:
            record = BookRecord.from_dict({**found.to_dict(), "isbn": isbn, "incomplete": False})
        else:
            logger.info("No metadata for ISBN %s; saving an incomplete record", isbn)
            record = BookRecord.placeholder(f"ISBN: {isbn}", isbn=isbn)

        _check_title_free(books, record.title)
        return self._insert(books, record)

    # ========== B. Search, then pick ==========

    def search(self, query: str) -> list[BookRecord]:
        q = (query or "").strip()
        if len(q) < MIN_QUERY_LENGTH:
            return []
        return self.provider.lookup_by_text(q, self.search_limit)

    def add_selected(self, candidate: BookRecord | dict[str, Any]) -> Outcome:
        try:
            return Outcome(self._add_selected(candidate))
        except CatalogError as e:
            logger.info("Selected book rejected (%s): %s", type(e).__name__, e.message)
            return Outcome(error=e)

    def _add_selected(self, candidate: BookRecord | dict[str, Any]) -> BookRecord:
        if isinstance(candidate, dict):
            candidate = BookRecord.from_dict(candidate)
        if not candidate.title.strip():
            raise InvalidInput("Dados do livro são obrigatórios")

        books = self.store.load()
        if candidate.isbn:
            _check_isbn_free(books, candidate.isbn)
        _check_title_free(books, candidate.title)
        return self._insert(books, candidate)

    # ========== C. Manual ==========

    def add_manual(self, title: str) -> Outcome:
        try:
            return Outcome(self._add_manual(title))
        except CatalogError as e:
            logger.info("Manual add rejected (%s): %s", type(e).__name__, e.message)
            return Outcome(error=e)

    def _add_manual(self, title: str) -> BookRecord:
        title = (title or "").strip()
        if not title:
            raise InvalidInput("Título é obrigatório")

        books = self.store.load()
        _check_title_free(books, title)
        return self._insert(books, BookRecord.placeholder(title))

    # ========== D. Remove ==========

    def remove(self, index: int) -> Outcome:
        books = self.store.load()
        if not 0 <= index < len(books):
            logger.info("Remove rejected: index %s outside 0..%d", index, len(books) - 1)
            return Outcome(error=NotFound("Livro não encontrado"))

        removed = books.pop(index)
        self.store.save(books)
        logger.info("Removed %r (position %d)", removed.title, index)
        return Outcome(removed)

    def _insert(self, books: list[BookRecord], record: BookRecord) -> BookRecord:
        record = record.stamped(self.clock())
        self.store.save([record, *books])
        logger.info("Added %r (isbn=%s, incomplete=%s)", record.title, record.isbn or "-", record.incomplete)
        return record


def _check_isbn_free(books: list[BookRecord], isbn: str) -> None:
    key = isbn_key(isbn)
    if key and any(isbn_key(b.isbn) == key for b in books):
        raise DuplicateRecord("Livro já cadastrado")


def _check_title_free(books: list[BookRecord], title: str) -> None:
    key = title.strip().casefold()
    if any(b.title_key == key for b in books):
        raise DuplicateRecord("Livro já cadastrado")
