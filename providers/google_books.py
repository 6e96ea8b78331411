# providers/google_books.py
from __future__ import annotations
import logging
import requests
from typing import Any

from config import GOOGLE_BOOKS_API_KEY, LOOKUP_TIMEOUT_S
from models import BookRecord, LookupUnavailable
from models.book_record import unique_strings

logger = logging.getLogger(__name__)

# Variables
GOOGLE_BOOKS_API = "https://www.googleapis.com/books/v1/volumes"
MAX_DESCRIPTION = 4000
DEFAULT_TITLE = "Unknown title"


class GoogleBooksProvider:
    """
    Book metadata from the Google Books volumes API.

    Both lookups only ever answer "found" or "not found": transport errors,
    timeouts, bad statuses and malformed payloads are logged and reported as
    no results. Without an API key every lookup is a miss and no request is made.
    """

    def __init__(self, api_key: str | None, timeout_s: float = LOOKUP_TIMEOUT_S):
        self.api_key = api_key
        self.timeout_s = timeout_s
        self._warned_no_key = False

    @classmethod
    def from_config(cls) -> "GoogleBooksProvider":
        return cls(GOOGLE_BOOKS_API_KEY, LOOKUP_TIMEOUT_S)

    # ========== Lookups ==========

    def lookup_by_identifier(self, isbn: str) -> BookRecord | None:
        try:
            items = self._search(f"isbn:{isbn}", max_results=1)
        except LookupUnavailable as e:
            logger.warning("ISBN lookup for %s failed: %s", isbn, e.message)
            return None

        if not items:
            logger.info("No Google Books result for ISBN %s", isbn)
            return None
        record = _record_from_volume(items[0], isbn=isbn)
        if record is None:
            logger.warning("Google Books result for ISBN %s has no volumeInfo", isbn)
        return record

    def lookup_by_text(self, query: str, limit: int = 5) -> list[BookRecord]:
        try:
            items = self._search(query, max_results=limit)
        except LookupUnavailable as e:
            logger.warning("Title search for %r failed: %s", query, e.message)
            return []
        records = (_record_from_volume(it) for it in items)
        return [r for r in records if r is not None][:limit]

    # ========== Transport ==========

    def _search(self, q: str, max_results: int) -> list[dict[str, Any]]:
        if not self.api_key:
            if not self._warned_no_key:
                logger.warning("GOOGLE_BOOKS_API_KEY is not set; every lookup will be a miss")
                self._warned_no_key = True
            return []

        params = {"q": q, "maxResults": max(1, min(max_results, 40)), "key": self.api_key}
        try:
            r = requests.get(GOOGLE_BOOKS_API, params=params, timeout=self.timeout_s)
            r.raise_for_status()
            data = r.json()
        except requests.RequestException as e:
            raise LookupUnavailable(f"Google Books request failed: {e}") from e
        except ValueError as e:
            raise LookupUnavailable(f"Google Books returned invalid JSON: {e}") from e

        if not isinstance(data, dict):
            raise LookupUnavailable("Google Books returned an unexpected payload")
        items = data.get("items") or []
        if not isinstance(items, list):
            raise LookupUnavailable("Google Books 'items' is not a list")
        return [it for it in items if isinstance(it, dict)]


# ========== Parsing ==========

def _record_from_volume(item: dict[str, Any], isbn: str | None = None) -> BookRecord | None:
    """None when the item carries no usable volumeInfo."""
    v = item.get("volumeInfo")
    if not isinstance(v, dict):
        return None

    if isbn is None:
        isbns = _extract_isbns_from_google(v)
        # Prefer canonical 13-digit if present
        isbn = isbns.get("isbn13") or isbns.get("isbn10") or ""

    # Description can be long; keep it but it's optional
    desc = v.get("description") or ""
    if isinstance(desc, str) and len(desc) > MAX_DESCRIPTION:
        desc = desc[:MAX_DESCRIPTION] + "..."

    return BookRecord.from_dict({
        "isbn": isbn,
        "title": v.get("title") or DEFAULT_TITLE,
        "authors": unique_strings(v.get("authors")),
        "publisher": v.get("publisher") or "",
        "publishedDate": v.get("publishedDate") or "",
        "description": desc if isinstance(desc, str) else "",
        "pageCount": v.get("pageCount") or 0,
        "coverUrl": _choose_cover_from_google(v) or "",
        "categories": v.get("categories") or [],
        "incomplete": False,
    })


def _choose_cover_from_google(v: dict[str, Any]) -> str | None:
    links = v.get("imageLinks")
    if not isinstance(links, dict):
        return None
    return (
        links.get("large")
        or links.get("medium")
        or links.get("small")
        or links.get("thumbnail")
        or links.get("smallThumbnail")
    )


def _extract_isbns_from_google(v: dict[str, Any]) -> dict[str, str]:
    out: dict[str, str] = {}
    idents = v.get("industryIdentifiers")
    if not isinstance(idents, list):
        return out
    for it in idents:
        if not isinstance(it, dict):
            continue
        t = str(it.get("type") or "").upper()
        ident = str(it.get("identifier") or "").strip()
        if not ident:
            continue
        if t == "ISBN_13":
            out["isbn13"] = ident
        elif t == "ISBN_10":
            out["isbn10"] = ident
    return out
