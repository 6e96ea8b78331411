# models/book_record.py
from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import Any

UNKNOWN_AUTHOR = "Unknown"

# Field names used by the first version of the catalog file
_LEGACY_KEYS = {
    "titulo": "title",
    "autores": "authors",
    "editora": "publisher",
    "dataPublicacao": "publishedDate",
    "descricao": "description",
    "paginas": "pageCount",
    "capa": "coverUrl",
    "categorias": "categories",
    "incompleto": "incomplete",
    "dataAdicionado": "addedAt",
}


def unique_strings(values: Any) -> list[str]:
    """Strip, drop blanks and duplicates, keep first-seen order."""
    if isinstance(values, str):
        values = [values]
    elif not isinstance(values, (list, tuple)):
        values = []
    seen: set[str] = set()
    out: list[str] = []
    for v in values or []:
        s = str(v or "").strip()
        if s and s not in seen:
            seen.add(s)
            out.append(s)
    return out


def _page_count(value: Any) -> int:
    try:
        n = int(value or 0)
    except (TypeError, ValueError):
        return 0
    return max(n, 0)


@dataclass(frozen=True)
class BookRecord:
    title: str
    isbn: str = ""
    authors: list[str] = field(default_factory=lambda: [UNKNOWN_AUTHOR])
    publisher: str = ""
    published_date: str = ""
    description: str = ""
    page_count: int = 0
    cover_url: str = ""
    categories: list[str] = field(default_factory=list)
    incomplete: bool = False
    added_at: str = ""

    @classmethod
    def placeholder(cls, title: str, isbn: str = "") -> "BookRecord":
        """Minimal record saved when no metadata could be found."""
        return cls(title=title, isbn=isbn, incomplete=True)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "BookRecord":
        d = {_LEGACY_KEYS.get(k, k): v for k, v in (data or {}).items()}
        return cls(
            title=str(d.get("title") or "").strip(),
            isbn=str(d.get("isbn") or "").strip(),
            authors=unique_strings(d.get("authors")) or [UNKNOWN_AUTHOR],
            publisher=str(d.get("publisher") or ""),
            published_date=str(d.get("publishedDate") or ""),
            description=str(d.get("description") or ""),
            page_count=_page_count(d.get("pageCount")),
            cover_url=str(d.get("coverUrl") or ""),
            categories=unique_strings(d.get("categories")),
            incomplete=bool(d.get("incomplete", False)),
            added_at=str(d.get("addedAt") or ""),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "isbn": self.isbn,
            "title": self.title,
            "authors": list(self.authors),
            "publisher": self.publisher,
            "publishedDate": self.published_date,
            "description": self.description,
            "pageCount": self.page_count,
            "coverUrl": self.cover_url,
            "categories": list(self.categories),
            "incomplete": self.incomplete,
            "addedAt": self.added_at,
        }

    def stamped(self, added_at: str) -> "BookRecord":
        return replace(self, added_at=added_at)

    @property
    def title_key(self) -> str:
        return self.title.strip().casefold()
