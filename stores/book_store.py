# stores/book_store.py
from __future__ import annotations
import os
import json
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path

from config import LIBRARY_FILE
from models import BookRecord

logger = logging.getLogger(__name__)


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).replace(microsecond=0).isoformat()


@dataclass(frozen=True)
class BookStore:
    """
    Whole catalog kept as one JSON array, most recent record first.

    Callers never hold on to a loaded list across actions: every change is
    load -> mutate -> save. Last writer wins.
    """
    path: Path  # e.g. Path(".../data/books.json")

    @classmethod
    def default(cls) -> "BookStore":
        return cls(LIBRARY_FILE)

    def ensure(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        if not self.path.exists():
            self.path.write_text("[]", encoding="utf-8")
            logger.info("Created empty catalog at %s", self.path)

    def load(self) -> list[BookRecord]:
        self.ensure()
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except ValueError as e:
            logger.warning("Catalog file %s is not valid JSON (%s); treating it as empty", self.path, e)
            return []

        if not isinstance(raw, list):
            logger.warning("Catalog file %s does not hold a list; treating it as empty", self.path)
            return []
        return [BookRecord.from_dict(item) for item in raw if isinstance(item, dict)]

    def save(self, records: list[BookRecord]) -> None:
        self.ensure()
        payload = [r.to_dict() for r in records]
        tmp = self.path.with_suffix(".json.tmp")
        tmp.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
        os.replace(tmp, self.path)
        logger.info("Saved %d record(s) to %s", len(records), self.path)
