# classifier.py
from __future__ import annotations
import re

from models import Classification, InputKind

ISBN_LENGTHS = (10, 13)
MIN_QUERY_LENGTH = 3


def normalize_isbn(raw: str) -> str:
    """
    Accepts scanner input like '978-1-...', ' ISBN:978...', etc.
    Returns the ASCII digits only; length is not checked here.
    """
    return re.sub(r"[^0-9]", "", raw or "")


def isbn_key(raw: str) -> str:
    """Comparison form of an ISBN: digits plus an ISBN-10 check digit X."""
    return re.sub(r"[^0-9X]", "", (raw or "").upper())


def is_barcode(value: str) -> bool:
    return value.isdecimal() and value.isascii() and len(value) in ISBN_LENGTHS


def classify(raw: str) -> Classification:
    """
    Decide what the user typed or scanned.

    - barcode: digits only, length 10 or 13
    - title_query: anything else longer than 2 characters
    - too_short: 1-2 characters, wait for more input before searching
    """
    s = (raw or "").strip()
    if not s:
        return Classification(InputKind.EMPTY)
    if is_barcode(s):
        return Classification(InputKind.BARCODE, s)
    if len(s) >= MIN_QUERY_LENGTH:
        return Classification(InputKind.TITLE_QUERY, s)
    return Classification(InputKind.TOO_SHORT, s)
