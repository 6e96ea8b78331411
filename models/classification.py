# models/classification.py
from dataclasses import dataclass
from enum import Enum


class InputKind(str, Enum):
    BARCODE = "barcode"
    TITLE_QUERY = "title_query"
    TOO_SHORT = "too_short"
    EMPTY = "empty"


@dataclass(frozen=True)
class Classification:
    kind: InputKind
    value: str = ""
