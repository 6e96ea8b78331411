from .book_record import BookRecord, UNKNOWN_AUTHOR
from .classification import Classification, InputKind
from .errors import CatalogError, DuplicateRecord, InvalidInput, LookupUnavailable, NotFound
