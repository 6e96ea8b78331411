from .book_store import BookStore, utc_now_iso
