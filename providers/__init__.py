from .google_books import GoogleBooksProvider
