# models/errors.py


class CatalogError(Exception):
    """Base for every failure a catalog action can report back to its caller."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInput(CatalogError):
    status_code = 400


class DuplicateRecord(CatalogError):
    status_code = 409


class NotFound(CatalogError):
    status_code = 404


class LookupUnavailable(CatalogError):
    """Transport or parsing failure talking to a metadata provider.

    Providers raise it internally and absorb it into "no results" before
    returning, so catalog callers never see it.
    """

    status_code = 503
