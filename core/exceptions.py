# core/exceptions.py


class IngestionError(Exception):
    """Base class for errors raised by the ingestion pipeline."""


class ScraperError(IngestionError):
    """A source could not be fetched or its payload could not be read."""

    def __init__(self, source_name: str, cause: Exception):
        self.source_name = source_name
        self.cause = cause
        super().__init__(f"{source_name} scraping failed: {cause}")


class PersistenceError(IngestionError):
    """The batch transaction could not be committed."""
