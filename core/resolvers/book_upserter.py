# core/resolvers/book_upserter.py
import logging
from typing import Iterable
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from core.exceptions import PersistenceError
from core.models.candidate import CandidateBook
from core.models.ingestion import CandidateOutcome, OutcomeStatus, SaveResult
from ..sa.repositories.book import BookRepository
from ..sa.repositories.source import SourceRepository

logger = logging.getLogger(__name__)


class BookUpserter:
    """Merges scraped candidates into the catalog without creating duplicates."""

    def __init__(self, session: Session):
        """
        Initialize the upserter.

        Args:
            session: SQLAlchemy session holding the run's transaction
        """
        self.session = session
        self.book_repository = BookRepository(session)
        self.source_repository = SourceRepository(session)

    def save_batch(self, books: Iterable[CandidateBook], source_id: int) -> SaveResult:
        """
        Save a batch of candidates for one source and commit once.

        Each candidate is written inside its own SAVEPOINT, so a candidate that
        fails only loses its own writes and the rest of the batch still commits.

        Args:
            books: Candidates in the order they were scraped
            source_id: ID of the source the candidates came from

        Returns:
            SaveResult with added/updated/failed counts and one outcome per candidate

        Raises:
            PersistenceError: If the final commit fails; nothing from the batch is kept
        """
        books = list(books)
        result = SaveResult()
        logger.info(f"Saving {len(books)} books to database...")

        for book in books:
            outcome = self.save_book(book, source_id)
            result.record(outcome)

        try:
            self.session.commit()
            self.source_repository.touch_last_scraped(source_id)
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error(f"Error committing batch for source {source_id}: {e}")
            raise PersistenceError(f"Failed to commit batch: {e}") from e

        logger.info(
            f"Database save complete: {result.added} added, "
            f"{result.updated} updated, {result.failed} failed"
        )
        return result

    def save_book(self, book: CandidateBook, source_id: int) -> CandidateOutcome:
        """Insert or merge a single candidate and relink its authors and categories"""
        try:
            with self.session.begin_nested():
                book_id = self.book_repository.find_book_id(book)
                if book_id is not None:
                    self.book_repository.update_book(book_id, book)
                    status = OutcomeStatus.UPDATED
                else:
                    book_id = self.book_repository.insert_book(book, source_id)
                    status = OutcomeStatus.ADDED

                if book.authors:
                    self.book_repository.relink_authors(book_id, book.authors)
                if book.categories:
                    self.book_repository.relink_categories(book_id, book.categories)
        except Exception as e:
            logger.error(f"  Error saving book \"{book.title}\": {e}")
            return CandidateOutcome(title=book.title, status=OutcomeStatus.FAILED, error=str(e))

        logger.debug(f"  {status.value.capitalize()}: {book.title}")
        return CandidateOutcome(title=book.title, status=status, book_id=book_id)
