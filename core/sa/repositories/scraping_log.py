# core/sa/repositories/scraping_log.py

from typing import List, Optional, Tuple
from sqlalchemy import desc
from sqlalchemy.orm import Session
from core.models.ingestion import RunStatus
from ..models import ScrapingLog, Source
from ..models.base import utcnow


class ScrapingLogRepository:
    """Repository for the audit log written once per ingestion run."""

    def __init__(self, session: Session):
        self.session = session

    def get_by_id(self, log_id: int) -> Optional[ScrapingLog]:
        return self.session.get(ScrapingLog, log_id)

    def create_log(self, source_id: int) -> ScrapingLog:
        """Open a log entry in the running state.

        Args:
            source_id: ID of the source being scraped

        Returns:
            The flushed ScrapingLog, with its id assigned
        """
        log = ScrapingLog(
            source_id=source_id,
            status=RunStatus.RUNNING.value,
            started_at=utcnow(),
            books_added=0,
            books_updated=0,
            errors=0
        )
        self.session.add(log)
        self.session.flush()
        return log

    def close_log(
        self,
        log_id: int,
        status: RunStatus,
        books_added: int = 0,
        books_updated: int = 0,
        errors: int = 0,
        error_details: Optional[str] = None
    ) -> ScrapingLog:
        """Write the terminal state of a run.

        Raises:
            ValueError: If the log does not exist or is already closed
        """
        log = self.get_by_id(log_id)
        if log is None:
            raise ValueError(f"Scraping log {log_id} does not exist")
        if log.status != RunStatus.RUNNING.value:
            raise ValueError(f"Scraping log {log_id} is already {log.status}")

        log.status = status.value
        log.completed_at = utcnow()
        log.books_added = books_added
        log.books_updated = books_updated
        log.errors = errors
        if error_details:
            log.error_details = error_details
        self.session.flush()
        return log

    def get_recent_logs(self, limit: int = 10) -> List[Tuple[ScrapingLog, Source]]:
        """Get the most recently started runs together with their source.

        Args:
            limit: Maximum number of logs to return (default: 10)

        Returns:
            List of (ScrapingLog, Source) tuples, newest first
        """
        return (
            self.session.query(ScrapingLog, Source)
            .join(Source, ScrapingLog.source_id == Source.id)
            .order_by(desc(ScrapingLog.started_at), desc(ScrapingLog.id))
            .limit(limit)
            .all()
        )
