# core/sa/repositories/source.py

import logging
from typing import List, Optional
from sqlalchemy.orm import Session
from ..models import Source
from ..models.base import utcnow

logger = logging.getLogger(__name__)


class SourceRepository:
    """Repository for managing Source entities."""

    def __init__(self, session: Session):
        """Initialize the repository with a database session.

        Args:
            session: SQLAlchemy session; callers own the transaction
        """
        self.session = session

    def get_by_name(self, name: str) -> Optional[Source]:
        """Get a source by its exact name."""
        return self.session.query(Source).filter(Source.name == name).first()

    def get_or_create_source(self, name: str, base_url: str) -> int:
        """Get the id of the named source, creating an active source if it does not exist.

        Args:
            name: Name of the source (e.g. "Open Library")
            base_url: Base URL of the source, only stored on creation

        Returns:
            The source id
        """
        source = self.get_by_name(name)
        if source:
            logger.info(f"Found existing source: {name} (ID: {source.id})")
            return source.id

        source = Source(name=name, base_url=base_url, is_active=True)
        self.session.add(source)
        self.session.flush()  # Need to flush to get the source.id
        logger.info(f"Created new source: {name} (ID: {source.id})")
        return source.id

    def touch_last_scraped(self, source_id: int) -> None:
        """Set the source's last scraped timestamp to now."""
        source = self.session.get(Source, source_id)
        if source is not None:
            source.last_scraped = utcnow()
            self.session.flush()

    def get_active_sources(self) -> List[Source]:
        """Get all active sources ordered by name."""
        return (
            self.session.query(Source)
            .filter(Source.is_active.is_(True))
            .order_by(Source.name)
            .all()
        )
