# core/sa/models/scraping_log.py
from datetime import datetime
from sqlalchemy import DateTime, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, utcnow


class ScrapingLog(Base):
    """One row per ingestion run."""
    __tablename__ = 'scraping_log'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    source_id: Mapped[int] = mapped_column(ForeignKey('source.id'), nullable=False)
    started_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utcnow)
    completed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    books_added: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    books_updated: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    errors: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default='running')
    error_details: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Relationships
    source = relationship('Source', back_populates='scraping_logs')

    __table_args__ = (
        Index('idx_scraping_log_started_at', 'started_at'),
    )
