# core/sa/models/source.py
from datetime import datetime
from sqlalchemy import Boolean, DateTime, Integer, String
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base


class Source(Base):
    __tablename__ = 'source'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    base_url: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    last_scraped: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    # Relationships
    books = relationship('Book', back_populates='source')
    scraping_logs = relationship('ScrapingLog', back_populates='source')
