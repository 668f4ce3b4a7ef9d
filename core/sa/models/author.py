# core/sa/models/author.py
from sqlalchemy import Integer, String
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base


class Author(Base):
    __tablename__ = 'author'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)

    # Relationships
    book_authors = relationship('BookAuthor', back_populates='author')

    # Convenience relationship
    books = relationship('Book', secondary='book_author', viewonly=True)
