# core/sa/models/category.py
from sqlalchemy import Integer, String
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base


class Category(Base):
    __tablename__ = 'category'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)

    # Relationships
    book_categories = relationship('BookCategory', back_populates='category')

    # Convenience relationship
    books = relationship('Book', secondary='book_category', viewonly=True)
