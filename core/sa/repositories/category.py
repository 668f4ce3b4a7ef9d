# core/sa/repositories/category.py

from typing import Optional
from sqlalchemy.orm import Session
from ..models import Category


class CategoryRepository:
    """Repository for managing Category entities."""

    def __init__(self, session: Session):
        self.session = session

    def get_by_name(self, name: str) -> Optional[Category]:
        """Get a category by its name.

        Args:
            name: The exact name of the category to retrieve

        Returns:
            The Category object if found, None otherwise
        """
        return self.session.query(Category).filter(Category.name == name).first()

    def get_or_create_category(self, name: str) -> int:
        """Get the id of the named category, creating it if needed."""
        category = self.get_by_name(name)
        if category:
            return category.id

        category = Category(name=name)
        self.session.add(category)
        self.session.flush()
        return category.id
