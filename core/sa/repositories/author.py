# core/sa/repositories/author.py
from typing import Optional
from sqlalchemy.orm import Session
from ..models import Author


class AuthorRepository:
    def __init__(self, session: Session):
        self.session = session

    def get_by_name(self, name: str) -> Optional[Author]:
        """Get an author by exact name"""
        return self.session.query(Author).filter(Author.name == name).first()

    def get_or_create_author(self, name: str) -> int:
        """Get the id of the named author, creating it if needed"""
        author = self.get_by_name(name)
        if author:
            return author.id

        author = Author(name=name)
        self.session.add(author)
        self.session.flush()
        return author.id
