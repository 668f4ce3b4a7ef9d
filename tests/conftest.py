# tests/conftest.py
import sys
import pytest
from pathlib import Path
from sqlalchemy.orm import Session

# Add project root to Python path
project_root = str(Path(__file__).parent.parent)
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from core.models.candidate import CandidateBook
from core.sa.database import Database
from core.sa.models import Source


@pytest.fixture
def database(tmp_path):
    """Create a fresh SQLite database for each test"""
    db = Database(f"sqlite:///{tmp_path / 'test_academix.db'}")
    db.init_db()
    yield db
    db.engine.dispose()

@pytest.fixture
def db_session(database):
    """Create a new database session for a test"""
    session: Session = database.get_session()
    try:
        yield session
    finally:
        session.close()

@pytest.fixture
def sample_source(db_session):
    """Create a sample source for testing."""
    source = Source(name="Test Source", base_url="https://example.com", is_active=True)
    db_session.add(source)
    db_session.commit()
    return source

@pytest.fixture
def make_candidate():
    """Build candidate books with sensible defaults"""
    def _make(title="Test Book", **kwargs):
        return CandidateBook(title=title, **kwargs)
    return _make
