# tests/test_sa/test_repositories/test_source_repository.py
import pytest
from core.sa.models import Source
from core.sa.repositories.source import SourceRepository

@pytest.fixture
def source_repo(db_session):
    """Fixture to create a SourceRepository instance"""
    return SourceRepository(db_session)

def test_get_or_create_source_creates_active_source(source_repo, db_session):
    source_id = source_repo.get_or_create_source("Open Library", "https://openlibrary.org")
    db_session.commit()

    source = db_session.get(Source, source_id)
    assert source.name == "Open Library"
    assert source.base_url == "https://openlibrary.org"
    assert source.is_active is True
    assert source.last_scraped is None

def test_get_or_create_source_reuses_existing(source_repo, db_session):
    first = source_repo.get_or_create_source("Open Library", "https://openlibrary.org")
    second = source_repo.get_or_create_source("Open Library", "https://changed.example.com")
    db_session.commit()

    assert first == second
    assert db_session.query(Source).count() == 1
    # base_url is only stored on creation
    assert db_session.get(Source, first).base_url == "https://openlibrary.org"

def test_get_by_nonexistent_name(source_repo):
    assert source_repo.get_by_name("missing") is None

def test_touch_last_scraped(source_repo, db_session, sample_source):
    source_repo.touch_last_scraped(sample_source.id)
    db_session.commit()

    assert db_session.get(Source, sample_source.id).last_scraped is not None

def test_get_active_sources(source_repo, db_session):
    db_session.add_all([
        Source(name="Zeta", base_url="https://z.example.com", is_active=True),
        Source(name="Alpha", base_url="https://a.example.com", is_active=True),
        Source(name="Retired", base_url="https://r.example.com", is_active=False),
    ])
    db_session.commit()

    names = [s.name for s in source_repo.get_active_sources()]
    assert names == ["Alpha", "Zeta"]
