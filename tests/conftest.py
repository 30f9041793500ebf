# tests/conftest.py
import os
import sys
import pytest
from pathlib import Path
from sqlalchemy.sql import text
from sqlalchemy.orm import Session

# Add project root to Python path
project_root = str(Path(__file__).parent.parent)
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from bookstore.sa.database import Database
from bookstore.sa.models import Base, Author, Book, Genre


@pytest.fixture(scope="session")
def test_db_path(tmp_path_factory):
    """Create a temporary directory for the test database."""
    test_dir = tmp_path_factory.mktemp("test_db")
    return str(test_dir / "test_bookstore.db")


@pytest.fixture(scope="session")
def database(test_db_path):
    """Create a test database instance"""
    db = Database(f"sqlite:///{test_db_path}")

    # Drop all tables and recreate schema
    Base.metadata.drop_all(db.engine)
    Base.metadata.create_all(db.engine)

    yield db

    db.engine.dispose()
    try:
        os.remove(test_db_path)
    except OSError:
        pass  # Ignore errors if file doesn't exist


@pytest.fixture(scope="function")
def db_session(database):
    """Create a new database session for a test"""
    session: Session = database.get_session()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(autouse=True)
def cleanup_db(db_session):
    """Clean up database tables before each test"""
    # Delete all data from tables in reverse order of dependencies
    db_session.execute(text("DELETE FROM book_genres"))
    db_session.execute(text("DELETE FROM books"))
    db_session.execute(text("DELETE FROM genres"))
    db_session.execute(text("DELETE FROM authors"))
    db_session.commit()
    yield
    db_session.rollback()


@pytest.fixture
def sample_author(db_session):
    """Create a sample author for testing."""
    author = Author(name="Leo Tolstoy", biography="Russian novelist")
    db_session.add(author)
    db_session.commit()
    return author


@pytest.fixture
def sample_genre(db_session):
    """Create a sample genre for testing."""
    genre = Genre(name="Classic")
    db_session.add(genre)
    db_session.commit()
    return genre


@pytest.fixture
def sample_book(db_session, sample_author):
    """Create a sample book owned by sample_author."""
    book = Book(title="War and Peace", isbn="123", page_count=1225, author=sample_author)
    db_session.add(book)
    db_session.commit()
    return book


@pytest.fixture
def library(db_session):
    """Two authors, three books and two genres, with some genres attached."""
    tolstoy = Author(name="Leo Tolstoy")
    homer = Author(name="Homer")
    classic = Genre(name="Classic")
    epic = Genre(name="Epic")

    war = Book(title="War and Peace", isbn="9780140447934", page_count=1225, author=tolstoy)
    warcraft = Book(title="Warcraft History", isbn="9781945683145", page_count=300, author=tolstoy)
    odyssey = Book(title="Odyssey", isbn="9780140268867", page_count=541, author=homer)

    war.attach_genre(classic)
    odyssey.attach_genre(classic)
    odyssey.attach_genre(epic)

    db_session.add_all([tolstoy, homer, classic, epic, war, warcraft, odyssey])
    db_session.commit()
    return {
        "tolstoy": tolstoy,
        "homer": homer,
        "classic": classic,
        "epic": epic,
        "war": war,
        "warcraft": warcraft,
        "odyssey": odyssey,
    }
