# tests/test_sa/test_services/test_book_service.py
import pytest
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, OperationalError
from sqlalchemy.orm.exc import StaleDataError

from bookstore.errors import NotFoundError, ValidationFailedError, PersistenceError
from bookstore.models import BookCreate, BookUpdate
from bookstore.sa.models import Author, Book, Genre, book_genres
from bookstore.services import BookService


@pytest.fixture
def book_service(db_session):
    return BookService(db_session)


def flaky_commit(session, error, failures=1):
    """Replace session.commit with one that raises ``error`` ``failures`` times"""
    real_commit = session.commit
    calls = {"count": 0}

    def commit():
        calls["count"] += 1
        if calls["count"] <= failures:
            raise error
        return real_commit()

    return commit, calls


class TestBookCrud:
    def test_create_book(self, book_service, sample_author):
        book = book_service.create_book(
            BookCreate(title="Resurrection", isbn="789", page_count=483, author_id=sample_author.id)
        )

        assert book.id is not None
        assert book.author.id == sample_author.id

    def test_create_book_for_missing_author(self, book_service, db_session):
        with pytest.raises(NotFoundError) as exc_info:
            book_service.create_book(BookCreate(title="Ghost", isbn="g-1", author_id=999999))

        assert exc_info.value.context == {"entity": "Author", "id": 999999}
        assert db_session.query(Book).count() == 0

    def test_create_book_with_duplicate_isbn(self, book_service, db_session, sample_book, sample_author):
        with pytest.raises(ValidationFailedError):
            book_service.create_book(BookCreate(title="Copy", isbn="123", author_id=sample_author.id))
        assert db_session.query(Book).count() == 1

    def test_storage_constraint_maps_to_validation_failure(self, book_service, db_session, sample_book, sample_author, monkeypatch):
        """A duplicate isbn that slips past the pre-check is still a validation failure"""
        monkeypatch.setattr(book_service, "ensure_isbn_available", lambda isbn: None)

        with pytest.raises(ValidationFailedError) as exc_info:
            book_service.create_book(BookCreate(title="Copy", isbn="123", author_id=sample_author.id))

        assert "Constraint violation" in exc_info.value.message
        assert db_session.query(Book).count() == 1

    def test_get_book(self, book_service, sample_book):
        assert book_service.get_book(sample_book.id).title == "War and Peace"

    def test_get_missing_book(self, book_service):
        with pytest.raises(NotFoundError):
            book_service.get_book(999999)

    def test_list_and_search_books(self, book_service, library):
        assert len(book_service.list_books()) == 3
        assert {b.title for b in book_service.search_books("war")} == {"War and Peace", "Warcraft History"}
        assert book_service.search_books("tolkien") == []

    def test_update_only_fields_in_patch(self, book_service, sample_book):
        updated = book_service.update_book(sample_book.id, BookUpdate(page_count=1300))

        assert updated.page_count == 1300
        assert updated.title == "War and Peace"
        assert updated.isbn == "123"

    def test_update_all_scalar_fields(self, book_service, sample_book):
        updated = book_service.update_book(
            sample_book.id, BookUpdate(title="Voyna i mir", isbn="321", page_count=1)
        )
        assert (updated.title, updated.isbn, updated.page_count) == ("Voyna i mir", "321", 1)

    def test_update_keeps_author_and_genres(self, book_service, db_session, library):
        war = library["war"]
        updated = book_service.update_book(war.id, BookUpdate(title="War & Peace"))

        assert updated.author.name == "Leo Tolstoy"
        assert {g.name for g in updated.genres} == {"Classic"}

    def test_update_to_same_isbn(self, book_service, sample_book):
        assert book_service.update_book(sample_book.id, BookUpdate(isbn="123")).isbn == "123"

    def test_update_to_taken_isbn(self, book_service, library):
        with pytest.raises(ValidationFailedError):
            book_service.update_book(library["war"].id, BookUpdate(isbn=library["odyssey"].isbn))
        assert book_service.get_book(library["war"].id).isbn == "9780140447934"

    def test_update_missing_book(self, book_service):
        with pytest.raises(NotFoundError):
            book_service.update_book(999999, BookUpdate(title="x"))

    def test_delete_book_keeps_author_and_genres(self, book_service, db_session, library):
        odyssey_id = library["odyssey"].id
        book_service.delete_book(odyssey_id)

        db_session.expire_all()
        assert db_session.get(Book, odyssey_id) is None
        assert db_session.get(Author, library["homer"].id) is not None
        classic = db_session.get(Genre, library["classic"].id)
        epic = db_session.get(Genre, library["epic"].id)
        assert {b.title for b in classic.books} == {"War and Peace"}
        assert epic.books == frozenset()

    def test_delete_missing_book(self, book_service):
        with pytest.raises(NotFoundError):
            book_service.delete_book(999999)


class TestGenreAssociation:
    def test_attach_genre(self, book_service, sample_book, sample_genre):
        book = book_service.attach_genre(sample_book.id, sample_genre.id)

        assert book.genres == {sample_genre}
        assert sample_genre.books == {book}

    def test_attach_genre_twice(self, book_service, db_session, sample_book, sample_genre):
        book_service.attach_genre(sample_book.id, sample_genre.id)
        book = book_service.attach_genre(sample_book.id, sample_genre.id)

        assert book.genres == {sample_genre}
        assert len(db_session.execute(select(book_genres)).all()) == 1

    def test_attach_two_genres(self, book_service, sample_book, library):
        book_service.attach_genre(sample_book.id, library["classic"].id)
        book = book_service.attach_genre(sample_book.id, library["epic"].id)

        assert {g.name for g in book.genres} == {"Classic", "Epic"}

    def test_detach_genre(self, book_service, db_session, sample_book, sample_genre):
        book_service.attach_genre(sample_book.id, sample_genre.id)
        book = book_service.detach_genre(sample_book.id, sample_genre.id)

        assert book.genres == frozenset()
        assert sample_genre.books == frozenset()
        assert db_session.execute(select(book_genres)).all() == []

    def test_detach_unattached_genre(self, book_service, sample_book, sample_genre):
        book = book_service.detach_genre(sample_book.id, sample_genre.id)
        assert book.genres == frozenset()

    @pytest.mark.parametrize("operation", ["attach_genre", "detach_genre"])
    def test_missing_book(self, book_service, sample_genre, operation):
        with pytest.raises(NotFoundError) as exc_info:
            getattr(book_service, operation)(999999, sample_genre.id)
        assert exc_info.value.entity == "Book"

    @pytest.mark.parametrize("operation", ["attach_genre", "detach_genre"])
    def test_missing_genre(self, book_service, sample_book, operation):
        with pytest.raises(NotFoundError) as exc_info:
            getattr(book_service, operation)(sample_book.id, 999999)
        assert exc_info.value.entity == "Genre"

    def test_attach_retries_conflicting_save(self, book_service, db_session, sample_book, sample_genre, monkeypatch):
        error = IntegrityError("INSERT INTO book_genres", {}, Exception("UNIQUE constraint failed"))
        commit, calls = flaky_commit(db_session, error)
        monkeypatch.setattr(db_session, "commit", commit)

        book = book_service.attach_genre(sample_book.id, sample_genre.id)

        assert calls["count"] == 2
        assert book.genres == {sample_genre}

    def test_detach_retries_stale_delete(self, book_service, db_session, sample_book, sample_genre, monkeypatch):
        sample_book.attach_genre(sample_genre)
        db_session.commit()
        commit, calls = flaky_commit(db_session, StaleDataError("expected to delete 1 row(s); 0 were matched"))
        monkeypatch.setattr(db_session, "commit", commit)

        book = book_service.detach_genre(sample_book.id, sample_genre.id)

        assert calls["count"] == 2
        assert book.genres == frozenset()

    def test_gives_up_after_retries(self, db_session, sample_book, sample_genre, monkeypatch):
        service = BookService(db_session, conflict_retries=2)
        commit, calls = flaky_commit(db_session, StaleDataError("conflict"), failures=10)
        monkeypatch.setattr(db_session, "commit", commit)

        with pytest.raises(PersistenceError) as exc_info:
            service.attach_genre(sample_book.id, sample_genre.id)

        assert calls["count"] == 2
        assert exc_info.value.kind == "persistence_failure"
        monkeypatch.undo()
        assert db_session.execute(select(book_genres)).all() == []


@pytest.fixture
def two_sessions(database):
    first, second = database.get_session(), database.get_session()
    yield first, second
    first.close()
    second.close()


def load_book_with_genres(session, book_id):
    book = session.get(Book, book_id)
    assert book is not None
    book.genres  # load the edge collection so later edits start from it
    return book


class TestConcurrentAttach:
    def test_different_genres_both_kept(self, two_sessions, db_session, sample_book, library):
        first, second = two_sessions
        book_id = sample_book.id
        classic_id, epic_id = library["classic"].id, library["epic"].id
        load_book_with_genres(first, book_id)
        load_book_with_genres(second, book_id)

        BookService(first).attach_genre(book_id, classic_id)
        book = BookService(second).attach_genre(book_id, epic_id)

        rows = db_session.execute(
            select(book_genres.c.genre_id).where(book_genres.c.book_id == book_id)
        ).scalars().all()
        assert sorted(rows) == sorted([classic_id, epic_id])
        assert {g.id for g in book.genres} == {classic_id, epic_id}

    def test_same_genre_from_stale_session_is_retried(self, two_sessions, db_session, sample_book, sample_genre):
        first, second = two_sessions
        book_id, genre_id = sample_book.id, sample_genre.id
        load_book_with_genres(first, book_id)
        stale = load_book_with_genres(second, book_id)

        BookService(first).attach_genre(book_id, genre_id)
        assert stale.genres == frozenset()

        book = BookService(second).attach_genre(book_id, genre_id)

        rows = db_session.execute(
            select(book_genres).where(book_genres.c.book_id == book_id)
        ).all()
        assert len(rows) == 1
        assert [g.id for g in book.genres] == [genre_id]


def test_storage_failure_is_persistence_error(book_service, db_session, sample_author, monkeypatch):
    error = OperationalError("INSERT INTO books", {}, Exception("disk I/O error"))
    commit, _ = flaky_commit(db_session, error)
    monkeypatch.setattr(db_session, "commit", commit)

    with pytest.raises(PersistenceError) as exc_info:
        book_service.create_book(BookCreate(title="Lost", isbn="lost-1", author_id=sample_author.id))

    assert "disk I/O error" in exc_info.value.message
    monkeypatch.undo()
    assert db_session.query(Book).count() == 0
