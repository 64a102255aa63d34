import os

# Settings are read once at import; keep the app off the production database.
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

from app.main import create_app
from app.models.base import Base
from app.models.author import Author
from app.models.book import Book, BookAuthor


@pytest.fixture
def test_engine():
    """In-memory SQLite database shared by every connection of one test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        future=True,
    )

    @event.listens_for(engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session_factory(test_engine):
    return sessionmaker(bind=test_engine, autocommit=False, autoflush=False, future=True)


@pytest.fixture
def db_session(session_factory):
    """Create a fresh database session for each test."""
    session = session_factory()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture
def test_app(session_factory):
    return create_app(session_factory=session_factory)


@pytest.fixture
def test_client(test_app):
    """Create a test client for the FastAPI app."""
    return TestClient(test_app)


@pytest.fixture
def graphql(test_client):
    """POST a GraphQL document and return the decoded response body."""

    def _execute(query: str, variables: dict | None = None, headers: dict | None = None) -> dict:
        payload: dict = {"query": query}
        if variables is not None:
            payload["variables"] = variables
        response = test_client.post("/graphql", json=payload, headers=headers or {})
        assert response.status_code == 200, response.text
        return response.json()

    return _execute


ADD_AUTHOR = """
mutation AddAuthor($name: String!, $rating: Float!) {
  addAuthor(name: $name, rating: $rating) { id name rating books { id title } }
}
"""

ADD_BOOK = """
mutation AddBook($title: String!, $authorIds: [ID!]!) {
  addBook(title: $title, authorIds: $authorIds) { id title authors { id name rating } }
}
"""


@pytest.fixture
def add_author(graphql):
    def _add(name: str = "Jane Doe", rating: float = 4.5) -> dict:
        body = graphql(ADD_AUTHOR, {"name": name, "rating": rating})
        assert "errors" not in body, body
        return body["data"]["addAuthor"]

    return _add


@pytest.fixture
def add_book(graphql):
    def _add(title: str, author_ids: list[str]) -> dict:
        return graphql(ADD_BOOK, {"title": title, "authorIds": author_ids})

    return _add


# Fixtures for repository tests that need SQLAlchemy model objects
@pytest.fixture
def sample_author_model(db_session):
    author = Author(name="Ursula K. Le Guin", rating=4.8)
    db_session.add(author)
    db_session.commit()
    db_session.refresh(author)
    return author


@pytest.fixture
def sample_book_model(db_session, sample_author_model):
    book = Book(
        title="The Dispossessed",
        author_links=[BookAuthor(author_id=sample_author_model.id)],
    )
    db_session.add(book)
    db_session.commit()
    db_session.refresh(book)
    return book


@pytest.fixture
def headers_with_correlation():
    import uuid
    return {"X-Request-ID": str(uuid.uuid4())}
