from typing import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.db.base import Base
from app.db.session import enable_sqlite_foreign_keys, get_db
from app.main import app
from app.models.category_model import Category


@pytest.fixture(scope="function")
def engine() -> Generator[Engine, None, None]:
    """A fresh in-memory SQLite database per test, shared across threads."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(
        bind=engine,
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
    )


@pytest.fixture(scope="function")
def db_session(session_factory: sessionmaker) -> Generator[Session, None, None]:
    session = session_factory()
    yield session
    session.close()


@pytest.fixture(scope="function")
def client(session_factory: sessionmaker) -> Generator[TestClient, None, None]:
    """Test client where every request gets its own session on the test database."""

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def electronics(db_session: Session) -> Category:
    """Root category with two children and one grandchild."""
    root = Category(label="Electronics")
    phones = Category(label="Phones", parent=root)
    laptops = Category(label="Laptops", parent=root)
    Category(label="Smartphones", parent=phones)
    db_session.add_all([root, phones, laptops])
    db_session.commit()
    db_session.refresh(root)
    return root
