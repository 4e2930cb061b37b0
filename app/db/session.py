from typing import Generator

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from app.core.config import DatabaseSettings, settings


def enable_sqlite_foreign_keys(engine: Engine) -> None:
    """SQLite ignores ON DELETE CASCADE unless foreign keys are switched on per connection."""

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, _connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def build_engine(db_settings: DatabaseSettings) -> Engine:
    if db_settings.is_sqlite:
        engine = create_engine(
            db_settings.database_url,
            future=True,
            echo=db_settings.echo,
            connect_args={"check_same_thread": False},
        )
        enable_sqlite_foreign_keys(engine)
        return engine

    return create_engine(
        db_settings.database_url,
        future=True,
        echo=db_settings.echo,
        pool_size=db_settings.pool_size,
        max_overflow=db_settings.max_overflow,
        pool_timeout=db_settings.pool_timeout,
        pool_recycle=db_settings.pool_recycle,
        pool_pre_ping=db_settings.pool_pre_ping,
    )


class DBSessionManager:

    def __init__(self, db_settings: DatabaseSettings = settings.database) -> None:
        self.engine = build_engine(db_settings)
        self.SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self.engine,
            expire_on_commit=False,
        )

    def get_session(self) -> Generator[Session, None, None]:
        session: Session = self.SessionLocal()
        try:
            yield session
        finally:
            session.close()


db_manager = DBSessionManager()


def get_db() -> Generator[Session, None, None]:
    # One session per request, closed once the response is sent
    yield from db_manager.get_session()
