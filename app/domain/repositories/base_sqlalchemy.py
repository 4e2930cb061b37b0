from __future__ import annotations

from typing import Generic, Type

from sqlalchemy import delete, inspect, select
from sqlalchemy.orm import Session

from app.domain.repositories.base import ID, IRepository, T


class SQLAlchemyRepository(Generic[T, ID], IRepository[T, ID]):
    """Generic SQLAlchemy repository with basic CRUD."""

    def __init__(self, model: Type[T], db: Session):
        self.model = model
        self.db = db
        self.pk = inspect(model).primary_key[0]

    # ----- CRUD --------------------------------------------------------
    def get(self, id_: ID, lock: bool = False) -> T | None:
        # Always hits the database, so rows removed by a cascade are not
        # served from the identity map
        stmt = select(self.model).where(self.pk == id_)
        if lock:
            stmt = stmt.with_for_update()
        return self.db.scalars(stmt).first()

    def save(self, obj: T) -> T | None:
        self.db.add(obj)
        self.db.flush()
        self.db.refresh(obj)
        return obj

    def delete(self, id_: ID) -> int:
        result = self.db.execute(delete(self.model).where(self.pk == id_))
        return result.rowcount
