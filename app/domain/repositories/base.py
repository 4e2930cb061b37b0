from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar


T = TypeVar("T")  # SQLAlchemy model type
ID = TypeVar("ID")  # primary-key type


class IRepository(Generic[T, ID], ABC):
    """Generic repository interface."""

    @abstractmethod
    def get(self, id_: ID, lock: bool = False) -> T | None: ...

    @abstractmethod
    def save(self, obj: T) -> T | None: ...

    @abstractmethod
    def delete(self, id_: ID) -> int: ...
