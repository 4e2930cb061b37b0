from typing import List

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from app.domain.repositories.base_sqlalchemy import SQLAlchemyRepository
from app.models.category_model import Category


class CategoryRepository(SQLAlchemyRepository[Category, int]):
    def __init__(self, db: Session):
        super().__init__(Category, db)

    def get_with_children(self, category_id: int) -> Category | None:
        """Load a category together with its direct children only."""
        stmt = (
            select(Category)
            .where(Category.id == category_id)
            .options(selectinload(Category.children))
            .execution_options(populate_existing=True)
        )
        return self.db.scalars(stmt).first()

    def ancestor_ids(self, category_id: int) -> List[int]:
        """Ids on the path from ``category_id`` up to its root, itself included.

        UNION (not UNION ALL) stops the recursion if the stored data already
        contains a cycle.
        """
        ancestors = (
            select(Category.id.label("id"), Category.parent_id.label("parent_id"))
            .where(Category.id == category_id)
            .cte("ancestors", recursive=True)
        )
        ancestors = ancestors.union(
            select(
                Category.id.label("id"), Category.parent_id.label("parent_id")
            ).join(ancestors, Category.id == ancestors.c.parent_id)
        )
        return list(self.db.scalars(select(ancestors.c.id)))
