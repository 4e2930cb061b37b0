from typing import Optional

from app.domain.exceptions import (
    CategoryNotFound,
    CategoryPersistenceError,
    InvalidCategoryMove,
    ParentCategoryNotFound,
)
from app.domain.unit_of_work import IUnitOfWork
from app.models.category_model import Category
from app.schemas.category_schema import CategorySchema
from app.utils.logger import get_logger

logger = get_logger("category_service")


class CategoryService:
    """Create, delete, fetch and re-parent nodes of the category tree.

    Every operation runs inside one unit-of-work transaction: it commits on
    success and rolls back on any exception.
    """

    def __init__(self, uow: IUnitOfWork):
        self.uow = uow

    def add_category(
        self, label: str, parent_id: Optional[int] = None
    ) -> CategorySchema.Result:
        """Create a category, optionally attached to an existing parent."""
        with self.uow:
            category = Category(label=label)

            # 0 and null both mean "no parent"
            if parent_id:
                parent = self.uow.categories.get(parent_id)
                if not parent:
                    logger.warning(f"Parent category {parent_id} not found")
                    raise ParentCategoryNotFound()
                category.parent = parent

            saved = self.uow.categories.save(category)
            if not saved:
                raise CategoryPersistenceError(
                    "An error occurred creating the category"
                )

            logger.info(f"Created category {saved.id} under parent {parent_id}")
            return CategorySchema.Result(
                message="Category created successfully",
                data=CategorySchema.Out.model_validate(saved),
            )

    def remove_category(self, category_id: int) -> CategorySchema.Result:
        """Delete a category; the database cascades the delete to its descendants."""
        with self.uow:
            category = self.uow.categories.get(category_id, lock=True)
            if not category:
                logger.warning(f"Category {category_id} not found for deletion")
                raise CategoryNotFound()

            affected = self.uow.categories.delete(category_id)
            if affected != 1:
                # Only reachable if the row vanished after the lookup above
                raise CategoryPersistenceError(
                    "An error occurred deleting the category"
                )

            logger.info(f"Deleted category {category_id} and its descendants")
            return CategorySchema.Result(message="Category deleted successfully")

    def get_subtree(self, category_id: int) -> CategorySchema.SubtreeResult:
        """Return a category with its direct children (one level deep)."""
        with self.uow:
            category = self.uow.categories.get_with_children(category_id)
            if not category:
                raise CategoryNotFound()

            return CategorySchema.SubtreeResult(
                message="Category fetched successfully",
                data=CategorySchema.Subtree.model_validate(category),
            )

    def move_subtree(
        self, category_id: int, new_parent_id: int
    ) -> CategorySchema.Result:
        """Re-parent a category; its descendants follow it."""
        with self.uow:
            category = self.uow.categories.get(category_id, lock=True)
            if not category:
                logger.warning(f"Category {category_id} not found for move")
                raise CategoryNotFound()

            new_parent = self.uow.categories.get(new_parent_id)
            if not new_parent:
                logger.warning(f"New parent category {new_parent_id} not found")
                raise ParentCategoryNotFound("New parent category not found")

            if category_id in self.uow.categories.ancestor_ids(new_parent_id):
                logger.warning(
                    f"Rejected move of category {category_id} under {new_parent_id}: cycle"
                )
                raise InvalidCategoryMove()

            category.parent = new_parent
            moved = self.uow.categories.save(category)
            if not moved:
                raise CategoryPersistenceError(
                    "An error occurred moving the category"
                )

            logger.info(f"Moved category {category_id} under {new_parent_id}")
            return CategorySchema.Result(
                message="Category moved successfully",
                data=CategorySchema.Out.model_validate(moved),
            )
