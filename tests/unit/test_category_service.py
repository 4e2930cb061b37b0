import unittest
from unittest.mock import MagicMock

from app.domain.exceptions import (
    CategoryNotFound,
    CategoryPersistenceError,
    InvalidCategoryMove,
    ParentCategoryNotFound,
)
from app.domain.unit_of_work import UnitOfWork
from app.models.category_model import Category
from app.services.category_service import CategoryService


def _persist(category: Category) -> Category:
    # Stand-in for the store assigning a primary key on insert
    if category.id is None:
        category.id = 10
    return category


class TestCategoryService(unittest.TestCase):
    def setUp(self):
        # Real unit of work over a mock session so commit/rollback are observable
        self.db = MagicMock()
        self.uow = UnitOfWork(self.db)
        self.repo = MagicMock()
        self.uow.categories = self.repo
        self.service = CategoryService(self.uow)

        self.root = Category(id=1, label="Electronics")
        self.phones = Category(id=2, label="Phones", parent=self.root)
        self.laptops = Category(id=3, label="Laptops", parent=self.root)
        self.by_id = {c.id: c for c in (self.root, self.phones, self.laptops)}
        self.repo.get.side_effect = lambda id_, lock=False: self.by_id.get(id_)
        self.repo.save.side_effect = _persist

    # ---- add_category ------------------------------------------------
    def test_add_root_category(self):
        result = self.service.add_category("Books")

        self.assertTrue(result.status)
        self.assertEqual(result.message, "Category created successfully")
        self.assertEqual(result.data.id, 10)
        self.assertEqual(result.data.label, "Books")
        self.assertIsNone(result.data.parent)
        self.repo.get.assert_not_called()
        self.db.commit.assert_called_once()

    def test_add_category_zero_parent_is_root(self):
        result = self.service.add_category("Books", parent_id=0)

        self.repo.get.assert_not_called()
        self.assertIsNone(self.repo.save.call_args.args[0].parent)
        self.assertIsNone(result.data.parent)

    def test_add_child_category(self):
        result = self.service.add_category("Tablets", parent_id=1)

        self.repo.get.assert_called_once_with(1)
        saved = self.repo.save.call_args.args[0]
        self.assertIs(saved.parent, self.root)
        self.assertEqual(result.data.parent.id, 1)
        self.assertEqual(result.data.parent.label, "Electronics")

    def test_add_category_parent_not_found(self):
        with self.assertRaises(ParentCategoryNotFound) as cm:
            self.service.add_category("Orphan", parent_id=999)

        self.assertEqual(cm.exception.message, "Parent category not found")
        self.repo.save.assert_not_called()
        self.db.rollback.assert_called_once()
        self.db.commit.assert_not_called()

    def test_add_category_save_returns_nothing(self):
        self.repo.save.side_effect = None
        self.repo.save.return_value = None

        with self.assertRaises(CategoryPersistenceError) as cm:
            self.service.add_category("Books")

        self.assertEqual(
            cm.exception.message, "An error occurred creating the category"
        )
        self.db.rollback.assert_called_once()

    # ---- remove_category ---------------------------------------------
    def test_remove_category(self):
        self.repo.delete.return_value = 1

        result = self.service.remove_category(1)

        self.assertTrue(result.status)
        self.assertEqual(result.message, "Category deleted successfully")
        self.assertIsNone(result.data)
        self.repo.get.assert_called_once_with(1, lock=True)
        self.repo.delete.assert_called_once_with(1)
        self.db.commit.assert_called_once()

    def test_remove_category_not_found(self):
        with self.assertRaises(CategoryNotFound) as cm:
            self.service.remove_category(123)

        self.assertEqual(cm.exception.message, "Category not found")
        self.repo.delete.assert_not_called()

    def test_remove_category_nothing_affected(self):
        self.repo.delete.return_value = 0

        with self.assertRaises(CategoryPersistenceError) as cm:
            self.service.remove_category(1)

        self.assertEqual(
            cm.exception.message, "An error occurred deleting the category"
        )
        self.repo.delete.assert_called_once_with(1)
        self.db.rollback.assert_called_once()

    # ---- get_subtree -------------------------------------------------
    def test_get_subtree(self):
        self.repo.get_with_children.return_value = self.root

        result = self.service.get_subtree(1)

        self.assertEqual(result.message, "Category fetched successfully")
        self.assertEqual(result.data.id, 1)
        self.assertEqual(
            [(c.id, c.label) for c in result.data.children],
            [(2, "Phones"), (3, "Laptops")],
        )

    def test_get_subtree_not_found(self):
        self.repo.get_with_children.return_value = None

        with self.assertRaises(CategoryNotFound):
            self.service.get_subtree(42)

    def test_get_subtree_is_repeatable(self):
        self.repo.get_with_children.return_value = self.root

        self.assertEqual(self.service.get_subtree(1), self.service.get_subtree(1))

    # ---- move_subtree ------------------------------------------------
    def test_move_subtree(self):
        self.repo.ancestor_ids.return_value = [2, 1]

        result = self.service.move_subtree(3, 2)

        self.assertEqual(result.message, "Category moved successfully")
        self.assertIs(self.laptops.parent, self.phones)
        self.assertEqual(result.data.parent.id, 2)
        self.repo.ancestor_ids.assert_called_once_with(2)
        self.repo.save.assert_called_once_with(self.laptops)
        self.db.commit.assert_called_once()

    def test_move_subtree_category_not_found(self):
        with self.assertRaises(CategoryNotFound) as cm:
            self.service.move_subtree(999, 1)

        self.assertEqual(cm.exception.message, "Category not found")
        self.repo.save.assert_not_called()

    def test_move_subtree_new_parent_not_found(self):
        with self.assertRaises(ParentCategoryNotFound) as cm:
            self.service.move_subtree(2, 999)

        self.assertEqual(cm.exception.message, "New parent category not found")
        self.assertIs(self.phones.parent, self.root)
        self.repo.save.assert_not_called()

    def test_move_subtree_under_itself(self):
        self.repo.ancestor_ids.return_value = [2, 1]

        with self.assertRaises(InvalidCategoryMove):
            self.service.move_subtree(2, 2)

        self.repo.save.assert_not_called()

    def test_move_subtree_under_descendant(self):
        # 1 is an ancestor of 2, so 1 cannot become a child of 2
        self.repo.ancestor_ids.return_value = [2, 1]

        with self.assertRaises(InvalidCategoryMove):
            self.service.move_subtree(1, 2)

        self.assertIsNone(self.root.parent)
        self.repo.save.assert_not_called()
        self.db.rollback.assert_called_once()

    def test_move_subtree_save_returns_nothing(self):
        self.repo.ancestor_ids.return_value = [2, 1]
        self.repo.save.side_effect = None
        self.repo.save.return_value = None

        with self.assertRaises(CategoryPersistenceError) as cm:
            self.service.move_subtree(3, 2)

        self.assertEqual(cm.exception.message, "An error occurred moving the category")
