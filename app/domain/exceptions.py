"""Domain exceptions that represent business rule violations."""

from typing import Optional


class DomainException(Exception):
    """Base exception for all domain-related errors."""

    def __init__(self, message: str, error_code: Optional[str] = None):
        self.message = message
        self.error_code = error_code
        super().__init__(message)


# Category Domain Exceptions
class CategoryException(DomainException):
    """Base exception for category-related errors."""


class CategoryNotFound(CategoryException):
    """Category not found in the tree."""

    def __init__(self, message: str = "Category not found"):
        super().__init__(message, "CATEGORY_NOT_FOUND")


class ParentCategoryNotFound(CategoryException):
    """Category referenced as a parent does not exist."""

    def __init__(self, message: str = "Parent category not found"):
        super().__init__(message, "PARENT_CATEGORY_NOT_FOUND")


class InvalidCategoryMove(CategoryException):
    """Re-parenting would put a category beneath itself."""

    def __init__(
        self,
        message: str = "Cannot move a category under itself or one of its descendants",
    ):
        super().__init__(message, "INVALID_CATEGORY_MOVE")


class CategoryPersistenceError(CategoryException):
    """The store did not produce the expected result for a write."""

    def __init__(self, message: str):
        super().__init__(message, "CATEGORY_PERSISTENCE_ERROR")
