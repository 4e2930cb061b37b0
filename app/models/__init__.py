# Every model must be imported here so Base.metadata knows about it
from app.models.category_model import Category

__all__ = [
    "Category",
]
