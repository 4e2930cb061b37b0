from typing import Optional

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base


class Category(Base):
    __tablename__ = "category"
    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    label: Mapped[str] = mapped_column(String, nullable=False)

    # Descendants are removed by the database cascade, never by the ORM
    parent_id: Mapped[Optional[int]] = mapped_column(
        "parentId",
        ForeignKey("category.id", ondelete="CASCADE", onupdate="NO ACTION"),
        nullable=True,
    )
    parent: Mapped[Optional["Category"]] = relationship(
        remote_side="Category.id", back_populates="children"
    )
    children: Mapped[list["Category"]] = relationship(
        back_populates="parent",
        passive_deletes=True,
        order_by="Category.id",
    )

    def __repr__(self) -> str:
        return f"<Category id={self.id} label={self.label!r} parent_id={self.parent_id}>"
