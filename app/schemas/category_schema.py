from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class CategorySchema:
    class Create(BaseModel):
        label: str = Field(..., min_length=1)
        parent_id: Optional[int] = Field(None, alias="parentId")

        model_config = ConfigDict(populate_by_name=True)

    class Node(BaseModel):
        id: int
        label: str

        model_config = ConfigDict(from_attributes=True)

    class Out(Node):
        parent: Optional["CategorySchema.Node"] = None

    class Subtree(Node):
        children: List["CategorySchema.Node"] = []

    class Result(BaseModel):
        status: bool = True
        message: str
        data: Optional["CategorySchema.Out"] = None

    class SubtreeResult(BaseModel):
        status: bool = True
        message: str
        data: "CategorySchema.Subtree"

    class Error(BaseModel):
        status: bool = False
        message: str
        error_code: Optional[str] = None


for _model in (
    CategorySchema.Out,
    CategorySchema.Subtree,
    CategorySchema.Result,
    CategorySchema.SubtreeResult,
):
    _model.model_rebuild()
