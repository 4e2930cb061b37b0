from fastapi import APIRouter, Depends, status

from app.api.v1.dependencies import get_uow
from app.domain.unit_of_work import UnitOfWork
from app.schemas.category_schema import CategorySchema
from app.services.category_service import CategoryService
from app.utils.logger import get_logger

logger = get_logger("category_router")

ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"model": CategorySchema.Error},
    status.HTTP_404_NOT_FOUND: {"model": CategorySchema.Error},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": CategorySchema.Error},
}


class CategoryRouter:
    def __init__(self):
        self.router = APIRouter(prefix="/category", tags=["Category"])
        self._register()

    def _register(self):
        self.router.post(
            "",
            response_model=CategorySchema.Result,
            status_code=status.HTTP_201_CREATED,
            responses=ERROR_RESPONSES,
        )(self._create_category)
        self.router.delete(
            "/{category_id}",
            response_model=CategorySchema.Result,
            response_model_exclude_none=True,
            responses=ERROR_RESPONSES,
        )(self._remove_category)
        self.router.get(
            "/{parent_id}/subtree",
            response_model=CategorySchema.SubtreeResult,
            responses=ERROR_RESPONSES,
        )(self._get_subtree)
        self.router.patch(
            "/{category_id}/move/{new_parent_id}",
            response_model=CategorySchema.Result,
            responses=ERROR_RESPONSES,
        )(self._move_subtree)

    def _create_category(
        self,
        payload: CategorySchema.Create,
        uow: UnitOfWork = Depends(get_uow),
    ):
        logger.info(f"Creating category {payload.label!r}")
        return CategoryService(uow).add_category(payload.label, payload.parent_id)

    def _remove_category(self, category_id: int, uow: UnitOfWork = Depends(get_uow)):
        logger.info(f"Deleting category {category_id}")
        return CategoryService(uow).remove_category(category_id)

    def _get_subtree(self, parent_id: int, uow: UnitOfWork = Depends(get_uow)):
        logger.info(f"Getting subtree of category {parent_id}")
        return CategoryService(uow).get_subtree(parent_id)

    def _move_subtree(
        self,
        category_id: int,
        new_parent_id: int,
        uow: UnitOfWork = Depends(get_uow),
    ):
        logger.info(f"Moving category {category_id} under {new_parent_id}")
        return CategoryService(uow).move_subtree(category_id, new_parent_id)


category_router = CategoryRouter().router
