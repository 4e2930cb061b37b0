from fastapi import APIRouter
from app.api.v1.routers.category_router import category_router

api_router = APIRouter()

api_router.include_router(category_router)
