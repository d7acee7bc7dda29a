from fastapi import APIRouter
from app.api import calculate

api_router = APIRouter()

api_router.include_router(calculate.calculate_router, tags=["calculate"])

__all__ = ["api_router"]
