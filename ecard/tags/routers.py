from fastapi import APIRouter

from .features.manage_tags.router import router as manage_tags_router

router = APIRouter()

router.include_router(manage_tags_router)
