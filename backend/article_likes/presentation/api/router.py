"""Top-level API router — aggregates all endpoint routers."""

from fastapi import APIRouter

from article_likes.presentation.api.endpoints.health import router as health_router
from article_likes.presentation.api.endpoints.articles import router as articles_router
from article_likes.presentation.api.endpoints.likes import router as likes_router

router = APIRouter()
router.include_router(health_router)
router.include_router(articles_router)
router.include_router(likes_router)
