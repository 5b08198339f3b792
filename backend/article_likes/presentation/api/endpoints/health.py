"""Health check endpoint — no dependencies, always available."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["Health"])


@router.get("/healthz", response_class=PlainTextResponse)
async def health_check() -> str:
    return "ok"
