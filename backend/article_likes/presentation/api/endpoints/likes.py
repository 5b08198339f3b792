"""Like / unlike endpoints.

Both are idempotent and answer 204 whether or not state changed.
"""

from fastapi import APIRouter, Depends, HTTPException, Path, Query, Response, status

from article_likes.application.services import LikeService
from article_likes.config import Settings
from article_likes.domain.entities import MAX_ID
from article_likes.domain.exceptions import EntityNotFoundError
from article_likes.infrastructure.dependencies import get_app_settings, get_like_service

router = APIRouter(prefix="/articles/{article_id}/like", tags=["Likes"])


@router.post("", status_code=status.HTTP_204_NO_CONTENT)
async def like_article(
    article_id: int = Path(..., le=MAX_ID),
    user_id: int | None = Query(None, alias="userId", le=MAX_ID),
    service: LikeService = Depends(get_like_service),
    settings: Settings = Depends(get_app_settings),
) -> Response:
    """Like an article on behalf of ``userId``."""
    if user_id is None:
        user_id = settings.default_user_id
    try:
        await service.like(user_id, article_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def unlike_article(
    article_id: int = Path(..., le=MAX_ID),
    user_id: int | None = Query(None, alias="userId", le=MAX_ID),
    service: LikeService = Depends(get_like_service),
    settings: Settings = Depends(get_app_settings),
) -> Response:
    """Withdraw the like of ``userId``; a missing like is not an error."""
    if user_id is None:
        user_id = settings.default_user_id
    await service.unlike(user_id, article_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
