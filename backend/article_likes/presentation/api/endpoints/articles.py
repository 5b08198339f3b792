"""Article CRUD endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Path, Query, Response, status

from article_likes.application.schemas import (
    ArticleCreate,
    ArticleCreated,
    ArticleListResponse,
    ArticleResponse,
    ArticleUpdate,
)
from article_likes.application.services import ArticleService
from article_likes.config import Settings
from article_likes.domain.entities import MAX_ID, PageRequest
from article_likes.domain.exceptions import EntityNotFoundError
from article_likes.infrastructure.dependencies import get_app_settings, get_article_service

router = APIRouter(prefix="/articles", tags=["Articles"])


@router.get("", response_model=ArticleListResponse)
async def list_articles(
    limit: str | None = Query(None, description="Page size, 1-100 (default 20)"),
    offset: str | None = Query(None, description="Rows to skip (default 0)"),
    sort: str | None = Query(None, description="'new' (default) or 'popular'"),
    service: ArticleService = Depends(get_article_service),
    settings: Settings = Depends(get_app_settings),
) -> ArticleListResponse:
    """Retrieve one page of articles and the offset of the next page.

    Out-of-range or malformed paging values fall back to their defaults
    instead of failing the request.
    """
    page = PageRequest.from_query(
        limit,
        offset,
        sort,
        default_limit=settings.default_page_size,
        max_limit=settings.max_page_size,
    )
    result = await service.list_articles(page)
    return ArticleListResponse(
        items=[ArticleResponse.model_validate(a, from_attributes=True) for a in result.items],
        next_offset=result.next_offset,
    )


@router.get("/{article_id}", response_model=ArticleResponse)
async def get_article(
    article_id: int = Path(..., le=MAX_ID),
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Retrieve a single article by ID."""
    try:
        article = await service.get_article(article_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ArticleResponse.model_validate(article, from_attributes=True)


@router.post("", response_model=ArticleCreated, status_code=status.HTTP_201_CREATED)
async def create_article(
    data: ArticleCreate,
    service: ArticleService = Depends(get_article_service),
) -> ArticleCreated:
    """Create a new article and return its ID."""
    article = await service.create_article(data)
    return ArticleCreated(id=article.id)


@router.put("/{article_id}", response_model=ArticleResponse)
async def update_article(
    data: ArticleUpdate,
    article_id: int = Path(..., le=MAX_ID),
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Replace the title and body of an existing article."""
    try:
        article = await service.update_article(article_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ArticleResponse.model_validate(article, from_attributes=True)


@router.delete("/{article_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_article(
    article_id: int = Path(..., le=MAX_ID),
    service: ArticleService = Depends(get_article_service),
) -> Response:
    """Delete an article and its likes."""
    try:
        await service.delete_article(article_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
