"""Health check endpoint."""
import logging

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import get_async_session
from services import bookmark_service


logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Whether the bookmarks table can be queried, and how many rows it holds."""

    status: str
    bookmarks_table: str
    bookmark_count: int | None = None


@router.get("/health", response_model=HealthResponse)
async def health_check(
    db: AsyncSession = Depends(get_async_session),
) -> HealthResponse:
    """Report 'healthy' when the bookmarks table answers a count query, else 'degraded'."""
    try:
        count = await bookmark_service.count_bookmarks(db)
    except SQLAlchemyError:
        logger.exception("Bookmarks table health check failed")
        return HealthResponse(status="degraded", bookmarks_table="unreachable")

    return HealthResponse(
        status="healthy",
        bookmarks_table="reachable",
        bookmark_count=count,
    )
