"""Bookmark CRUD endpoints."""
from typing import Any

from fastapi import APIRouter, Body, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import get_async_session
from schemas.bookmark import (
    BookmarkCreate,
    BookmarkResponse,
    BookmarkUpdate,
    ErrorResponse,
)
from schemas.validators import validate_bookmark_update, validate_new_bookmark
from services import bookmark_service
from services.exceptions import NotFoundError, ValidationError

router = APIRouter(prefix="/bookmarks", tags=["bookmarks"])

NOT_FOUND_RESPONSE = {404: {"model": ErrorResponse}}
BAD_REQUEST_RESPONSE = {400: {"model": ErrorResponse}}


@router.get("", response_model=list[BookmarkResponse])
async def list_bookmarks(
    db: AsyncSession = Depends(get_async_session),
) -> list[BookmarkResponse]:
    """List all bookmarks."""
    bookmarks = await bookmark_service.get_bookmarks(db)
    return [BookmarkResponse.model_validate(b) for b in bookmarks]


@router.get(
    "/{bookmark_id}",
    response_model=BookmarkResponse,
    responses=NOT_FOUND_RESPONSE,
)
async def get_bookmark(
    bookmark_id: int,
    db: AsyncSession = Depends(get_async_session),
) -> BookmarkResponse:
    """Get a single bookmark by ID."""
    bookmark = await bookmark_service.get_bookmark(db, bookmark_id)
    if bookmark is None:
        raise NotFoundError(bookmark_id)
    return BookmarkResponse.model_validate(bookmark)


@router.post(
    "",
    response_model=BookmarkResponse,
    status_code=201,
    responses=BAD_REQUEST_RESPONSE,
)
async def create_bookmark(
    response: Response,
    payload: dict[str, Any] = Body(...),
    db: AsyncSession = Depends(get_async_session),
) -> BookmarkResponse:
    """
    Create a new bookmark.

    'name', 'url' and 'rating' (1-5) are required; 'description' is optional.
    Any 'id' in the body is ignored and the database assigns one.
    """
    reason = validate_new_bookmark(payload)
    if reason is not None:
        raise ValidationError(reason)

    bookmark = await bookmark_service.create_bookmark(
        db, BookmarkCreate.from_payload(payload),
    )
    response.headers["Location"] = f"{router.prefix}/{bookmark.id}"
    return BookmarkResponse.model_validate(bookmark)


@router.patch(
    "/{bookmark_id}",
    response_model=BookmarkResponse,
    responses={**BAD_REQUEST_RESPONSE, **NOT_FOUND_RESPONSE},
)
async def update_bookmark(
    bookmark_id: int,
    payload: dict[str, Any] = Body(...),
    db: AsyncSession = Depends(get_async_session),
) -> BookmarkResponse:
    """Update any of a bookmark's 'name', 'url', 'description' or 'rating'."""
    reason = validate_bookmark_update(payload)
    if reason is not None:
        raise ValidationError(reason)

    bookmark = await bookmark_service.update_bookmark(
        db, bookmark_id, BookmarkUpdate.from_payload(payload),
    )
    if bookmark is None:
        raise NotFoundError(bookmark_id)
    return BookmarkResponse.model_validate(bookmark)


@router.delete("/{bookmark_id}", status_code=204, responses=NOT_FOUND_RESPONSE)
async def delete_bookmark(
    bookmark_id: int,
    db: AsyncSession = Depends(get_async_session),
) -> None:
    """Delete a bookmark."""
    deleted = await bookmark_service.delete_bookmark(db, bookmark_id)
    if not deleted:
        raise NotFoundError(bookmark_id)
