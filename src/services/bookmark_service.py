"""Service layer for bookmark CRUD operations."""
import logging

from sqlalchemy import delete, func, select, text
from sqlalchemy.ext.asyncio import AsyncSession

from models.bookmark import Bookmark
from schemas.bookmark import BookmarkCreate, BookmarkUpdate

logger = logging.getLogger(__name__)


async def create_bookmark(db: AsyncSession, data: BookmarkCreate) -> Bookmark:
    """
    Insert a new bookmark and return it with its database-assigned id.

    Note:
        Does not commit. Caller (session generator) handles commit at request end.
    """
    bookmark = Bookmark(
        name=data.name,
        url=data.url,
        description=data.description,
        rating=data.rating,
    )
    db.add(bookmark)
    await db.flush()
    await db.refresh(bookmark)
    logger.info("Created bookmark %s", bookmark.id)
    return bookmark


async def get_bookmark(db: AsyncSession, bookmark_id: int) -> Bookmark | None:
    """Get a bookmark by ID, or None if it doesn't exist."""
    result = await db.execute(select(Bookmark).where(Bookmark.id == bookmark_id))
    return result.scalar_one_or_none()


async def get_bookmarks(db: AsyncSession) -> list[Bookmark]:
    """List all bookmarks in insertion (id) order."""
    result = await db.execute(select(Bookmark).order_by(Bookmark.id))
    return list(result.scalars().all())


async def count_bookmarks(db: AsyncSession) -> int:
    """Count rows in the bookmarks table."""
    return await db.scalar(select(func.count()).select_from(Bookmark)) or 0


async def update_bookmark(
    db: AsyncSession,
    bookmark_id: int,
    data: BookmarkUpdate,
) -> Bookmark | None:
    """
    Apply the fields that were set on `data` to an existing bookmark.

    Returns the updated bookmark, or None if it doesn't exist.
    """
    bookmark = await get_bookmark(db, bookmark_id)
    if bookmark is None:
        return None

    changes = data.model_dump(exclude_unset=True)
    for field, value in changes.items():
        setattr(bookmark, field, value)

    await db.flush()
    await db.refresh(bookmark)
    logger.info("Updated bookmark %s fields=%s", bookmark_id, sorted(changes))
    return bookmark


async def delete_bookmark(db: AsyncSession, bookmark_id: int) -> bool:
    """Delete a bookmark by ID. Returns False if no row was removed."""
    result = await db.execute(delete(Bookmark).where(Bookmark.id == bookmark_id))
    await db.flush()
    deleted = result.rowcount > 0
    if deleted:
        logger.info("Deleted bookmark %s", bookmark_id)
    return deleted


async def sync_id_sequence(db: AsyncSession) -> int | None:
    """
    Move the id sequence past the largest existing id.

    Rows inserted with explicit ids (seed data, manual imports) don't advance
    the serial sequence, so the next server-assigned id would collide with
    them. Returns the largest id, or None for an empty table (the sequence is
    then reset so the next id is 1).
    """
    max_id = await db.scalar(select(func.max(Bookmark.id)))
    await db.execute(
        text(
            "SELECT setval(pg_get_serial_sequence(:table, :column), :value, :is_called)",
        ),
        {
            "table": Bookmark.__tablename__,
            "column": "id",
            "value": max_id or 1,
            "is_called": max_id is not None,
        },
    )
    logger.info("Synced bookmarks id sequence to %s", max_id)
    return max_id
