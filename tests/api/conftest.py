"""Shared fixtures for API tests."""
import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from models.bookmark import Bookmark
from services.bookmark_service import sync_id_sequence

TEST_BOOKMARKS = [
    {
        "id": 1,
        "name": "test1",
        "url": "test1_url",
        "description": "test1_descr",
        "rating": 5,
    },
    {
        "id": 2,
        "name": "test2",
        "url": "test2_url",
        "description": "test2_descr",
        "rating": 2,
    },
    {
        "id": 3,
        "name": "test3",
        "url": "test3_url",
        "description": "test3_descr",
        "rating": 3,
    },
    {
        "id": 4,
        "name": "test4",
        "url": "test4_url",
        "description": "test4_descr",
        "rating": 4,
    },
]


@pytest.fixture
async def seeded_bookmarks(db_session: AsyncSession) -> list[dict]:
    """Insert TEST_BOOKMARKS directly into the table (explicit ids)."""
    db_session.add_all([Bookmark(**data) for data in TEST_BOOKMARKS])
    await db_session.flush()
    await sync_id_sequence(db_session)
    return TEST_BOOKMARKS
