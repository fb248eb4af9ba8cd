"""Tests for bookmark Pydantic schemas."""
import pytest
from pydantic import ValidationError

from schemas.bookmark import BookmarkCreate, BookmarkResponse, BookmarkUpdate


def test__bookmark_create__from_payload_drops_id_and_parses_rating() -> None:
    """from_payload keeps known fields only and converts the rating to int."""
    data = BookmarkCreate.from_payload(
        {"id": 13, "name": "n", "url": "u", "rating": "5", "extra": 1},
    )
    assert data.model_dump() == {"name": "n", "url": "u", "description": None, "rating": 5}


def test__bookmark_create__rejects_out_of_range_rating() -> None:
    """The schema enforces the rating range on its own."""
    with pytest.raises(ValidationError):
        BookmarkCreate(name="n", url="u", rating=6)


def test__bookmark_update__tracks_only_sent_fields() -> None:
    """Fields that weren't sent are not part of the update."""
    data = BookmarkUpdate.from_payload({"rating": 2.0, "id": 4})
    assert data.model_dump(exclude_unset=True) == {"rating": 2}


def test__bookmark_update__explicit_null_description_is_set() -> None:
    """Sending description null is distinct from omitting it."""
    data = BookmarkUpdate.from_payload({"description": None})
    assert data.model_dump(exclude_unset=True) == {"description": None}


def test__bookmark_response__has_exactly_resource_fields() -> None:
    """The response carries exactly id, name, url, description and rating."""
    response = BookmarkResponse(id=1, name="n", url="u", description=None, rating=3)
    assert set(response.model_dump()) == {"id", "name", "url", "description", "rating"}
