"""Pydantic schemas for bookmark endpoints."""
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from models.bookmark import RATING_MAX, RATING_MIN
from schemas.validators import parse_rating


class BookmarkCreate(BaseModel):
    """Schema for creating a new bookmark."""

    name: str = Field(min_length=1)
    url: str = Field(min_length=1)
    description: str | None = None
    rating: int = Field(ge=RATING_MIN, le=RATING_MAX)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "BookmarkCreate":
        """
        Build from a raw payload that already passed validate_new_bookmark.

        Unknown keys (including a client-supplied 'id') are dropped; the id is
        always assigned by the database.
        """
        return cls(
            name=payload["name"],
            url=payload["url"],
            description=payload.get("description"),
            rating=parse_rating(payload["rating"]),
        )


class BookmarkUpdate(BaseModel):
    """Schema for a partial bookmark update. Only fields that were sent are applied."""

    name: str | None = Field(default=None, min_length=1)
    url: str | None = Field(default=None, min_length=1)
    description: str | None = None
    rating: int | None = Field(default=None, ge=RATING_MIN, le=RATING_MAX)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "BookmarkUpdate":
        """Build from a raw payload that already passed validate_bookmark_update."""
        data = {
            field: payload[field]
            for field in ("name", "url", "description")
            if field in payload
        }
        if "rating" in payload:
            data["rating"] = parse_rating(payload["rating"])
        return cls(**data)


class BookmarkResponse(BaseModel):
    """Schema for bookmark responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    url: str
    description: str | None
    rating: int


class ErrorDetail(BaseModel):
    """Error message wrapper."""

    message: str


class ErrorResponse(BaseModel):
    """Schema for error responses: {"error": {"message": "..."}}."""

    error: ErrorDetail
