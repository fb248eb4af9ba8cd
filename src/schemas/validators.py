"""
Request payload validation for bookmark endpoints.

Each validator runs an ordered series of independent checks and returns the
message of the first one that fails, or None when the payload is valid. Only
one reason is ever reported; callers rely on the order (e.g. a payload missing
both 'name' and 'url' is reported as missing 'name').
"""
import re
from collections.abc import Mapping
from typing import Any

from models.bookmark import RATING_MAX, RATING_MIN

# Optional sign and ASCII digits; no underscores or non-ASCII digits
RATING_STRING_PATTERN = re.compile(r"[+-]?[0-9]+")

UPDATABLE_FIELDS = ("name", "url", "description", "rating")

INVALID_RATING = "Invalid rating"
INVALID_DESCRIPTION = "Invalid description"
MISSING_UPDATE_FIELDS = (
    "Request body must contain either 'name', 'url', 'description' or 'rating'"
)


def missing_field_message(field: str) -> str:
    """Message for a required field that is absent or empty."""
    return f"Missing '{field}' in request body"


def _is_non_blank_string(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def parse_rating(value: Any) -> int | None:
    """
    Parse a rating into an int, or return None if it isn't an integer number.

    Accepts ints, integral floats (4.0) and strings holding an integer ("4").
    Booleans are rejected even though they subclass int.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        stripped = value.strip()
        if RATING_STRING_PATTERN.fullmatch(stripped) is None:
            return None
        return int(stripped)
    return None


def is_valid_rating(value: Any) -> bool:
    """True if value parses as an integer within the allowed rating range."""
    rating = parse_rating(value)
    return rating is not None and RATING_MIN <= rating <= RATING_MAX


def validate_new_bookmark(payload: Mapping[str, Any]) -> str | None:
    """Return the first rejection reason for a create payload, or None if valid."""
    if not _is_non_blank_string(payload.get("name")):
        return missing_field_message("name")
    if not _is_non_blank_string(payload.get("url")):
        return missing_field_message("url")
    if payload.get("rating") is None:
        return missing_field_message("rating")
    if parse_rating(payload["rating"]) is None:
        return INVALID_RATING
    if not is_valid_rating(payload["rating"]):
        return INVALID_RATING
    description = payload.get("description")
    if description is not None and not isinstance(description, str):
        return INVALID_DESCRIPTION
    return None


def validate_bookmark_update(payload: Mapping[str, Any]) -> str | None:
    """Return the first rejection reason for a partial update payload, or None if valid."""
    if not any(field in payload for field in UPDATABLE_FIELDS):
        return MISSING_UPDATE_FIELDS
    if "name" in payload and not _is_non_blank_string(payload["name"]):
        return "Invalid name"
    if "url" in payload and not _is_non_blank_string(payload["url"]):
        return "Invalid url"
    if "rating" in payload and not is_valid_rating(payload["rating"]):
        return INVALID_RATING
    description = payload.get("description")
    if description is not None and not isinstance(description, str):
        return INVALID_DESCRIPTION
    return None
