"""Shared exceptions for service layer operations."""


class BookmarkError(Exception):
    """Base exception for bookmark errors that map to a client-facing message."""

    status_code = 500

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationError(BookmarkError):
    """Raised when a request payload breaks a required-field or range rule."""

    status_code = 400


class NotFoundError(BookmarkError):
    """Raised when the requested bookmark id doesn't exist."""

    status_code = 404

    def __init__(self, bookmark_id: int) -> None:
        self.bookmark_id = bookmark_id
        super().__init__("Bookmark doesn't exist")
