"""FastAPI application entry point."""
import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.routers import bookmarks, health
from core.config import get_settings
from db.session import async_session_factory, create_tables, dispose_engine
from services import bookmark_service
from services.exceptions import BookmarkError


logger = logging.getLogger(__name__)

app_settings = get_settings()

logging.basicConfig(
    level=app_settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build a {"error": {"message": ...}} response."""
    return JSONResponse(status_code=status_code, content={"error": {"message": message}})


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None]:
    """Manage application lifespan - startup and shutdown."""
    if app_settings.create_tables:
        await create_tables()

    async with async_session_factory() as session:
        await bookmark_service.sync_id_sequence(session)
        await session.commit()

    yield

    await dispose_engine()


app = FastAPI(
    title="Bookmarks API",
    description="Create, list, read, update and delete rated bookmarks.",
    version="0.1.0",
    lifespan=lifespan,
)


@app.exception_handler(BookmarkError)
async def bookmark_exception_handler(
    _request: Request, exc: BookmarkError,
) -> JSONResponse:
    """Map service exceptions to their status code and error body."""
    return error_response(exc.status_code, exc.message)


@app.exception_handler(RequestValidationError)
async def request_validation_exception_handler(
    _request: Request, exc: RequestValidationError,
) -> JSONResponse:
    """Reshape framework validation errors (bad JSON, non-integer ids) to a 400."""
    errors = exc.errors()
    if errors:
        location = ".".join(str(part) for part in errors[0].get("loc", ()))
        message = f"Invalid request: {location}" if location else "Invalid request"
    else:
        message = "Invalid request"
    return error_response(400, message)


@app.exception_handler(Exception)
async def unhandled_exception_handler(
    request: Request, exc: Exception,
) -> JSONResponse:
    """Log unexpected errors; only expose their text in debug mode."""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    message = str(exc) if app_settings.debug else "server error"
    return error_response(500, message)


app.add_middleware(
    CORSMiddleware,
    allow_origins=app_settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(bookmarks.router)
