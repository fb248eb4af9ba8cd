"""Entry point for running the API server."""
import uvicorn

from core.config import get_settings


def main() -> None:
    """Run the API with uvicorn using host/port from settings."""
    settings = get_settings()
    uvicorn.run(
        "api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
