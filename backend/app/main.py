"""FastAPI application factory and main entry point."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import get_settings
from app.core.logging import get_logger, setup_logging
from app.email_regex.application.exceptions import TutorialUnavailableError
from app.email_regex.domain.services.pattern_matcher import EMAIL_PATTERN_SOURCE
from app.email_regex.infrastructure.content.tutorial_loader import get_tutorial_loader
from app.email_regex.presentation.api import emails, health, pattern, tutorial
from app.email_regex.presentation.web import tutorial_page

settings = get_settings()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager for startup/shutdown events."""
    # Startup
    setup_logging(level=settings.effective_log_level)
    logger.info("Email Regex Guide starting up...")
    logger.info(f"Environment: {settings.app_env}")
    logger.info(f"Email pattern: {EMAIL_PATTERN_SOURCE} (case-insensitive)")

    # Parse the tutorial once so request handlers hit the cache
    try:
        get_tutorial_loader().load()
    except TutorialUnavailableError as e:
        logger.error(f"⚠️ {e.message}; tutorial endpoints will return 503")

    yield

    # Shutdown
    logger.info("Email Regex Guide shutting down...")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Email Regex Guide",
        description="Validate email addresses with a regular expression, and learn how the pattern works",
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/api/docs" if settings.is_development else None,
        redoc_url="/api/redoc" if settings.is_development else None,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins if settings.is_development else [],
        allow_credentials=False,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    # API routes
    app.include_router(health.router, prefix="/api", tags=["Health"])
    app.include_router(emails.router, prefix="/api", tags=["Emails"])
    app.include_router(pattern.router, prefix="/api", tags=["Pattern"])
    app.include_router(tutorial.router, prefix="/api", tags=["Tutorial"])

    # Web routes (tutorial page) - no prefix for root /
    app.include_router(tutorial_page.router, tags=["Web"])

    return app


# Application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.is_development,
    )
