"""Main FastAPI application.

Entry point for the spec verification service.
"""

import logging
import sys
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, RedirectResponse

from specmatch.api.dependencies import get_settings, get_verification_provider
from specmatch.api.routes import verification
from specmatch.domain.exceptions import ConfigurationError
from specmatch.infrastructure.llm.constants import PROVIDER_NAME

# Third-party loggers that report every HTTP exchange at INFO
_SDK_LOGGERS = ("anthropic", "httpx", "httpcore")


def configure_logging(level: str = "INFO") -> None:
    """Route service logs to stdout at the configured level.

    The ``specmatch`` loggers follow ``level``. SDK and transport loggers stay
    at WARNING unless ``level`` is DEBUG, in which case request traces are kept.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    logging.getLogger("specmatch").setLevel(numeric_level)

    sdk_level = logging.DEBUG if numeric_level <= logging.DEBUG else logging.WARNING
    for name in _SDK_LOGGERS:
        logging.getLogger(name).setLevel(sdk_level)


settings = get_settings()
configure_logging(settings.log_level)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    The provider is created lazily on the first request; on shutdown it is
    closed only if it was ever built.
    """
    logger.info(f"Starting {settings.api_title} v{settings.api_version}")
    if not settings.anthropic_api_key:
        logger.warning("ANTHROPIC_API_KEY is not set - verification requests will fail")

    yield

    if get_verification_provider.cache_info().currsize:
        await get_verification_provider().close()
    logger.info(f"Shutting down {settings.api_title}")


app = FastAPI(
    lifespan=lifespan,
    title=settings.api_title,
    version=settings.api_version,
    description="""
# Spec Match Verification

Grade how closely a set of source files implements a specification document.

The service sends the specification and the files to Claude, which replies
with a match percentage, the spec items it found in the code, the items it
did not, and free-form notes.
    """,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_tags=[
        {"name": "Verification", "description": "Spec-to-code comparison endpoints"},
        {"name": "Health & Status", "description": "Service health check and status endpoints"},
    ],
)

# allow_credentials=False is required when using allow_origins=["*"]
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allowed_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(verification.router)


@app.exception_handler(ConfigurationError)
async def configuration_error_handler(request: Request, exc: ConfigurationError) -> JSONResponse:
    """Report a misconfigured provider as a server error."""
    logger.error(f"Provider misconfigured: {exc}")
    return JSONResponse(status_code=500, content={"detail": str(exc)})


@app.get("/", include_in_schema=False)
async def root():
    """Redirect root to API documentation."""
    return RedirectResponse(url="/docs")


@app.get(
    "/health",
    status_code=200,
    summary="Service health check",
    tags=["Health & Status"],
)
async def health_check():
    """Service health check endpoint.

    Returns:
        Dictionary containing service health status and provider configuration
    """
    return {
        "status": "healthy",
        "service": settings.api_title,
        "version": settings.api_version,
        "provider": PROVIDER_NAME,
        "model": settings.anthropic_model,
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "specmatch.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level=settings.log_level.lower(),
    )
