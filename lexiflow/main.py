"""Main FastAPI application."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from starlette import status

from lexiflow.config import configure_logging, get_settings
from lexiflow.database import dispose_engine, initialize_database
from lexiflow.domain.common.exceptions import (
    AuthorizationError,
    DomainError,
    EntityNotFoundError,
)
from lexiflow.exceptions import LexiflowError
from lexiflow.infrastructure.analytics.routers import statistics as statistics_router
from lexiflow.infrastructure.common.routers import settings as settings_router
from lexiflow.infrastructure.dictionary.routers import categories, word_lists, words
from lexiflow.infrastructure.identity.routers import auth, users
from lexiflow.infrastructure.practice.routers import difficulty, exercises, sessions, srs
from lexiflow.infrastructure.vocabulary.routers import dictionary, user_lists

settings = get_settings()
configure_logging(settings.ENVIRONMENT)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    initialize_database(settings)
    logger.info(f"Starting {settings.PROJECT_NAME} v{settings.VERSION} ({settings.ENVIRONMENT})")
    yield
    dispose_engine()


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    docs_url=f"{settings.API_V1_PREFIX}/docs",
    openapi_url=f"{settings.API_V1_PREFIX}/openapi.json",
    lifespan=lifespan,
)

app.state.limiter = auth.limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)  # type: ignore[arg-type]

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(LexiflowError)
async def lexiflow_error_handler(_request: Request, exc: LexiflowError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.exception_handler(DomainError)
async def domain_error_handler(_request: Request, exc: DomainError) -> JSONResponse:
    """Translate domain errors that reach the API into HTTP responses."""
    if isinstance(exc, EntityNotFoundError):
        status_code = status.HTTP_404_NOT_FOUND
    elif isinstance(exc, AuthorizationError):
        status_code = status.HTTP_403_FORBIDDEN
    else:
        status_code = status.HTTP_400_BAD_REQUEST
    return JSONResponse(status_code=status_code, content={"detail": exc.message})


@app.get("/")
async def root() -> dict[str, str]:
    return {"message": "Welcome to Lexiflow API"}


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "healthy"}


@app.get(f"{settings.API_V1_PREFIX}/")
async def api_root() -> dict[str, str]:
    return {
        "message": "Lexiflow API v1",
        "version": settings.VERSION,
        "docs": f"{settings.API_V1_PREFIX}/docs",
    }


for module in (
    auth,
    users,
    settings_router,
    words,
    categories,
    word_lists,
    dictionary,
    user_lists,
    sessions,
    srs,
    exercises,
    difficulty,
    statistics_router,
):
    app.include_router(module.router, prefix=settings.API_V1_PREFIX)
