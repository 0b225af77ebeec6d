import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from app.api.v1.api import api_router
from app.api.v1.endpoints import health
from app.core.config import settings
from app.core.errors import (
    TrailmarksError,
    TranslationsNotFoundError,
    request_validation_error_handler,
    trailmarks_error_handler,
    translations_not_found_handler,
)
from app.db.init_db import init_db
from app.utils import logger as _  # noqa: F401 - Import to configure logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.DB_INIT_ON_STARTUP:
        init_db()
    yield


app = FastAPI(
    title=settings.PROJECT_NAME,
    description=settings.PROJECT_DESCRIPTION,
    version=settings.VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(TranslationsNotFoundError, translations_not_found_handler)
app.add_exception_handler(TrailmarksError, trailmarks_error_handler)
app.add_exception_handler(RequestValidationError, request_validation_error_handler)

logger.info("Starting %s version v%s", settings.PROJECT_NAME, settings.VERSION)

app.include_router(health.router, tags=["health"])
app.include_router(api_router, prefix=settings.API_PREFIX)


@app.get("/")
def read_root():
    return {"message": "Welcome to the Trailmarks API"}
