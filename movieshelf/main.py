# movieshelf/main.py

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
from movieshelf import __version__
from movieshelf.api.v1 import api_router
from movieshelf.core import responses
from movieshelf.core.config import get_settings
from movieshelf.core.exceptions import ApiError
from movieshelf.core.logging_setup import setup_logging
from movieshelf.database import engine, Base
from movieshelf import models  # noqa: F401  registers tables on Base

settings = get_settings()
setup_logging(settings.log_level)

logger = logging.getLogger(__name__)

Base.metadata.create_all(bind=engine)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting %s %s", settings.app_name, __version__)
    if not settings.tmdb_access_token:
        logger.warning("TMDB_ACCESS_TOKEN is not set; TMDB requests will fail")
    yield
    logger.info("Shutting down %s", settings.app_name)


app = FastAPI(
    title=settings.app_name,
    description="Authenticated TMDB proxy with user favorites",
    version=__version__,
    debug=settings.debug,
    docs_url="/docs",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

# Without explicit origins allow all, but without credentials
cors_origins = settings.cors_allow_origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins or ["*"],
    allow_credentials=bool(cors_origins),
    allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)


@app.exception_handler(ApiError)
async def api_error_handler(request: Request, exc: ApiError):
    return responses.error(exc.message, exc.code, exc.status_code, exc.errors)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = {}
    for err in exc.errors():
        # drop the "body"/"query"/"path" location prefix
        loc = [str(part) for part in err.get("loc", ())[1:]] or ["__root__"]
        errors.setdefault(".".join(loc), []).append(err["msg"])
    return responses.error("Validation failed", "validation:failed", 422, errors)


HTTP_ERROR_CODES = {
    404: ("Not found", "general:not-found"),
    405: ("Method not allowed", "general:method-not-allowed"),
}


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    message, code = HTTP_ERROR_CODES.get(exc.status_code, (str(exc.detail), "general:http-error"))
    return responses.error(message, code, exc.status_code)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return responses.error("Internal server error", "general:server-error", 500, str(exc))


app.include_router(api_router, prefix="/api/v1")
