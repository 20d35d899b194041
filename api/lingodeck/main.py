from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.encoders import jsonable_encoder
import logging
import traceback
from lingodeck.core.config import Settings, get_settings
from lingodeck.core.database import create_db_engine, init_db
from lingodeck.core.exceptions import (
    LingoDeckException,
    ValidationError,
    NotFoundError,
    ConflictError,
    AuthorizationError,
    UpstreamUnavailableError
)
from lingodeck.services.sentence_service import SentenceService
from lingodeck.services.translation_service import TranslationService

# Import API router
from lingodeck.api.v1 import api_router

logger = logging.getLogger(__name__)

EXCEPTION_STATUS_CODES = [
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
    (AuthorizationError, status.HTTP_403_FORBIDDEN),
    (UpstreamUnavailableError, status.HTTP_503_SERVICE_UNAVAILABLE),
]


def _status_code_for(exc: LingoDeckException) -> int:
    for exc_type, status_code in EXCEPTION_STATUS_CODES:
        if isinstance(exc, exc_type):
            return status_code
    if isinstance(exc, ValueError):
        # InvalidLevelError and other contract violations surfacing from input
        return status.HTTP_400_BAD_REQUEST
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the application.

    The database engine and the text services are created here, once, and kept
    on app.state for the lifetime of the application.
    """
    if settings is None:
        settings = get_settings()

    logging.basicConfig(level=settings.log_level.upper())

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Initialize database on startup."""
        init_db(app.state.engine)
        yield
        app.state.engine.dispose()

    app = FastAPI(title="LingoDeck API", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.engine = create_db_engine(settings.sqlalchemy_database_url)
    app.state.sentence_service = SentenceService(settings)
    app.state.translation_service = TranslationService(settings)

    # Add exception handler for validation errors to log details
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Log validation errors with full details for debugging."""
        body = await request.body()
        logger.error(f"Validation error on {request.method} {request.url.path}")
        logger.error(f"Validation errors: {exc.errors()}")
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"detail": jsonable_encoder(exc.errors()), "body": body.decode('utf-8') if body else None},
        )

    # Add exception handler for custom application exceptions
    @app.exception_handler(LingoDeckException)
    async def lingodeck_exception_handler(request: Request, exc: LingoDeckException):
        """Handle custom application exceptions."""
        status_code = _status_code_for(exc)
        logger.warning(f"Application exception on {request.method} {request.url.path}: {type(exc).__name__}: {str(exc)}")
        return JSONResponse(
            status_code=status_code,
            content={"detail": str(exc), "type": type(exc).__name__},
        )

    # Add global exception handler for unhandled errors
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Catch all unhandled exceptions and answer with a JSON 500."""
        logger.error(f"Unhandled exception on {request.method} {request.url.path}", exc_info=exc)

        # In development, show full error details
        if settings.is_development:
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={
                    "detail": str(exc),
                    "type": type(exc).__name__,
                    "traceback": traceback.format_exc()
                },
            )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "detail": "An internal server error occurred. Please try again later.",
                "type": "InternalServerError"
            },
        )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/")
    async def root():
        return {
            "message": "LingoDeck API",
            "status": "running",
            "docs": {
                "swagger": "/docs",
                "redoc": "/redoc"
            }
        }

    @app.get("/health")
    async def health():
        return {"status": "healthy"}

    # Include API router
    app.include_router(api_router, prefix=settings.api_v1_prefix)

    return app

