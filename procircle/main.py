# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# Local application imports
from .api.v1 import user_router, post_router
from .core.config import get_settings
from .domain.exceptions import InternalError, ProCircleError
from .infrastructure.db.mongo_connection import ensure_indexes, close_connection
from .utils.datetime_utils import utc_now

logger = logging.getLogger(__name__)

API_TITLE = "ProCircle API"
API_VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Creates MongoDB indexes on startup and closes the shared client on shutdown.
    """
    try:
        await ensure_indexes()
    except Exception as e:
        # The API still serves; requests will fail individually until MongoDB is reachable
        logger.error(f"Failed to ensure MongoDB indexes: {e}", exc_info=True)

    yield

    close_connection()
    logger.info("Application shutdown complete")


def _format_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "Invalid value")
    return f"{location}: {message}" if location else message


def register_exception_handlers(application: FastAPI) -> None:
    """Map every failure to an HTTP status and a JSON {message} body"""

    @application.exception_handler(ProCircleError)
    async def procircle_error_handler(request: Request, exc: ProCircleError) -> JSONResponse:
        if isinstance(exc, InternalError):
            logger.error(f"{request.method} {request.url.path} failed: {exc.message}", exc_info=exc)
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.user_message},
        )

    @application.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": _format_validation_error(exc)},
        )

    @application.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "Server error"},
        )


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - Logging
    - CORS middleware configuration
    - Exception handlers
    - API route registration

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    application = FastAPI(
        title=API_TITLE,
        version=API_VERSION,
        description="Minimal social network: users, posts, likes and comments",
        lifespan=lifespan
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials="*" not in settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(application)

    application.include_router(user_router, prefix="/api/users")
    application.include_router(post_router, prefix="/api/posts")

    @application.get("/", tags=["health"])
    async def root():
        return {"message": f"Welcome to {API_TITLE}"}

    @application.get("/health", tags=["health"])
    async def health_check():
        return {
            "service": API_TITLE,
            "version": API_VERSION,
            "status": "healthy",
            "timestamp": utc_now().isoformat(),
        }

    return application


# Create application instance
app = create_application()
