import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import JSONResponse
from starlette import status
from scalar_fastapi import get_scalar_api_reference
from foldertree.schemas.response import ApiError, ErrorDetail
from foldertree.configs.settings import settings, ensure_required_settings
from foldertree.core.exceptions import AppError
from foldertree.crud import FileCRUD, FolderCRUD
from foldertree.utils import setup_logging, get_logger
from foldertree.middlewares import init_sentry
from foldertree.databases import MongoDB
from foldertree.models import DOCUMENT_MODELS
from foldertree.api import folder_router, file_router, health_router

logger = get_logger(__name__)


async def _setup_logging() -> None:
    """Setup application logging configuration"""
    setup_logging(
        level="DEBUG" if settings.APP_DEBUG else "INFO",
        app_name=settings.APP_NAME,
        enable_json=settings.APP_ENV == "prod",
        log_file="logs/app.log" if settings.APP_ENV == "prod" else None
    )
    logger.info("Logging configuration initialized")


async def _setup_sentry() -> None:
    """Setup Sentry monitoring for production environment"""
    if not settings.SENTRY_DSN:
        logger.warning("Sentry DSN not configured - monitoring disabled")
        return

    if settings.APP_ENV != "prod":
        logger.info("Sentry monitoring disabled - not in production environment")
        return

    try:
        init_sentry(
            dsn=settings.SENTRY_DSN,
            environment=settings.APP_ENV,
            release=settings.RELEASE,
            traces_sample_rate=settings.SENTRY_TRACES_SAMPLE_RATE,
            send_default_pii=settings.SENTRY_SEND_DEFAULT_PII
        )
        logger.info("Sentry monitoring initialized for production environment")
    except Exception as e:
        # Monitoring is optional, keep starting up
        logger.error(f"Failed to initialize Sentry: {str(e)}")


async def _setup_databases(app: FastAPI) -> None:
    """Open the MongoDB handle and the CRUD layer the services share"""
    mongodb = MongoDB(
        url=settings.MONGO_URL,
        database_name=settings.MONGO_DB,
        connect_timeout_ms=settings.MONGO_CONNECT_TIMEOUT_MS,
    )
    try:
        await mongodb.connect(document_models=DOCUMENT_MODELS)
        logger.info("Database connected")
    except Exception as e:
        logger.error(f"Failed to initialize MongoDB: {str(e)}")
        raise

    app.state.mongodb = mongodb
    app.state.folder_crud = FolderCRUD()
    app.state.file_crud = FileCRUD()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan context manager"""
    ensure_required_settings()
    logger.info(f"Starting {settings.APP_NAME}...")

    try:
        await _setup_logging()
        await _setup_sentry()
        await _setup_databases(app)

        logger.info("Application startup completed successfully")

        yield

    except Exception as e:
        logger.error(f"Application startup failed: {str(e)}")
        raise
    finally:
        logger.info(f"Shutting down {settings.APP_NAME}...")
        mongodb = getattr(app.state, "mongodb", None)
        if mongodb:
            try:
                await mongodb.disconnect()
            except Exception as e:
                logger.error(f"Error during shutdown: {str(e)}")
        logger.info("Application shutdown completed")


async def _handle_app_error(request: Request, exc: AppError) -> JSONResponse:
    """Handle custom application errors"""
    if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        body = ApiError(
            success=False,
            message=exc.message,
        ).model_dump(mode="json", exclude_none=True)
        return JSONResponse(content=body, status_code=exc.status_code)

    errors = list(exc.errors or [])
    if exc.field:
        errors.append({
            "code": exc.code,
            "message": exc.message,
            "field": exc.field
        })

    body = ApiError(
        success=False,
        error=exc.message,
        code=exc.code,
        errors=[ErrorDetail(**e) for e in errors] or None
    ).model_dump(mode="json", exclude_none=True)

    return JSONResponse(content=body, status_code=exc.status_code)


async def _handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Handle HTTP exceptions from Starlette"""
    body = ApiError(
        success=False,
        error=str(exc.detail)
    ).model_dump(mode="json", exclude_none=True)

    return JSONResponse(content=body, status_code=exc.status_code)


async def _handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed request bodies and parameters are client errors (400)"""
    errors = []
    for error in exc.errors():
        location = ".".join(
            str(x) for x in error.get("loc", [])
            if x not in ("body",)
        )
        errors.append({
            "code": error.get("type", "validation_error"),
            "message": error.get("msg", ""),
            "field": location or None
        })

    body = ApiError(
        success=False,
        error="Invalid request",
        code="validation_error",
        errors=[ErrorDetail(**e) for e in errors]
    ).model_dump(mode="json", exclude_none=True)

    return JSONResponse(
        content=body,
        status_code=status.HTTP_400_BAD_REQUEST
    )


async def _handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """Last resort: log the detail, answer with a generic 500"""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {str(exc)}")
    body = ApiError(
        success=False,
        message="Something went wrong. Please try again later."
    ).model_dump(mode="json", exclude_none=True)

    return JSONResponse(content=body, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


def install_cors_middleware(app: FastAPI) -> None:
    """Install CORS middleware for the application"""
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=settings.CORS_CREDENTIALS,
        allow_methods=settings.CORS_METHODS,
        allow_headers=settings.CORS_HEADERS,
        expose_headers=settings.CORS_EXPOSE_HEADERS,
    )


def install_exception_handlers(app: FastAPI) -> None:
    """Install all exception handlers for the application"""
    app.exception_handler(AppError)(_handle_app_error)
    app.exception_handler(StarletteHTTPException)(_handle_http_exception)
    app.exception_handler(RequestValidationError)(_handle_validation_error)
    app.exception_handler(Exception)(_handle_unexpected_error)

    logger.info("Exception handlers installed successfully")


def include_routers(app: FastAPI) -> None:
    """Include all API routers"""
    routers_config = [
        (folder_router, "/v1"),
        (file_router, "/v1"),
        (health_router, ""),
    ]
    if settings.APP_ENV == "dev":
        @app.get("/scalar", include_in_schema=False)
        async def scalar_html():
            return get_scalar_api_reference(
                openapi_url=app.openapi_url,
                title=settings.APP_NAME,
            )

    for router, prefix in routers_config:
        app.include_router(router, prefix=prefix)

    logger.info(f"Included {len(routers_config)} API routers successfully")


def create_app() -> FastAPI:
    """Create and configure FastAPI application with all components"""
    app = FastAPI(
        title=settings.APP_NAME,
        description="File and folder metadata API",
        version="1.0.0",
        debug=settings.APP_DEBUG,
        lifespan=lifespan,
        docs_url="/docs" if settings.APP_DEBUG else None,
        redoc_url="/redoc" if settings.APP_DEBUG else None,
    )
    app.state.started_at = time.monotonic()

    install_cors_middleware(app)
    install_exception_handlers(app)
    include_routers(app)

    logger.info("FastAPI application created and configured successfully")
    return app
