# 📄 File: app/main.py
#
# 🧭 Purpose (Layman Explanation):
# The main control center that starts up our Plant Care app, connects all the different parts together,
# and makes sure everything is ready to handle requests from the web and mobile apps.
#
# 🧪 Purpose (Technical Summary):
# FastAPI application factory and entry point with logging setup, CORS and request logging
# middleware, router registration, database lifecycle management and the exception handlers that
# render every error in the {"success": false, "error": {...}} envelope.
#
# 🔗 Dependencies:
# - FastAPI framework, uvicorn
# - app.shared.config.settings
# - app.shared.infrastructure.database (connection, session)
# - app.api.v1.router, app.api.middleware
#
# 🔄 Connected Modules / Calls From:
# - uvicorn server startup
# - Docker container entry point
# - Development server commands

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import uvicorn
from fastapi import FastAPI, Request, Response
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from app.api.middleware import RequestLoggingMiddleware
from app.api.v1 import API_TAGS
from app.api.v1.router import api_v1_router
from app.modules.plant_care.presentation.dependencies import get_care_advisor, get_plant_catalog
from app.shared.config.settings import get_settings
from app.shared.core.exceptions import PlantCareException
from app.shared.infrastructure.database.connection import close_database, initialize_database
from app.shared.infrastructure.database.session import initialize_sessions
from app.shared.utils.logging import get_logger, log_shutdown_event, log_startup_event, setup_logging

# Get application settings
settings = get_settings()

# Setup logging
setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Handles startup and shutdown: database engine and schema, session
    factory and the HTTP sessions of the AI advisor and the plant database.
    """
    log_startup_event(settings.APP_NAME, settings.APP_VERSION, extra={"environment": settings.ENVIRONMENT})

    try:
        await initialize_database()
        logger.info("✅ Database connection initialized")

        initialize_sessions()
        logger.info("✅ Session manager initialized")

        logger.info("✅ Plant Care API startup complete")

        yield  # Application is running

    except Exception as e:
        logger.error(f"❌ Startup failed: {e}", exc_info=True)
        raise

    finally:
        log_shutdown_event(settings.APP_NAME)

        try:
            # Only close the advisor if a request ever created it
            if get_care_advisor.cache_info().currsize:
                await get_care_advisor().close()
                logger.info("✅ AI advisor client closed")

            if get_plant_catalog.cache_info().currsize:
                await get_plant_catalog().close()
                logger.info("✅ Plant database client closed")

            await close_database()
            logger.info("✅ Database connections closed")

        except Exception as e:
            logger.error(f"❌ Shutdown error: {e}", exc_info=True)


def _error_response(
    request: Request,
    status_code: int,
    code: str,
    message: str,
    details: Optional[dict] = None,
    headers: Optional[dict] = None
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "error": {
                "code": code,
                "message": message,
                "details": jsonable_encoder(details or {}),
                "request_id": getattr(request.state, "request_id", None),
            }
        },
        headers=headers,
    )


def create_application() -> FastAPI:
    """
    Application factory function.

    Creates and configures the FastAPI application with middleware,
    routers and exception handlers.

    Returns:
        FastAPI: Configured FastAPI application instance
    """
    app = FastAPI(
        title=settings.APP_NAME,
        description=settings.APP_DESCRIPTION,
        version=settings.APP_VERSION,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        openapi_url="/openapi.json" if settings.DEBUG else None,
        openapi_tags=API_TAGS,
        lifespan=lifespan,
        debug=settings.DEBUG,
    )

    # =========================================================================
    # MIDDLEWARE CONFIGURATION
    # =========================================================================

    if not settings.is_testing:
        app.add_middleware(RequestLoggingMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=["GET", "POST", "PUT", "DELETE", "PATCH", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )

    app.add_middleware(GZipMiddleware, minimum_size=1000)

    # =========================================================================
    # ROUTER REGISTRATION
    # =========================================================================

    app.include_router(api_v1_router, prefix="/api/v1")

    # =========================================================================
    # EXCEPTION HANDLERS
    # =========================================================================

    @app.exception_handler(PlantCareException)
    async def plant_care_exception_handler(request: Request, exc: PlantCareException) -> JSONResponse:
        """Handle custom Plant Care application exceptions."""
        headers = None
        retry_after = getattr(exc, "retry_after", None)
        if retry_after:
            headers = {"Retry-After": str(retry_after)}

        if exc.status_code >= 500:
            logger.error(f"{exc.error_code}: {exc.message}", extra={"details": exc.details})
        else:
            logger.info(f"{exc.error_code}: {exc.message}", extra={"status_code": exc.status_code})

        return _error_response(request, exc.status_code, exc.error_code, exc.message, exc.details, headers)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        """Handle request body / query / path validation errors."""
        errors = exc.errors()
        message = errors[0].get("msg", "Validation failed") if errors else "Validation failed"
        return _error_response(request, 422, "VALIDATION_ERROR", message, {"errors": errors})

    @app.exception_handler(Exception)
    async def internal_server_error_handler(request: Request, exc: Exception) -> JSONResponse:
        """Handle anything the application did not anticipate."""
        logger.error(f"Internal server error: {exc}", exc_info=True)
        return _error_response(
            request,
            500,
            "INTERNAL_SERVER_ERROR",
            "An internal server error occurred",
            {"error_type": type(exc).__name__} if settings.DEBUG else {},
        )

    # =========================================================================
    # ROOT ENDPOINTS
    # =========================================================================

    @app.get("/", include_in_schema=False)
    async def root() -> dict:
        """Root endpoint with API information."""
        return {
            "name": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "description": settings.APP_DESCRIPTION,
            "docs_url": "/docs" if settings.DEBUG else None,
            "health_check": "/api/v1/health",
            "api_base": "/api/v1",
        }

    @app.get("/favicon.ico", include_in_schema=False)
    async def favicon():
        """Favicon endpoint to prevent 404 errors."""
        return Response(status_code=204)

    return app


# Create the FastAPI application
app = create_application()


def main():
    """
    Main function for running the application in development.

    Used when running the application directly with python -m app.main
    or through the plant-care-api script entry point.
    """
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD and settings.is_development,
        log_level=settings.LOG_LEVEL.lower(),
        workers=1 if settings.RELOAD else settings.WORKERS,
    )


if __name__ == "__main__":
    main()
