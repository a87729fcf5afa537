"""Account portal FastAPI application entry point."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded

from .api.limiter import limiter, rate_limit_exceeded_handler
from .api.v1 import api_router
from .config import settings
from .config.logging import configure_logging, get_logger
from .exceptions import GENERIC_SERVER_ERROR, BusinessRuleError, ServerFault
from .web import router as pages_router

# Configure logging on module import
configure_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup and shutdown events."""
    logger.info(
        "starting_application",
        app_name=settings.app_name,
        version=settings.app_version,
        environment=settings.environment,
    )

    yield

    logger.info("shutting_down_application")


async def business_rule_error_handler(request: Request, exc: BusinessRuleError) -> JSONResponse:
    """Report a rejected request as a 400 with its message."""
    content: dict = {"message": exc.message}
    if exc.errors:
        content["errors"] = exc.errors
    return JSONResponse(status_code=400, content=content)


async def server_fault_handler(request: Request, exc: ServerFault) -> JSONResponse:
    """Report a malformed request as a 500 without leaking the cause."""
    logger.warning("request_rejected_as_server_fault", path=request.url.path, error=str(exc))
    return JSONResponse(status_code=500, content={"message": GENERIC_SERVER_ERROR})


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last-resort handler: log everything, return only the generic message."""
    logger.exception("unhandled_exception", path=request.url.path)
    return JSONResponse(status_code=500, content={"message": GENERIC_SERVER_ERROR})


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Login, profile and password pages with mock account endpoints",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
        debug=settings.debug,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    # Add rate limiter to app state
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    app.add_exception_handler(BusinessRuleError, business_rule_error_handler)
    app.add_exception_handler(ServerFault, server_fault_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.include_router(api_router, prefix=settings.api_prefix)
    app.include_router(pages_router)

    @app.get("/health", tags=["Health"])
    async def health_check() -> JSONResponse:
        """Health check endpoint."""
        logger.debug("health_check_called")
        return JSONResponse(
            status_code=200,
            content={
                "status": "healthy",
                "app": settings.app_name,
                "version": settings.app_version,
                "environment": settings.environment,
            },
        )

    logger.info(
        "application_created",
        cors_origins=settings.cors_origins,
        api_prefix=settings.api_prefix,
    )

    return app


# Create the application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "account_portal.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )
