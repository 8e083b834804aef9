from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from chatbff.app import App
from chatbff.config import Config
from chatbff.errors import UserError
from chatbff.web.cors import CorsMiddleware
from chatbff.web.error_handlers import (
    general_exception_handler,
    http_exception_handler,
    request_validation_error_handler,
    user_error_handler,
)
from chatbff.web.openapi import SERVICE_NAME, set_custom_openapi
from chatbff.web.routers import (
    auth_router,
    content_router,
    conversations_router,
    fallback_router,
    filters_router,
    metadata_router,
    rag_router,
)


def create_fastapi_app(app_instance: App, config: Config) -> FastAPI:
    """Create and configure FastAPI application."""

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
        """FastAPI application lifespan management."""
        # Store app instance and config in app state
        app.state.app = app_instance
        app.state.config = config
        async with app_instance.lifespan():
            yield

    app = FastAPI(
        title=SERVICE_NAME,
        lifespan=lifespan,
    )

    app.add_middleware(CorsMiddleware, allow_origin=config.frontend_url)

    # Public routes
    app.include_router(metadata_router)
    app.include_router(auth_router)

    # Session-protected proxy routes
    app.include_router(rag_router)
    app.include_router(conversations_router)
    app.include_router(filters_router)
    app.include_router(content_router)
    app.include_router(fallback_router)

    # Register error handlers
    app.add_exception_handler(UserError, user_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    set_custom_openapi(app)

    return app
