"""
Admin HTTP surface of the workspace cleaner.

Serves the billing integration (suspend / restore), an on-demand cleanup
trigger and a health probe. The scheduled cleanup itself runs from
``cleanup.py`` and does not need this app.
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from .error import ClientError, ServerError
import logging

logger = logging.getLogger(__name__)


async def handle_client_error(request: Request, exc: ClientError):
    error_dict = {"code": exc.base_error.code, "message": exc.base_error.message}
    logger.warning(f"{request.method} {request.url.path} rejected: {error_dict}")
    return JSONResponse(status_code=exc.status_code, content={"error": error_dict})


async def handle_server_error(request: Request, exc: ServerError):
    error_dict = {"code": exc.base_error.code, "message": "Internal server error"}
    logger.error(
        f"{request.method} {request.url.path} failed: "
        f"{exc.base_error.code} {exc.base_error.message}"
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": error_dict}
    )


def create_app(config) -> FastAPI:
    """Build the workspace cleaner admin app from an ApplicationConfig-like object"""
    app = FastAPI(
        title="Workspace Cleaner API",
        description="Suspension, restoration and cleanup of billing-inactive workspaces",
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=config.CORS_ALLOW_CREDENTIALS,
        allow_methods=["POST", "GET"],
        allow_headers=["X-Admin-API-Key", "Content-Type"],
    )

    from src.api.routes import admin, health_check

    app.include_router(health_check.router, tags=["Health"])
    app.include_router(admin.router)

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)

    return app
