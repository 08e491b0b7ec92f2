"""
Library catalog API application.

Run with `python -m library_catalog.main` or point uvicorn at
`library_catalog.main:app`.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from library_catalog import __version__
from library_catalog.api.v1.catalog_endpoints import router as catalog_router
from library_catalog.api.v1.tool_endpoints import router as tool_router
from library_catalog.config import Settings, configure_logging
from library_catalog.domain.errors import CatalogError, ErrorKind
from library_catalog.domain.services import CatalogService
from library_catalog.infrastructure.db import SqliteCatalogStore
from library_catalog.seed import seed_sample_books
from library_catalog.tools import BookTools, ToolRegistry

logger = logging.getLogger(__name__)

_STATUS_BY_KIND = {
    ErrorKind.INVALID_ARGUMENT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.DUPLICATE_BOOK: status.HTTP_409_CONFLICT,
    ErrorKind.STORE_FAILURE: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the FastAPI application.

    The store, service and tool registry are created when the app starts
    and live on app.state until it shuts down.
    """
    settings = settings or Settings.from_env()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        store = SqliteCatalogStore(settings.db_path)
        service = CatalogService(store)
        app.state.catalog_service = service
        app.state.tool_registry = ToolRegistry(BookTools(service))
        logger.info(f"Catalog opened at {settings.db_path} ({service.total_count()} books)")

        if settings.seed_sample_data:
            seed_sample_books(service)

        yield

    app = FastAPI(
        title="Library Catalog API",
        description="Manage and search a catalog of books, directly or through tools.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    @app.exception_handler(CatalogError)
    async def catalog_error_handler(request: Request, exc: CatalogError) -> JSONResponse:
        return JSONResponse(
            status_code=_STATUS_BY_KIND.get(exc.kind, status.HTTP_500_INTERNAL_SERVER_ERROR),
            content={"kind": exc.kind.value, "detail": exc.message},
        )

    # Include API routers
    app.include_router(catalog_router, prefix="/api/v1", tags=["catalog"])
    app.include_router(tool_router, prefix="/api/v1", tags=["tools"])

    @app.get("/")
    def read_root():
        """Root endpoint."""
        return {
            "message": "Welcome to the Library Catalog API",
            "docs": "/docs",
            "health": "/api/v1/health",
        }

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn

    settings = Settings.from_env()
    configure_logging(settings.log_level)
    uvicorn.run(app, host=settings.host, port=settings.port)
