"""
Endpoint dependencies for the catalog API.

The catalog service and tool registry are built once in the application
lifespan (see library_catalog.main) and kept on app.state; these functions
hand them to endpoints through FastAPI's Depends() system. Tests swap them
with app.dependency_overrides or by building an app around their own store.
"""

from fastapi import Request

from library_catalog.domain.services import CatalogService
from library_catalog.tools import ToolRegistry


def get_catalog_service(request: Request) -> CatalogService:
    """Provide the catalog service of the running app."""
    return request.app.state.catalog_service


def get_tool_registry(request: Request) -> ToolRegistry:
    """Provide the tool registry of the running app."""
    return request.app.state.tool_registry
