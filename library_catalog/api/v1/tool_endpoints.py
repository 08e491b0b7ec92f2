"""
API endpoints for the tool surface.

Tools always answer with text; failures come back as "Error: ..." results
with status 200, the same way a tool-calling client would see them.
"""

import json
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, status

from library_catalog.api.v1 import schemas as api
from library_catalog.api.v1.dependencies import get_tool_registry
from library_catalog.tools import ToolRegistry

router = APIRouter()


@router.get("/tools", response_model=List[api.ToolDescriptor])
def list_tools(
    registry: ToolRegistry = Depends(get_tool_registry),
) -> List[api.ToolDescriptor]:
    """List the available tools and their argument schemas."""
    return [api.ToolDescriptor(**descriptor) for descriptor in registry.describe()]


@router.post("/tools/{tool_name}", response_model=api.ToolResult)
def invoke_tool(
    tool_name: str,
    arguments: Optional[Dict[str, Any]] = Body(default=None),
    registry: ToolRegistry = Depends(get_tool_registry),
) -> api.ToolResult:
    """
    Invoke a tool with a JSON object of arguments.

    Raises:
        404: Unknown tool name
    """
    if tool_name not in registry.names():
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown tool '{tool_name}'",
        )

    result = registry.invoke(tool_name, json.dumps(arguments or {}))
    return api.ToolResult(tool=tool_name, result=result)
