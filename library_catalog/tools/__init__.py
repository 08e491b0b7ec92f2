"""
Tool surface of the library catalog.

This package contains:
- BookTools: one typed method per library tool, returning text
- ToolRegistry: invoke a tool by name with a JSON argument string
"""

from .book_tools import BookTools
from .registry import ToolRegistry, ToolSpec

__all__ = ["BookTools", "ToolRegistry", "ToolSpec"]
