"""
Tool Registry component.

Keep the catalog of tools in memory for the lifetime of the process.
"""

from toolhub.tool_registry.registry import ToolRegistry, DEFAULT_TOOLS
from toolhub.tool_registry.models import Tool, ToolCreate

__all__ = ["ToolRegistry", "Tool", "ToolCreate", "DEFAULT_TOOLS"]
