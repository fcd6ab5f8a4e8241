"""
Tool Registry implementation for maintaining the in-memory catalog of tools.
"""

import logging
from typing import Dict, List, Optional
from uuid import UUID

from toolhub.tool_registry.models import Tool
from toolhub.utils.error_handling import RegistryError
from toolhub.utils.ids import uuid7
from toolhub.utils.locks import AsyncRWLock


logger = logging.getLogger(__name__)


# Tools every freshly started service knows about
DEFAULT_TOOLS = [
    {
        "title": "Notion",
        "link": "https://notion.so",
        "description": "All in one tool",
        "tags": ["text"],
    },
]


class ToolRegistry:
    """
    Maintains the catalog of tools, keyed by identifier.

    Reads share a reader/writer lock; create and remove hold it exclusively.
    Records handed out are copies, so callers cannot mutate the store.
    """

    def __init__(self):
        """Initialize an empty Tool Registry."""
        self._tools: Dict[UUID, Tool] = {}
        self._lock = AsyncRWLock()
        self._seeded = False
        self.logger = logging.getLogger(__name__)

    async def seed_default_tools(self) -> List[Tool]:
        """
        Insert the default catalog entries, once per registry.

        Returns:
            The seeded tools, or an empty list if the registry was already seeded
        """
        async with self._lock.write():
            if self._seeded:
                return []
            self._seeded = True
            seeded = [
                self._insert(Tool(id=uuid7(), **entry).model_copy(deep=True))
                for entry in DEFAULT_TOOLS
            ]

        self.logger.info(f"Seeded registry with {len(seeded)} tools")
        return [tool.model_copy(deep=True) for tool in seeded]

    def _insert(self, tool: Tool) -> Tool:
        # Caller holds the write side
        if tool.id in self._tools:
            raise RegistryError(
                message=f"Tool id {tool.id} already registered",
                component="tool_registry",
                details={"tool_id": str(tool.id)}
            )
        self._tools[tool.id] = tool
        return tool

    async def list(self, tag: Optional[str] = None) -> List[Tool]:
        """
        List tools, optionally restricted to those carrying a tag.

        Args:
            tag: Exact, case-sensitive tag to filter on

        Returns:
            Matching tools in insertion order
        """
        async with self._lock.read():
            return [
                tool.model_copy(deep=True)
                for tool in self._tools.values()
                if tag is None or tag in tool.tags
            ]

    async def get(self, tool_id: UUID) -> Optional[Tool]:
        """
        Get a tool by ID.

        Args:
            tool_id: ID of the tool

        Returns:
            The tool if found, None otherwise
        """
        async with self._lock.read():
            tool = self._tools.get(tool_id)
            return tool.model_copy(deep=True) if tool is not None else None

    async def count(self) -> int:
        """Number of tools currently registered."""
        async with self._lock.read():
            return len(self._tools)

    async def create(self, title: str, link: str, description: str, tags: List[str]) -> Tool:
        """
        Register a new tool under a freshly generated identifier.

        Args:
            title: Display name of the tool
            link: Where the tool lives
            description: Free-form description
            tags: Ordered tags used for filtering

        Returns:
            The stored tool

        Raises:
            RegistryError: If the generated identifier is already taken
        """
        tool = Tool(
            id=uuid7(),
            title=title,
            link=link,
            description=description,
            tags=list(tags)
        )

        async with self._lock.write():
            self._insert(tool)

        self.logger.info(f"Registered tool {tool.id} ({tool.title})")
        return tool.model_copy(deep=True)

    async def remove(self, tool_id: UUID) -> bool:
        """
        Remove a tool from the registry.

        Args:
            tool_id: ID of the tool to remove

        Returns:
            True if the tool was removed, False if it was not found
        """
        async with self._lock.write():
            removed = self._tools.pop(tool_id, None)

        if removed is None:
            self.logger.warning(f"Tool {tool_id} not found for removal")
            return False

        self.logger.info(f"Removed tool {tool_id}")
        return True
