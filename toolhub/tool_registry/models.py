"""
Data models for the Tool Registry component.
"""

from typing import List
from uuid import UUID

from pydantic import BaseModel, Field

from toolhub.utils.ids import uuid7


class Tool(BaseModel):
    """Represents a tool stored in the registry."""
    id: UUID = Field(default_factory=uuid7)
    title: str
    link: str
    description: str
    tags: List[str]


class ToolCreate(BaseModel):
    """Request body for adding a tool to the registry."""
    title: str
    link: str
    description: str
    tags: List[str]
