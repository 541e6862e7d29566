"""
Document model: the unit of persistence.
"""

import uuid
from dataclasses import dataclass
from typing import Any


@dataclass
class Document:
    """
    A titled, typed document.

    `type` selects the content codec ("text" or "json"); `content` holds
    the decoded value whose shape depends on that type.
    """

    id: str  # Externally assigned, immutable once created
    title: str
    description: str
    type: str
    content: Any

    @classmethod
    def new(cls, title: str, description: str, type: str, content: Any) -> "Document":
        """Create a document with a freshly generated id."""
        return cls(
            id=uuid.uuid4().hex,
            title=title,
            description=description,
            type=type,
            content=content,
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON transport."""
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "type": self.type,
            "content": self.content,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Document":
        """Create from dictionary."""
        return cls(
            id=data.get("id", ""),
            title=data.get("title", ""),
            description=data.get("description", ""),
            type=data["type"],
            content=data.get("content"),
        )
