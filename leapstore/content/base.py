"""
Abstract base class for content codecs.

A codec converts a document's in-memory content to the single string
stored in the content column and back. For every value a codec accepts,
parse(serialize(value)) must equal value.
"""

from abc import ABC, abstractmethod
from typing import Any


class ContentCodec(ABC):
    """
    Abstract base class for content codecs.

    Implementations must provide:
    - The document type tag they handle
    - Serialization of content to a string
    - Parsing of a stored string back to content
    """

    @property
    @abstractmethod
    def type_name(self) -> str:
        """Return the document type tag this codec handles."""
        pass

    @abstractmethod
    def serialize(self, content: Any) -> str:
        """
        Convert content to its stored string form.

        Args:
            content: In-memory content value

        Returns:
            String suitable for the content column

        Raises:
            EncodingError: If content has the wrong shape for this type
        """
        pass

    @abstractmethod
    def parse(self, raw: str) -> Any:
        """
        Convert a stored string back to content.

        Args:
            raw: Value read from the content column

        Returns:
            In-memory content value

        Raises:
            DecodingError: If raw is not well formed for this type
        """
        pass
