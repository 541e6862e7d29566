"""
Content codec package.

Converts typed document content to the string stored in the content
column and back, dispatching on the document's type tag.
"""

from leapstore.content.base import ContentCodec
from leapstore.content.codecs import (
    JSONCodec,
    TextCodec,
    get_codec,
    parse_content,
    register_codec,
    serialize_content,
    supported_types,
)

__all__ = [
    # Base
    "ContentCodec",
    # Codecs
    "TextCodec",
    "JSONCodec",
    # Registry
    "get_codec",
    "register_codec",
    "supported_types",
    "serialize_content",
    "parse_content",
]
