"""
Built-in content codecs and the registry that dispatches on document type.
"""

import json
import logging
from typing import Any

from leapstore.content.base import ContentCodec
from leapstore.errors import DecodingError, EncodingError, UnsupportedTypeError

logger = logging.getLogger(__name__)

_JSON_SCALARS = (str, int, float, bool, type(None))


def _check_json_value(value: Any, path: str) -> None:
    """
    Reject values json.dumps would accept but not give back unchanged,
    such as tuples or dicts with non-string keys.
    """
    if isinstance(value, _JSON_SCALARS):
        return
    if type(value) is list:
        for i, item in enumerate(value):
            _check_json_value(item, f"{path}[{i}]")
        return
    if type(value) is dict:
        for key, item in value.items():
            if not isinstance(key, str):
                raise EncodingError(
                    f"{path} has a {type(key).__name__} key {key!r}; JSON keys must be strings"
                )
            _check_json_value(item, f"{path}[{key!r}]")
        return
    raise EncodingError(f"{path} has unsupported JSON type {type(value).__name__}")


class TextCodec(ContentCodec):
    """Plain text bodies, stored verbatim."""

    @property
    def type_name(self) -> str:
        return "text"

    def serialize(self, content: Any) -> str:
        if not isinstance(content, str):
            raise EncodingError(
                f"text content must be a string, got {type(content).__name__}"
            )
        return content

    def parse(self, raw: str) -> str:
        if not isinstance(raw, str):
            raise DecodingError(
                f"stored text content must be a string, got {type(raw).__name__}"
            )
        return raw


class JSONCodec(ContentCodec):
    """
    Structured bodies stored as JSON.

    Accepts dicts with string keys, lists, strings, numbers, booleans and
    None. NaN and infinities are rejected since they would not compare
    equal after a round trip.
    """

    @property
    def type_name(self) -> str:
        return "json"

    def serialize(self, content: Any) -> str:
        _check_json_value(content, "content")
        try:
            return json.dumps(content, allow_nan=False, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise EncodingError(f"content is not JSON serializable: {e}") from e

    def parse(self, raw: str) -> Any:
        try:
            return json.loads(raw)
        except (TypeError, ValueError) as e:
            raise DecodingError(f"stored content is not valid JSON: {e}") from e


_codecs: dict[str, ContentCodec] = {}


def register_codec(codec: ContentCodec) -> None:
    """Register a codec under its type tag, replacing any previous one."""
    if codec.type_name in _codecs:
        logger.warning(f"Replacing content codec for type {codec.type_name!r}")
    _codecs[codec.type_name] = codec


def get_codec(doc_type: str) -> ContentCodec:
    """
    Look up the codec for a document type.

    Raises:
        UnsupportedTypeError: If no codec is registered for doc_type
    """
    try:
        return _codecs[doc_type]
    except (KeyError, TypeError):
        raise UnsupportedTypeError(doc_type) from None


def supported_types() -> list[str]:
    """Return the registered document type tags."""
    return sorted(_codecs)


def serialize_content(doc_type: str, content: Any) -> str:
    """Serialize content using the codec registered for doc_type."""
    return get_codec(doc_type).serialize(content)


def parse_content(doc_type: str, raw: str) -> Any:
    """Parse stored content using the codec registered for doc_type."""
    return get_codec(doc_type).parse(raw)


register_codec(TextCodec())
register_codec(JSONCodec())
