"""
In-process document store.

Keeps serialized rows in a dict so content still passes through the
codec, giving the same behavior as SQLStore without a database.
"""

import logging
import threading

from leapstore.content import parse_content, serialize_content
from leapstore.errors import ContentCodecError, ContentParseError, NotFoundError, StoreError
from leapstore.models import Document
from leapstore.stores.base import DocumentStore

logger = logging.getLogger(__name__)


class MemoryStore(DocumentStore):
    """Document store held in memory for the life of the process."""

    def __init__(self):
        self._rows: dict[str, tuple[str, str, str, str]] = {}
        self._lock = threading.Lock()

    def create(self, doc_id: str, doc: Document) -> None:
        content = serialize_content(doc.type, doc.content)
        with self._lock:
            if doc_id in self._rows:
                raise StoreError(f"document {doc_id!r} already exists")
            self._rows[doc_id] = (doc.title, doc.description, doc.type, content)

    def store(self, doc_id: str, doc: Document) -> None:
        content = serialize_content(doc.type, doc.content)
        with self._lock:
            if doc_id not in self._rows:
                logger.warning(f"Store of document {doc_id} matched no rows")
                return
            self._rows[doc_id] = (doc.title, doc.description, doc.type, content)

    def fetch(self, doc_id: str) -> Document:
        with self._lock:
            row = self._rows.get(doc_id)
        if row is None:
            raise NotFoundError(doc_id)

        title, description, doc_type, raw = row
        try:
            content = parse_content(doc_type, raw)
        except ContentCodecError as e:
            raise ContentParseError(f"failed to parse row content: {e}") from e

        return Document(
            id=doc_id,
            title=title,
            description=description,
            type=doc_type,
            content=content,
        )

    def __len__(self) -> int:
        return len(self._rows)
