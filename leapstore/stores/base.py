"""
Abstract base class for document stores.
"""

from abc import ABC, abstractmethod

from leapstore.models import Document


class DocumentStore(ABC):
    """
    Interface shared by every document store.

    Each call is a single blocking operation; stores hold no per-call
    state and never cache documents.
    """

    @abstractmethod
    def create(self, doc_id: str, doc: Document) -> None:
        """
        Create a new document.

        Args:
            doc_id: Unique id for the new document
            doc: Document to persist

        Raises:
            ContentCodecError: If doc.content cannot be serialized
            StoreError: If the write fails, e.g. doc_id already exists
        """
        pass

    @abstractmethod
    def store(self, doc_id: str, doc: Document) -> None:
        """
        Overwrite an existing document.

        Storing to an id that does not exist succeeds without effect.

        Raises:
            ContentCodecError: If doc.content cannot be serialized
            StoreError: If the write fails
        """
        pass

    @abstractmethod
    def fetch(self, doc_id: str) -> Document:
        """
        Fetch a document by id.

        Raises:
            NotFoundError: If no document has this id
            QueryError: If the lookup itself fails
            ContentParseError: If the stored content cannot be parsed
        """
        pass
