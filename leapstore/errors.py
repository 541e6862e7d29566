"""
Exception types raised by document stores and content codecs.

Callers branch on the class: a miss (NotFoundError), a backend failure
(StoreError, QueryError, StoreConnectionError) and bad input data
(ContentCodecError subclasses, ContentParseError) are distinct.
"""


class DocumentStoreError(Exception):
    """Base class for every error raised by leapstore."""


class ConfigError(DocumentStoreError):
    """The store configuration is unusable (e.g. empty DSN)."""


class StoreConnectionError(DocumentStoreError):
    """The database could not be reached or no driver is registered."""


class StatementPrepareError(DocumentStoreError):
    """A write statement failed to prepare against the database."""


# Content codec errors


class ContentCodecError(DocumentStoreError):
    """Base class for content serialization failures."""


class UnsupportedTypeError(ContentCodecError):
    """No codec is registered for the document type."""

    def __init__(self, doc_type: str):
        super().__init__(f"unsupported document type: {doc_type!r}")
        self.doc_type = doc_type


class EncodingError(ContentCodecError):
    """Content does not have the shape its type expects."""


class DecodingError(ContentCodecError):
    """A stored content string is not well formed for its type."""


# Per-operation errors


class NotFoundError(DocumentStoreError):
    """No document exists with the requested id."""

    def __init__(self, doc_id: str):
        super().__init__(f"document ID was not found in table: {doc_id!r}")
        self.doc_id = doc_id


class StoreError(DocumentStoreError):
    """A create or store statement failed to execute."""


class QueryError(DocumentStoreError):
    """A fetch query failed for a reason other than a missing row."""


class ContentParseError(DocumentStoreError):
    """A fetched row's content could not be parsed by its codec."""
