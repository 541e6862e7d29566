"""
leapstore: document persistence backed by a relational database.
"""

from leapstore.config import DocumentStoreConfig, SQLConfig, TableConfig
from leapstore.models import Document
from leapstore.stores import DocumentStore, MemoryStore, SQLStore, get_document_store

__all__ = [
    # Config
    "DocumentStoreConfig",
    "SQLConfig",
    "TableConfig",
    # Models
    "Document",
    # Stores
    "DocumentStore",
    "MemoryStore",
    "SQLStore",
    "get_document_store",
]
