"""
Document store implementations.

get_document_store() picks one from DocumentStoreConfig.type: "memory"
for the in-process store, any other value is treated as an SQL dialect.
"""

from typing import Mapping, Optional

from leapstore.config import DocumentStoreConfig
from leapstore.stores.base import DocumentStore
from leapstore.stores.dialects import Dialect, Driver, get_dialect, register_dialect
from leapstore.stores.memory_store import MemoryStore
from leapstore.stores.sql_store import SQLStore


def get_document_store(
    config: DocumentStoreConfig,
    drivers: Optional[Mapping[str, Driver]] = None,
) -> DocumentStore:
    """Build the document store described by config."""
    if config.type == "memory":
        return MemoryStore()
    return SQLStore.open(config, drivers=drivers)


__all__ = [
    # Base
    "DocumentStore",
    # Stores
    "MemoryStore",
    "SQLStore",
    "get_document_store",
    # Dialects
    "Dialect",
    "Driver",
    "get_dialect",
    "register_dialect",
]
