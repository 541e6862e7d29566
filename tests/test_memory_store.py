import threading

import pytest

from leapstore.config import DocumentStoreConfig, SQLConfig
from leapstore.errors import ConfigError, NotFoundError, StoreError, UnsupportedTypeError
from leapstore.models import Document
from leapstore.stores import MemoryStore, SQLStore, get_document_store


def make_doc(content="hello", type="text"):
    return Document(id="", title="T", description="D", type=type, content=content)


@pytest.fixture
def store():
    return MemoryStore()


def test_create_then_fetch(store):
    store.create("doc-1", make_doc())

    assert store.fetch("doc-1") == Document(
        id="doc-1", title="T", description="D", type="text", content="hello"
    )


def test_fetch_returns_fresh_documents(store):
    store.create("doc-1", make_doc(type="json", content={"items": [1]}))

    first = store.fetch("doc-1")
    first.content["items"].append(2)

    assert store.fetch("doc-1").content == {"items": [1]}


def test_fetch_missing(store):
    with pytest.raises(NotFoundError):
        store.fetch("doc-1")


def test_duplicate_create(store):
    store.create("doc-1", make_doc())
    with pytest.raises(StoreError):
        store.create("doc-1", make_doc("other"))


def test_store_overwrites(store):
    store.create("doc-1", make_doc())
    store.store("doc-1", make_doc("a"))
    store.store("doc-1", make_doc("b"))

    assert store.fetch("doc-1").content == "b"


def test_store_missing_is_noop(store):
    store.store("ghost", make_doc())

    assert len(store) == 0


def test_unknown_type(store):
    with pytest.raises(UnsupportedTypeError):
        store.create("doc-1", make_doc(type="markdown"))
    assert len(store) == 0


def test_concurrent_creates(store):
    def worker(start):
        for i in range(start, start + 50):
            store.create(f"doc-{i}", make_doc(str(i)))

    threads = [threading.Thread(target=worker, args=(n * 50,)) for n in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(store) == 200
    assert store.fetch("doc-123").content == "123"


class TestGetDocumentStore:
    def test_memory(self):
        assert isinstance(get_document_store(DocumentStoreConfig()), MemoryStore)

    def test_sql(self, sqlite_config):
        store = get_document_store(sqlite_config)
        try:
            assert isinstance(store, SQLStore)
            assert store.dialect.name == "sqlite3"
        finally:
            store.close()

    def test_sql_without_dsn(self):
        config = DocumentStoreConfig(type="postgres", sql_config=SQLConfig())
        with pytest.raises(ConfigError):
            get_document_store(config)
