import sqlite3

import pytest

from leapstore.config import DocumentStoreConfig, SQLConfig, TableConfig
from leapstore.stores import SQLStore
from leapstore.stores.dialects import Driver


def create_table(dsn: str, table: TableConfig = TableConfig()) -> None:
    conn = sqlite3.connect(dsn)
    try:
        conn.execute(
            f"""
            CREATE TABLE {table.name} (
                {table.id_col} TEXT PRIMARY KEY,
                {table.title_col} TEXT NOT NULL,
                {table.description_col} TEXT NOT NULL,
                {table.type_col} TEXT NOT NULL,
                {table.content_col} TEXT NOT NULL
            )
            """
        )
        conn.commit()
    finally:
        conn.close()


def count_rows(dsn: str, table: str = "leaps_documents") -> int:
    conn = sqlite3.connect(dsn)
    try:
        return conn.execute(f"SELECT COUNT(*) FROM {table}").fetchone()[0]
    finally:
        conn.close()


@pytest.fixture
def sqlite_dsn(tmp_path):
    dsn = str(tmp_path / "docs.sqlite")
    create_table(dsn)
    return dsn


@pytest.fixture
def sqlite_config(sqlite_dsn):
    return DocumentStoreConfig(type="sqlite3", sql_config=SQLConfig(dsn=sqlite_dsn))


@pytest.fixture
def sqlite_store(sqlite_config):
    store = SQLStore.open(sqlite_config)
    yield store
    store.close()


class FakeDBError(Exception):
    pass


class FakeCursor:
    def __init__(self, connection):
        self.connection = connection
        self.rowcount = -1

    def execute(self, sql, params=None):
        self.connection.executed.append((sql, params))
        for prefix in self.connection.fail_on:
            if sql.startswith(prefix):
                raise self.connection.fail_with(f"rejected: {sql}")
        self.rowcount = self.connection.rowcount

    def fetchone(self):
        return self.connection.next_row

    def fetchall(self):
        return []

    def close(self):
        pass


class FakeConnection:
    """Records every statement executed through its cursors."""

    def __init__(self):
        self.executed = []
        self.fail_on = []
        self.fail_with = FakeDBError
        self.rowcount = 1
        self.next_row = None
        self.closed = False

    def cursor(self):
        return FakeCursor(self)

    def close(self):
        self.closed = True


@pytest.fixture
def fake_connection():
    return FakeConnection()


@pytest.fixture
def fake_drivers(fake_connection):
    def connect(dsn):
        fake_connection.dsn = dsn
        return fake_connection

    driver = Driver(connect=connect, error=FakeDBError)
    return {"postgres": driver, "mysql": driver, "firebird": driver}
