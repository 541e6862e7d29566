"""
SQL-backed document store.

Stores documents as rows of a single table whose name and columns come
from TableConfig. The insert and update statements are prepared once in
open(), so schema or permission problems surface at startup; the select
is rebuilt per fetch.
"""

import logging
from typing import Any, Mapping, Optional

from leapstore.config import DocumentStoreConfig
from leapstore.content import parse_content, serialize_content
from leapstore.errors import (
    ConfigError,
    ContentCodecError,
    ContentParseError,
    NotFoundError,
    QueryError,
    StatementPrepareError,
    StoreConnectionError,
    StoreError,
)
from leapstore.models import Document
from leapstore.stores.base import DocumentStore
from leapstore.stores.dialects import (
    DEFAULT_DRIVERS,
    Dialect,
    Driver,
    PreparedStatement,
    build_insert,
    build_select,
    build_update,
    get_dialect,
)

logger = logging.getLogger(__name__)

# Both write statements bind the five document columns
WRITE_PARAMS = 5


class SQLStore(DocumentStore):
    """
    Document store for an SQL database.

    Construct with SQLStore.open(config); a store returned from open() is
    fully prepared and its fields are never modified afterwards.
    """

    def __init__(
        self,
        config: DocumentStoreConfig,
        dialect: Dialect,
        driver: Driver,
        connection: Any,
        create_stmt: PreparedStatement,
        update_stmt: PreparedStatement,
    ):
        self.config = config
        self.dialect = dialect
        self.driver = driver
        self.connection = connection
        self._create_stmt = create_stmt
        self._update_stmt = update_stmt

    @classmethod
    def open(
        cls,
        config: DocumentStoreConfig,
        drivers: Optional[Mapping[str, Driver]] = None,
    ) -> "SQLStore":
        """
        Connect to the database and prepare the write statements.

        Args:
            config: Store configuration; config.type names the dialect
            drivers: Drivers by dialect name, overriding the defaults

        Raises:
            ConfigError: If the DSN is empty
            StoreConnectionError: If no driver is registered or the connection fails
            StatementPrepareError: If either statement fails to prepare
        """
        dsn = config.sql_config.dsn
        if not dsn:
            raise ConfigError(
                f"attempted to connect to {config.type} database without a valid DSN"
            )

        dialect = get_dialect(config.type)
        registry = {**DEFAULT_DRIVERS, **(drivers or {})}
        driver = registry.get(config.type)
        if driver is None:
            raise StoreConnectionError(f"no driver registered for dialect {config.type!r}")

        try:
            connection = driver.connect(dsn)
        except driver.error as e:
            raise StoreConnectionError(
                f"failed to connect to {config.type} database: {e}"
            ) from e

        table = config.sql_config.table_config
        statements = {}
        try:
            for name, text in (
                ("create", build_insert(table, dialect)),
                ("update", build_update(table, dialect)),
            ):
                try:
                    statements[name] = dialect.prepare(
                        connection, f"leaps_{name}", text, WRITE_PARAMS
                    )
                except driver.error as e:
                    raise StatementPrepareError(
                        f"failed to prepare {name} statement: {e}"
                    ) from e
        except BaseException:
            # No partially opened store may outlive a failed open()
            connection.close()
            raise

        logger.info(f"Opened {dialect.name} document store on table {table.name}")
        return cls(
            config=config,
            dialect=dialect,
            driver=driver,
            connection=connection,
            create_stmt=statements["create"],
            update_stmt=statements["update"],
        )

    def create(self, doc_id: str, doc: Document) -> None:
        content = serialize_content(doc.type, doc.content)

        try:
            self._create_stmt.execute(
                (doc_id, doc.title, doc.description, doc.type, content)
            )
        except self.driver.error as e:
            raise StoreError(f"failed to create document {doc_id!r}: {e}") from e

        logger.debug(f"Created document {doc_id}")

    def store(self, doc_id: str, doc: Document) -> None:
        content = serialize_content(doc.type, doc.content)

        try:
            count = self._update_stmt.execute(
                (doc.title, doc.description, doc.type, content, doc_id)
            )
        except self.driver.error as e:
            raise StoreError(f"failed to store document {doc_id!r}: {e}") from e

        if count == 0:
            logger.warning(f"Store of document {doc_id} matched no rows")
        else:
            logger.debug(f"Stored document {doc_id}")

    def fetch(self, doc_id: str) -> Document:
        select = build_select(
            self.config.sql_config.table_config, self.dialect.query_marker
        )
        try:
            cursor = self.connection.cursor()
            try:
                cursor.execute(select, (doc_id,))
                row = cursor.fetchone()
            finally:
                cursor.close()
        except self.driver.error as e:
            raise QueryError(f"failed to fetch document {doc_id!r}: {e}") from e

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

    def close(self) -> None:
        """Close the underlying connection."""
        self.connection.close()
