"""
Configuration management using Pydantic Settings.

The store itself consumes a DocumentStoreConfig; Settings is a convenience
for building one from environment variables or a .env file.
"""

import re
from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


class TableConfig(BaseModel):
    """Table and column names of the SQL document table."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field("leaps_documents", alias="table")
    id_col: str = Field("ID", alias="id_column")
    title_col: str = Field("TITLE", alias="title_column")
    description_col: str = Field("DESCRIPTION", alias="description_column")
    type_col: str = Field("TYPE", alias="type_column")
    content_col: str = Field("CONTENT", alias="content_column")

    @field_validator("*")
    @classmethod
    def _check_identifier(cls, value: str) -> str:
        # Names are interpolated into statement text, never bound as parameters
        if not _IDENTIFIER.match(value):
            raise ValueError(f"not a plain SQL identifier: {value!r}")
        return value


class SQLConfig(BaseModel):
    """Connection string plus table layout for an SQL store."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    dsn: str = ""
    table_config: TableConfig = Field(default_factory=TableConfig, alias="db_table")


class DocumentStoreConfig(BaseModel):
    """
    Top level store configuration.

    `type` selects the store kind: "memory" for the in-process store,
    otherwise the SQL dialect name (e.g. "postgres", "sqlite3").
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    type: str = "memory"
    sql_config: SQLConfig = Field(default_factory=SQLConfig, alias="sql")


class Settings(BaseSettings):
    """Store settings loaded from LEAPS_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="LEAPS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    store_type: str = "memory"
    dsn: str = ""

    # Table layout
    table: str = "leaps_documents"
    id_column: str = "ID"
    title_column: str = "TITLE"
    description_column: str = "DESCRIPTION"
    type_column: str = "TYPE"
    content_column: str = "CONTENT"

    def to_store_config(self) -> DocumentStoreConfig:
        """Build the DocumentStoreConfig described by these settings."""
        table = TableConfig(
            name=self.table,
            id_col=self.id_column,
            title_col=self.title_column,
            description_col=self.description_column,
            type_col=self.type_column,
            content_col=self.content_column,
        )
        return DocumentStoreConfig(
            type=self.store_type,
            sql_config=SQLConfig(dsn=self.dsn, table_config=table),
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
