#!/usr/bin/env python3
"""
Create, store and fetch documents from the command line.

Usage:
    python scripts/docstore.py --type sqlite3 --dsn docs.sqlite create doc-1 --title T --content hello
    python scripts/docstore.py --type sqlite3 --dsn docs.sqlite store doc-1 --title T --content bye
    python scripts/docstore.py --type sqlite3 --dsn docs.sqlite fetch doc-1

Store type and DSN default to LEAPS_STORE_TYPE / LEAPS_DSN.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from leapstore.config import SQLConfig, get_settings
from leapstore.errors import DocumentStoreError
from leapstore.models import Document
from leapstore.stores import SQLStore, get_document_store

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def _add_document_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("id", type=str, help="Document ID")
    parser.add_argument("--title", type=str, default="", help="Document title")
    parser.add_argument("--description", type=str, default="", help="Document description")
    parser.add_argument("--doc-type", type=str, default="text", help="Content type (text, json)")
    parser.add_argument("--content", type=str, required=True, help="Content; JSON text for --doc-type json")


def _document_from_args(args: argparse.Namespace) -> Document:
    content = args.content
    if args.doc_type == "json":
        content = json.loads(content)
    return Document(
        id=args.id,
        title=args.title,
        description=args.description,
        type=args.doc_type,
        content=content,
    )


def main():
    parser = argparse.ArgumentParser(description="Document store operations")
    parser.add_argument("--type", type=str, help="Store type or SQL dialect (overrides LEAPS_STORE_TYPE)")
    parser.add_argument("--dsn", type=str, help="Database DSN (overrides LEAPS_DSN)")

    commands = parser.add_subparsers(dest="command", required=True)
    _add_document_args(commands.add_parser("create", help="Create a new document"))
    _add_document_args(commands.add_parser("store", help="Overwrite an existing document"))
    fetch = commands.add_parser("fetch", help="Print a document as JSON")
    fetch.add_argument("id", type=str, help="Document ID")

    args = parser.parse_args()

    config = get_settings().to_store_config()
    if args.dsn:
        sql_config = SQLConfig(dsn=args.dsn, table_config=config.sql_config.table_config)
        config = config.model_copy(update={"sql_config": sql_config})
    if args.type:
        config = config.model_copy(update={"type": args.type})

    try:
        store = get_document_store(config)
    except DocumentStoreError as e:
        logger.error(f"Could not open {config.type} store: {e}")
        sys.exit(1)

    try:
        if args.command == "create":
            store.create(args.id, _document_from_args(args))
            logger.info(f"Created {args.id}")
        elif args.command == "store":
            store.store(args.id, _document_from_args(args))
            logger.info(f"Stored {args.id}")
        else:
            doc = store.fetch(args.id)
            print(json.dumps(doc.to_dict(), indent=2, ensure_ascii=False))

    except (DocumentStoreError, json.JSONDecodeError) as e:
        logger.error(f"{args.command} failed: {e}")
        sys.exit(1)

    finally:
        if isinstance(store, SQLStore):
            store.close()


if __name__ == "__main__":
    main()
