"""JSON-file-backed unit of work.

The whole store is one JSON document (``shop.json``).  A transaction:

1. takes an exclusive ``flock`` on a sidecar lock file,
2. loads the document into memory,
3. lets the repositories mutate that working copy,
4. on commit, writes it to a temp file and ``os.replace``s it over the
   store, so readers see either the old document or the new one.

Because the lock is held for the whole block, transactions from other
threads or processes run strictly one after another.
"""

from __future__ import annotations

import fcntl
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import IO, Any

from shop.application.unit_of_work import UnitOfWork
from shop.infrastructure.persistence.json_cart_repository import JsonCartRepository
from shop.infrastructure.persistence.json_order_repository import JsonOrderRepository
from shop.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from shop.infrastructure.persistence.json_user_repository import JsonUserRepository

logger = logging.getLogger(__name__)

SCHEMA_VERSION = 1


class StorageError(Exception):
    """The backing store could not be read or written."""


def _empty_document() -> dict[str, Any]:
    return {
        "schema_version": SCHEMA_VERSION,
        "sequences": {},
        "users": [],
        "products": [],
        "carts": [],
        "orders": [],
    }


class JsonUnitOfWork(UnitOfWork):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._lock_path = file_path.with_name(f".{file_path.name}.lock")
        self._lock_file: IO[str] | None = None
        self._document: dict[str, Any] | None = None

    # --- UnitOfWork hooks -----------------------------------------------------

    def _begin(self) -> None:
        if self._lock_file is not None:
            raise RuntimeError("JsonUnitOfWork is not re-entrant")
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._lock_file = open(self._lock_path, "w", encoding="utf-8")
            fcntl.flock(self._lock_file.fileno(), fcntl.LOCK_EX)
        except OSError as exc:
            self._release_lock()
            raise StorageError(f"Cannot lock store {self._file_path}: {exc}") from exc

        try:
            self._document = self._load()
        except BaseException:
            self._release_lock()
            raise

        self.users = JsonUserRepository(self._document)
        self.products = JsonProductRepository(self._document)
        self.carts = JsonCartRepository(self._document)
        self.orders = JsonOrderRepository(self._document)

    def _commit(self) -> None:
        if self._document is None:
            raise RuntimeError("commit() called outside of a transaction")
        self._write_atomically(self._document)
        logger.debug("Committed store %s", self._file_path)

    def rollback(self) -> None:
        if self._document is not None:
            logger.debug("Rolled back transaction on %s", self._file_path)
        self._document = None

    def _end(self) -> None:
        self._document = None
        self._release_lock()

    # --- File helpers ---------------------------------------------------------

    def _load(self) -> dict[str, Any]:
        if not self._file_path.exists():
            return _empty_document()
        try:
            with open(self._file_path, "r", encoding="utf-8") as f:
                document = json.load(f)
        except (OSError, json.JSONDecodeError) as exc:
            raise StorageError(f"Cannot read store {self._file_path}: {exc}") from exc

        if not isinstance(document, dict):
            raise StorageError(
                f"Store {self._file_path} must hold a JSON object, "
                f"got {type(document).__name__}"
            )
        version = document.get("schema_version")
        if version != SCHEMA_VERSION:
            raise StorageError(
                f"Unsupported schema version {version} in {self._file_path} "
                f"(expected {SCHEMA_VERSION})"
            )
        return document

    def _write_atomically(self, document: dict[str, Any]) -> None:
        fd, temp_path = tempfile.mkstemp(
            dir=self._file_path.parent, prefix=".shop_", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(document, f, indent=2)
                f.write("\n")
                f.flush()
                os.fsync(f.fileno())
            os.replace(temp_path, self._file_path)
        except OSError as exc:
            try:
                os.unlink(temp_path)
            except OSError:
                pass
            raise StorageError(f"Cannot write store {self._file_path}: {exc}") from exc

    def _release_lock(self) -> None:
        if self._lock_file is None:
            return
        try:
            fcntl.flock(self._lock_file.fileno(), fcntl.LOCK_UN)
        finally:
            self._lock_file.close()
            self._lock_file = None
