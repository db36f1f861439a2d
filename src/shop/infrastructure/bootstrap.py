"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.

Data directory resolution, first match wins:
  1. an explicit ``data_dir`` argument (the CLI's ``--data-dir``)
  2. the ``SHOP_DATA_DIR`` environment variable
  3. ``<project root>/data``
"""

from __future__ import annotations

import os
from pathlib import Path

from shop.infrastructure.persistence.json_store import JsonUnitOfWork

DATA_DIR_ENV = "SHOP_DATA_DIR"
STORE_FILE = "shop.json"

# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def resolve_data_dir(data_dir: Path | None = None) -> Path:
    if data_dir is not None:
        return data_dir
    env_value = os.environ.get(DATA_DIR_ENV)
    if env_value:
        return Path(env_value).expanduser()
    return _DEFAULT_DATA_DIR


def unit_of_work(data_dir: Path | None = None) -> JsonUnitOfWork:
    """Return a fresh unit of work; use one per handler call."""
    return JsonUnitOfWork(resolve_data_dir(data_dir) / STORE_FILE)
