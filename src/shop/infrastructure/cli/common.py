"""Helpers shared by the CLI command modules."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

import click

from shop.domain.exceptions import DomainException
from shop.infrastructure import bootstrap
from shop.infrastructure.persistence.json_store import JsonUnitOfWork, StorageError


@contextmanager
def reported_errors() -> Iterator[None]:
    """Turn domain and storage failures into a one-line ClickException."""
    try:
        yield
    except DomainException as exc:
        raise click.ClickException(str(exc))
    except StorageError as exc:
        raise click.ClickException(f"Storage failure: {exc}")


def uow_from(data_dir: Path | None) -> JsonUnitOfWork:
    return bootstrap.unit_of_work(data_dir)
