"""Shared plumbing for repositories backed by one section of the JSON document."""

from __future__ import annotations

from typing import Any


class JsonCollection:
    """A named list of raw records inside the store document.

    The document is the working copy owned by the current unit of work;
    repositories mutate it in place and the unit of work writes it out
    on commit.
    """

    section: str

    def __init__(self, document: dict[str, Any]) -> None:
        self._document = document

    @property
    def _rows(self) -> list[dict[str, Any]]:
        return self._document.setdefault(self.section, [])

    def _next_id(self, sequence: str) -> int:
        sequences = self._document.setdefault("sequences", {})
        sequences[sequence] = sequences.get(sequence, 0) + 1
        return sequences[sequence]

    def _find_row(self, field: str, value: Any) -> dict[str, Any] | None:
        for row in self._rows:
            if row.get(field) == value:
                return row
        return None

    def _upsert(self, field: str, raw: dict[str, Any]) -> None:
        rows = self._rows
        for i, row in enumerate(rows):
            if row.get(field) == raw[field]:
                rows[i] = raw
                return
        rows.append(raw)
