"""Errors returned by the demo store."""

from __future__ import annotations


class RecordNotFoundError(Exception):
    """Returned when no record has the requested ID."""

    def __init__(self, kind: str, record_id: int) -> None:
        """Initialize with the record kind and ID."""
        self.kind = kind
        self.record_id = record_id
        super().__init__(f"No {kind} with ID {record_id}")
