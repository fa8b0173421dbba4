"""Record repository protocol."""

from __future__ import annotations

from typing import Any, Mapping, Protocol, TypeVar

RecordT = TypeVar("RecordT")


class RecordRepository(Protocol[RecordT]):
    """CRUD contract every record category implements."""

    def list_all(self) -> list[RecordT]:
        """Fetch all records. Raises NetworkError / DataShapeError."""
        ...

    def create(self, data: RecordT | Mapping[str, Any]) -> RecordT:
        """Create a record. Raises ValidationError / NetworkError."""
        ...

    def update(self, record_id: str, data: RecordT | Mapping[str, Any]) -> RecordT:
        """Replace a record. Raises ValidationError / NotFoundError / NetworkError."""
        ...

    def delete(self, record_id: str) -> None:
        """Delete a record. Raises NotFoundError / NetworkError."""
        ...
