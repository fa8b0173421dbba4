"""Shared CRUD plumbing for the API-backed record repositories."""

from __future__ import annotations

from typing import Any, ClassVar, Generic, Mapping, TypeVar

from sqlmodel import SQLModel

from ...errors import DataShapeError
from ...logging_config import get_logger
from ...services.validation import check_numbers, ensure_valid
from ..api_client import ApiClient, expect_list, expect_object

logger = get_logger(__name__)

RecordT = TypeVar("RecordT", bound=SQLModel)


class ApiRecordRepository(Generic[RecordT]):
    """CRUD for one record category against a remote JSON resource.

    Subclasses provide the resource path plus the three shape converters:
    ``normalize`` (local mapping -> record), ``from_wire`` (API object ->
    record) and ``to_wire`` (record -> API object).
    """

    resource: ClassVar[str]
    label: ClassVar[str]
    number_fields: ClassVar[Mapping[str, str]] = {}

    def __init__(self, client: ApiClient, *, default_van_no: str = "VAN001"):
        self.client = client
        self.default_van_no = default_van_no

    # Shape conversion -------------------------------------------------

    def normalize(self, data: Mapping[str, Any]) -> RecordT:  # pragma: no cover - interface
        raise NotImplementedError

    def from_wire(self, payload: Mapping[str, Any]) -> RecordT:  # pragma: no cover - interface
        raise NotImplementedError

    def to_wire(self, record: RecordT) -> dict[str, Any]:  # pragma: no cover - interface
        raise NotImplementedError

    def validate(self, record: RecordT) -> dict[str, str]:  # pragma: no cover - interface
        raise NotImplementedError

    def coerce(self, data: RecordT | Mapping[str, Any]) -> RecordT:
        if isinstance(data, SQLModel):
            return self.normalize(data.model_dump())
        return self.normalize(data)

    def prepare(self, data: RecordT | Mapping[str, Any]) -> RecordT:
        """Coerce ``data`` and raise ValidationError when anything is off."""

        record = self.coerce(data)
        errors = self.validate(record)
        if isinstance(data, Mapping):
            # A typo must not be saved as 0 or reported as "greater than 0".
            errors.update(check_numbers(data, self.number_fields))
        ensure_valid(errors)
        return record

    # CRUD -------------------------------------------------------------

    def list_all(self) -> list[RecordT]:
        """Fetch every record of this category."""

        payload = self.client.get(self.resource)
        items = expect_list(payload, self.label)
        records = [self.from_wire(expect_object(item, self.label)) for item in items]
        logger.info(f"Fetched {len(records)} {self.label}", extra={"resource": self.resource})
        return records

    def create(self, data: RecordT | Mapping[str, Any]) -> RecordT:
        """Validate locally, then create the record remotely."""

        record = self.prepare(data)
        payload = self.client.post(self.resource, self.to_wire(record))
        saved = self._saved(payload, record, record_id=None)
        logger.info(f"Created {self.label} record", extra={"id": saved.id})
        return saved

    def update(self, record_id: str, data: RecordT | Mapping[str, Any]) -> RecordT:
        """Validate locally, then replace the remote record ``record_id``."""

        record = self.prepare(data)
        payload = self.client.put(f"{self.resource}/{record_id}", self.to_wire(record))
        saved = self._saved(payload, record, record_id=str(record_id))
        logger.info(f"Updated {self.label} record", extra={"id": saved.id})
        return saved

    def delete(self, record_id: str) -> None:
        """Delete the remote record ``record_id``."""

        self.client.delete(f"{self.resource}/{record_id}")
        logger.info(f"Deleted {self.label} record", extra={"id": record_id})

    def _saved(self, payload: Any, record: RecordT, *, record_id: str | None) -> RecordT:
        # Some endpoints answer with an empty body; fall back to what was sent.
        if payload is None:
            return record.model_copy(update={"id": record_id or record.id})
        if isinstance(payload, Mapping):
            saved = self.from_wire(payload)
            if saved.id is None and record_id is not None:
                saved = saved.model_copy(update={"id": record_id})
            return saved
        raise DataShapeError(
            f"Invalid response format: expected a {self.label} object, got {type(payload).__name__}"
        )
