"""
Beacon container.

A beacon is the batch payload the browser agent sends to the collection
endpoint. It holds zero or more telemetry records in insertion order.
"""

from typing import Annotated, Any, Iterable, List, Mapping, Tuple

from pydantic import ConfigDict, Field, SerializeAsAny, field_validator

from eum.exceptions import InvalidRecordError
from eum.models.base import OmitIfEmpty, WireModel
from eum.models.records import DataRecord


class AbstractBeacon(WireModel):
    """
    Ordered collection of data records.

    ``data`` is omitted from serialized output while it is empty. The list
    returned by ``get_data`` is the live list held by the beacon, not a copy,
    and is not synchronized.
    """

    data: Annotated[List[SerializeAsAny[DataRecord]], OmitIfEmpty()] = Field(
        default_factory=list, description="The contents of this beacon"
    )

    model_config = ConfigDict(extra="ignore")

    @field_validator("data", mode="before")
    @classmethod
    def decode_records(cls, value: Any) -> Any:
        """
        Turn raw record objects into their registered record subclasses.

        Record errors raised here reach the caller wrapped in pydantic's
        ``ValidationError``. Use ``decode_beacon`` to get ``InvalidRecordError``
        and ``UnknownRecordTypeError`` unwrapped.
        """
        if value is None:
            return []
        if isinstance(value, (list, tuple)):
            return [
                DataRecord.from_payload(item) if isinstance(item, Mapping) else item
                for item in value
            ]
        return value

    def get_data(self) -> List[DataRecord]:
        """Return the live record list. Mutations on it are seen by the beacon."""
        return self.data

    def append(self, record: DataRecord) -> None:
        """Add a record at the end of the beacon."""
        if not isinstance(record, DataRecord):
            raise InvalidRecordError(
                f"Beacon records must be DataRecord instances, got {type(record).__name__}"
            )
        self.data.append(record)

    def add_all(self, records: Iterable[DataRecord]) -> None:
        """Add records in order. Nothing is added if any of them is invalid."""
        records = list(records)
        for record in records:
            if not isinstance(record, DataRecord):
                raise InvalidRecordError(
                    f"Beacon records must be DataRecord instances, got {type(record).__name__}"
                )
        self.data.extend(records)

    def snapshot(self) -> Tuple[DataRecord, ...]:
        """Immutable view of the records held right now."""
        return tuple(self.data)

    def is_empty(self) -> bool:
        """True when the beacon holds no records."""
        return not self.data

    def __len__(self) -> int:
        return len(self.data)
