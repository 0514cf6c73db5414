"""
JSON codec for beacons.

Encodes beacons into the wire format sent by the browser agent and decodes
incoming payloads back into typed records.
"""

import json
from typing import Any, Dict, List, Optional, Type, TypeVar, Union

from pydantic import ValidationError

from eum.config import BeaconSettings, get_settings
from eum.exceptions import BeaconDecodeError, UnknownRecordTypeError
from eum.logging import LoggerMixin, log_context
from eum.models import AbstractBeacon, DataRecord


BeaconT = TypeVar("BeaconT", bound=AbstractBeacon)


class BeaconCodec(LoggerMixin):
    """Converts beacons to and from JSON."""

    def __init__(self, settings: Optional[BeaconSettings] = None):
        self.settings = settings or get_settings()

    def to_dict(self, beacon: AbstractBeacon) -> Dict[str, Any]:
        """Serialize a beacon into JSON-compatible Python objects."""
        return beacon.model_dump(mode="json", by_alias=True)

    def encode(self, beacon: AbstractBeacon) -> str:
        """
        Serialize a beacon into JSON text.

        Args:
            beacon: Beacon to encode

        Returns:
            JSON document; ``data`` is absent when the beacon holds no records
        """
        text = beacon.model_dump_json(by_alias=True, indent=self.settings.json_indent)
        self.logger.debug(
            "beacon_encoded",
            beacon_type=type(beacon).__name__,
            record_count=len(beacon),
            size_bytes=len(text),
        )
        return text

    def decode(
        self,
        payload: Union[str, bytes, bytearray],
        beacon_cls: Type[BeaconT] = AbstractBeacon,
    ) -> BeaconT:
        """
        Parse a beacon payload.

        Args:
            payload: JSON text as received from the agent
            beacon_cls: Beacon class to build

        Returns:
            Beacon holding the decoded records in payload order

        Raises:
            BeaconDecodeError: If the payload is too large, is not a JSON
                object, or its ``data`` field is not an array
            InvalidRecordError: If a record is malformed
            UnknownRecordTypeError: If a record type is not registered and
                unknown records are not skipped
        """
        if isinstance(payload, str):
            size = len(payload.encode("utf-8"))
        elif isinstance(payload, (bytes, bytearray)):
            size = len(payload)
        else:
            raise TypeError(
                f"Beacon payload must be str or bytes, got {type(payload).__name__}"
            )

        if size > self.settings.max_payload_bytes:
            raise BeaconDecodeError(
                f"Beacon payload of {size} bytes exceeds limit of "
                f"{self.settings.max_payload_bytes} bytes"
            )

        with log_context(beacon_type=beacon_cls.__name__, size_bytes=size):
            beacon = self._parse(payload, beacon_cls)
            self.logger.debug("beacon_decoded", record_count=len(beacon))
        return beacon

    def _parse(self, payload: Union[str, bytes, bytearray], beacon_cls: Type[BeaconT]) -> BeaconT:
        try:
            document = json.loads(payload)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise BeaconDecodeError(f"Beacon payload is not valid JSON: {e}") from e

        if not isinstance(document, dict):
            raise BeaconDecodeError(
                f"Beacon payload must be a JSON object, got {type(document).__name__}"
            )

        records = self._decode_records(document.get("data"))

        try:
            return beacon_cls.model_validate({**document, "data": records})
        except ValidationError as e:
            raise BeaconDecodeError(
                f"Invalid {beacon_cls.__name__} payload: {e.error_count()} validation error(s)"
            ) from e

    def _decode_records(self, raw_records: Any) -> List[DataRecord]:
        if raw_records is None:
            return []
        if not isinstance(raw_records, list):
            raise BeaconDecodeError(
                f"Beacon 'data' must be an array, got {type(raw_records).__name__}"
            )

        records: List[DataRecord] = []
        for index, raw in enumerate(raw_records):
            try:
                records.append(DataRecord.from_payload(raw))
            except UnknownRecordTypeError as e:
                if not self.settings.skip_unknown_records:
                    raise
                self.logger.warning(
                    "unknown_record_skipped",
                    record_type=e.record_type,
                    index=index,
                )
        return records


def beacon_to_dict(beacon: AbstractBeacon) -> Dict[str, Any]:
    """Serialize a beacon into JSON-compatible Python objects."""
    return BeaconCodec().to_dict(beacon)


def encode_beacon(beacon: AbstractBeacon, settings: Optional[BeaconSettings] = None) -> str:
    """Serialize a beacon into JSON text."""
    return BeaconCodec(settings).encode(beacon)


def decode_beacon(
    payload: Union[str, bytes, bytearray],
    beacon_cls: Type[BeaconT] = AbstractBeacon,
    settings: Optional[BeaconSettings] = None,
) -> BeaconT:
    """Parse a beacon payload into ``beacon_cls``."""
    return BeaconCodec(settings).decode(payload, beacon_cls)
