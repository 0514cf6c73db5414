"""
Telemetry records carried inside a beacon.

``DataRecord`` is an open base type. Each concrete subclass declares its wire
discriminator as a ``Literal`` default on the ``type`` field and is registered
when the class is created, so incoming payloads can be turned back into the
right subclass with ``DataRecord.from_payload``.
"""

from typing import Any, ClassVar, Dict, List, Literal, Mapping, Optional, Type

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from eum.exceptions import InvalidRecordError, UnknownRecordTypeError


_RECORD_TYPES: Dict[str, Type["DataRecord"]] = {}


class DataRecord(BaseModel):
    """
    Base of all telemetry records.

    Field names are written in camelCase on the wire (``timeStamp``), which is
    the format produced by the browser agent. Unknown wire fields are ignored.
    """

    type: str = Field(..., description="Record type discriminator")
    id: Optional[str] = Field(None, description="Record identifier assigned by the agent")
    time_stamp: Optional[int] = Field(
        None, ge=0, description="Creation time in epoch milliseconds"
    )

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    record_type: ClassVar[Optional[str]] = None

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)

        default = cls.model_fields["type"].default
        if not isinstance(default, str):
            # Intermediate base without its own discriminator
            return

        registered = _RECORD_TYPES.get(default)
        # Re-running the same class statement (module reload) replaces the entry
        if registered is not None and (registered.__module__, registered.__qualname__) != (
            cls.__module__,
            cls.__qualname__,
        ):
            raise TypeError(
                f"Record type {default!r} already registered by "
                f"{registered.__module__}.{registered.__qualname__}"
            )
        _RECORD_TYPES[default] = cls
        cls.record_type = default

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "DataRecord":
        """
        Build a record of the registered subclass named by ``payload["type"]``.

        Args:
            payload: Decoded JSON object of a single record

        Returns:
            Instance of the concrete record subclass

        Raises:
            InvalidRecordError: If the payload is not an object, has no type,
                or fails field validation
            UnknownRecordTypeError: If the type is not registered
        """
        if not isinstance(payload, Mapping):
            raise InvalidRecordError(
                f"Record payload must be an object, got {type(payload).__name__}"
            )

        record_type = payload.get("type")
        if record_type is None:
            raise InvalidRecordError("Record payload has no 'type' field")

        record_cls = record_class_for(record_type)
        if not issubclass(record_cls, cls):
            raise InvalidRecordError(
                f"Record type {record_type!r} is not a {cls.__name__}"
            )

        try:
            return record_cls.model_validate(payload)
        except ValidationError as e:
            raise InvalidRecordError(
                f"Invalid {record_type!r} record: {e.error_count()} validation error(s)"
            ) from e


def record_class_for(record_type: str) -> Type[DataRecord]:
    """Look up the record subclass registered for a wire discriminator."""
    try:
        return _RECORD_TYPES[record_type]
    except (KeyError, TypeError):
        raise UnknownRecordTypeError(record_type) from None


def registered_record_types() -> List[str]:
    """Return all registered record discriminators, sorted."""
    return sorted(_RECORD_TYPES)


class DomListenerExecution(DataRecord):
    """Execution of an instrumented DOM event listener."""

    type: Literal["domListenerExecution"] = "domListenerExecution"
    function_name: Optional[str] = Field(None, description="Name of the listener function")
    event_type: Optional[str] = Field(None, description="DOM event type, e.g. click")
    element_type: Optional[str] = Field(None, description="Node name of the event target")
    element_id: Optional[str] = Field(
        None, alias="elementID", description="id attribute of the event target"
    )
    duration: Optional[float] = Field(
        None, ge=0, description="Listener execution time in milliseconds"
    )
