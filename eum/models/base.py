"""Serialization base for wire models.

Fields annotated with ``OmitIfEmpty`` are dropped from serialized output when
their value is ``None`` or has zero length, instead of being written as
``null`` or ``[]``. The rule lives on the serializer, so model types stay free
of output logic.
"""

from typing import Any, Dict, List

from pydantic import (
    BaseModel,
    SerializationInfo,
    SerializerFunctionWrapHandler,
    model_serializer,
)


class OmitIfEmpty:
    """Annotated marker: leave the field out of serialized output when empty."""

    def __repr__(self) -> str:
        return "OmitIfEmpty()"


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    try:
        return len(value) == 0
    except TypeError:
        return False


class WireModel(BaseModel):
    """Base model honoring ``OmitIfEmpty`` field markers on serialization."""

    @classmethod
    def omit_if_empty_fields(cls) -> List[str]:
        """Names of the fields marked with ``OmitIfEmpty``."""
        return [
            name
            for name, field in cls.model_fields.items()
            if any(isinstance(meta, OmitIfEmpty) for meta in field.metadata)
        ]

    @model_serializer(mode="wrap")
    def drop_empty_fields(
        self, handler: SerializerFunctionWrapHandler, info: SerializationInfo
    ) -> Dict[str, Any]:
        """Serialize normally, then remove marked fields whose value is empty."""
        serialized = handler(self)
        fields = type(self).model_fields
        for name in self.omit_if_empty_fields():
            field = fields[name]
            # Output is keyed by alias or by name depending on by_alias
            for key in {name, field.serialization_alias or field.alias or name}:
                if key in serialized and _is_empty(serialized[key]):
                    del serialized[key]
        return serialized
