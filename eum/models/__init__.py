"""Beacon wire models."""

from .base import OmitIfEmpty, WireModel
from .beacon import AbstractBeacon
from .records import (
    DataRecord,
    DomListenerExecution,
    record_class_for,
    registered_record_types,
)

__all__ = [
    "AbstractBeacon",
    "DataRecord",
    "DomListenerExecution",
    "OmitIfEmpty",
    "WireModel",
    "record_class_for",
    "registered_record_types",
]
