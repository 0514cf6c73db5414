"""
Error types for beacon encoding and decoding.

Construction of a beacon and access to its records never fail; errors are
raised only when foreign input is decoded or a non-record is added.
"""

from typing import Optional


class BeaconError(Exception):
    """Base class for all beacon errors"""


class BeaconDecodeError(BeaconError, ValueError):
    """Raised when an incoming beacon payload cannot be decoded"""


class InvalidRecordError(BeaconError, ValueError):
    """Raised when a record is malformed or is not a DataRecord"""


class UnknownRecordTypeError(InvalidRecordError):
    """Raised when a payload names a record type that is not registered"""

    def __init__(self, record_type: Optional[str], message: Optional[str] = None):
        self.record_type = record_type
        super().__init__(message or f"Unknown record type: {record_type!r}")
