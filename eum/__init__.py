"""End-user monitoring beacon payloads."""

__version__ = "0.1.0"

from .models import AbstractBeacon, DataRecord, DomListenerExecution
from .codec import BeaconCodec, beacon_to_dict, decode_beacon, encode_beacon
from .config import BeaconSettings, configure_from_settings, get_settings

__all__ = [
    "AbstractBeacon",
    "BeaconCodec",
    "BeaconSettings",
    "DataRecord",
    "DomListenerExecution",
    "beacon_to_dict",
    "configure_from_settings",
    "decode_beacon",
    "encode_beacon",
    "get_settings",
]
