"""Unit tests for data records and the record type registry."""

from typing import Literal, Optional

import pytest
from pydantic import ValidationError

from eum.exceptions import InvalidRecordError, UnknownRecordTypeError
from eum.models import (
    DataRecord,
    DomListenerExecution,
    record_class_for,
    registered_record_types,
)


class PageVisibilityChange(DataRecord):
    """Record type defined outside the library"""

    type: Literal["pageVisibilityChange"] = "pageVisibilityChange"
    hidden: Optional[bool] = None


class TestRecordRegistry:
    """Test registration of record subclasses"""

    def test_builtin_record_registered(self):
        """The DOM listener record is available by its discriminator"""
        assert record_class_for("domListenerExecution") is DomListenerExecution
        assert "domListenerExecution" in registered_record_types()

    def test_external_subclass_registered(self):
        """Subclasses defined by callers register themselves"""
        assert record_class_for("pageVisibilityChange") is PageVisibilityChange
        assert PageVisibilityChange.record_type == "pageVisibilityChange"

    def test_registered_types_sorted(self):
        """Discriminators are listed in sorted order"""
        types = registered_record_types()

        assert types == sorted(types)

    def test_unknown_type(self):
        """Unregistered discriminators raise UnknownRecordTypeError"""
        with pytest.raises(UnknownRecordTypeError) as exc_info:
            record_class_for("resourceLoad")

        assert exc_info.value.record_type == "resourceLoad"
        assert "resourceLoad" in str(exc_info.value)

    def test_unknown_type_is_invalid_record(self):
        """UnknownRecordTypeError is an InvalidRecordError and a ValueError"""
        assert issubclass(UnknownRecordTypeError, InvalidRecordError)
        assert issubclass(UnknownRecordTypeError, ValueError)

    def test_duplicate_discriminator_rejected(self):
        """Two classes cannot share a discriminator"""
        with pytest.raises(TypeError, match="already registered"):

            class ImpostorListener(DataRecord):
                type: Literal["domListenerExecution"] = "domListenerExecution"

        assert record_class_for("domListenerExecution") is DomListenerExecution

    def test_same_class_name_in_another_module_rejected(self):
        """A class of the same name from a different module cannot take over a type"""

        def define_shared(module_name):
            class SharedRecord(DataRecord):
                __module__ = module_name
                type: Literal["sharedPluginRecord"] = "sharedPluginRecord"

            return SharedRecord

        first = define_shared("plugins.first")

        with pytest.raises(TypeError, match="plugins.first"):
            define_shared("plugins.second")

        assert record_class_for("sharedPluginRecord") is first

    def test_redefinition_in_same_module_replaces_entry(self):
        """Re-running a class statement, as on module reload, is allowed"""

        def define_reloaded():
            class ReloadedRecord(DataRecord):
                type: Literal["reloadedRecord"] = "reloadedRecord"

            return ReloadedRecord

        define_reloaded()
        second = define_reloaded()

        assert record_class_for("reloadedRecord") is second

    def test_intermediate_base_not_registered(self):
        """Subclasses without a discriminator default stay unregistered"""
        before = registered_record_types()

        class TimedRecord(DataRecord):
            duration: Optional[float] = None

        assert registered_record_types() == before


class TestDomListenerExecution:
    """Test the DOM listener record fields"""

    def test_defaults(self):
        """All listener fields are optional"""
        record = DomListenerExecution()

        assert record.type == "domListenerExecution"
        assert record.id is None
        assert record.time_stamp is None
        assert record.function_name is None
        assert record.element_id is None

    def test_wire_names(self, click_record):
        """Fields use the agent's camelCase names on the wire"""
        dumped = click_record.model_dump(by_alias=True)

        assert dumped["functionName"] == "onSubmit"
        assert dumped["eventType"] == "click"
        assert dumped["elementType"] == "BUTTON"
        assert dumped["elementID"] == "submit"
        assert dumped["timeStamp"] == 1700000000000

    def test_validate_from_wire_names(self):
        """Records accept the camelCase wire names"""
        record = DomListenerExecution.model_validate(
            {"functionName": "handler", "elementID": "menu", "timeStamp": 5}
        )

        assert record.function_name == "handler"
        assert record.element_id == "menu"
        assert record.time_stamp == 5

    def test_negative_timestamp_rejected(self):
        """Timestamps are epoch milliseconds and cannot be negative"""
        with pytest.raises(ValidationError):
            DomListenerExecution(time_stamp=-1)

    def test_negative_duration_rejected(self):
        """Durations cannot be negative"""
        with pytest.raises(ValidationError):
            DomListenerExecution(duration=-0.5)

    def test_unknown_fields_ignored(self):
        """Extra wire fields from newer agents are ignored"""
        record = DomListenerExecution.model_validate({"eventType": "click", "extra": 1})

        assert "extra" not in record.model_dump()


class TestFromPayload:
    """Test DataRecord.from_payload dispatch"""

    def test_dispatches_on_type(self):
        """The type field selects the subclass"""
        record = DataRecord.from_payload(
            {"type": "domListenerExecution", "eventType": "scroll"}
        )

        assert isinstance(record, DomListenerExecution)
        assert record.event_type == "scroll"

    def test_external_type(self):
        """Caller-defined record types decode too"""
        record = DataRecord.from_payload({"type": "pageVisibilityChange", "hidden": True})

        assert isinstance(record, PageVisibilityChange)
        assert record.hidden is True

    def test_missing_type(self):
        """Payloads without type are rejected"""
        with pytest.raises(InvalidRecordError, match="no 'type'"):
            DataRecord.from_payload({"eventType": "click"})

    def test_not_an_object(self):
        """Only JSON objects are records"""
        with pytest.raises(InvalidRecordError, match="must be an object"):
            DataRecord.from_payload(["domListenerExecution"])

    def test_unknown_type(self):
        """Unknown discriminators raise UnknownRecordTypeError"""
        with pytest.raises(UnknownRecordTypeError):
            DataRecord.from_payload({"type": "ajaxRequest"})

    def test_invalid_fields_wrap_validation_error(self):
        """Field errors surface as InvalidRecordError with the cause attached"""
        with pytest.raises(InvalidRecordError) as exc_info:
            DataRecord.from_payload({"type": "domListenerExecution", "timeStamp": -10})

        assert isinstance(exc_info.value.__cause__, ValidationError)

    def test_subclass_restricts_dispatch(self):
        """Dispatch from a subclass only yields that subclass"""
        with pytest.raises(InvalidRecordError, match="is not a"):
            DomListenerExecution.from_payload({"type": "pageVisibilityChange"})
