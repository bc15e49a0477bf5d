from __future__ import annotations

import pytest

from schematype.errors import ErrorCollector, ErrorRecord
from schematype.pointer import JsonPointer


def test_pointer_parse_with_filename():
    pointer = JsonPointer.parse("order.json#/items/0")
    assert pointer.filename == "order.json"
    assert pointer.property_paths == ("items", "0")
    assert str(pointer) == "order.json#/items/0"


def test_pointer_root():
    assert JsonPointer.parse("#") == JsonPointer()
    assert JsonPointer().property_path_string() == "#"


def test_pointer_escaping_round_trips_special_characters():
    pointer = JsonPointer().with_property_path("a/b", "m~n")
    assert pointer.property_path_string() == "#/a~1b/m~0n"
    assert JsonPointer.parse(str(pointer)).property_paths == ("a/b", "m~n")


def test_pointer_with_property_path_is_non_destructive():
    base = JsonPointer.parse("#/items")
    child = base.with_property_path(3)
    assert base.property_paths == ("items",)
    assert child.property_paths == ("items", "3")


def test_pointer_rejects_relative_fragment():
    with pytest.raises(ValueError):
        JsonPointer.parse("#items")


def test_error_record_str():
    record = ErrorRecord(path=JsonPointer.parse("#/price"), message="String value found, but a number is required")
    assert record.code == "type"
    assert str(record) == "[type] #/price - String value found, but a number is required"
    assert str(ErrorRecord(path=None, message="m")) == "[type] # - m"


def test_error_collector():
    collector = ErrorCollector()
    assert collector.is_valid()

    collector.add_error(ErrorRecord(path="#", message="m"))
    assert not collector.is_valid()
    assert len(collector) == 1

    collector.reset()
    assert collector.is_valid()
