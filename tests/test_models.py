from decimal import Decimal

import pytest

from kubecodec.core.models import (
    BoolValue, ListValue, MappingValue, NullValue, NumberValue, StringValue,
)


def test_mapping_rejects_duplicate_keys():
    with pytest.raises(ValueError):
        MappingValue((("a", NullValue()), ("a", BoolValue(True))))


def test_from_pairs_last_value_wins_in_first_position():
    mapping = MappingValue.from_pairs([
        ("a", NumberValue(1)), ("b", NumberValue(2)), ("a", NumberValue(3)),
    ])
    assert mapping.keys() == ("a", "b")
    assert mapping["a"] == NumberValue(3)


def test_mapping_lookup_helpers():
    mapping = MappingValue((("kind", StringValue("Pod")), ("spec", MappingValue())))
    assert "kind" in mapping
    assert "status" not in mapping
    assert mapping.get("status") is None
    assert list(mapping) == ["kind", "spec"]
    assert len(mapping) == 2
    with pytest.raises(KeyError):
        mapping["status"]


def test_mapping_equality_is_order_sensitive():
    first = MappingValue((("a", NullValue()), ("b", NullValue())))
    second = MappingValue((("b", NullValue()), ("a", NullValue())))
    assert first != second
    assert first == MappingValue((("a", NullValue()), ("b", NullValue())))


def test_number_keeps_decimal_and_rejects_floats():
    assert NumberValue(3).value == Decimal(3)
    assert NumberValue("0.25").value == Decimal("0.25")
    with pytest.raises(TypeError):
        NumberValue(0.25)
    with pytest.raises(TypeError):
        NumberValue(True)


def test_number_integral_check():
    assert NumberValue(Decimal("3.000")).is_integral
    assert not NumberValue(Decimal("0.5")).is_integral
    assert not NumberValue(Decimal("Infinity")).is_integral


def test_to_python_unwraps_nested_values():
    value = MappingValue((
        ("replicas", NumberValue(2)),
        ("ports", ListValue((NumberValue(80), StringValue("https")))),
        ("paused", BoolValue(False)),
        ("owner", NullValue()),
    ))
    assert value.to_python() == {
        "replicas": Decimal(2),
        "ports": [Decimal(80), "https"],
        "paused": False,
        "owner": None,
    }
