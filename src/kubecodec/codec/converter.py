#!/usr/bin/env python3
"""
KUBECODEC CONVERTER - Native <-> Structured Values
--------------------------------------------------
The single place where open-ended native Python values (whatever the
YAML loader or a JSON reader produced) are mapped onto the closed
structured value model, and back again for the emitter.

Author: KubeCodec Team
Date: 2026-10-19
"""

from collections.abc import Mapping
from decimal import Decimal
from typing import Any, List

from ruamel.yaml.comments import CommentedMap, CommentedSeq

from kubecodec.core.config import CodecConfig
from kubecodec.core.errors import ParseError, SerializationError, TypeConversionError
from kubecodec.core.models import (
    BoolValue, ListValue, MappingValue, NullValue, NumberValue, StringValue, Value,
)


def _key_text(key: Any) -> str:
    """Default textual form for a non-string mapping key."""
    if isinstance(key, str):
        return key
    if key is None:
        return "null"
    if isinstance(key, bool):
        return "true" if key else "false"
    return str(key)


class ValueConverter:
    """
    Maps native values to structured values (to_structured) and
    structured values to emitter-ready native values (to_native).
    """

    def __init__(self, config: CodecConfig = None):
        self.config = config or CodecConfig()

    # --- native -> structured ---

    def to_structured(self, native: Any, document: int = None) -> Value:
        counter = [0]
        return self._convert(native, "", 0, counter, document)

    def _convert(self, native: Any, path: str, depth: int, counter: List[int], document: int) -> Value:
        counter[0] += 1
        if counter[0] > self.config.max_values:
            raise ParseError(f"Document expands to more than {self.config.max_values} values", document=document)
        if depth > self.config.max_depth:
            raise ParseError(f"Document nesting exceeds {self.config.max_depth} levels at '{path or '.'}'",
                             document=document)

        # Order matters: bool is a subclass of int.
        if native is None:
            return NullValue()
        if isinstance(native, bool):
            return BoolValue(native)
        if isinstance(native, str):
            return StringValue(str(native))
        if isinstance(native, int):
            return NumberValue(Decimal(int(native)))
        if isinstance(native, Decimal):
            return NumberValue(native)
        if isinstance(native, float):
            # repr gives the shortest literal that reads back as the same float.
            return NumberValue(Decimal(repr(float(native))))
        if isinstance(native, Value):
            return native
        if isinstance(native, Mapping):
            pairs = []
            for key, item in native.items():
                text = _key_text(key)
                pairs.append((text, self._convert(item, f"{path}.{text}" if path else text,
                                                  depth + 1, counter, document)))
            return MappingValue.from_pairs(pairs)
        if isinstance(native, (list, tuple)):
            return ListValue(tuple(
                self._convert(item, f"{path}[{i}]", depth + 1, counter, document)
                for i, item in enumerate(native)
            ))
        raise TypeConversionError(type(native).__name__, path)

    # --- structured -> native ---

    def to_native(self, value: Value) -> Any:
        return self._emit(value, "")

    def _emit(self, value: Value, path: str) -> Any:
        if isinstance(value, NullValue):
            return None
        if isinstance(value, (BoolValue, StringValue)):
            return value.value
        if isinstance(value, NumberValue):
            if value.is_integral and abs(value.value.adjusted()) < self.config.max_number_digits:
                return int(value.value)
            # Non-integral, special and very large values stay Decimal; the
            # exporter writes them as exact float literals.
            return value.value
        if isinstance(value, MappingValue):
            out = CommentedMap()
            for key, item in value.items:
                out[key] = self._emit(item, f"{path}.{key}" if path else key)
            return out
        if isinstance(value, ListValue):
            return CommentedSeq(self._emit(item, f"{path}[{i}]") for i, item in enumerate(value.items))
        where = f" at '{path}'" if path else ""
        raise SerializationError(f"Cannot serialize {type(value).__name__}{where}: not a structured value")


_default = ValueConverter()


def to_structured(native: Any) -> Value:
    return _default.to_structured(native)


def to_native(value: Value) -> Any:
    return _default.to_native(value)
