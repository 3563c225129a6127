#!/usr/bin/env python3
"""
KUBECODEC CORE MODELS
---------------------
Defines the structured value model every manifest is decoded into and
encoded from. A value is always exactly one of six closed variants:
null, boolean, number, string, ordered list and ordered mapping.

Numbers are carried as Decimal so that a manifest can travel through
the codec without picking up binary float rounding.

Author: KubeCodec Team
Date: 2026-10-19
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, Iterable, Iterator, Optional, Tuple


class Value:
    """Base class for the structured value variants."""

    __slots__ = ()

    def to_python(self) -> Any:
        raise NotImplementedError


@dataclass(frozen=True)
class NullValue(Value):
    def to_python(self) -> Any:
        return None


@dataclass(frozen=True)
class BoolValue(Value):
    value: bool

    def __post_init__(self):
        if not isinstance(self.value, bool):
            raise TypeError(f"BoolValue expects bool, got {type(self.value).__name__}")

    def to_python(self) -> Any:
        return self.value


@dataclass(frozen=True)
class NumberValue(Value):
    """
    Arbitrary-precision number. Accepts Decimal, int or numeric text;
    floats must be converted explicitly by the caller.
    """
    value: Decimal

    def __post_init__(self):
        raw = self.value
        if isinstance(raw, bool) or isinstance(raw, float):
            raise TypeError(f"NumberValue expects Decimal, int or str, got {type(raw).__name__}")
        if not isinstance(raw, Decimal):
            object.__setattr__(self, "value", Decimal(raw))

    @property
    def is_integral(self) -> bool:
        return self.value.is_finite() and self.value == self.value.to_integral_value()

    def to_python(self) -> Any:
        return self.value


@dataclass(frozen=True)
class StringValue(Value):
    value: str

    def __post_init__(self):
        if not isinstance(self.value, str):
            raise TypeError(f"StringValue expects str, got {type(self.value).__name__}")

    def to_python(self) -> Any:
        return self.value


@dataclass(frozen=True)
class ListValue(Value):
    items: Tuple[Value, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "items", tuple(self.items))

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Value]:
        return iter(self.items)

    def __getitem__(self, index: int) -> Value:
        return self.items[index]

    def to_python(self) -> Any:
        return [item.to_python() for item in self.items]


@dataclass(frozen=True)
class MappingValue(Value):
    """
    Ordered key -> value association. Keys are unique strings and keep the
    order they were first seen in, so re-encoding is deterministic.
    """
    items: Tuple[Tuple[str, Value], ...] = ()
    _index: Dict[str, int] = field(default_factory=dict, init=False, repr=False, compare=False, hash=False)

    def __post_init__(self):
        pairs = tuple((k, v) for k, v in self.items)
        index = {}
        for position, (key, _) in enumerate(pairs):
            if not isinstance(key, str):
                raise TypeError(f"MappingValue keys must be str, got {type(key).__name__}")
            if key in index:
                raise ValueError(f"Duplicate mapping key '{key}'")
            index[key] = position
        object.__setattr__(self, "items", pairs)
        object.__setattr__(self, "_index", index)

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[str, Value]]) -> "MappingValue":
        """Builds a mapping where a repeated key overwrites the earlier value in place."""
        merged: Dict[str, Value] = {}
        for key, value in pairs:
            merged[key] = value
        return cls(tuple(merged.items()))

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[str]:
        return (key for key, _ in self.items)

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def __getitem__(self, key: str) -> Value:
        try:
            return self.items[self._index[key]][1]
        except KeyError:
            raise KeyError(key) from None

    def get(self, key: str, default: Optional[Value] = None) -> Optional[Value]:
        position = self._index.get(key)
        return default if position is None else self.items[position][1]

    def keys(self) -> Tuple[str, ...]:
        return tuple(key for key, _ in self.items)

    def values(self) -> Tuple[Value, ...]:
        return tuple(value for _, value in self.items)

    def to_python(self) -> Any:
        return {key: value.to_python() for key, value in self.items}
