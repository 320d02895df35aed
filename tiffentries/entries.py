"""Typed tag entries -- the (tag, data type, value) triples an IFD is built from."""

import copy
import math
from dataclasses import dataclass
from fractions import Fraction
from typing import Any, Dict, Iterable, NamedTuple

from tiffentries.constants import DIRECTORY_DATA_TYPES, DataType
from tiffentries.tiff.tags import tag_name

_MAX_SHORT = 0xFFFF
_MAX_LONG = 0xFFFFFFFF


class Rational(NamedTuple):
    """An unsigned TIFF RATIONAL: two 32-bit integers."""
    numerator: int
    denominator: int

    @classmethod
    def from_float(cls, value: float) -> 'Rational':
        """Closest rational whose terms both fit in 32 bits."""
        if value is None or math.isnan(value) or math.isinf(value):
            return cls(0, 1)
        frac = Fraction(value).limit_denominator(_MAX_LONG)
        if abs(frac.numerator) > _MAX_LONG:
            if abs(value) >= _MAX_LONG:
                return cls(_MAX_LONG if value > 0 else -_MAX_LONG, 1)
            frac = Fraction(value).limit_denominator(max(1, int(_MAX_LONG // abs(value))))
        return cls(frac.numerator, frac.denominator)

    def __float__(self) -> float:
        if self.denominator == 0:
            return 0.0
        return self.numerator / self.denominator


def _check_range(tag: int, value: int, maximum: int) -> int:
    value = int(value)
    if not 0 <= value <= maximum:
        raise ValueError(f'Value {value} out of range for tag {tag} (max {maximum})')
    return value


@dataclass(frozen=True)
class TagEntry:
    """A single directory entry ready for serialization.

    ``is_array`` marks values that are sequences even when they hold a
    single element, e.g. BitsPerSample ``(8,)``.
    """
    tag: int
    data_type: DataType
    value: Any
    is_array: bool = False

    @classmethod
    def short(cls, tag: int, value: int) -> 'TagEntry':
        return cls(tag, DataType.SHORT, _check_range(tag, value, _MAX_SHORT))

    @classmethod
    def long(cls, tag: int, value: int) -> 'TagEntry':
        return cls(tag, DataType.LONG, _check_range(tag, value, _MAX_LONG))

    @classmethod
    def short_array(cls, tag: int, values: Iterable[int]) -> 'TagEntry':
        items = tuple(_check_range(tag, v, _MAX_SHORT) for v in values)
        return cls(tag, DataType.SHORT, items, is_array=True)

    @classmethod
    def rational(cls, tag: int, value) -> 'TagEntry':
        if not isinstance(value, Rational):
            value = Rational.from_float(value)
        return cls(tag, DataType.RATIONAL, value)

    @classmethod
    def string(cls, tag: int, value: str) -> 'TagEntry':
        return cls(tag, DataType.ASCII, str(value))

    @property
    def name(self) -> str:
        return tag_name(self.tag)

    @property
    def is_directory(self) -> bool:
        return self.data_type in DIRECTORY_DATA_TYPES

    @property
    def count(self) -> int:
        """Number of TIFF values, including the NUL of ASCII strings."""
        if isinstance(self.value, str):
            return len(self.value.encode('utf-8')) + 1
        if isinstance(self.value, (bytes, bytearray)):
            return len(self.value)
        if self.is_array or isinstance(self.value, list):
            return len(self.value)
        if isinstance(self.value, tuple) and not isinstance(self.value, Rational):
            return len(self.value)
        return 1

    def copy(self) -> 'TagEntry':
        """Deep copy; the new entry shares no mutable state with this one."""
        return TagEntry(self.tag, self.data_type, copy.deepcopy(self.value),
                        self.is_array)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'tag': self.tag,
            'name': self.name,
            'type': self.data_type.name,
            'count': self.count,
            'value': _jsonable(self.value),
        }


def _jsonable(value):
    if isinstance(value, Rational):
        return [value.numerator, value.denominator]
    if isinstance(value, (bytes, bytearray)):
        return value.hex()
    if isinstance(value, (list, tuple)):
        return [_jsonable(v) for v in value]
    return value
