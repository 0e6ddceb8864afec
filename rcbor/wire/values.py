# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
The wire value is a closed tagged union, it can represent every shape that is written to or read from CBOR and
carries no host-specific semantics.

The variants are listed in the order they're tried when reading: a special tag is a one-entry map, so it must be
recognized before falling back to a regular mapping.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional

from rcbor.wire.special_tag import SpecialTag


class WireValue:
    """ Base class of all wire value variants, instances are immutable and compared structurally.
    """

    __slots__ = ()


@dataclass(frozen=True, slots=True)
class SpecialValue(WireValue):
    tag: SpecialTag

    def __post_init__(self) -> None:
        if not isinstance(self.tag, SpecialTag):
            raise TypeError('expected SpecialTag')


@dataclass(frozen=True, slots=True, eq=False)
class NumberValue(WireValue):
    """ An IEEE-754 double, NaN is equal to NaN when comparing wire values (the payload bits are not kept).
    """

    value: float

    def __post_init__(self) -> None:
        # XXX: bool is a subclass of int, it has to be rejected explicitly
        if isinstance(self.value, bool) or not isinstance(self.value, (int, float)):
            raise TypeError('expected float')
        object.__setattr__(self, 'value', float(self.value))

    def is_nan(self) -> bool:
        return math.isnan(self.value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NumberValue):
            return NotImplemented
        if self.is_nan() or other.is_nan():
            return self.is_nan() and other.is_nan()
        return self.value == other.value

    def __hash__(self) -> int:
        return hash(('nan',) if self.is_nan() else (self.value,))


@dataclass(frozen=True, slots=True)
class BooleanValue(WireValue):
    value: bool

    def __post_init__(self) -> None:
        if not isinstance(self.value, bool):
            raise TypeError('expected bool')


@dataclass(frozen=True, slots=True)
class TextValue(WireValue):
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise TypeError('expected str')


@dataclass(frozen=True, slots=True)
class SequenceValue(WireValue):
    items: tuple[WireValue, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, 'items', tuple(self.items))

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[WireValue]:
        return iter(self.items)

    def __getitem__(self, index: int) -> WireValue:
        return self.items[index]


@dataclass(frozen=True, slots=True)
class MappingValue(WireValue):
    """ Ordered mapping with unique text keys, the order is the order of the fields in the host value.
    """

    entries: tuple[tuple[str, WireValue], ...] = ()

    def __post_init__(self) -> None:
        entries = tuple((key, value) for key, value in self.entries)
        seen: set[str] = set()
        for key, _ in entries:
            if not isinstance(key, str):
                raise TypeError('mapping keys must be str')
            if key in seen:
                raise ValueError(f'duplicate mapping key: {key!r}')
            seen.add(key)
        object.__setattr__(self, 'entries', entries)

    @classmethod
    def from_items(cls, items: Iterable[tuple[str, WireValue]]) -> MappingValue:
        return cls(tuple(items))

    def __len__(self) -> int:
        return len(self.entries)

    def keys(self) -> list[str]:
        return [key for key, _ in self.entries]

    def values(self) -> list[WireValue]:
        return [value for _, value in self.entries]

    def items(self) -> Iterator[tuple[str, WireValue]]:
        return iter(self.entries)

    def get(self, key: str, default: Optional[WireValue] = None) -> Optional[WireValue]:
        for entry_key, value in self.entries:
            if entry_key == key:
                return value
        return default
