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
Python model of the R host values that can be encoded.

R has no scalars: `3.5` is a numeric vector of length 1. A vector is homogeneous, any slot can be `NA` (missing), and
`NULL` (absent) is a different thing entirely, here it is modeled with `None`. Lists are the only heterogeneous
aggregate and they may carry names.

>>> Vector.numeric(1, 2.5, NA)
Vector.numeric(1.0, 2.5, NA)
>>> Vector.numeric(float('nan')) == Vector.numeric(float('nan'))
True
>>> RList.named({'a': Vector.logical(True)}).names
('a',)
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from enum import Enum, unique
from typing import Any, TypeAlias, Union, final

from typing_extensions import Self


@final
class NAType:
    """ Type of the missing value marker, there is only one instance of it: `NA`.
    """

    __slots__ = ()

    _instance: NAType | None = None

    def __new__(cls) -> NAType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return 'NA'

    def __reduce__(self) -> str:
        return 'NA'


NA = NAType()


@unique
class VectorKind(Enum):
    """ The three atomic vector types that have a wire mapping.
    """

    LOGICAL = 'logical'
    NUMERIC = 'numeric'
    CHARACTER = 'character'

    @property
    def element_type(self) -> type:
        return _ELEMENT_TYPES[self]


_ELEMENT_TYPES: dict[VectorKind, type] = {
    VectorKind.LOGICAL: bool,
    VectorKind.NUMERIC: float,
    VectorKind.CHARACTER: str,
}

Element: TypeAlias = Union[bool, float, str, NAType]


def _normalize_element(kind: VectorKind, value: Any) -> Element:
    if value is NA:
        return NA
    if kind is VectorKind.NUMERIC:
        # XXX: bool is a subclass of int, it has to be rejected explicitly
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(f'expected float or NA in a numeric vector, got {type(value).__name__}')
        try:
            return float(value)
        except OverflowError as e:
            raise ValueError(f'{value} cannot be represented as a float') from e
    element_type = kind.element_type
    if not isinstance(value, element_type):
        raise TypeError(f'expected {element_type.__name__} or NA in a {kind.value} vector, got {type(value).__name__}')
    return value


def _same_element(a: Element, b: Element) -> bool:
    if a is NA or b is NA:
        return a is b
    if isinstance(a, float) and isinstance(b, float) and math.isnan(a) and math.isnan(b):
        return True
    return a == b


@dataclass(frozen=True, slots=True, eq=False)
class Vector:
    """ An immutable homogeneous vector, elements are either of the kind's element type or `NA`.

    Numeric vectors accept `int` values but always store `float`, there is a single numeric kind.
    """

    kind: VectorKind
    values: tuple[Element, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.kind, VectorKind):
            raise TypeError('expected VectorKind')
        values = tuple(_normalize_element(self.kind, value) for value in self.values)
        object.__setattr__(self, 'values', values)

    @classmethod
    def logical(cls, *values: bool | NAType) -> Self:
        return cls(VectorKind.LOGICAL, values)

    @classmethod
    def numeric(cls, *values: float | NAType) -> Self:
        return cls(VectorKind.NUMERIC, values)

    @classmethod
    def character(cls, *values: str | NAType) -> Self:
        return cls(VectorKind.CHARACTER, values)

    @classmethod
    def empty(cls, kind: VectorKind) -> Self:
        return cls(kind, ())

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[Element]:
        return iter(self.values)

    def __getitem__(self, index: int) -> Element:
        return self.values[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return (
            self.kind is other.kind
            and len(self.values) == len(other.values)
            and all(_same_element(a, b) for a, b in zip(self.values, other.values))
        )

    def __hash__(self) -> int:
        # NaN is not equal to itself, a placeholder keeps equal vectors hashing equally
        return hash((self.kind, tuple('nan' if isinstance(v, float) and math.isnan(v) else v for v in self.values)))

    def __repr__(self) -> str:
        return f'Vector.{self.kind.name.lower()}({", ".join(map(repr, self.values))})'

    def is_na(self, index: int) -> bool:
        return self.values[index] is NA

    def tolist(self) -> list[Element]:
        return list(self.values)


@dataclass(frozen=True, slots=True)
class RList:
    """ An immutable list, unnamed when `names` is None, named otherwise.

    A named list has exactly one name per value, names are kept in field order.
    """

    values: tuple[HostValue, ...] = ()
    names: tuple[str, ...] | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, 'values', tuple(self.values))
        if self.names is not None:
            names = tuple(self.names)
            if len(names) != len(self.values):
                raise ValueError(f'expected {len(self.values)} names, got {len(names)}')
            for name in names:
                if not isinstance(name, str):
                    raise TypeError(f'list names must be str, got {type(name).__name__}')
            object.__setattr__(self, 'names', names)

    @classmethod
    def unnamed(cls, *values: HostValue) -> Self:
        return cls(values)

    @classmethod
    def named(cls, mapping: Mapping[str, HostValue] | Iterable[tuple[str, HostValue]]) -> Self:
        items = list(mapping.items() if isinstance(mapping, Mapping) else mapping)
        return cls(tuple(value for _, value in items), tuple(name for name, _ in items))

    @property
    def is_named(self) -> bool:
        return self.names is not None

    def items(self) -> Iterator[tuple[str, HostValue]]:
        if self.names is None:
            raise TypeError('unnamed list has no items')
        return zip(self.names, self.values)

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[HostValue]:
        return iter(self.values)

    def __getitem__(self, index: int) -> HostValue:
        return self.values[index]


HostValue: TypeAlias = Union[None, NAType, Vector, RList]
