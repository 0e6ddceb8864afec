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

r"""
Wire value to host value conversion.

A sequence does not say whether it was a vector or a list, the vector type is recovered by looking at every element,
in this fixed order:

1. booleans and NA: logical vector
2. numbers and NA: numeric vector
3. text and NA: character vector
4. anything else: unnamed list, each element converted independently

>>> to_host(SequenceValue((BooleanValue(True), SpecialValue(SpecialTag.NA))), max_depth=8)
Vector.logical(True, NA)
>>> to_host(SequenceValue((NumberValue(1.0), TextValue('x'))), max_depth=8)
RList(values=(Vector.numeric(1.0), Vector.character('x')), names=None)

A sequence of only NA has no type evidence, it becomes a logical vector unless told otherwise:

>>> to_host(SequenceValue((SpecialValue(SpecialTag.NA), SpecialValue(SpecialTag.NA))), max_depth=8)
Vector.logical(NA, NA)
>>> to_host(SequenceValue((SpecialValue(SpecialTag.NA),)), max_depth=8, all_na_kind=VectorKind.CHARACTER)
Vector.character(NA)
"""

from functools import partial
from typing import Any, Optional, Union

from rcbor.host.types import NA, Element, HostValue, RList, Vector, VectorKind
from rcbor.utils.walk import Branch, walk
from rcbor.wire.exceptions import UnsupportedWireShapeError
from rcbor.wire.special_tag import SpecialTag
from rcbor.wire.values import (
    BooleanValue,
    MappingValue,
    NumberValue,
    SequenceValue,
    SpecialValue,
    TextValue,
    WireValue,
)

# the order of this tuple is the classification priority
_VECTOR_RULES: tuple[tuple[type[WireValue], VectorKind], ...] = (
    (BooleanValue, VectorKind.LOGICAL),
    (NumberValue, VectorKind.NUMERIC),
    (TextValue, VectorKind.CHARACTER),
)

_HostStep = Union[HostValue, Branch[WireValue, HostValue]]


def to_host(value: WireValue, *, max_depth: int, all_na_kind: VectorKind = VectorKind.LOGICAL) -> HostValue:
    """ Convert a wire value into a host value.

    Raises `UnsupportedWireShapeError` for shapes without a host mapping and `DepthExceededError` when sequences or
    mappings nest deeper than `max_depth`.
    """
    return walk(value, partial(_to_host_step, all_na_kind=all_na_kind), max_depth=max_depth)


def is_na(value: WireValue) -> bool:
    return isinstance(value, SpecialValue) and value.tag is SpecialTag.NA


def classify_sequence(items: tuple[WireValue, ...], all_na_kind: VectorKind) -> Optional[VectorKind]:
    """ Return the vector kind of a sequence, or None if it must become a list.

    A sequence with no element other than NA (including the empty sequence) has no type evidence and is given
    `all_na_kind`.
    """
    evidence = [item for item in items if not is_na(item)]
    if not evidence:
        return all_na_kind
    for wire_type, kind in _VECTOR_RULES:
        if all(isinstance(item, wire_type) for item in evidence):
            return kind
    return None


def special_to_host(tag: SpecialTag) -> HostValue:
    match tag:
        case SpecialTag.NULL:
            return None
        case SpecialTag.NA:
            return NA
        case SpecialTag.EMPTY_LIST:
            return RList()
        case SpecialTag.EMPTY_BOOL_VEC:
            return Vector.empty(VectorKind.LOGICAL)
        case SpecialTag.EMPTY_NUM_VEC:
            return Vector.empty(VectorKind.NUMERIC)
        case SpecialTag.EMPTY_STRING_VEC:
            return Vector.empty(VectorKind.CHARACTER)
        case _:
            raise UnsupportedWireShapeError(f'special tag {tag!r} has no host mapping')


def _element(item: WireValue) -> Element:
    if is_na(item):
        return NA
    assert isinstance(item, (BooleanValue, NumberValue, TextValue))
    return item.value


def _to_host_step(value: Any, *, all_na_kind: VectorKind) -> _HostStep:
    if isinstance(value, SpecialValue):
        return special_to_host(value.tag)
    if isinstance(value, NumberValue):
        return Vector.numeric(value.value)
    if isinstance(value, BooleanValue):
        return Vector.logical(value.value)
    if isinstance(value, TextValue):
        return Vector.character(value.value)
    if isinstance(value, SequenceValue):
        kind = classify_sequence(value.items, all_na_kind)
        if kind is None:
            return Branch(value.items, lambda items: RList(tuple(items)))
        elements = tuple(_element(item) for item in value.items)
        # XXX: a vector has no children to walk, but it is still a container for the depth limit
        return Branch((), lambda _: Vector(kind, elements))
    if isinstance(value, MappingValue):
        names = tuple(value.keys())
        return Branch(value.values(), lambda values: RList(tuple(values), names))
    raise UnsupportedWireShapeError(f'{type(value).__name__} has no host mapping')
