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
Host value to wire value conversion.

Scalars are never wrapped, a length-1 vector is written as its only element:

>>> to_wire(Vector.numeric(3.5), max_depth=8) == to_wire(3.5, max_depth=8)
True
>>> to_wire(Vector.numeric(3.5), max_depth=8)
NumberValue(value=3.5)

Empty vectors keep their type through a special tag, and missing elements become NA tags in place:

>>> to_wire(Vector.empty(VectorKind.CHARACTER), max_depth=8)
SpecialValue(tag=<SpecialTag.EMPTY_STRING_VEC: 'EmptyStringVec'>)
>>> to_wire(Vector.logical(True, NA), max_depth=8)
SequenceValue(items=(BooleanValue(value=True), SpecialValue(tag=<SpecialTag.NA: 'NA'>)))

Named lists become mappings, in field order:

>>> to_wire({'b': 'x', 'a': 1}, max_depth=8).keys()
['b', 'a']
"""

from typing import Any, Union

from rcbor.adapter.exceptions import NameConflictError, UnsupportedTypeError
from rcbor.host.native import shallow_as_host
from rcbor.host.types import NA, Element, RList, Vector, VectorKind
from rcbor.utils.walk import Branch, walk
from rcbor.wire.special_tag import RESERVED_TYPE_KEY, SpecialTag
from rcbor.wire.values import (
    BooleanValue,
    MappingValue,
    NumberValue,
    SequenceValue,
    SpecialValue,
    TextValue,
    WireValue,
)

EMPTY_VECTOR_TAGS: dict[VectorKind, SpecialTag] = {
    VectorKind.LOGICAL: SpecialTag.EMPTY_BOOL_VEC,
    VectorKind.NUMERIC: SpecialTag.EMPTY_NUM_VEC,
    VectorKind.CHARACTER: SpecialTag.EMPTY_STRING_VEC,
}

_WireStep = Union[WireValue, Branch[Any, WireValue]]


def to_wire(value: Any, *, max_depth: int) -> WireValue:
    """ Convert a host value (or its plain Python shorthand) into a wire value.

    Raises `UnsupportedTypeError` for values without a mapping, `NameConflictError` for named lists that cannot be
    represented as a mapping and `DepthExceededError` when lists or vectors nest deeper than `max_depth`.
    """
    return walk(value, _to_wire_step, max_depth=max_depth)


def element_to_wire(element: Element) -> WireValue:
    """ Convert a single vector element, NA becomes the NA special tag.
    """
    if element is NA:
        return SpecialValue(SpecialTag.NA)
    if isinstance(element, bool):
        return BooleanValue(element)
    if isinstance(element, float):
        return NumberValue(element)
    if isinstance(element, str):
        return TextValue(element)
    raise UnsupportedTypeError(type(element).__name__, 'not a vector element')


def _to_wire_step(value: Any) -> _WireStep:
    if value is None:
        return SpecialValue(SpecialTag.NULL)
    try:
        host = shallow_as_host(value)
    except (TypeError, ValueError) as e:
        raise UnsupportedTypeError(type(value).__name__, str(e)) from e
    if host is None:
        raise UnsupportedTypeError(type(value).__name__)
    if host is NA:
        return SpecialValue(SpecialTag.NA)
    if isinstance(host, Vector):
        return _vector_step(host)
    assert isinstance(host, RList)
    return _list_step(host)


def _vector_step(vector: Vector) -> _WireStep:
    if len(vector) == 0:
        return SpecialValue(EMPTY_VECTOR_TAGS[vector.kind])
    if len(vector) == 1:
        return element_to_wire(vector[0])
    items = tuple(element_to_wire(element) for element in vector)
    # XXX: a vector has no children to walk, but it is still a container for the depth limit
    return Branch((), lambda _: SequenceValue(items))


def _list_step(rlist: RList) -> _WireStep:
    if len(rlist) == 0:
        # XXX: names on an empty list carry nothing, it is always written as the empty list tag
        return SpecialValue(SpecialTag.EMPTY_LIST)
    names = rlist.names
    if names is None:
        return Branch(rlist.values, lambda items: SequenceValue(tuple(items)))
    _check_names(names)
    return Branch(rlist.values, lambda items: MappingValue(tuple(zip(names, items))))


def _check_names(names: tuple[str, ...]) -> None:
    seen: set[str] = set()
    for name in names:
        if name == RESERVED_TYPE_KEY:
            raise NameConflictError(name, 'reserved field name')
        if name in seen:
            raise NameConflictError(name, 'duplicate field name')
        seen.add(name)
