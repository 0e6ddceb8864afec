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
Shorthands for building host values out of plain Python values.

>>> value = as_host({"a": 1, "b": ["x", True]})
>>> value.names
('a', 'b')
>>> value[0]
Vector.numeric(1.0)
>>> value[1]
RList(values=(Vector.character('x'), Vector.logical(True)), names=None)
"""

from collections.abc import Mapping
from typing import Any, Optional, Union

from rcbor.host.types import HostValue, NAType, RList, Vector, VectorKind
from rcbor.utils.walk import Branch, walk

# XXX: bool must come before int, bool is a subclass of int
_SCALAR_KINDS: tuple[tuple[type, VectorKind], ...] = (
    (bool, VectorKind.LOGICAL),
    (int, VectorKind.NUMERIC),
    (float, VectorKind.NUMERIC),
    (str, VectorKind.CHARACTER),
)

_NATIVE_MAX_DEPTH = 10_000


def scalar_kind(value: Any) -> Optional[VectorKind]:
    """ Return the vector kind a Python scalar maps to, or None if it is not a supported scalar.
    """
    for type_, kind in _SCALAR_KINDS:
        if isinstance(value, type_):
            return kind
    return None


def shallow_as_host(value: Any) -> Optional[Union[NAType, Vector, RList]]:
    """ Convert only the outermost level of a non-None value, list elements are kept as they are.

    Returns None when the value has no mapping. Raises TypeError or ValueError if the value looks right but its
    contents are not, for example a dict with non-str keys.
    """
    if isinstance(value, (NAType, Vector, RList)):
        return value
    kind = scalar_kind(value)
    if kind is not None:
        return Vector(kind, (value,))
    if isinstance(value, Mapping):
        return RList.named(value)
    if isinstance(value, (list, tuple)):
        return RList(tuple(value))
    return None


def as_host(value: Any) -> HostValue:
    """ Convert plain Python values into host values, raises TypeError on values without a mapping.

    `bool`, `int`, `float` and `str` become length-1 vectors, `list` and `tuple` become unnamed lists and `dict` becomes
    a named list. Host values are passed through, lists are rebuilt so that nested plain values are converted too.
    """
    def visit(node: Any) -> Union[HostValue, Branch[Any, HostValue]]:
        if node is None:
            return None
        host = shallow_as_host(node)
        if host is None:
            raise TypeError(f'{type(node).__name__} has no host value mapping')
        if isinstance(host, RList):
            names = host.names
            return Branch(host.values, lambda values: RList(tuple(values), names))
        return host

    return walk(value, visit, max_depth=_NATIVE_MAX_DEPTH)
