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
CBOR (RFC 8949) reading and writing of wire values, the byte-level work is done by `cbor2`.

Numbers are always written as floats, sequences as arrays and mappings as maps with text keys. The only custom shape is
the special tag map.

>>> write(NumberValue(3.5), max_depth=8).hex()
'fb400c000000000000'
>>> write(SpecialValue(SpecialTag.NA), max_depth=8).hex()
'a16724525f54595045624e41'

Breakdown of the last result:

    a1: map with 1 entry
    6724525f54595045: '$R_TYPE' (text string of length 7)
    624e41: 'NA' (text string of length 2)

A sequence of booleans with a missing slot:

>>> data = write(SequenceValue((BooleanValue(True), SpecialValue(SpecialTag.NA), BooleanValue(False))), max_depth=8)
>>> data.hex()
'83f5a16724525f54595045624e41f4'
>>> read(data, max_depth=8)
SequenceValue(items=(BooleanValue(value=True), SpecialValue(tag=<SpecialTag.NA: 'NA'>), BooleanValue(value=False)))

Reading requires the whole input to be exactly one item:

>>> read(data + b'\x00', max_depth=8)
Traceback (most recent call last):
...
rcbor.wire.exceptions.MalformedError: trailing data
"""

from typing import Any, Union

import cbor2

from rcbor.exception import DepthExceededError, EncodeError
from rcbor.utils.walk import Branch, walk
from rcbor.wire.exceptions import MalformedError, UnsupportedWireShapeError
from rcbor.wire.scanner import check_item
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

Buffer = Union[bytes, bytearray, memoryview]


def write(value: WireValue, *, max_depth: int) -> bytes:
    """ Encode a wire value tree as a single CBOR item.
    """
    obj = walk(value, _to_cbor_step, max_depth=max_depth)
    try:
        return cbor2.dumps(obj)
    except (cbor2.CBOREncodeError, UnicodeEncodeError) as e:
        raise EncodeError(f'CBOR encoding failed: {e}') from e


def read(data: Buffer, *, max_depth: int) -> WireValue:
    """ Decode exactly one CBOR item into a wire value tree.

    Raises `MalformedError` for invalid, truncated or trailing data, `UnknownTagError` for an unrecognized special tag,
    `UnsupportedWireShapeError` for CBOR values that have no wire variant and `DepthExceededError` when the input is
    nested too deeply.
    """
    raw = bytes(data)
    obj = _decode_cbor(raw, max_depth)
    return walk(obj, _from_cbor_step, max_depth=max_depth)


def _decode_cbor(raw: bytes, max_depth: int) -> Any:
    # cbor2 builds shared values and resolves tags on its own, anything outside the supported subset is rejected first
    check_item(raw, max_depth=max_depth)
    try:
        return cbor2.loads(raw)
    except RecursionError as e:
        raise DepthExceededError(max_depth) from e
    except (cbor2.CBORDecodeError, UnicodeDecodeError) as e:
        raise MalformedError(f'invalid CBOR: {e}') from e


def _to_cbor_step(value: WireValue) -> Any:
    if isinstance(value, SpecialValue):
        return {RESERVED_TYPE_KEY: value.tag.wire_name}
    if isinstance(value, (NumberValue, BooleanValue, TextValue)):
        return value.value
    if isinstance(value, SequenceValue):
        return Branch(value.items, list)
    if isinstance(value, MappingValue):
        keys = value.keys()
        if RESERVED_TYPE_KEY in keys:
            raise EncodeError(f'{RESERVED_TYPE_KEY!r} is reserved and cannot be a mapping key')
        return Branch(value.values(), lambda values: dict(zip(keys, values)))
    raise TypeError(f'expected WireValue, got {type(value).__name__}')


def _from_cbor_step(obj: Any) -> Union[WireValue, Branch[Any, WireValue]]:
    # XXX: bool must be checked before int, bool is a subclass of int
    if isinstance(obj, bool):
        return BooleanValue(obj)
    if isinstance(obj, float):
        return NumberValue(obj)
    if isinstance(obj, int):
        # integers are what the integer vectors used to be written as, without bignums they always fit a float
        return NumberValue(float(obj))
    if isinstance(obj, str):
        return TextValue(obj)
    if isinstance(obj, list):
        return Branch(obj, lambda items: SequenceValue(tuple(items)))
    if isinstance(obj, dict):
        if RESERVED_TYPE_KEY in obj:
            return _special_from_map(obj)
        keys = list(obj.keys())
        for key in keys:
            if not isinstance(key, str):
                raise UnsupportedWireShapeError(f'map keys must be text strings, got {type(key).__name__}')
        return Branch(list(obj.values()), lambda values: MappingValue(tuple(zip(keys, values))))
    raise UnsupportedWireShapeError(f'CBOR value of type {type(obj).__name__} has no wire mapping')


def _special_from_map(obj: dict[Any, Any]) -> SpecialValue:
    if len(obj) != 1:
        raise MalformedError(f'{RESERVED_TYPE_KEY!r} is reserved and must be the only key in its map')
    tag_name = obj[RESERVED_TYPE_KEY]
    if not isinstance(tag_name, str):
        raise MalformedError(f'{RESERVED_TYPE_KEY!r} must map to a text string, got {type(tag_name).__name__}')
    return SpecialValue(SpecialTag.from_wire_name(tag_name))
