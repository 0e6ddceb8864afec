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
Structural check of raw CBOR before it is handed to `cbor2`.

Only item heads are parsed, values are not built. The check enforces the subset of CBOR that has a wire mapping and
that `cbor2` would otherwise accept silently:

- no semantic tags (`cbor2` resolves bignums, shared values and string references on its own);
- no repeated text key in a map (`cbor2` keeps only the last one);
- nesting bounded by the depth limit, so the decoder never recurses deeper than that;
- exactly one item, no trailing data.

>>> check_item(bytes.fromhex('83f5a16724525f54595045624e41f4'), max_depth=1)
>>> check_item(bytes.fromhex('c24101'), max_depth=1)
Traceback (most recent call last):
...
rcbor.wire.exceptions.UnsupportedWireShapeError: semantic tag 2 is not supported
>>> check_item(bytes.fromhex('a2616101616102'), max_depth=1)
Traceback (most recent call last):
...
rcbor.wire.exceptions.MalformedError: repeated map key: 'a'
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import NamedTuple, Optional

from rcbor.exception import DepthExceededError
from rcbor.wire.exceptions import MalformedError, UnsupportedWireShapeError


class _Major(IntEnum):
    UINT = 0
    NEGINT = 1
    BYTES = 2
    TEXT = 3
    ARRAY = 4
    MAP = 5
    TAG = 6
    SIMPLE = 7


_INFO_INDEFINITE = 31


class _Head(NamedTuple):
    major: int
    info: int
    # None for indefinite lengths and for the break marker
    argument: Optional[int]

    def is_break(self) -> bool:
        return self.major == _Major.SIMPLE and self.info == _INFO_INDEFINITE


class _BytesReader:
    """Reads item heads and string payloads, the view is shortened as bytes are read."""

    def __init__(self, data: bytes) -> None:
        self._view = memoryview(data)

    def is_empty(self) -> bool:
        return not self._view

    def read_bytes(self, n: int) -> bytes:
        if len(self._view) < n:
            raise MalformedError('not enough bytes to read')
        b = bytes(self._view[:n])
        self._view = self._view[n:]
        return b

    def read_head(self) -> _Head:
        initial = self.read_bytes(1)[0]
        major, info = initial >> 5, initial & 0x1f
        if info < 24:
            return _Head(major, info, info)
        if info <= 27:
            return _Head(major, info, int.from_bytes(self.read_bytes(1 << (info - 24)), 'big'))
        if info == _INFO_INDEFINITE:
            return _Head(major, info, None)
        raise MalformedError(f'reserved additional information: {info}')

    def read_string(self, head: _Head) -> bytes:
        if head.argument is not None:
            return self.read_bytes(head.argument)
        chunks: list[bytes] = []
        while True:
            chunk = self.read_head()
            if chunk.is_break():
                return b''.join(chunks)
            if chunk.major != head.major or chunk.argument is None:
                raise MalformedError('invalid chunk in indefinite length string')
            chunks.append(self.read_bytes(chunk.argument))


@dataclass(slots=True)
class _Container:
    is_map: bool
    # items left to read, maps count keys and values, None when the length is indefinite
    remaining: Optional[int]
    count: int = 0
    keys: set[bytes] = field(default_factory=set)

    def is_done(self) -> bool:
        return self.remaining == 0


def check_item(data: bytes, *, max_depth: int) -> None:
    """ Check that `data` holds exactly one CBOR item that can be read as a wire value.

    Raises `MalformedError` for invalid, truncated or trailing data and repeated map keys, `UnsupportedWireShapeError`
    for semantic tags and `DepthExceededError` for containers nested deeper than `max_depth` (a special tag map may sit
    one level below the deepest accepted container, so only containers past that are rejected here).
    """
    reader = _BytesReader(data)
    containers: list[_Container] = []
    started = False
    while True:
        while containers and containers[-1].is_done():
            containers.pop()
        if started and not containers:
            break
        started = True
        parent = containers[-1] if containers else None
        head = reader.read_head()
        if head.is_break():
            if parent is None or parent.remaining is not None:
                raise MalformedError('unexpected break')
            if parent.is_map and parent.count % 2:
                raise MalformedError('map key without a value')
            containers.pop()
            continue
        is_key = False
        if parent is not None:
            parent.count += 1
            if parent.remaining is not None:
                parent.remaining -= 1
            is_key = parent.is_map and parent.count % 2 == 1
        match head.major:
            case _Major.UINT | _Major.NEGINT:
                if head.argument is None:
                    raise MalformedError('integers cannot have an indefinite length')
            case _Major.BYTES | _Major.TEXT:
                payload = reader.read_string(head)
                if is_key and head.major == _Major.TEXT:
                    assert parent is not None
                    if payload in parent.keys:
                        raise MalformedError(f'repeated map key: {payload.decode("utf-8", "replace")!r}')
                    parent.keys.add(payload)
            case _Major.ARRAY | _Major.MAP:
                if len(containers) > max_depth:
                    raise DepthExceededError(max_depth)
                is_map = head.major == _Major.MAP
                remaining = head.argument
                if remaining is not None and is_map:
                    remaining *= 2
                containers.append(_Container(is_map, remaining))
            case _Major.TAG:
                raise UnsupportedWireShapeError(f'semantic tag {head.argument} is not supported')
            case _:
                # simple values and floats, their arguments were already consumed with the head
                pass
    if not reader.is_empty():
        raise MalformedError('trailing data')
