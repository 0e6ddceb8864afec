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
Public entry points: `encode` a host value into CBOR bytes and `decode` CBOR bytes into a host value.

    >>> from rcbor.api import decode, encode
    >>> from rcbor.host import NA, RList, Vector
    >>> data = encode({'a': 1, 'b': 'hello', 'c': Vector.logical(True, False, NA)})
    >>> decode(data) == RList.named({
    ...     'a': Vector.numeric(1),
    ...     'b': Vector.character('hello'),
    ...     'c': Vector.logical(True, False, NA),
    ... })
    True

Everything is pure and stateless, a `Codec` only holds its settings and logger so it can be shared between threads.
"""

from typing import Any, Optional

from structlog import get_logger

from rcbor.adapter import to_host, to_wire
from rcbor.conf.get_settings import get_global_settings
from rcbor.conf.settings import RcborSettings
from rcbor.exception import RcborError
from rcbor.host.types import HostValue, RList, Vector
from rcbor.wire import codec
from rcbor.wire.codec import Buffer
from rcbor.wire.values import WireValue

logger = get_logger()


def _describe(value: HostValue) -> str:
    if value is None:
        return 'NULL'
    if isinstance(value, Vector):
        return f'{value.kind.value}[{len(value)}]'
    if isinstance(value, RList):
        return f'{"named " if value.is_named else ""}list[{len(value)}]'
    return 'NA'


class Codec:
    """ Converts host values to CBOR and back using the given settings, or the global settings when none is given.

    Every method is all-or-nothing: it either returns a complete result or raises a `RcborError`.
    """

    def __init__(self, settings: Optional[RcborSettings] = None) -> None:
        self._settings = settings if settings is not None else get_global_settings()
        self.log = logger.new(max_depth=self._settings.MAX_DEPTH)

    @property
    def settings(self) -> RcborSettings:
        return self._settings

    def to_wire(self, value: Any) -> WireValue:
        return to_wire(value, max_depth=self._settings.MAX_DEPTH)

    def to_host(self, value: WireValue) -> HostValue:
        return to_host(value, max_depth=self._settings.MAX_DEPTH, all_na_kind=self._settings.ALL_NA_VECTOR_KIND)

    def write(self, value: WireValue) -> bytes:
        return codec.write(value, max_depth=self._settings.MAX_DEPTH)

    def read(self, data: Buffer) -> WireValue:
        return codec.read(data, max_depth=self._settings.MAX_DEPTH)

    def encode(self, value: Any) -> bytes:
        """ Encode a host value (or its plain Python shorthand) into CBOR bytes.
        """
        try:
            data = self.write(self.to_wire(value))
        except RcborError as e:
            self.log.debug('encode failed', error=repr(e))
            raise
        self.log.debug('encoded value', size=len(data))
        return data

    def decode(self, data: Buffer) -> HostValue:
        """ Decode CBOR bytes into a host value.
        """
        try:
            value = self.to_host(self.read(data))
        except RcborError as e:
            self.log.debug('decode failed', size=len(data), error=repr(e))
            raise
        self.log.debug('decoded value', size=len(data), kind=_describe(value))
        return value


def encode(value: Any, *, settings: Optional[RcborSettings] = None) -> bytes:
    """ Encode a host value into CBOR bytes, see `Codec.encode`.
    """
    return Codec(settings).encode(value)


def decode(data: Buffer, *, settings: Optional[RcborSettings] = None) -> HostValue:
    """ Decode CBOR bytes into a host value, see `Codec.decode`.
    """
    return Codec(settings).decode(data)
