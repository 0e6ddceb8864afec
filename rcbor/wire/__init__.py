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

from rcbor.wire.codec import read, write
from rcbor.wire.exceptions import MalformedError, UnknownTagError, UnsupportedWireShapeError
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

__all__ = [
    'RESERVED_TYPE_KEY',
    'BooleanValue',
    'MalformedError',
    'MappingValue',
    'NumberValue',
    'SequenceValue',
    'SpecialTag',
    'SpecialValue',
    'TextValue',
    'UnknownTagError',
    'UnsupportedWireShapeError',
    'WireValue',
    'read',
    'write',
]
