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
Special tags are the leaves that would otherwise collapse onto the same CBOR shape: NULL, a standalone NA and the
typed empty vectors.

Layout: a map with a single entry, the reserved key `$R_TYPE` and the tag name as a text string.

    {"$R_TYPE": "Null"}

The names written are the canonical ones, a few aliases are also accepted when reading:

>>> SpecialTag.EMPTY_BOOL_VEC.wire_name
'EmptyLogicalVec'
>>> SpecialTag.from_wire_name('EmptyBoolVec')
<SpecialTag.EMPTY_BOOL_VEC: 'EmptyLogicalVec'>

`EmptyIntegerVec` comes from when integer and float vectors were different kinds, it is read as the numeric empty
vector and never written:

>>> SpecialTag.from_wire_name('EmptyIntegerVec')
<SpecialTag.EMPTY_NUM_VEC: 'EmptyFloatVec'>
>>> SpecialTag.from_wire_name('Bogus')
Traceback (most recent call last):
...
rcbor.wire.exceptions.UnknownTagError: unknown special tag: 'Bogus'
"""

from enum import Enum, unique

from rcbor.wire.exceptions import UnknownTagError

# XXX: this key is reserved, a named list cannot use it as a field name
RESERVED_TYPE_KEY = '$R_TYPE'


@unique
class SpecialTag(Enum):
    NULL = 'Null'
    NA = 'NA'
    EMPTY_LIST = 'EmptyList'
    EMPTY_BOOL_VEC = 'EmptyLogicalVec'
    EMPTY_NUM_VEC = 'EmptyFloatVec'
    EMPTY_STRING_VEC = 'EmptyStringVec'

    @property
    def wire_name(self) -> str:
        return self.value

    @classmethod
    def from_wire_name(cls, name: str) -> 'SpecialTag':
        tag = _TAGS_BY_WIRE_NAME.get(name)
        if tag is None:
            raise UnknownTagError(name)
        return tag


_TAGS_BY_WIRE_NAME: dict[str, SpecialTag] = {
    **{tag.wire_name: tag for tag in SpecialTag},
    'EmptyBoolVec': SpecialTag.EMPTY_BOOL_VEC,
    'EmptyNumVec': SpecialTag.EMPTY_NUM_VEC,
    'EmptyIntegerVec': SpecialTag.EMPTY_NUM_VEC,
}
