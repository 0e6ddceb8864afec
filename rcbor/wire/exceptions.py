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

from rcbor.exception import DecodeError


class MalformedError(DecodeError):
    """Input is not a single well-formed CBOR item, or misuses the reserved special-tag map."""
    pass


class UnknownTagError(DecodeError):
    """A special-tag map names a tag that is not recognized."""

    def __init__(self, tag_name: str) -> None:
        super().__init__(f'unknown special tag: {tag_name!r}')
        self.tag_name = tag_name


class UnsupportedWireShapeError(DecodeError):
    """Input is valid CBOR but has no mapping to a wire value or to a host value."""
    pass
