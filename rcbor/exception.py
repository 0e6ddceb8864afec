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


class RcborError(Exception):
    """Base class for exceptions in rcbor."""
    pass


class EncodeError(RcborError):
    """Raised when a host value cannot be turned into bytes."""
    pass


class DecodeError(RcborError):
    """Raised when a byte sequence cannot be turned into a host value."""
    pass


class DepthExceededError(RcborError):
    """Raised when a value is nested deeper than the configured maximum depth.

    It can be raised both when encoding and when decoding, the limit is the same in both directions so that anything
    that was encoded with a given setting can be decoded with it.
    """

    def __init__(self, max_depth: int) -> None:
        super().__init__(f'maximum nesting depth of {max_depth} exceeded')
        self.max_depth = max_depth
