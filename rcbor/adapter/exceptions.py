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

from rcbor.exception import EncodeError


class UnsupportedTypeError(EncodeError):
    """The host value has no wire mapping, `type_name` is the name of the offending type."""

    def __init__(self, type_name: str, reason: str = '') -> None:
        message = f'unsupported type for CBOR conversion: {type_name}'
        if reason:
            message = f'{message} ({reason})'
        super().__init__(message)
        self.type_name = type_name


class NameConflictError(UnsupportedTypeError):
    """A named list uses a reserved field name or repeats a field name, neither can be represented as a mapping."""

    def __init__(self, name: str, reason: str) -> None:
        super().__init__('list', f'{reason}: {name!r}')
        self.name = name
