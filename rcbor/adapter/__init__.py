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
The host adapter maps host values to wire values and back, resolving every case where distinct host values would
otherwise share a wire shape.
"""

from rcbor.adapter.exceptions import NameConflictError, UnsupportedTypeError
from rcbor.adapter.to_host import classify_sequence, to_host
from rcbor.adapter.to_wire import to_wire

__all__ = [
    'NameConflictError',
    'UnsupportedTypeError',
    'classify_sequence',
    'to_host',
    'to_wire',
]
