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
Encode R-like host values into CBOR (RFC 8949) and decode them back.

The public entry points live in `rcbor.api`, this module is kept free of imports so the package version can be read
without any dependency installed.
"""

from rcbor.version import __version__

__all__ = [
    '__version__',
]
