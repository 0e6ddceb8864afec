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

from pathlib import Path
from typing import Union

from pydantic import Field

from rcbor.host.types import VectorKind
from rcbor.utils.pydantic import BaseModel
from rcbor.utils.yaml import dict_from_yaml


class RcborSettings(BaseModel):
    # Maximum nesting of containers (lists, and vectors longer than 1), the top-level value is at depth 0 and a
    # container at depth `d` is accepted when `d < MAX_DEPTH`. Applies to both encoding and decoding.
    MAX_DEPTH: int = Field(default=128, ge=1)

    # A sequence made only of NA carries no type evidence, this is the kind of vector it decodes to.
    ALL_NA_VECTOR_KIND: VectorKind = VectorKind.LOGICAL

    @classmethod
    def from_yaml(cls, *, filepath: Union[Path, str]) -> 'RcborSettings':
        """Takes a filepath to a yaml file and returns a validated RcborSettings instance."""
        settings_dict = dict_from_yaml(filepath=filepath)
        return cls.model_validate(settings_dict)
