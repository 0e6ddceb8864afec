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

import os
from typing import NamedTuple, Optional

from structlog import get_logger

from rcbor import conf
from rcbor.conf.settings import RcborSettings as Settings

logger = get_logger()

CONFIG_YAML_ENV_VAR = 'RCBOR_CONFIG_YAML'


class _SettingsMetadata(NamedTuple):
    source: str
    settings: Settings


_settings_singleton: Optional[_SettingsMetadata] = None


def get_global_settings() -> Settings:
    """
    Returns the global settings.

    Tries to get the configuration from a yaml filepath in the 'RCBOR_CONFIG_YAML' env var, if it is not set the
    packaged defaults are used. The file is only loaded once, later calls return the same instance.
    """
    settings_yaml_filepath = os.environ.get(CONFIG_YAML_ENV_VAR, conf.DEFAULT_SETTINGS_FILEPATH)
    return _load_settings_singleton(settings_yaml_filepath)


def get_settings_source() -> str:
    """ Returns the path of the settings YAML file that was loaded.

    XXX: Will raise an assertion error if get_global_settings() wasn't used before.
    """
    global _settings_singleton
    assert _settings_singleton is not None, 'get_global_settings() not called before'
    return _settings_singleton.source


def _load_settings_singleton(source: str) -> Settings:
    global _settings_singleton

    if _settings_singleton is not None:
        if _settings_singleton.source != source:
            raise Exception('loading config twice with a different file')

        return _settings_singleton.settings

    settings = Settings.from_yaml(filepath=source)
    logger.info('loaded settings', source=source)
    _settings_singleton = _SettingsMetadata(source=source, settings=settings)
    return settings
