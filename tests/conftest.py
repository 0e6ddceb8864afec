import os

from rcbor.conf import UNITTESTS_SETTINGS_FILEPATH

os.environ['RCBOR_CONFIG_YAML'] = os.environ.get('RCBOR_TEST_CONFIG_YAML', UNITTESTS_SETTINGS_FILEPATH)
