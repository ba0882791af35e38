# Copyright 2020, Schuberg Philis B.V
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from collections import namedtuple
from configparser import ConfigParser, Error
from pathlib import Path

SoftLayerCredentials = namedtuple('SoftLayerCredentials', ['username', 'api_key', 'endpoint_url', 'timeout'])

CONFIG_EXAMPLE = """Example:
[softlayer]
username = user
api_key = abcdefghijklmnopqrstuvwxyz0123456789
endpoint_url = https://api.softlayer.com/xmlrpc/v3.1/
timeout = 0"""


def get_config():
    config_file = Path.cwd() / 'config'
    if not config_file.is_file():
        config_file = Path.home() / '.softlayerops' / 'config'

    config = ConfigParser()
    config.read(str(config_file))

    return config


def get_softlayer_config_files(primary_config_file):
    return [str(Path.cwd() / primary_config_file), str(Path.home() / '.softlayer')]


def _parse_timeout(value):
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def load_softlayer_config(config_files):
    """Returns the credentials and the path of the first existing config file.

    Raises RuntimeError with setup instructions when no file exists or the first existing one has no usable
    [softlayer] section.
    """
    config_file = next((config_file for config_file in config_files if Path(config_file).is_file()), None)

    if config_file:
        config = ConfigParser()
        try:
            config.read(config_file)
        except Error as e:
            raise RuntimeError(f"Unable to parse '{config_file}': {e}\n{CONFIG_EXAMPLE}") from e

        if 'softlayer' in config and config['softlayer']:
            section = config['softlayer']
            credentials = SoftLayerCredentials(
                username=section.get('username'),
                api_key=section.get('api_key'),
                endpoint_url=section.get('endpoint_url'),
                timeout=_parse_timeout(section.get('timeout'))
            )
            return credentials, config_file

    raise RuntimeError(f"You need to setup a config file with valid credentials at one of these locations: "
                       f"{' '.join(config_files)}\n{CONFIG_EXAMPLE}")
