"""
configfile - per-application configuration files

Loads configuration for an application and mode from
``$HOME/.config/<app_name>/<mode>.yaml``, creating the file with default
values when it does not exist.

Quick Usage:
    from configfile import open_config

    config = open_config('MyApp', 'dev')
    config.url                    # strict, raises ConfigKeyError
    config.get('timeout', 30)     # with fallback
    config.property_names()
"""

from .defaults import default_config_data
from .errors import (
    ConfigError,
    ConfigKeyError,
    ConfigParseError,
    ConfigWriteError,
    HomeDirectoryNotSetError,
)
from .paths import Mode, config_base, config_dir, config_file, list_modes, mode_name
from .store import ConfigData, open_config

__version__ = '0.1.0'

__all__ = [
    'ConfigData',
    'open_config',
    'default_config_data',
    'config_base',
    'config_dir',
    'config_file',
    'list_modes',
    'mode_name',
    'Mode',
    'ConfigError',
    'ConfigKeyError',
    'ConfigParseError',
    'ConfigWriteError',
    'HomeDirectoryNotSetError',
]
