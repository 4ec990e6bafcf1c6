"""
Per-application, per-mode configuration store.

Usage:
    from configfile import open_config

    config = open_config('MyApp', 'test')
    api_url = config.url
    timeout = config.get('timeout', 30)

The configuration file is created with default values the first time a
store is opened for an (application, mode) pair. After that it is only
read; edit the file and open a new store to pick up changes.
"""

import copy
import logging
from pathlib import Path
from typing import Any, Dict, Iterator, List, Mapping, Optional

from .defaults import default_config_data
from .document import read_document, write_document
from .errors import ConfigKeyError
from .paths import config_file, mode_name

logger = logging.getLogger(__name__)


class ConfigData:
    """
    Configuration values loaded from ``<home>/.config/<app_name>/<mode>.yaml``.

    Values are read once, when the instance is created. Three kinds of
    access are provided:
    - ``get(key, default)`` returns a fallback for missing keys
    - ``lookup(key)``, ``config[key]`` and ``config.key`` raise ConfigKeyError
    - ``property_names()`` lists the available keys

    Attributes:
        app_name (str): Application name
        mode (str): Configuration mode
        path (Path): Backing YAML file
    """

    def __init__(self, app_name: str, mode: Any, defaults: Optional[Mapping[str, Any]] = None,
                 home: Optional[str] = None) -> None:
        """
        Load the configuration, creating the file first if it does not exist.

        Args:
            app_name: Name of the application.
            mode: Configuration mode (e.g. "dev", "test", "prod").
            defaults: Values written to a new file. Defaults to default_config_data().
                Ignored when the file already exists.
            home: Home directory. Defaults to the HOME environment variable.

        Raises:
            HomeDirectoryNotSetError: If no home directory is available.
            ConfigParseError: If the file is not a valid YAML mapping.
            ConfigWriteError: If ``defaults`` holds values YAML cannot represent.
                No file is created in that case.
            OSError: If the file or its directory cannot be created or read.
        """
        self._app_name = app_name
        self._mode = mode_name(mode)
        self._path = config_file(app_name, mode, home)

        if not self._path.is_file():
            logger.warning(f"Creating config file {self._path}")
            write_document(default_config_data() if defaults is None else defaults, self._path)

        logger.debug(f"Loading config file {self._path}")
        self._data: Dict[Any, Any] = read_document(self._path)

    @property
    def app_name(self) -> str:
        return self._app_name

    @property
    def mode(self) -> str:
        return self._mode

    @property
    def path(self) -> Path:
        return self._path

    def get(self, key: Any, default: Any = None) -> Any:
        """
        Get a configuration value with a fallback.

        Args:
            key: Configuration key.
            default: Value returned unchanged when the key is missing.

        Returns:
            The stored value, or ``default``.

        Examples:
            >>> config.get('timeout', 30)
            10
            >>> config.get('nonexistent', 'fallback')
            'fallback'
        """
        return self._data.get(key, default)

    def lookup(self, key: Any) -> Any:
        """
        Get a configuration value that must exist.

        Raises:
            ConfigKeyError: If the key is not present.
        """
        try:
            return self._data[key]
        except KeyError:
            raise ConfigKeyError(key, self._path) from None

    def get_nested(self, path: str, default: Any = None) -> Any:
        """
        Get a nested configuration value using dot notation.

        Args:
            path: Dot separated keys (e.g. "database.host").
            default: Value to return if any part of the path is missing.

        Examples:
            >>> config.get_nested('database.port', 5432)
            5432
        """
        current = self._data
        for key in path.split('.'):
            if isinstance(current, dict) and key in current:
                current = current[key]
            else:
                return default
        return current

    def property_names(self) -> List[Any]:
        """
        List the configuration keys.

        Examples:
            >>> config.property_names()
            ['url', 'key', 'secret', 'timeout']
        """
        return list(self._data.keys())

    def as_dict(self) -> Dict[Any, Any]:
        """Return a deep copy of the configuration values."""
        return copy.deepcopy(self._data)

    def __getitem__(self, key: Any) -> Any:
        return self.lookup(key)

    def __getattr__(self, name: str) -> Any:
        # Only called when normal attribute lookup fails
        if name.startswith('_'):
            raise AttributeError(name)
        return self.lookup(name)

    def __contains__(self, key: Any) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[Any]:
        return iter(self.property_names())

    def __len__(self) -> int:
        return len(self._data)

    def __dir__(self) -> List[str]:
        names = set(super().__dir__())
        names.update(k for k in self._data if isinstance(k, str))
        return sorted(names)

    def __repr__(self) -> str:
        return f"ConfigData(app_name={self._app_name!r}, mode={self._mode!r}, path='{self._path}')"


def open_config(app_name: str, mode: Any, defaults: Optional[Mapping[str, Any]] = None,
                home: Optional[str] = None) -> ConfigData:
    """
    Open the configuration store for an application and mode.

    See ConfigData for the arguments and the errors raised.
    """
    return ConfigData(app_name, mode, defaults=defaults, home=home)
