"""
Configuration path resolution.

Configuration files live in ``<home>/.config/<app_name>/<mode>.yaml``.
Every function accepts an explicit ``home`` directory; when it is omitted
the ``HOME`` environment variable is used.
"""

import logging
import os
from enum import Enum
from pathlib import Path
from typing import Any, List, Optional

from .errors import HomeDirectoryNotSetError

logger = logging.getLogger(__name__)

HOME_VARIABLE = "HOME"
CONFIG_DIR_NAME = ".config"
CONFIG_EXTENSION = ".yaml"


class Mode(str, Enum):
    """Common configuration modes. Any other identifier is accepted as well."""

    DEV = "dev"
    TEST = "test"
    PROD = "prod"


def home_dir(home: Optional[str] = None) -> Path:
    """
    Return the home directory, reading HOME when none is given.

    Raises:
        HomeDirectoryNotSetError: If ``home`` is None and HOME is unset.
            An empty HOME is used as is (a relative path).
    """
    if home is None:
        home = os.environ.get(HOME_VARIABLE)
        if home is None:
            raise HomeDirectoryNotSetError(HOME_VARIABLE)
    return Path(home)


def mode_name(mode: Any) -> str:
    """Render a mode as the plain string used for its file name."""
    if isinstance(mode, Enum):
        return str(mode.value)
    return str(mode)


def config_base(home: Optional[str] = None) -> Path:
    """
    Get the base directory for configuration files.

    Args:
        home: Home directory. Defaults to the HOME environment variable.

    Returns:
        Path: ``<home>/.config``
    """
    return home_dir(home) / CONFIG_DIR_NAME


def config_dir(app_name: str, home: Optional[str] = None) -> Path:
    """
    Get the configuration directory for an application.

    Args:
        app_name: Name of the application, used as is.
        home: Home directory. Defaults to the HOME environment variable.

    Returns:
        Path: ``<home>/.config/<app_name>``
    """
    return config_base(home) / app_name


def config_file(app_name: str, mode: Any, home: Optional[str] = None) -> Path:
    """
    Get the path of the configuration file for an application and mode.

    Args:
        app_name: Name of the application.
        mode: Configuration mode (e.g. "dev", "test", Mode.PROD).
        home: Home directory. Defaults to the HOME environment variable.

    Returns:
        Path: ``<home>/.config/<app_name>/<mode>.yaml``
    """
    return config_dir(app_name, home) / f"{mode_name(mode)}{CONFIG_EXTENSION}"


def list_modes(app_name: str, home: Optional[str] = None) -> List[str]:
    """
    List the modes that have a configuration file for an application.

    Args:
        app_name: Name of the application.
        home: Home directory. Defaults to the HOME environment variable.

    Returns:
        List[str]: Sorted mode names (file names without the .yaml extension).
            Empty if the application has no configuration directory.

    Examples:
        >>> list_modes('MyApp')
        ['dev', 'prod', 'test']
    """
    directory = config_dir(app_name, home)
    if not directory.is_dir():
        logger.debug(f"No configuration directory at {directory}")
        return []
    return sorted(f.stem for f in directory.glob(f"*{CONFIG_EXTENSION}") if f.is_file())
