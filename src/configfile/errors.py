"""
Exceptions raised by the configuration file package.

I/O failures are not wrapped: they surface as the built-in OSError (IOError).
"""

from typing import Any, Optional


class ConfigError(Exception):
    """Base class for all configfile errors."""


class HomeDirectoryNotSetError(ConfigError, EnvironmentError):
    """Raised when no home directory is given and HOME is not set."""

    def __init__(self, variable: str = "HOME") -> None:
        self.variable = variable
        super().__init__(f"Environment variable '{variable}' is not set")


class ConfigParseError(ConfigError):
    """Raised when a configuration file is not a valid YAML mapping."""

    def __init__(self, path: Any, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot parse config file {path}: {reason}")


class ConfigKeyError(ConfigError, KeyError):
    """Raised by strict lookups when a key is not present."""

    def __init__(self, key: Any, path: Optional[Any] = None) -> None:
        self.key = key
        self.path = path
        super().__init__(key)

    def __str__(self) -> str:
        if self.path is None:
            return f"Configuration key not found: {self.key!r}"
        return f"Configuration key not found: {self.key!r} (in {self.path})"


class ConfigWriteError(ConfigError):
    """Raised when configuration values cannot be serialized to YAML."""

    def __init__(self, path: Any, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot write config file {path}: {reason}")
