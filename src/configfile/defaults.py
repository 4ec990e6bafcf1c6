"""Default values written to a newly created configuration file."""

from typing import Any, Dict


def default_config_data() -> Dict[str, Any]:
    """
    Generate default configuration data.

    A new dictionary is built on every call, so callers may modify the
    result freely.

    Returns:
        Dict[str, Any]: The default configuration values.
    """
    return {
        "url": "https://api.example.com",
        "key": "abc123",
        "secret": "def456",
        "timeout": 10,
    }
