"""
Show Config Tool

Open the configuration for an application and mode (creating it with
default values if needed) and print its properties.
"""

import argparse
import logging
import sys
from typing import Any, Dict, Optional

import yaml

from .base import ConfigTool
from .errors import ConfigError, ConfigKeyError
from .store import open_config

__all__ = ['ShowConfig', 'format_value', 'main']


class ShowConfig(ConfigTool):
    """
    Print the properties of a configuration file.
    """

    def __init__(self, home: Optional[str] = None, log_level: str = 'WARNING') -> None:
        super().__init__(home, log_level)
        self.logger = logging.getLogger(self.__class__.__name__)

    def run(self, app_name: str, mode: str, key: Optional[str] = None) -> Dict[str, Any]:
        """
        Load the configuration and select the requested properties.

        Args:
            app_name: Name of the application.
            mode: Configuration mode.
            key: If given, only this property is returned.

        Returns:
            Mapping of property names to values.

        Raises:
            ConfigKeyError: If ``key`` is given and not configured.
        """
        config = open_config(app_name, mode, home=self.home)
        self.logger.info(f"Loaded {len(config)} properties from {config.path}")

        if key is not None:
            return {key: config.lookup(key)}
        return {name: config.get(name) for name in config.property_names()}


def format_value(value: Any) -> str:
    """
    Render a value the way it appears in the configuration file.

    Scalars are printed as is; mappings and lists as YAML block text.
    """
    if isinstance(value, (dict, list)):
        return yaml.safe_dump(value, default_flow_style=False, sort_keys=False).rstrip("\n")
    return str(value)


def main(argv=None):
    """
    Main function to run the tool from the command line.
    """
    parser = argparse.ArgumentParser(
        description="Show the configuration properties of an application mode."
    )
    parser.add_argument("app_name", help="Application name")
    parser.add_argument("mode", help="Configuration mode (e.g. dev, test, prod)")
    parser.add_argument("--key", "-k", default=None,
                        help="Print only the value of this property")

    ConfigTool.add_standard_arguments(parser)
    args = parser.parse_args(argv)

    tool = ShowConfig(home=args.home, log_level=args.log_level)
    try:
        result = tool.run(args.app_name, args.mode, args.key)
    except ConfigKeyError as e:
        tool.logger.error(str(e))
        print(f"Property '{args.key}' is not configured", file=sys.stderr)
        return 1
    except (ConfigError, OSError) as e:
        tool.logger.error(f"Error loading configuration: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.key is not None:
        print(format_value(result[args.key]))
    else:
        print(format_value(result))
    return 0


if __name__ == '__main__':
    sys.exit(main())
