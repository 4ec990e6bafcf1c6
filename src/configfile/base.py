"""
Base class for configfile command-line tools.

This module provides the logging setup and the standard arguments shared
by the tools in this package.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional
import logging

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class ConfigTool(ABC):
    """Base class for all configfile tools."""

    def __init__(self, home: Optional[str] = None, log_level: str = 'WARNING') -> None:
        """
        Initialize the tool.

        Args:
            home: Home directory override. Defaults to the HOME environment variable.
            log_level: Name of the logging level (e.g. "DEBUG", "INFO").
        """
        self.home = home
        self.setup_logging(log_level)

    @staticmethod
    def add_standard_arguments(parser):
        """
        Add standard arguments that should be consistent across all command-line tools.

        Args:
            parser: The ArgumentParser instance to add arguments to
        """
        parser.add_argument("--home", default=None,
                            help="Home directory to read configuration from (default: $HOME)")
        parser.add_argument("--log-level", default="WARNING",
                            help="Logging level: DEBUG, INFO, WARNING or ERROR (default: WARNING)")

    @staticmethod
    def setup_logging(level: str = 'WARNING'):
        """
        Configure the root logger.

        Args:
            level: Name of the logging level. Unknown names fall back to WARNING.
        """
        numeric_level = getattr(logging, str(level).upper(), logging.WARNING)
        if not isinstance(numeric_level, int):
            numeric_level = logging.WARNING

        # Reset any existing handlers to avoid duplicated logs
        for handler in logging.root.handlers[:]:
            logging.root.removeHandler(handler)

        logging.basicConfig(level=numeric_level, format=LOG_FORMAT, datefmt=DATE_FORMAT)
        logging.getLogger().setLevel(numeric_level)

        logger.debug(f"Logging initialized with level: {logging.getLevelName(numeric_level)}")

    @abstractmethod
    def run(self, *args, **kwargs) -> Any:
        """
        Run the tool. Must be implemented by subclasses.

        Returns:
            The result of running the tool.
        """
        pass
