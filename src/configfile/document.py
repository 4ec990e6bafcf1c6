"""
Reading and writing YAML configuration documents.
"""

import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, Mapping, Union

import yaml

from .errors import ConfigParseError, ConfigWriteError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def read_document(file_path: PathLike) -> Dict[Any, Any]:
    """
    Read a YAML configuration document.

    Args:
        file_path: Path to the YAML file.

    Returns:
        The top-level mapping. An empty document gives an empty dictionary.

    Raises:
        ConfigParseError: If the file is not valid YAML or its top level
            is not a mapping.
        OSError: If the file cannot be read.
    """
    path = Path(file_path)
    logger.debug(f"Reading YAML file: {path}")

    with open(path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigParseError(path, str(e)) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigParseError(path, f"expected a mapping at the top level, got {type(data).__name__}")
    return data


def write_document(data: Mapping[Any, Any], file_path: PathLike) -> Path:
    """
    Write a mapping to a YAML file as a block mapping.

    Keys are written in insertion order. Parent directories are created
    when missing. The document is serialized before anything touches the
    disk and is moved into place only once fully written, so a failed
    write never leaves a truncated file behind.

    Args:
        data: The mapping to write.
        file_path: Path to the output file.

    Returns:
        Path: The path written.

    Raises:
        ConfigWriteError: If a value cannot be represented in YAML.
        OSError: If the directory or file cannot be written.
    """
    path = Path(file_path)

    try:
        text = yaml.safe_dump(dict(data), default_flow_style=False, sort_keys=False)
    except yaml.YAMLError as e:
        raise ConfigWriteError(path, str(e)) from e

    path.parent.mkdir(parents=True, exist_ok=True)

    fd, temp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=str(path.parent))
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(text)
        os.replace(temp_name, str(path))
    except OSError:
        if os.path.exists(temp_name):
            os.unlink(temp_name)
        raise

    logger.debug(f"YAML data written to {path}")
    return path
