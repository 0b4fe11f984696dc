"""YAML loading for access-control configuration files.

Navigation catalogs and route rules are static configuration loaded once
at process start. This module only reads and validates the file shape;
the navigation package turns the parsed mapping into typed objects.
"""

import os
from pathlib import Path
from typing import Any, Dict, Union

import yaml


def load_config(config_path: Union[str, Path]) -> Dict[str, Any]:
    """Load configuration from YAML file.

    Args:
        config_path: Path to configuration file

    Returns:
        Configuration dictionary

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If config file is invalid YAML
        TypeError: If the document root is not a mapping
    """
    config_file = Path(config_path)

    if not config_file.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with config_file.open("r") as f:
        config = yaml.safe_load(f)

    if config is None:
        config = {}

    if not isinstance(config, dict):
        raise TypeError(
            f"Configuration root must be a mapping, got {type(config).__name__}"
        )

    return _expand_env_vars(config)


def _expand_env_vars(obj: Any) -> Any:
    """Recursively expand environment variables in configuration.

    Args:
        obj: Configuration object (dict, list, str, etc.)

    Returns:
        Configuration with expanded environment variables
    """
    if isinstance(obj, dict):
        return {key: _expand_env_vars(value) for key, value in obj.items()}
    elif isinstance(obj, list):
        return [_expand_env_vars(item) for item in obj]
    elif isinstance(obj, str):
        return os.path.expandvars(obj)
    else:
        return obj
