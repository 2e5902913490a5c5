"""
Configuration Loader

Loads YAML configuration files for the HTTP fetcher and the
extraction pattern table.
"""

import os
from pathlib import Path
from typing import Any, Dict, List

import yaml

from .errors import ConfigError

# Environment variables that override values from fetcher.yaml
ENV_TIMEOUT = "PRODUCT_FETCHER_TIMEOUT"
ENV_MAX_RETRIES = "PRODUCT_FETCHER_MAX_RETRIES"


def _get_config_dir() -> Path:
    """Get the config directory path."""
    # Try the directory shipped inside the package first
    module_dir = Path(__file__).parent.parent
    config_dir = module_dir / 'config'

    if config_dir.exists():
        return config_dir

    # Try current working directory
    cwd_config = Path.cwd() / 'config'
    if cwd_config.exists():
        return cwd_config

    raise ConfigError(
        f"Config directory not found. Tried: {config_dir}, {cwd_config}"
    )


def load_config(filename: str) -> Dict[str, Any]:
    """
    Load a YAML configuration file.

    Args:
        filename: Name of the config file (e.g., 'fetcher.yaml')

    Returns:
        Parsed YAML content as dictionary

    Raises:
        ConfigError: If the file doesn't exist or is not a YAML mapping
    """
    config_path = _get_config_dir() / filename

    if not config_path.exists():
        raise ConfigError(f"Config file not found: {config_path}")

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a mapping at the top of {config_path}")

    return data


def load_fetcher_settings() -> Dict[str, Any]:
    """
    Load HTTP fetcher settings, with environment overrides applied.

    Returns:
        Dictionary with keys 'timeout' (seconds), 'max_retries' and 'headers'

    Example:
        {
            'timeout': 15.0,
            'max_retries': 3,
            'headers': {'User-Agent': 'Mozilla/5.0 ...', ...},
        }
    """
    config = load_config('fetcher.yaml')
    http = config.get('http', {}) or {}

    settings = {
        'timeout': float(http.get('timeout', 15)),
        'max_retries': int(http.get('max_retries', 1)),
        'headers': dict(http.get('headers', {}) or {}),
    }

    timeout = os.environ.get(ENV_TIMEOUT)
    if timeout:
        try:
            settings['timeout'] = float(timeout)
        except ValueError as e:
            raise ConfigError(f"{ENV_TIMEOUT} must be a number, got {timeout!r}") from e

    max_retries = os.environ.get(ENV_MAX_RETRIES)
    if max_retries:
        try:
            settings['max_retries'] = int(max_retries)
        except ValueError as e:
            raise ConfigError(f"{ENV_MAX_RETRIES} must be an integer, got {max_retries!r}") from e

    if settings['max_retries'] < 1:
        settings['max_retries'] = 1

    return settings


def load_pattern_table() -> List[Dict[str, Any]]:
    """
    Load the extraction rule table.

    Returns:
        List of rule dictionaries in declaration order

    Example:
        [
            {'id': 'jsonld.name', 'field': 'title', 'tier': 'structured',
             'group': 1, 'pattern': '"name"\\s*:\\s*"([^"]+)"'},
            ...
        ]
    """
    config = load_config('patterns.yaml')
    rules = config.get('rules')
    if not isinstance(rules, list):
        raise ConfigError("patterns.yaml must define a 'rules' list")
    return rules
