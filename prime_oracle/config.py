"""
Configuration loading.

Reads config/default.yaml (or a user-supplied file) and overlays it on the
built-in defaults.
"""

import copy
from pathlib import Path
from typing import Any, Dict

import yaml

from .bounds import DEFAULT_MAX_SIEVE_LIMIT
from .errors import ConfigError

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent / 'config' / 'default.yaml'

DEFAULTS: Dict[str, Any] = {
    'max_sieve_limit': DEFAULT_MAX_SIEVE_LIMIT,
    'benchmark': {
        'limits': [10, 100, 1000, 10000, 100000, 1000000],
        'next_prime_inputs': [100, 1000, 1000000, 1000000000],
        'time_budget_seconds': 1.0,
    },
}


def _merge(base: dict, override: dict) -> dict:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_config(config: Dict[str, Any]) -> Dict[str, Any]:
    """Check types and ranges; raise ConfigError on the first problem."""
    max_limit = config['max_sieve_limit']
    if not _is_int(max_limit) or max_limit < 0:
        raise ConfigError(f"max_sieve_limit must be a non-negative integer, got {max_limit!r}")

    bench = config['benchmark']
    if not isinstance(bench, dict):
        raise ConfigError("benchmark must be a mapping")
    for key in ('limits', 'next_prime_inputs'):
        values = bench.get(key)
        if not isinstance(values, list) or not all(_is_int(v) for v in values):
            raise ConfigError(f"benchmark.{key} must be a list of integers")

    budget = bench.get('time_budget_seconds')
    if isinstance(budget, bool) or not isinstance(budget, (int, float)) or budget <= 0:
        raise ConfigError(f"benchmark.time_budget_seconds must be positive, got {budget!r}")
    return config


def load_config(path=None) -> Dict[str, Any]:
    """
    Load configuration.

    Parameters
    ----------
    path : str or Path, optional
        YAML file to read. When omitted, config/default.yaml is used if it
        exists, otherwise the built-in defaults.

    Returns
    -------
    dict
        Validated configuration.

    Raises
    ------
    ConfigError
        If an explicit path is missing, the document is not a mapping, or a
        value is out of range.
    """
    if path is None:
        path = DEFAULT_CONFIG_PATH
        if not path.exists():
            return validate_config(copy.deepcopy(DEFAULTS))

    path = Path(path)
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")

    with open(path) as f:
        try:
            loaded = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Could not parse {path}: {e}") from e

    if loaded is None:
        loaded = {}
    if not isinstance(loaded, dict):
        raise ConfigError(f"{path} must contain a mapping, got {type(loaded).__name__}")

    return validate_config(_merge(DEFAULTS, loaded))
