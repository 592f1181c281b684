"""
Run configuration.

Loads a YAML file (config/default.yaml by default) over built-in defaults.
"""

import copy
import yaml
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .bounds import U32_MAX, MAX_PRIME_COUNT, check_integer

DEFAULT_CONFIG_PATH = Path('config/default.yaml')

DEFAULTS: Dict[str, Any] = {
    'limit': 10_000,
    'n_primes': 1000,
    'factor_samples': [360, 1001, 65536, 4294967291, 4294967295],
    'seed': 123,
    'sample_size': 200,
    'output_dir': 'data/results',
    'figures': True,
}

# Integer keys and their inclusive ceilings
_INT_CEILINGS = {
    'limit': U32_MAX,
    'n_primes': MAX_PRIME_COUNT,
    'seed': U32_MAX,
    'sample_size': 10**7,
}


def validate_config(config: Dict[str, Any]) -> Dict[str, Any]:
    """
    Check keys and value types of a configuration dict.

    Raises
    ------
    ValueError
        On unknown keys or out-of-range values.
    """
    unknown = sorted(set(config) - set(DEFAULTS))
    if unknown:
        raise ValueError(f"Unknown config keys: {', '.join(unknown)}")

    for key, ceiling in _INT_CEILINGS.items():
        try:
            check_integer(config[key], key, ceiling)
        except TypeError as exc:
            raise ValueError(str(exc)) from None

    samples = config['factor_samples']
    if not isinstance(samples, list):
        raise ValueError("factor_samples must be a list of integers")
    for value in samples:
        try:
            check_integer(value, 'factor_samples entry')
        except TypeError as exc:
            raise ValueError(str(exc)) from None

    if not isinstance(config['figures'], bool):
        raise ValueError("figures must be true or false")

    if not isinstance(config['output_dir'], (str, Path)):
        raise ValueError("output_dir must be a path string")

    return config


def load_config(path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """
    Load configuration from a YAML file merged over DEFAULTS.

    Parameters
    ----------
    path : str or Path, optional
        YAML file. If None, DEFAULT_CONFIG_PATH is used when it exists,
        otherwise the defaults alone are returned.

    Returns
    -------
    dict
        Validated configuration.
    """
    config = copy.deepcopy(DEFAULTS)

    if path is None:
        if not DEFAULT_CONFIG_PATH.exists():
            return validate_config(config)
        path = DEFAULT_CONFIG_PATH

    with open(path) as f:
        loaded = yaml.safe_load(f)

    if loaded is None:
        loaded = {}
    if not isinstance(loaded, dict):
        raise ValueError(f"Config file {path} must contain a mapping")

    config.update(loaded)
    return validate_config(config)
