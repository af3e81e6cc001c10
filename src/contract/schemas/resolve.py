"""Configuration resolution and merging logic.

resolve_config() is the single entrypoint: it merges overrides over the
defaults and returns a validated ContractConfig.
"""

from typing import Union, Optional
from contract.schemas.config import ContractConfig


def deep_merge(base: dict, *overrides: dict) -> dict:
    """Deep merge multiple dictionaries.

    Later dictionaries override earlier ones. Nested dictionaries are
    merged recursively; other values are replaced.

    Examples
    --------
    >>> deep_merge({"a": 1, "b": {"c": 2}}, {"b": {"d": 3}})
    {'a': 1, 'b': {'c': 2, 'd': 3}}
    """
    result = base.copy()

    for override in overrides:
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = deep_merge(result[key], value)
            else:
                result[key] = value

    return result


def resolve_config(
    base: Optional[Union[dict, ContractConfig]] = None,
    overrides: Optional[Union[dict, ContractConfig]] = None,
) -> ContractConfig:
    """Resolve the final configuration from defaults and overrides.

    Parameters
    ----------
    base : dict or ContractConfig, optional
        Base layer. Defaults to ``ContractConfig()``.
    overrides : dict or ContractConfig, optional
        Values that replace the base layer, merged key by key.

    Returns
    -------
    ContractConfig
        Fully validated configuration

    Raises
    ------
    ValidationError
        If either layer or the merged result fails validation

    Examples
    --------
    >>> resolve_config(None, {"logging": {"level": "debug"}}).logging.level
    'DEBUG'
    """
    if base is None:
        base = ContractConfig()
    elif not isinstance(base, ContractConfig):
        base = ContractConfig.model_validate(base)

    if overrides is None:
        override_dict = {}
    elif isinstance(overrides, ContractConfig):
        override_dict = overrides.model_dump(exclude_unset=True)
    else:
        override_dict = overrides

    merged = deep_merge(base.model_dump(), override_dict)
    return ContractConfig.model_validate(merged)
