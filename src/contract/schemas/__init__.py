"""Pydantic configuration schemas for the contract package.

Exports
-------
resolve_config : function
    Single entrypoint for configuration resolution
ContractConfig : class
    Complete configuration with defaults
LoggingConfig : class
    Logging settings for the package logger
"""

from contract.schemas.resolve import resolve_config
from contract.schemas.config import ContractConfig, LoggingConfig

__all__ = [
    'resolve_config',
    'ContractConfig',
    'LoggingConfig',
]
