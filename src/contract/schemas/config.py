"""ContractConfig: defaults for the contract package.

Configuration only covers ambient behavior (logging). It never changes
whether a check raises, its category, or its message text.
"""

from typing import Literal
from pydantic import Field, field_validator
from contract.schemas.base import ContractBaseModel

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LoggingConfig(ContractBaseModel):
    """Logging configuration for the ``contract`` logger."""
    level: LogLevel = "INFO"
    attach_handler: bool = Field(False, description="Attach a console handler to the package logger")

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v):
        """Accept lower-case level names."""
        if isinstance(v, str):
            return v.upper().strip()
        return v


class ContractConfig(ContractBaseModel):
    """Complete configuration with all defaults.

    Checks cannot be switched off: a violation always raises.
    """

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
