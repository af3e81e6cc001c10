"""Shared Pydantic base for contract configs."""

from pydantic import BaseModel, ConfigDict


class ContractBaseModel(BaseModel):
    """Strict base for every config model in ``contract.schemas``.

    Unknown keys are errors, so a misspelt override fails loudly instead
    of being dropped. Assignments are validated like construction.
    """

    model_config = ConfigDict(
        extra='forbid',
        validate_assignment=True,
        str_strip_whitespace=True,
    )
