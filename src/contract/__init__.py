"""`contract` - design-by-contract checks that fail fast.

Calling code declares what it assumes and the checks halt at the first
broken assumption:

- requires: pre-conditions (bug in the caller)
- ensures: post-conditions (bug in the implementation)
- assert_: beliefs about intermediate state
- fail: paths that must never execute
- invariant: consistency of stateful entities

Every violation raises ContractViolation carrying its Category and a
fully formatted message. Nothing here recovers or retries; recovery, if
any, belongs to the caller at a higher frame.
"""

from contract.failure import Category, ContractViolation
from contract.base import (
    requires,
    ensures,
    assert_,
    fail,
    invariant,
    format_message,
    MESSAGE_TEMPLATES,
)
from contract.invariants import checked
from contract.util import is_empty

__version__ = "0.1.0"

__all__ = [
    "Category",
    "ContractViolation",
    "requires",
    "ensures",
    "assert_",
    "fail",
    "invariant",
    "format_message",
    "MESSAGE_TEMPLATES",
    "checked",
    "is_empty",
]
