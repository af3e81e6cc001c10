"""Base contract enforcement functions.

Five checks cover the design-by-contract vocabulary:

- requires: pre-condition the caller must establish
- ensures: post-condition the implementation guarantees
- assert_: belief about intermediate state
- fail: marker for a path that must never execute
- invariant: consistency condition of a stateful entity

Each check is fail-fast: no recovery, no fallback, no silence. A false
condition raises ContractViolation at the point of the check and nothing
after it runs. A true condition returns None and does nothing else.
"""

import logging
from types import MappingProxyType
from typing import NoReturn

from contract.failure import Category, ContractViolation

__all__ = [
    "requires",
    "ensures",
    "assert_",
    "fail",
    "invariant",
    "format_message",
    "MESSAGE_TEMPLATES",
]

logger = logging.getLogger(__name__)


REQUIRES_MSG = "Pre-condition violated. Invalid implementation of calling code given method pre-condition [%s]."
ENSURES_MSG = "Post-condition violated. Invalid implementation of method given post-condition [%s]."
ASSERT_MSG = "Assertion violated. Invalid assumption about state of computation given assert condition [%s]."
FAIL_MSG = "Fail condition triggered. Invalid program path executed with failed condition [%s]. "
INVARIANT_MSG = "Invariant violated. Invalid state given invariant [%s]."

MESSAGE_TEMPLATES = MappingProxyType({
    Category.REQUIRES: REQUIRES_MSG,
    Category.ENSURES: ENSURES_MSG,
    Category.ASSERT: ASSERT_MSG,
    Category.FAIL: FAIL_MSG,
    Category.INVARIANT: INVARIANT_MSG,
})


def format_message(category, description: str) -> str:
    """Interpolate a description into the template of a category.

    The description is inserted literally, exactly once.

    Examples
    --------
    >>> format_message("invariant", "value must be positive")
    'Invariant violated. Invalid state given invariant [value must be positive].'
    """
    return MESSAGE_TEMPLATES[Category(category)] % (description,)


def _create(category: Category, description: str) -> ContractViolation:
    violation = ContractViolation(category, format_message(category, description))
    logger.debug("%s contract violated: %s", category.value, violation.message)
    return violation


def requires(condition: bool, description: str) -> None:
    """Enforce a pre-condition.

    A call is only valid if the condition holds on entry. A false
    condition indicates a bug in the caller.

    Parameters
    ----------
    condition : bool
        Pre-condition that must be true on entry.
    description : str
        Human-readable description of the condition.

    Raises
    ------
    ContractViolation
        With category REQUIRES, if condition is false.

    Examples
    --------
    >>> requires(obj is not None, "object must be provided")
    """
    if not condition:
        raise _create(Category.REQUIRES, description)


def ensures(condition: bool, description: str) -> None:
    """Enforce a post-condition.

    Establishes a condition the caller can rely on after the call
    returns. A false condition indicates a bug in the implementation.

    Raises
    ------
    ContractViolation
        With category ENSURES, if condition is false.
    """
    if not condition:
        raise _create(Category.ENSURES, description)


def assert_(condition: bool, description: str) -> None:
    """Enforce a belief about the state of the computation.

    A false condition means the reasoning about the program state needs
    to be revised.

    Raises
    ------
    ContractViolation
        With category ASSERT, if condition is false.
    """
    if not condition:
        raise _create(Category.ASSERT, description)


def fail(description: str) -> NoReturn:
    """Mark a program path that must never execute.

    Always raises. Reaching this call means the understanding of the
    control flow needs to be revised.

    Raises
    ------
    ContractViolation
        With category FAIL, unconditionally.
    """
    raise _create(Category.FAIL, description)


def invariant(condition: bool, description: str) -> None:
    """Enforce an invariant of a stateful entity.

    An invariant holds before and after every public operation on the
    entity. Entities usually call this once per constraint from their
    own ``invariant()`` method.

    Raises
    ------
    ContractViolation
        With category INVARIANT, if condition is false.
    """
    if not condition:
        raise _create(Category.INVARIANT, description)
