"""Centralized failure taxonomy for contract violations.

Contracts fail fast, loud, and once. Every violation raises the same
exception type; the category tells the caller which kind of assumption
was broken.
"""

from enum import Enum


class Category(str, Enum):
    """Kind of contract that was violated."""
    REQUIRES = "requires"
    ENSURES = "ensures"
    ASSERT = "assert"
    FAIL = "fail"
    INVARIANT = "invariant"


class ContractViolation(RuntimeError):
    """Raised when a contract is violated.

    This indicates a bug in program logic, not bad user input or a
    recoverable condition. The category points at where the bug lives:

    - requires: the caller broke a pre-condition
    - ensures: the implementation broke its post-condition
    - assert: an assumption about intermediate state was wrong
    - fail: a path believed unreachable was executed
    - invariant: a stateful entity reached an invalid state

    Key distinction:
    - ValueError: User input error
    - ValidationError: Config error (handled by Pydantic)
    - ContractViolation: Programmer error

    Parameters
    ----------
    category : Category or str
        Kind of contract. Strings are looked up by value.
    message : str
        Fully formatted message. Stored as-is and never changed.
    """

    def __init__(self, category, message: str):
        self._category = Category(category)
        self._message = message
        super().__init__(message)

    @property
    def category(self) -> Category:
        return self._category

    @property
    def message(self) -> str:
        return self._message

    def error(self) -> str:
        """Return the formatted violation message."""
        return self._message

    def is_requires(self) -> bool:
        """True when raised by a failed pre-condition."""
        return self._category is Category.REQUIRES

    def is_ensures(self) -> bool:
        """True when raised by a failed post-condition."""
        return self._category is Category.ENSURES

    def is_assert(self) -> bool:
        """True when raised by a failed assertion."""
        return self._category is Category.ASSERT

    def is_fail(self) -> bool:
        """True when raised by an executed fail statement."""
        return self._category is Category.FAIL

    def is_invariant(self) -> bool:
        """True when raised by a failed invariant."""
        return self._category is Category.INVARIANT

    def __str__(self) -> str:
        return self._message

    def __repr__(self) -> str:
        return f"ContractViolation({self._category.value!r}, {self._message!r})"

    def __eq__(self, other):
        if not isinstance(other, ContractViolation):
            return NotImplemented
        return (self._category, self._message) == (other._category, other._message)

    def __hash__(self):
        return hash((self._category, self._message))

    def __reduce__(self):
        return (self.__class__, (self._category, self._message))
