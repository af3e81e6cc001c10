"""Root-level pytest fixtures for the contract test suite."""

import logging

import pytest

import contract


class Item:
    """Stateful entity guarded by an invariant.

    Mirrors the usual convention: ``invariant()`` calls the invariant
    check once per field it must preserve.
    """

    def __init__(self, name, value, obj):
        self.name = name
        self.value = value
        self.obj = obj

    def invariant(self):
        contract.invariant(not contract.is_empty(self.name), "name must be provided")
        contract.invariant(self.value >= 0, "value must be positive")
        contract.invariant(self.obj is not None, "object must be provided")


@pytest.fixture
def make_item():
    """Factory for Item entities with valid defaults.

    Examples
    --------
    >>> def test_negative(make_item):
    ...     item = make_item(value=-1)
    """
    def _make(name="item", value=1, obj=object()):
        return Item(name, value, obj)

    return _make


@pytest.fixture
def contract_logger():
    """The package logger, restored to its original state after the test."""
    logger = logging.getLogger("contract")
    level = logger.level
    handlers = logger.handlers[:]
    yield logger
    logger.setLevel(level)
    for handler in logger.handlers[:]:
        if handler not in handlers:
            logger.removeHandler(handler)
