"""Per-entity invariant convention.

An entity that wants invariant enforcement defines its own ``invariant()``
method calling ``contract.invariant`` once per field or relationship it
must preserve. Public mutating methods check it on entry and on exit.

``checked`` wires that up for a single method. It is opt-in: nothing in
the checking functions requires entities to use it.

Examples
--------
>>> class Account:
...     def __init__(self, owner, balance):
...         self.owner = owner
...         self.balance = balance
...         self.invariant()
...
...     def invariant(self):
...         contract.invariant(not is_empty(self.owner), "owner must be provided")
...         contract.invariant(self.balance >= 0, "balance must be positive")
...
...     @checked
...     def withdraw(self, amount):
...         contract.requires(amount > 0, "amount must be positive")
...         self.balance -= amount
"""

import functools

__all__ = ["checked"]


def checked(method):
    """Check ``self.invariant()`` before and after a method call.

    For ``__init__`` the invariant is only checked after the call, since
    the entity has no state on entry, and only by the most-derived
    constructor: a base ``__init__`` reached through ``super()`` leaves the
    check to the subclass, whose fields are not set yet.

    The wrapped method's return value is passed through. If the method
    raises, the exit check is skipped and the original exception
    propagates.
    """
    is_init = method.__name__ == "__init__"

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        if not is_init:
            self.invariant()
        result = method(self, *args, **kwargs)
        if not is_init or type(self).__init__ is wrapper:
            self.invariant()
        return result

    return wrapper
