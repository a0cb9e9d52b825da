"""
Assembly Context — Errors
===========================
Error types for the item registry.

Duplicate registration is NOT an error (it is tracked).
Unknown items on query are NOT an error (None is returned).
Only caller contract violations are raised.
"""


class ItemRegistryError(Exception):
    """Base error for item registry operations."""
    pass


class IllegalStateError(ItemRegistryError):
    """Registry used out of order. Always a caller bug."""
    pass


class ScopeAlreadyOpenError(IllegalStateError):
    """A scope was opened while another one is still open."""

    def __init__(self, current_scope: type, new_scope: type):
        self.current_scope = current_scope
        self.new_scope = new_scope
        super().__init__(
            f"State error: scope '{_scope_name(current_scope)}' not closed. "
            f"Cannot open '{_scope_name(new_scope)}'."
        )


class ScopeNotOpenError(IllegalStateError):
    """close() called with no open scope."""

    def __init__(self):
        super().__init__(
            "State error: trying to close not opened scope."
        )


def _scope_name(scope: type) -> str:
    return getattr(scope, "__qualname__", repr(scope))
