"""
Assembly Context — Scope Tracker
==================================
Attributes registrations and disables to the configuration phase
that performed them.

Rules:
- Exactly one scope may be open at a time (no nesting)
- open() and close() must alternate
- With no open scope the Application scope is current
- A scope is a type: a built-in marker or a bundle/module class

This is NOT a lock. It attributes work, it does not guard it.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from enum import Enum
from typing import Iterator, Optional

from assembly.context.errors import ScopeAlreadyOpenError, ScopeNotOpenError

logger = logging.getLogger("assembly.context")


# ══════════════════════════════════════════════════════════════
# BUILT-IN SCOPE MARKERS
# ══════════════════════════════════════════════════════════════

class Application:
    """Root scope: items registered directly by the application."""


class ClasspathScan:
    """Items discovered by classpath scanning."""


class BundleLookup:
    """Bundles resolved by the lookup mechanism."""


class HostFrameworkBundleAdapter:
    """Bundles recognized from the host framework's own bundles."""


class Configurator:
    """External configurators (mostly test overrides)."""


class DisablePredicate:
    """Synthetic scope: an item was disabled by a predicate, not a caller."""


class ConfigScope(Enum):
    """Built-in scopes. Bundle scopes are their own bundle class."""

    APPLICATION = Application
    CLASSPATH_SCAN = ClasspathScan
    BUNDLE_LOOKUP = BundleLookup
    HOST_FRAMEWORK_BUNDLE_ADAPTER = HostFrameworkBundleAdapter
    CONFIGURATOR = Configurator
    DISABLE_PREDICATE = DisablePredicate

    @property
    def type(self) -> type:
        return self.value

    @classmethod
    def recognize(cls, scope: type) -> Optional["ConfigScope"]:
        """Built-in member for a scope type, None for bundle scopes."""
        for member in cls:
            if member.value is scope:
                return member
        return None


# ══════════════════════════════════════════════════════════════
# SCOPE TRACKER
# ══════════════════════════════════════════════════════════════

class ScopeTracker:
    """
    Holds the single currently open scope.

    Usage:
        tracker = ScopeTracker()
        tracker.open(ClasspathScan)
        tracker.current_scope()   # ClasspathScan
        tracker.close()
        tracker.current_scope()   # Application
    """

    def __init__(self) -> None:
        self._current: Optional[type] = None

    def open(self, scope: type) -> None:
        """
        Open a scope.

        Raises:
            TypeError: If scope is not a type.
            ScopeAlreadyOpenError: If another scope is still open.
        """
        if not isinstance(scope, type):
            raise TypeError(
                f"Scope must be a class, got {type(scope).__name__}."
            )
        if self._current is not None:
            raise ScopeAlreadyOpenError(self._current, scope)
        self._current = scope
        logger.debug(f"Scope opened: {scope.__qualname__}")

    def close(self) -> None:
        """
        Close the open scope.

        Raises:
            ScopeNotOpenError: If no scope is open.
        """
        if self._current is None:
            raise ScopeNotOpenError()
        logger.debug(f"Scope closed: {self._current.__qualname__}")
        self._current = None

    def current_scope(self) -> type:
        return self._current if self._current is not None else Application

    @property
    def is_open(self) -> bool:
        return self._current is not None

    @contextmanager
    def scoped(self, scope: type) -> Iterator[type]:
        """Open scope for the duration of a with-block."""
        self.open(scope)
        try:
            yield scope
        finally:
            self.close()
