"""
Assembly Context — Scope Tracker Tests
========================================
Covers:
- Default Application scope
- open/close alternation
- Contract violations (open while open, close while closed)
- scoped() context manager
- Built-in scope recognition
"""

import pytest

from assembly.context.errors import (
    IllegalStateError,
    ScopeAlreadyOpenError,
    ScopeNotOpenError,
)
from assembly.context.scope import (
    Application,
    ClasspathScan,
    ConfigScope,
    DisablePredicate,
    ScopeTracker,
)


class AuthBundle:
    pass


# ══════════════════════════════════════════════════════════════
# OPEN / CLOSE
# ══════════════════════════════════════════════════════════════

class TestOpenClose:

    def test_default_scope_is_application(self):
        tracker = ScopeTracker()
        assert tracker.current_scope() is Application
        assert not tracker.is_open

    def test_open_sets_current_scope(self):
        tracker = ScopeTracker()
        tracker.open(ClasspathScan)
        assert tracker.current_scope() is ClasspathScan
        assert tracker.is_open

    def test_close_restores_application(self):
        tracker = ScopeTracker()
        tracker.open(AuthBundle)
        tracker.close()
        assert tracker.current_scope() is Application

    def test_open_close_can_alternate(self):
        tracker = ScopeTracker()
        for scope in (ClasspathScan, AuthBundle, ClasspathScan):
            tracker.open(scope)
            assert tracker.current_scope() is scope
            tracker.close()


# ══════════════════════════════════════════════════════════════
# CONTRACT VIOLATIONS
# ══════════════════════════════════════════════════════════════

class TestContractViolations:

    def test_open_while_open_rejected(self):
        tracker = ScopeTracker()
        tracker.open(ClasspathScan)
        with pytest.raises(ScopeAlreadyOpenError, match="not closed") as exc:
            tracker.open(AuthBundle)
        assert exc.value.current_scope is ClasspathScan
        assert exc.value.new_scope is AuthBundle
        # original scope untouched
        assert tracker.current_scope() is ClasspathScan

    def test_close_without_open_rejected(self):
        tracker = ScopeTracker()
        with pytest.raises(ScopeNotOpenError):
            tracker.close()

    def test_double_close_rejected(self):
        tracker = ScopeTracker()
        tracker.open(ClasspathScan)
        tracker.close()
        with pytest.raises(IllegalStateError):
            tracker.close()

    def test_non_class_scope_rejected(self):
        tracker = ScopeTracker()
        with pytest.raises(TypeError, match="class"):
            tracker.open("classpath")


# ══════════════════════════════════════════════════════════════
# SCOPED CONTEXT MANAGER
# ══════════════════════════════════════════════════════════════

class TestScoped:

    def test_scoped_opens_and_closes(self):
        tracker = ScopeTracker()
        with tracker.scoped(AuthBundle) as scope:
            assert scope is AuthBundle
            assert tracker.current_scope() is AuthBundle
        assert not tracker.is_open

    def test_scoped_closes_on_error(self):
        tracker = ScopeTracker()
        with pytest.raises(RuntimeError):
            with tracker.scoped(AuthBundle):
                raise RuntimeError("boom")
        assert not tracker.is_open

    def test_scoped_not_nestable(self):
        tracker = ScopeTracker()
        with tracker.scoped(AuthBundle):
            with pytest.raises(ScopeAlreadyOpenError):
                with tracker.scoped(ClasspathScan):
                    pass
            assert tracker.current_scope() is AuthBundle


# ══════════════════════════════════════════════════════════════
# BUILT-IN SCOPES
# ══════════════════════════════════════════════════════════════

class TestConfigScope:

    def test_recognize_builtin(self):
        assert ConfigScope.recognize(ClasspathScan) is ConfigScope.CLASSPATH_SCAN
        assert ConfigScope.recognize(DisablePredicate) is ConfigScope.DISABLE_PREDICATE

    def test_bundle_scope_not_builtin(self):
        assert ConfigScope.recognize(AuthBundle) is None

    def test_type_property(self):
        assert ConfigScope.APPLICATION.type is Application
