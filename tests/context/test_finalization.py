"""
Assembly Context — Finalization Tests
=======================================
Covers:
- Records synthesized for disabled-but-never-registered classes
- Disable sources merged into records
- Synthesized records stay out of the registered ledger
- Repeated finalization is ignored
"""

import pytest

from assembly.context.items import ConfigItem, ExtensionDetails
from assembly.context.registry import ItemRegistry
from assembly.context.scope import DisablePredicate
from assembly.stats.tracker import Stat


class Bar:
    pass


class Qux:
    pass


class ScopeThree:
    pass


class ScopeFour:
    pass


@pytest.fixture
def registry():
    return ItemRegistry()


class TestFinalization:

    def test_scenario_disable_then_register(self, registry):
        with registry.scope.scoped(ScopeThree):
            registry.disable(ConfigItem.EXTENSION, Bar)
        with registry.scope.scoped(ScopeFour):
            registry.register(ConfigItem.EXTENSION, Bar)

        assert Bar not in registry.enabled_items_of(ConfigItem.EXTENSION)

        registry.finalize_configuration()
        record = registry.info_of(Bar)
        assert record.disabled_by == [ScopeThree]
        assert record.registration_scope is ScopeFour

    def test_never_registered_gets_record(self, registry):
        registry.disable_installers(Qux)
        registry.finalize_configuration()

        record = registry.info_of(Qux)
        assert record is not None
        assert record.category is ConfigItem.INSTALLER
        assert not record.is_registered
        assert record.registration_scope is None
        assert record.registered_by == []
        assert not record.enabled
        assert registry.items_of(ConfigItem.INSTALLER) == []

    def test_synthesized_extension_has_empty_details(self, registry):
        registry.disable_extensions(Qux)
        registry.finalize_configuration()
        assert registry.info_of(Qux).details == ExtensionDetails()

    def test_every_disabled_class_has_sources(self, registry):
        registry.register_extensions(Bar)
        registry.register_disable_predicates(lambda r: r.item_type is Bar)
        registry.disable_modules(Qux)
        registry.finalize_configuration()

        for category in ConfigItem:
            for item_type in registry.disabled_of(category):
                record = registry.info_of(item_type)
                assert record is not None
                assert record.disabled_by

        assert registry.info_of(Bar).disabled_by == [DisablePredicate]

    def test_finalize_twice_ignored(self, registry):
        registry.disable_extensions(Qux)
        registry.finalize_configuration()
        record = registry.info_of(Qux)
        registry.finalize_configuration()

        assert registry.is_finalized
        assert registry.info_of(Qux) is record
        assert record.disabled_by == registry.info_of(Qux).disabled_by

    def test_finalization_timed(self, registry):
        registry.finalize_configuration()
        assert Stat.FINALIZATION_TIME.value in registry.stats.summary()

    def test_configuration_timed_until_finalization(self, registry):
        assert Stat.CONFIGURATION_TIME.value not in registry.stats.summary()
        registry.register_extensions(Bar)
        registry.finalize_configuration()
        assert Stat.CONFIGURATION_TIME.value in registry.stats.summary()

    def test_configuration_timer_stopped_once(self, registry):
        registry.finalize_configuration()
        first = registry.stats.value(Stat.CONFIGURATION_TIME)
        registry.finalize_configuration()
        assert registry.stats.value(Stat.CONFIGURATION_TIME) == first
