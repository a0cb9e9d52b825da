"""
Assembly Context — Disable Predicate Helper Tests
===================================================
"""

import pytest

from assembly.binding.markers import alternate_managed as alternate_marker
from assembly.binding.markers import lazy_binding
from assembly.context.disables import (
    ItemPredicate,
    alternate_managed,
    bundle,
    extension,
    in_package,
    installer,
    item_type,
    lazy,
    module,
    registered_by,
)
from assembly.context.items import ConfigItem
from assembly.context.registry import ItemRegistry
from assembly.context.scope import Application, ClasspathScan


LegacyResource = type("LegacyResource", (), {"__module__": "legacy.resources"})
LegacyRoot = type("LegacyRoot", (), {"__module__": "legacy"})
ModernResource = type("ModernResource", (), {"__module__": "legacyplus.resources"})


@lazy_binding
class LazyResource:
    pass


@alternate_marker
class HkFilter:
    pass


class ScanInstaller:
    pass


class CoreInstaller:
    pass


@pytest.fixture
def registry():
    return ItemRegistry()


# ══════════════════════════════════════════════════════════════
# FACTORIES
# ══════════════════════════════════════════════════════════════

class TestFactories:

    def test_item_type(self):
        record = ConfigItem.EXTENSION.new_record(LazyResource)
        assert item_type(LazyResource, HkFilter)(record)
        assert not item_type(HkFilter)(record)

    def test_in_package_matches_subpackages_only(self):
        assert in_package("legacy")(ConfigItem.EXTENSION.new_record(LegacyResource))
        assert in_package("legacy")(ConfigItem.EXTENSION.new_record(LegacyRoot))
        assert not in_package("legacy")(ConfigItem.EXTENSION.new_record(ModernResource))

    def test_category_shortcuts(self):
        record = ConfigItem.INSTALLER.new_record(CoreInstaller)
        assert installer()(record)
        assert not extension()(record)
        assert not bundle()(record)
        assert not module()(record)

    def test_registered_by(self, registry):
        registry.register_installers(CoreInstaller)
        registry.register_installers_from_scan([ScanInstaller])
        predicate = registered_by(ClasspathScan)
        assert predicate(registry.info_of(ScanInstaller))
        assert not predicate(registry.info_of(CoreInstaller))
        assert registered_by(Application)(registry.info_of(CoreInstaller))

    def test_lazy_and_alternate(self, registry):
        registry.register_extensions(LazyResource, HkFilter)
        assert lazy()(registry.info_of(LazyResource))
        assert not lazy()(registry.info_of(HkFilter))
        assert alternate_managed()(registry.info_of(HkFilter))


# ══════════════════════════════════════════════════════════════
# COMPOSITION
# ══════════════════════════════════════════════════════════════

class TestComposition:

    def test_and_or_not(self):
        record = ConfigItem.EXTENSION.new_record(LegacyResource)
        assert (extension() & in_package("legacy"))(record)
        assert not (installer() & in_package("legacy"))(record)
        assert (installer() | in_package("legacy"))(record)
        assert not (~extension())(record)

    def test_composes_with_plain_callables(self):
        record = ConfigItem.EXTENSION.new_record(LegacyResource)
        predicate = extension() & (lambda r: r.item_type.__name__.startswith("Legacy"))
        assert isinstance(predicate, ItemPredicate)
        assert predicate(record)

    def test_description(self):
        predicate = installer() & ~registered_by(Application)
        assert repr(predicate) == (
            "ItemPredicate((category in [installer] and "
            "not registered by [Application]))"
        )


# ══════════════════════════════════════════════════════════════
# WITH REGISTRY
# ══════════════════════════════════════════════════════════════

class TestWithRegistry:

    def test_disable_scanned_installers(self, registry):
        registry.register_installers(CoreInstaller)
        registry.register_installers_from_scan([ScanInstaller])
        registry.register_disable_predicates(
            installer() & ~registered_by(Application)
        )
        assert registry.enabled_installers() == [CoreInstaller]

    def test_disable_legacy_package(self, registry):
        registry.register_disable_predicates(extension() & in_package("legacy"))
        registry.register_extensions(LegacyResource, ModernResource, LazyResource)
        assert registry.enabled_extensions() == [ModernResource, LazyResource]
