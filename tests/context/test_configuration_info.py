"""
Assembly Context — Configuration Info Tests
=============================================
"""

import pytest

from assembly.context.info import ConfigurationInfo, scope_name
from assembly.context.items import ConfigItem
from assembly.context.registry import ItemRegistry
from assembly.context.scope import ClasspathScan, DisablePredicate


class Users:
    pass


class Orders:
    pass


class Legacy:
    pass


@pytest.fixture
def finalized_registry():
    registry = ItemRegistry()
    registry.register_extensions(Users, Orders)
    registry.register_extensions(Users)
    registry.disable_extensions(Legacy, Orders)
    registry.finalize_configuration()
    return registry


class TestConfigurationInfo:

    def test_items_include_disabled_only_last(self, finalized_registry):
        info = ConfigurationInfo(finalized_registry)
        assert info.items(ConfigItem.EXTENSION) == [Users, Orders, Legacy]

    def test_items_filtered(self, finalized_registry):
        info = ConfigurationInfo(finalized_registry)
        assert info.items(ConfigItem.EXTENSION, lambda r: not r.enabled) == [
            Orders,
            Legacy,
        ]
        assert info.items(ConfigItem.EXTENSION, lambda r: r.is_registered) == [
            Users,
            Orders,
        ]

    def test_enabled_and_disabled(self, finalized_registry):
        info = ConfigurationInfo(finalized_registry)
        assert info.enabled(ConfigItem.EXTENSION) == [Users]
        assert info.disabled(ConfigItem.EXTENSION) == [Legacy, Orders]

    def test_duplicates(self, finalized_registry):
        info = ConfigurationInfo(finalized_registry)
        assert [r.item_type for r in info.duplicates()] == [Users]

    def test_info_absent(self, finalized_registry):
        info = ConfigurationInfo(finalized_registry)
        assert info.info(ConfigurationInfo) is None
        assert info.items(ConfigItem.BUNDLE) == []


class BillingBundle:
    pass


class TestDescribe:

    def test_scope_names(self):
        assert scope_name(ClasspathScan) == "CLASSPATH_SCAN"
        assert scope_name(DisablePredicate) == "DISABLE_PREDICATE"
        assert scope_name(BillingBundle) == "bundle:BillingBundle"

    def test_describe_registered_record(self):
        registry = ItemRegistry()
        with registry.scope.scoped(BillingBundle):
            registry.register_extensions(Orders)
        registry.get_or_register_extension(Orders, from_scan=True)
        registry.register_disable_predicates(lambda r: r.item_type is Orders)
        registry.finalize_configuration()

        info = ConfigurationInfo(registry)
        assert info.describe(info.info(Orders)) == {
            "category": "extension",
            "type": "Orders",
            "registration_scope": "bundle:BillingBundle",
            "registered_by": ["bundle:BillingBundle", "CLASSPATH_SCAN"],
            "registration_attempts": 2,
            "disabled_by": ["DISABLE_PREDICATE"],
            "enabled": False,
        }

    def test_describe_disabled_only_record(self, finalized_registry):
        info = ConfigurationInfo(finalized_registry)
        described = info.describe(info.info(Legacy, ConfigItem.EXTENSION))
        assert described["registration_scope"] is None
        assert described["registered_by"] == []
        assert described["disabled_by"] == ["APPLICATION"]
