"""
Assembly Context — Item Registry
==================================
Central ledger of every configuration item registered during
bootstrap.

Rules:
- Items are identified by class, even when an instance is registered
- Each class is registered once per category; repeated attempts are
  counted, not stored
- Registration order is preserved and meaningful
- Items may be disabled explicitly (by class) or by predicate
- Disabling may happen before the item is ever registered
- Predicates apply to items registered before AND after them
- First matching predicate wins

Lifecycle:
    1. Create registry (one per bootstrap run)
    2. Register / disable items, opening scopes per configuration phase
    3. finalize_configuration()
    4. Query enabled items to materialize wiring

Not thread-safe. Bootstrap is a single sequential pass.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Optional

from assembly.binding.markers import is_alternate_managed, is_lazy
from assembly.context.errors import ItemRegistryError
from assembly.context.items import ConfigItem, ItemRecord, resolve_type
from assembly.context.scope import ConfigScope, ScopeTracker
from assembly.lifecycle.broadcaster import LifecycleBroadcaster
from assembly.options.models import InstallerOptions, Option
from assembly.options.store import OptionsStore
from assembly.stats.tracker import Stat, StatsTracker

logger = logging.getLogger("assembly.context")

Predicate = Callable[[ItemRecord], bool]

# Categories swept when new disable predicates arrive, in sweep order.
PREDICATE_SWEEP_ORDER = (
    ConfigItem.MODULE,
    ConfigItem.BUNDLE,
    ConfigItem.EXTENSION,
    ConfigItem.INSTALLER,
)


class ItemRegistry:
    """
    Registry of bootstrap configuration items.

    Usage:
        registry = ItemRegistry()

        registry.register_extensions(UserResource, HealthCheck)
        registry.disable_extensions(HealthCheck)
        registry.register_disable_predicates(lambda r: r.lazy)

        registry.finalize_configuration()
        registry.enabled_extensions()   # [UserResource]
    """

    def __init__(
        self,
        options: Optional[OptionsStore] = None,
        stats: Optional[StatsTracker] = None,
        lifecycle: Optional[LifecycleBroadcaster] = None,
    ):
        self._items: dict[ConfigItem, list[Any]] = {}
        self._records: dict[tuple[ConfigItem, type], ItemRecord] = {}
        self._disabled: dict[ConfigItem, list[type]] = {}
        self._disabled_by: dict[tuple[ConfigItem, type], list[type]] = {}
        self._predicates: list[Predicate] = []
        self._finalized = False

        self.scope = ScopeTracker()
        self._options = options if options is not None else OptionsStore()
        self._stats = stats if stats is not None else StatsTracker()
        self._lifecycle = (
            lifecycle
            if lifecycle is not None
            else LifecycleBroadcaster(self._options.options_info())
        )
        self._stats.start(Stat.CONFIGURATION_TIME)

    # ══════════════════════════════════════════════════════════
    # SCOPE
    # ══════════════════════════════════════════════════════════

    def open_scope(self, scope: type) -> None:
        self.scope.open(scope)

    def close_scope(self) -> None:
        self.scope.close()

    def current_scope(self) -> type:
        return self.scope.current_scope()

    # ══════════════════════════════════════════════════════════
    # REGISTRATION
    # ══════════════════════════════════════════════════════════

    def register(self, category: ConfigItem, item: Any) -> ItemRecord:
        """
        Register an item (class or instance) under the current scope.

        Repeated registration of the same class keeps the first
        ledger entry and only counts the attempt.

        A class may be tracked under several categories; each
        (category, class) pair has its own record.

        Returns:
            The item's record, to attach category-specific metadata.
        """
        return self._register(category, item)

    def _register(
        self, category: ConfigItem, item: Any, overriding: bool = False
    ) -> ItemRecord:
        item_type = resolve_type(item)
        scope = self.current_scope()
        record = self._records.get((category, item_type))

        if record is None or not record.is_registered:
            self._items.setdefault(category, []).append(item)
            if record is None:
                record = self._create_record(category, item_type)
            self._describe(record, overriding)
            self._stats.count(Stat.REGISTRATION_COUNT)
            logger.debug(
                f"{category.value.capitalize()} registered: "
                f"{item_type.__qualname__} "
                f"(scope: {scope.__qualname__})"
            )
        else:
            self._stats.count(Stat.DUPLICATE_REGISTRATION_COUNT)
            logger.debug(
                f"Duplicate {category.value} registration ignored: "
                f"{item_type.__qualname__} "
                f"(scope: {scope.__qualname__}, "
                f"attempt {record.registration_attempts + 1})"
            )

        record.count_registration_attempt(scope)

        if record.registration_attempts == 1 and category.disable_supported:
            self._apply_predicates(self._predicates, record)
        return record

    def _create_record(self, category: ConfigItem, item_type: type) -> ItemRecord:
        record = category.new_record(item_type)
        for source in self._disabled_by.get((category, item_type), ()):
            record.add_disabled_by(source)
        self._records[(category, item_type)] = record
        return record

    def _describe(self, record: ItemRecord, overriding: bool) -> None:
        """Fill category details known at first registration."""
        if record.category is ConfigItem.MODULE and overriding:
            record.mark_overriding()
        elif record.category is ConfigItem.EXTENSION:
            primary_first = self._options.get(
                InstallerOptions.PRIMARY_MANAGES_EXTENSIONS
            )
            record.set_lazy(is_lazy(record.item_type))
            record.set_alternate_managed(
                is_alternate_managed(record.item_type, primary_first)
            )

    def _register_batch(
        self, category: ConfigItem, items: Iterable[Any], scope: Optional[type] = None
    ) -> None:
        if scope is None:
            for item in items:
                self._register(category, item)
            return
        with self.scope.scoped(scope):
            for item in items:
                self._register(category, item)

    # ══════════════════════════════════════════════════════════
    # DISABLE ENGINE
    # ══════════════════════════════════════════════════════════

    def disable(self, category: ConfigItem, item_type: type) -> None:
        """
        Disable a class under the current scope.

        The class does not have to be registered (yet or ever).
        Disabling twice from different scopes accumulates sources.
        """
        self._disable(category, item_type, self.current_scope())

    def _disable(self, category: ConfigItem, item_type: type, source: type) -> None:
        if not isinstance(item_type, type):
            raise TypeError(
                f"Only classes can be disabled, got {type(item_type).__name__}."
            )
        if not category.disable_supported:
            raise ItemRegistryError(
                f"Items of category '{category.value}' cannot be disabled."
            )

        disabled = self._disabled.setdefault(category, [])
        if item_type not in disabled:
            disabled.append(item_type)

        sources = self._disabled_by.setdefault((category, item_type), [])
        if source not in sources:
            sources.append(source)

        record = self._records.get((category, item_type))
        if record is not None:
            record.add_disabled_by(source)

        logger.info(
            f"{category.value.capitalize()} disabled: "
            f"{item_type.__qualname__} (by: {source.__qualname__})"
        )

    def register_disable_predicates(self, *predicates: Predicate) -> None:
        """
        Add disable predicates.

        Every currently enabled module, bundle, extension and installer
        is immediately tested against the NEW predicates only. Items
        registered later are tested against all predicates.

        Predicate errors propagate.
        """
        for predicate in predicates:
            if not callable(predicate):
                raise TypeError(
                    f"Disable predicate must be callable, got {type(predicate)}."
                )
        new_predicates = list(predicates)
        self._predicates.extend(new_predicates)

        snapshot = [
            self._records[(category, resolve_type(item))]
            for category in PREDICATE_SWEEP_ORDER
            for item in self.enabled_items_of(category)
        ]
        for record in snapshot:
            self._apply_predicates(new_predicates, record)

    def _apply_predicates(
        self, predicates: Iterable[Predicate], record: ItemRecord
    ) -> None:
        for predicate in predicates:
            if predicate(record):
                self._disable(
                    record.category,
                    record.item_type,
                    ConfigScope.DISABLE_PREDICATE.type,
                )
                self._stats.count(Stat.DISABLED_BY_PREDICATE_COUNT)
                break

    def predicate_count(self) -> int:
        return len(self._predicates)

    # ══════════════════════════════════════════════════════════
    # FINALIZATION
    # ══════════════════════════════════════════════════════════

    def finalize_configuration(self) -> None:
        """
        Create records for disabled-but-never-registered classes and
        merge all disable sources into records.

        Call once, after all registration and before any item is used.
        Ends the configuration timer started with the registry.
        Repeated calls are ignored.
        """
        if self._finalized:
            logger.warning("Configuration already finalized — ignored.")
            return

        with self._stats.timer(Stat.FINALIZATION_TIME):
            synthesized = 0
            for category, disabled in self._disabled.items():
                for item_type in disabled:
                    record = self._records.get((category, item_type))
                    if record is None:
                        record = self._create_record(category, item_type)
                        synthesized += 1
                    for source in self._disabled_by.get((category, item_type), ()):
                        record.add_disabled_by(source)
            self._finalized = True
        self._stats.stop(Stat.CONFIGURATION_TIME)

        logger.info(
            f"Configuration finalized — {len(self._records)} items tracked, "
            f"{sum(len(d) for d in self._disabled.values())} disabled "
            f"({synthesized} never registered)"
        )

    @property
    def is_finalized(self) -> bool:
        return self._finalized

    # ══════════════════════════════════════════════════════════
    # QUERY
    # ══════════════════════════════════════════════════════════

    def items_of(self, category: ConfigItem) -> list[Any]:
        """All registered items of a category, in registration order."""
        return list(self._items.get(category, ()))

    def disabled_of(self, category: ConfigItem) -> list[type]:
        """All disabled classes of a category, in disable order."""
        return list(self._disabled.get(category, ()))

    def enabled_items_of(self, category: ConfigItem) -> list[Any]:
        disabled = self._disabled.get(category, ())
        return [
            item for item in self._items.get(category, ())
            if resolve_type(item) not in disabled
        ]

    def is_enabled(self, category: ConfigItem, item_type: type) -> bool:
        return item_type not in self._disabled.get(category, ())

    def info_of(
        self, item: Any, category: Optional[ConfigItem] = None
    ) -> Optional[ItemRecord]:
        """
        Record of an item (class or instance). None if never tracked.

        Without a category, the record created first for the class
        is returned.
        """
        item_type = resolve_type(item)
        if category is not None:
            return self._records.get((category, item_type))
        for record in self._records.values():
            if record.item_type is item_type:
                return record
        return None

    def records(self) -> list[ItemRecord]:
        return list(self._records.values())

    # ══════════════════════════════════════════════════════════
    # BUNDLES
    # ══════════════════════════════════════════════════════════

    def register_bundles(self, *bundles: Any) -> None:
        self._register_batch(ConfigItem.BUNDLE, bundles)

    def register_host_bundles(self, bundles: list[Any]) -> None:
        """Bundles recognized from the host framework's own bundles."""
        with self._stats.timer(Stat.BUNDLE_RESOLUTION_TIME):
            self._register_batch(
                ConfigItem.BUNDLE,
                bundles,
                ConfigScope.HOST_FRAMEWORK_BUNDLE_ADAPTER.type,
            )
        self._lifecycle.bundles_resolved_from_adapter(bundles)

    def register_lookup_bundles(self, bundles: list[Any]) -> None:
        """Bundles resolved by lookup. Completes bundle resolution."""
        with self._stats.timer(Stat.BUNDLE_RESOLUTION_TIME):
            self._register_batch(
                ConfigItem.BUNDLE, bundles, ConfigScope.BUNDLE_LOOKUP.type
            )
        self._lifecycle.bundles_resolved_from_lookup(bundles)
        self._lifecycle.all_bundles_resolved(self.enabled_bundles())

    def disable_bundles(self, *bundles: type) -> None:
        for bundle in bundles:
            self.disable(ConfigItem.BUNDLE, bundle)

    def enabled_bundles(self) -> list[Any]:
        return self.enabled_items_of(ConfigItem.BUNDLE)

    def is_bundle_enabled(self, bundle: type) -> bool:
        """Only meaningful before the bundle is processed."""
        return self.is_enabled(ConfigItem.BUNDLE, bundle)

    # ══════════════════════════════════════════════════════════
    # MODULES
    # ══════════════════════════════════════════════════════════

    def register_modules(self, *modules: Any) -> None:
        self._register_batch(ConfigItem.MODULE, modules)

    def register_overriding_modules(self, *modules: Any) -> None:
        for module in modules:
            self._register(ConfigItem.MODULE, module, overriding=True)

    def disable_modules(self, *modules: type) -> None:
        for module in modules:
            self.disable(ConfigItem.MODULE, module)

    def enabled_modules(self) -> list[Any]:
        """Both normal and overriding modules."""
        return self.enabled_items_of(ConfigItem.MODULE)

    def normal_modules(self) -> list[Any]:
        return [
            module for module in self.enabled_modules()
            if not self.info_of(module, ConfigItem.MODULE).overriding
        ]

    def overriding_modules(self) -> list[Any]:
        return [
            module for module in self.enabled_modules()
            if self.info_of(module, ConfigItem.MODULE).overriding
        ]

    # ══════════════════════════════════════════════════════════
    # INSTALLERS
    # ══════════════════════════════════════════════════════════

    def register_installers(self, *installers: type) -> None:
        self._register_batch(ConfigItem.INSTALLER, installers)

    def register_installers_from_scan(self, installers: list[type]) -> None:
        self._register_batch(
            ConfigItem.INSTALLER, installers, ConfigScope.CLASSPATH_SCAN.type
        )

    def disable_installers(self, *installers: type) -> None:
        for installer in installers:
            self.disable(ConfigItem.INSTALLER, installer)

    def enabled_installers(self) -> list[type]:
        return self.enabled_items_of(ConfigItem.INSTALLER)

    # ══════════════════════════════════════════════════════════
    # EXTENSIONS
    # ══════════════════════════════════════════════════════════

    def register_extensions(self, *extensions: type) -> None:
        self._register_batch(ConfigItem.EXTENSION, extensions)

    def get_or_register_extension(
        self, extension: type, from_scan: bool
    ) -> Optional[ItemRecord]:
        """
        Scanned extensions are registered on recognition (under the
        classpath scan scope). Manual extensions were registered
        earlier, so only their record is returned.
        """
        if from_scan:
            with self.scope.scoped(ConfigScope.CLASSPATH_SCAN.type):
                return self._register(ConfigItem.EXTENSION, extension)
        return self.info_of(extension, ConfigItem.EXTENSION)

    def disable_extensions(self, *extensions: type) -> None:
        for extension in extensions:
            self.disable(ConfigItem.EXTENSION, extension)

    def is_extension_enabled(self, extension: type) -> bool:
        return self.is_enabled(ConfigItem.EXTENSION, extension)

    def enabled_extensions(self) -> list[type]:
        return self.enabled_items_of(ConfigItem.EXTENSION)

    # ══════════════════════════════════════════════════════════
    # COMMANDS
    # ══════════════════════════════════════════════════════════

    def register_commands(self, commands: list[type]) -> None:
        """Commands found by classpath scan."""
        self._register_batch(
            ConfigItem.COMMAND, commands, ConfigScope.CLASSPATH_SCAN.type
        )

    # ══════════════════════════════════════════════════════════
    # CONFIGURATORS
    # ══════════════════════════════════════════════════════════

    def apply_configurators(
        self, configurators: Iterable[Callable[[Any], Any]], target: Any
    ) -> None:
        """
        Run external configurators against target under the
        configurator scope, then notify lifecycle listeners.
        """
        applied = []
        with self._stats.timer(Stat.CONFIGURATORS_TIME):
            with self.scope.scoped(ConfigScope.CONFIGURATOR.type):
                for configurator in configurators:
                    if configurator in applied:
                        continue
                    configurator(target)
                    applied.append(configurator)
        self._lifecycle.configurators_applied(applied)

    # ══════════════════════════════════════════════════════════
    # COLLABORATORS
    # ══════════════════════════════════════════════════════════

    def set_option(self, option: Option, value: Any) -> None:
        self._options.set(option, value)

    def option(self, option: Option) -> Any:
        return self._options.get(option)

    @property
    def options(self) -> OptionsStore:
        return self._options

    @property
    def stats(self) -> StatsTracker:
        return self._stats

    @property
    def lifecycle(self) -> LifecycleBroadcaster:
        return self._lifecycle
