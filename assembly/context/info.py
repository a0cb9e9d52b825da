"""
Assembly Context — Configuration Info
=======================================
Read-only diagnostic view over a registry.

Intended for use after finalize_configuration(), when records
exist for every registered or disabled class.
"""

from __future__ import annotations

from typing import Any, Callable, Optional

from assembly.context.items import ConfigItem, ItemRecord, resolve_type
from assembly.context.registry import ItemRegistry
from assembly.context.scope import ConfigScope


class ConfigurationInfo:

    def __init__(self, registry: ItemRegistry) -> None:
        self._registry = registry

    def items(
        self,
        category: ConfigItem,
        predicate: Optional[Callable[[ItemRecord], bool]] = None,
    ) -> list[type]:
        """
        All classes of a category: registered ones in registration
        order, then disabled-only ones in disable order.
        """
        ordered = [resolve_type(item) for item in self._registry.items_of(category)]
        for item_type in self._registry.disabled_of(category):
            if item_type not in ordered:
                ordered.append(item_type)
        if predicate is None:
            return ordered
        matched = []
        for item_type in ordered:
            record = self.info(item_type, category)
            if record is not None and predicate(record):
                matched.append(item_type)
        return matched

    def info(
        self, item_type: type, category: Optional[ConfigItem] = None
    ) -> Optional[ItemRecord]:
        return self._registry.info_of(item_type, category)

    def enabled(self, category: ConfigItem) -> list[type]:
        return [resolve_type(item) for item in self._registry.enabled_items_of(category)]

    def disabled(self, category: ConfigItem) -> list[type]:
        return self._registry.disabled_of(category)

    def duplicates(self) -> list[ItemRecord]:
        """Records registered more than once (possible configuration mistakes)."""
        return [record for record in self._registry.records() if record.is_duplicated]

    def describe(self, record: ItemRecord) -> dict[str, Any]:
        """Record as a plain dict with readable scope names."""
        return {
            "category": record.category.value,
            "type": record.item_type.__qualname__,
            "registration_scope": (
                scope_name(record.registration_scope)
                if record.registration_scope is not None
                else None
            ),
            "registered_by": [scope_name(s) for s in record.registered_by],
            "registration_attempts": record.registration_attempts,
            "disabled_by": [scope_name(s) for s in record.disabled_by],
            "enabled": record.enabled,
        }


def scope_name(scope: type) -> str:
    """Built-in scopes by member name, bundle scopes by class name."""
    builtin = ConfigScope.recognize(scope)
    if builtin is not None:
        return builtin.name
    return f"bundle:{scope.__qualname__}"
