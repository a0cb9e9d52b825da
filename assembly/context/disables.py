"""
Assembly Context — Disable Predicates
=======================================
Ready-made predicates for ItemRegistry.register_disable_predicates().

Predicates compose with & (and), | (or) and ~ (not):

    registry.register_disable_predicates(
        extension() & in_package("legacy"),
        installer() & ~registered_by(Application),
    )

All predicates are pure. No registry access.
"""

from __future__ import annotations

from typing import Callable

from assembly.context.items import ConfigItem, ItemRecord


class ItemPredicate:
    """Callable wrapper adding boolean composition."""

    def __init__(self, test: Callable[[ItemRecord], bool], description: str):
        self._test = test
        self.description = description

    def __call__(self, record: ItemRecord) -> bool:
        return bool(self._test(record))

    def __and__(self, other: Callable[[ItemRecord], bool]) -> "ItemPredicate":
        return ItemPredicate(
            lambda r: self(r) and other(r),
            f"({self.description} and {_describe(other)})",
        )

    def __or__(self, other: Callable[[ItemRecord], bool]) -> "ItemPredicate":
        return ItemPredicate(
            lambda r: self(r) or other(r),
            f"({self.description} or {_describe(other)})",
        )

    def __invert__(self) -> "ItemPredicate":
        return ItemPredicate(
            lambda r: not self(r), f"not {self.description}"
        )

    def __repr__(self) -> str:
        return f"ItemPredicate({self.description})"


def _describe(predicate: Callable) -> str:
    return getattr(
        predicate, "description", getattr(predicate, "__qualname__", repr(predicate))
    )


# ══════════════════════════════════════════════════════════════
# FACTORIES
# ══════════════════════════════════════════════════════════════

def item_type(*types: type) -> ItemPredicate:
    """Exact class match (subclasses do not match)."""
    names = ", ".join(t.__qualname__ for t in types)
    return ItemPredicate(lambda r: r.item_type in types, f"type in [{names}]")


def in_package(*packages: str) -> ItemPredicate:
    """Class declared in one of the packages or their sub-packages."""

    def test(record: ItemRecord) -> bool:
        module = record.item_type.__module__
        return any(
            module == package or module.startswith(package + ".")
            for package in packages
        )

    return ItemPredicate(test, f"package in [{', '.join(packages)}]")


def registered_by(*scopes: type) -> ItemPredicate:
    """Item first registered by one of the scopes."""
    names = ", ".join(s.__qualname__ for s in scopes)
    return ItemPredicate(
        lambda r: r.registration_scope in scopes, f"registered by [{names}]"
    )


def category(*categories: ConfigItem) -> ItemPredicate:
    names = ", ".join(c.value for c in categories)
    return ItemPredicate(lambda r: r.is_category(*categories), f"category in [{names}]")


def bundle() -> ItemPredicate:
    return category(ConfigItem.BUNDLE)


def module() -> ItemPredicate:
    return category(ConfigItem.MODULE)


def installer() -> ItemPredicate:
    return category(ConfigItem.INSTALLER)


def extension() -> ItemPredicate:
    return category(ConfigItem.EXTENSION)


def lazy() -> ItemPredicate:
    return ItemPredicate(lambda r: r.lazy, "lazy")


def alternate_managed() -> ItemPredicate:
    return ItemPredicate(lambda r: r.alternate_managed, "alternate managed")
