"""
Assembly Context — Item Records
=================================
One record per distinct class per category. Records are created
lazily and never removed.

Items are always identified by class, even when an instance was
registered. Category-specific metadata lives in a details variant
(ModuleDetails, ExtensionDetails) instead of a record hierarchy.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Union


def resolve_type(item: Any) -> type:
    """Identifying class of an item: the class itself or the instance's class."""
    return item if isinstance(item, type) else type(item)


# ══════════════════════════════════════════════════════════════
# CATEGORY-SPECIFIC DETAILS
# ══════════════════════════════════════════════════════════════

@dataclass
class ModuleDetails:
    overriding: bool = False


@dataclass
class ExtensionDetails:
    """
    installed_by: installers that recognized the extension
                  (normally one, may be several)
    lazy:         extension is not bound eagerly
    alternate_managed: instance is owned by the alternate injection
                  runtime instead of the primary one
    """

    installed_by: list[type] = field(default_factory=list)
    lazy: bool = False
    alternate_managed: bool = False


ItemDetails = Union[ModuleDetails, ExtensionDetails, None]


# ══════════════════════════════════════════════════════════════
# CATEGORY
# ══════════════════════════════════════════════════════════════

class ConfigItem(Enum):
    """Closed set of configuration item kinds."""

    BUNDLE = "bundle"
    MODULE = "module"
    INSTALLER = "installer"
    EXTENSION = "extension"
    COMMAND = "command"

    @property
    def disable_supported(self) -> bool:
        return self is not ConfigItem.COMMAND

    def new_record(self, item_type: type) -> "ItemRecord":
        details: ItemDetails = None
        if self is ConfigItem.MODULE:
            details = ModuleDetails()
        elif self is ConfigItem.EXTENSION:
            details = ExtensionDetails()
        return ItemRecord(category=self, item_type=item_type, details=details)


# ══════════════════════════════════════════════════════════════
# ITEM RECORD
# ══════════════════════════════════════════════════════════════

@dataclass
class ItemRecord:
    """
    Registration and disable history of one class.

    Fields:
        category:               Item kind
        item_type:              Identifying class
        registration_scope:     Scope of the first registration (set once)
        registered_by:          Every scope that attempted registration,
                                in first-attempt order, no duplicates
        registration_attempts:  Number of register() calls for this class
        disabled_by:            Scopes that disabled the class
        details:                Category-specific metadata
    """

    category: ConfigItem
    item_type: type
    registration_scope: Optional[type] = None
    registered_by: list[type] = field(default_factory=list)
    registration_attempts: int = 0
    disabled_by: list[type] = field(default_factory=list)
    details: ItemDetails = None

    # ── Registration bookkeeping ──────────────────────────────

    def count_registration_attempt(self, scope: type) -> None:
        self.registration_attempts += 1
        if scope not in self.registered_by:
            self.registered_by.append(scope)
        if self.registration_scope is None:
            self.registration_scope = scope

    def add_disabled_by(self, scope: type) -> None:
        if scope not in self.disabled_by:
            self.disabled_by.append(scope)

    # ── Derived state ─────────────────────────────────────────

    @property
    def enabled(self) -> bool:
        return not self.disabled_by

    @property
    def is_registered(self) -> bool:
        """False for records synthesized only to hold disable info."""
        return self.registration_attempts > 0

    @property
    def is_duplicated(self) -> bool:
        return self.registration_attempts > 1

    def is_category(self, *categories: ConfigItem) -> bool:
        return self.category in categories

    # ── Module details ────────────────────────────────────────

    @property
    def overriding(self) -> bool:
        return isinstance(self.details, ModuleDetails) and self.details.overriding

    def mark_overriding(self) -> None:
        self._require_details(ModuleDetails).overriding = True

    # ── Extension details ─────────────────────────────────────

    @property
    def installed_by(self) -> tuple[type, ...]:
        if isinstance(self.details, ExtensionDetails):
            return tuple(self.details.installed_by)
        return ()

    @property
    def lazy(self) -> bool:
        return isinstance(self.details, ExtensionDetails) and self.details.lazy

    @property
    def alternate_managed(self) -> bool:
        return (
            isinstance(self.details, ExtensionDetails)
            and self.details.alternate_managed
        )

    def mark_installed_by(self, installer: type) -> None:
        details = self._require_details(ExtensionDetails)
        if installer not in details.installed_by:
            details.installed_by.append(installer)

    def set_lazy(self, lazy: bool = True) -> None:
        self._require_details(ExtensionDetails).lazy = lazy

    def set_alternate_managed(self, managed: bool = True) -> None:
        self._require_details(ExtensionDetails).alternate_managed = managed

    def _require_details(self, kind: type) -> Any:
        if not isinstance(self.details, kind):
            raise TypeError(
                f"{self.category.value} record for "
                f"'{self.item_type.__qualname__}' has no "
                f"{kind.__name__}."
            )
        return self.details
