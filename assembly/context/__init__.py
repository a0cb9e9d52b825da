"""
Assembly Context — Public API
===============================
Scope tracking, item records, the item registry and its
disable engine.
"""

from assembly.context.errors import (
    IllegalStateError,
    ItemRegistryError,
    ScopeAlreadyOpenError,
    ScopeNotOpenError,
)
from assembly.context.info import ConfigurationInfo
from assembly.context.items import (
    ConfigItem,
    ExtensionDetails,
    ItemRecord,
    ModuleDetails,
)
from assembly.context.registry import ItemRegistry
from assembly.context.scope import ConfigScope, ScopeTracker

__all__ = [
    # ── Errors ────────────────────────────────────────────────
    "ItemRegistryError",
    "IllegalStateError",
    "ScopeAlreadyOpenError",
    "ScopeNotOpenError",
    # ── Scope ─────────────────────────────────────────────────
    "ConfigScope",
    "ScopeTracker",
    # ── Records ───────────────────────────────────────────────
    "ConfigItem",
    "ItemRecord",
    "ModuleDetails",
    "ExtensionDetails",
    # ── Registry ──────────────────────────────────────────────
    "ItemRegistry",
    "ConfigurationInfo",
]
