"""
Assembly Bootstrap — Registry Settings
========================================
Reads the ASSEMBLY_REGISTRY Django setting and prepares an
ItemRegistry from it.

Setting shape:
    ASSEMBLY_REGISTRY = {
        "OPTIONS": {
            "CoreOptions.SEARCH_COMMANDS": True,
        },
        "DISABLED": {
            "extension": ["myapp.resources.LegacyResource"],
            "installer": ["myapp.installers.TaskInstaller"],
        },
    }

Both keys are optional. Classes are given as dotted paths.
Disables from settings are attributed to the Application scope.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

from django.conf import settings as django_settings
from django.utils.module_loading import import_string

from assembly.bootstrap.errors import BootstrapConfigurationError
from assembly.context.items import ConfigItem
from assembly.context.registry import ItemRegistry
from assembly.options.models import Option
from assembly.options.store import OptionValueError

logger = logging.getLogger("assembly.bootstrap")

SETTING_NAME = "ASSEMBLY_REGISTRY"
KNOWN_KEYS = frozenset({"OPTIONS", "DISABLED"})


@dataclass(frozen=True)
class RegistrySettings:
    options: tuple[tuple[Option, Any], ...] = ()
    disabled: tuple[tuple[ConfigItem, type], ...] = ()


def load_registry_settings(settings: Any = None) -> RegistrySettings:
    """
    Parse and resolve ASSEMBLY_REGISTRY.

    Args:
        settings: Django settings object (defaults to django.conf.settings).

    Raises:
        BootstrapConfigurationError: Unknown keys, unknown options,
            unknown categories or unimportable classes.
    """
    settings = settings if settings is not None else django_settings
    raw = getattr(settings, SETTING_NAME, None) or {}

    if not isinstance(raw, dict):
        raise BootstrapConfigurationError(
            SETTING_NAME, f"must be a dict, got {type(raw).__name__}."
        )
    unknown = set(raw) - KNOWN_KEYS
    if unknown:
        raise BootstrapConfigurationError(
            SETTING_NAME, f"unknown keys {sorted(unknown)}."
        )

    return RegistrySettings(
        options=_load_options(raw.get("OPTIONS", {})),
        disabled=_load_disabled(raw.get("DISABLED", {})),
    )


def _load_options(raw: dict) -> tuple[tuple[Option, Any], ...]:
    options = []
    for key, value in raw.items():
        option = Option.resolve(key)
        if option is None:
            raise BootstrapConfigurationError(
                f"OPTIONS.{key}", "unknown option."
            )
        options.append((option, value))
    return tuple(options)


def _load_disabled(raw: dict) -> tuple[tuple[ConfigItem, type], ...]:
    disabled = []
    for category_name, paths in raw.items():
        try:
            category = ConfigItem(category_name)
        except ValueError:
            raise BootstrapConfigurationError(
                f"DISABLED.{category_name}",
                f"unknown category. Expected one of "
                f"{sorted(c.value for c in ConfigItem)}.",
            )
        if not category.disable_supported:
            raise BootstrapConfigurationError(
                f"DISABLED.{category_name}", "category cannot be disabled."
            )
        for path in paths:
            try:
                item_type = import_string(path)
            except ImportError as exc:
                raise BootstrapConfigurationError(
                    f"DISABLED.{category_name}", f"cannot import '{path}': {exc}"
                )
            if not isinstance(item_type, type):
                raise BootstrapConfigurationError(
                    f"DISABLED.{category_name}", f"'{path}' is not a class."
                )
            disabled.append((category, item_type))
    return tuple(disabled)


def build_registry(
    registry_settings: Optional[RegistrySettings] = None,
) -> ItemRegistry:
    """
    Create an ItemRegistry with options and disables from settings
    already applied.
    """
    if registry_settings is None:
        registry_settings = load_registry_settings()

    registry = ItemRegistry()
    for option, value in registry_settings.options:
        try:
            registry.set_option(option, value)
        except OptionValueError as exc:
            raise BootstrapConfigurationError(f"OPTIONS.{option.key}", str(exc))
    for category, item_type in registry_settings.disabled:
        registry.disable(category, item_type)

    logger.info(
        f"Item registry prepared from settings — "
        f"{len(registry_settings.options)} option(s), "
        f"{len(registry_settings.disabled)} disabled item(s)"
    )
    return registry
