"""
Assembly Options — Options Store
==================================
Typed key → value settings. The store validates values against
the option's declared type but never interprets them.

Tracks which options were explicitly set and which were read,
for startup diagnostics.
"""

from __future__ import annotations

import logging
from typing import Any

from assembly.options.models import Option

logger = logging.getLogger("assembly.options")


class OptionValueError(ValueError):
    """Option value is missing or of the wrong type."""

    def __init__(self, option: Option, value: Any):
        self.option = option
        self.value = value
        super().__init__(
            f"Option '{option.key}' expects "
            f"{option.value_type.__name__}, got {value!r}."
        )


class OptionsStore:
    """
    Mutable option values for one bootstrap run.

    Usage:
        store = OptionsStore()
        store.set(CoreOptions.SEARCH_COMMANDS, True)
        store.get(CoreOptions.SEARCH_COMMANDS)     # True
        store.get(CoreOptions.BUNDLE_LOOKUP)       # True (default)
    """

    def __init__(self) -> None:
        self._values: dict[Option, Any] = {}
        self._used: set[Option] = set()

    def set(self, option: Option, value: Any) -> None:
        """
        Raises:
            TypeError: If option is not an Option member.
            OptionValueError: If value is None or of the wrong type.
        """
        if not isinstance(option, Option):
            raise TypeError(
                f"Expected Option, got {type(option).__name__}."
            )
        if value is None or not isinstance(value, option.value_type):
            raise OptionValueError(option, value)
        self._values[option] = value
        logger.debug(f"Option set: {option.key} = {value!r}")

    def get(self, option: Option) -> Any:
        self._used.add(option)
        return self._values.get(option, option.default)

    def options_info(self) -> "OptionsInfo":
        return OptionsInfo(self)


class OptionsInfo:
    """Read-only view over an OptionsStore. Reading does not mark usage."""

    def __init__(self, store: OptionsStore) -> None:
        self._store = store

    def value(self, option: Option) -> Any:
        return self._store._values.get(option, option.default)

    def was_set(self, option: Option) -> bool:
        return option in self._store._values

    def was_used(self, option: Option) -> bool:
        return option in self._store._used

    def known_options(self) -> frozenset[Option]:
        return frozenset(self._store._values) | frozenset(self._store._used)
