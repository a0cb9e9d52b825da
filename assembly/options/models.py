"""
Assembly Options — Option Declarations
========================================
Options are enum members. Each member declares its value type and
default value. Groups of options are separate enums sharing the
Option base.

Example:
    class MyOptions(Option):
        STRICT_MODE = (bool, False)
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional


class Option(Enum):
    """Base for option enums. Members are (value_type, default) pairs."""

    def __new__(cls, value_type: type, default: Any):
        obj = object.__new__(cls)
        # pairs may repeat across members, so values are numbered
        obj._value_ = len(cls.__members__) + 1
        return obj

    def __init__(self, value_type: type, default: Any) -> None:
        self.value_type = value_type
        self.default = default

    @property
    def key(self) -> str:
        return f"{type(self).__name__}.{self.name}"

    @classmethod
    def resolve(cls, key: str) -> Optional["Option"]:
        """Find option by 'Group.NAME' key among all declared groups."""
        group_name, _, member_name = key.partition(".")
        for group in _all_groups(cls):
            if group.__name__ == group_name and member_name in group.__members__:
                return group[member_name]
        return None


def _all_groups(base: type) -> list[type]:
    groups = []
    for sub in base.__subclasses__():
        groups.append(sub)
        groups.extend(_all_groups(sub))
    return groups


# ══════════════════════════════════════════════════════════════
# BUILT-IN OPTIONS
# ══════════════════════════════════════════════════════════════

class CoreOptions(Option):
    SEARCH_COMMANDS = (bool, False)
    USE_CORE_INSTALLERS = (bool, True)
    CONFIGURE_FROM_HOST_BUNDLES = (bool, False)
    BUNDLE_LOOKUP = (bool, True)


class InstallerOptions(Option):
    # False switches extensions to alternate-runtime-first management
    PRIMARY_MANAGES_EXTENSIONS = (bool, True)
