"""
Assembly Lifecycle — Events
=============================
Notifications fired after a registration batch closes its scope.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from assembly.options.store import OptionsInfo


class LifecycleEvent(Enum):
    BUNDLES_RESOLVED_FROM_ADAPTER = "bundles_resolved_from_adapter"
    BUNDLES_RESOLVED_FROM_LOOKUP = "bundles_resolved_from_lookup"
    ALL_BUNDLES_RESOLVED = "all_bundles_resolved"
    CONFIGURATORS_APPLIED = "configurators_applied"


@dataclass(frozen=True)
class LifecycleEventData:
    """
    Fields:
        event:   Which notification
        items:   Bundles or configurators the event is about
        options: Read-only options at the time of the event
    """

    event: LifecycleEvent
    items: tuple[Any, ...]
    options: Optional[OptionsInfo] = None
