"""
Assembly Lifecycle — Broadcaster
==================================
Delivers lifecycle notifications to listeners.

Rules:
- Listeners are plain callables taking LifecycleEventData
- Delivery order is listener registration order
- Same listener registered twice is ignored
- A failing listener aborts bootstrap: the error is logged
  and re-raised, remaining listeners are not called
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Optional

from assembly.lifecycle.events import LifecycleEvent, LifecycleEventData
from assembly.options.store import OptionsInfo

logger = logging.getLogger("assembly.lifecycle")

Listener = Callable[[LifecycleEventData], Any]


class LifecycleBroadcaster:

    def __init__(self, options: Optional[OptionsInfo] = None) -> None:
        self._listeners: list[Listener] = []
        self._options = options

    def register(self, *listeners: Listener) -> None:
        for listener in listeners:
            if not callable(listener):
                raise TypeError(
                    f"Listener must be callable, got {type(listener)}."
                )
            if listener in self._listeners:
                logger.debug(
                    f"Listener {_name(listener)} already registered — ignored."
                )
                continue
            self._listeners.append(listener)

    def listener_count(self) -> int:
        return len(self._listeners)

    # ══════════════════════════════════════════════════════════
    # NOTIFICATIONS
    # ══════════════════════════════════════════════════════════

    def bundles_resolved_from_adapter(self, bundles: Iterable[Any]) -> None:
        self._broadcast(LifecycleEvent.BUNDLES_RESOLVED_FROM_ADAPTER, bundles)

    def bundles_resolved_from_lookup(self, bundles: Iterable[Any]) -> None:
        self._broadcast(LifecycleEvent.BUNDLES_RESOLVED_FROM_LOOKUP, bundles)

    def all_bundles_resolved(self, bundles: Iterable[Any]) -> None:
        self._broadcast(LifecycleEvent.ALL_BUNDLES_RESOLVED, bundles)

    def configurators_applied(self, configurators: Iterable[Any]) -> None:
        self._broadcast(LifecycleEvent.CONFIGURATORS_APPLIED, configurators)

    def _broadcast(self, event: LifecycleEvent, items: Iterable[Any]) -> None:
        data = LifecycleEventData(
            event=event, items=tuple(items), options=self._options
        )
        for listener in list(self._listeners):
            try:
                listener(data)
            except Exception:
                logger.error(
                    f"Lifecycle listener {_name(listener)} failed "
                    f"on '{event.value}'",
                    exc_info=True,
                )
                raise
        logger.debug(
            f"Lifecycle '{event.value}' delivered to "
            f"{len(self._listeners)} listener(s)"
        )


def _name(listener: Listener) -> str:
    return getattr(listener, "__qualname__", repr(listener))
