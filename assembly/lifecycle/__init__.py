"""
Assembly Lifecycle — Public API
=================================
"""

from assembly.lifecycle.broadcaster import LifecycleBroadcaster
from assembly.lifecycle.events import LifecycleEvent, LifecycleEventData

__all__ = [
    "LifecycleBroadcaster",
    "LifecycleEvent",
    "LifecycleEventData",
]
