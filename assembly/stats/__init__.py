"""
Assembly Stats — Public API
=============================
"""

from assembly.stats.tracker import Stat, StatsTracker

__all__ = [
    "Stat",
    "StatsTracker",
]
