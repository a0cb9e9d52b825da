"""
Assembly Bootstrap — Settings-Driven Registry Setup
=====================================================
Builds the item registry from Django settings.
"""

from assembly.bootstrap.errors import BootstrapConfigurationError

__all__ = [
    "BootstrapConfigurationError",
]
