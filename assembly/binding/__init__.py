"""
Assembly Binding — Public API
===============================
"""

from assembly.binding.markers import (
    alternate_managed,
    is_alternate_managed,
    is_lazy,
    lazy_binding,
    primary_managed,
)

__all__ = [
    "lazy_binding",
    "alternate_managed",
    "primary_managed",
    "is_lazy",
    "is_alternate_managed",
]
