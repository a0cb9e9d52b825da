"""
Assembly Binding — Class Markers
==================================
Decorators read when an extension is first registered.

- lazy_binding:      extension is not bound eagerly
- alternate_managed: extension instance owned by the alternate
                     injection runtime (primary-first mode)
- primary_managed:   extension instance owned by the primary
                     runtime (alternate-first mode)

Markers are plain class attributes and are inherited.
"""

from __future__ import annotations

_LAZY = "__assembly_lazy__"
_ALTERNATE = "__assembly_alternate_managed__"
_PRIMARY = "__assembly_primary_managed__"


def lazy_binding(cls: type) -> type:
    setattr(cls, _LAZY, True)
    return cls


def alternate_managed(cls: type) -> type:
    setattr(cls, _ALTERNATE, True)
    return cls


def primary_managed(cls: type) -> type:
    setattr(cls, _PRIMARY, True)
    return cls


def is_lazy(cls: type) -> bool:
    return bool(getattr(cls, _LAZY, False))


def is_alternate_managed(cls: type, primary_first_mode: bool) -> bool:
    """
    Primary-first (default): only alternate_managed classes go to the
    alternate runtime. Alternate-first: everything does, except
    primary_managed classes.
    """
    if primary_first_mode:
        return bool(getattr(cls, _ALTERNATE, False))
    return not getattr(cls, _PRIMARY, False)
