"""
Assembly — Bootstrap Item Registry
====================================
Tracks every configuration item registered while an application
assembles its wiring: bundles, modules, installers, extensions
and commands.

The registry records WHERE each item came from and WHETHER it is
enabled. It never instantiates or binds anything.
"""
