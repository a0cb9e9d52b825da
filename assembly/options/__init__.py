"""
Assembly Options — Public API
===============================
"""

from assembly.options.models import CoreOptions, InstallerOptions, Option
from assembly.options.store import OptionsInfo, OptionsStore, OptionValueError

__all__ = [
    "Option",
    "CoreOptions",
    "InstallerOptions",
    "OptionsStore",
    "OptionsInfo",
    "OptionValueError",
]
