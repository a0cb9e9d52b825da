"""
Assembly Bootstrap — Errors
=============================
Invalid registry configuration must stop startup.
No fallback, no warning-only mode.
"""


class BootstrapConfigurationError(Exception):
    """
    Raised when the ASSEMBLY_REGISTRY setting is invalid.

    Attributes:
        setting: Offending setting path (e.g. 'DISABLED.extension')
        detail:  What is wrong with it
    """

    def __init__(self, setting: str, detail: str):
        self.setting = setting
        self.detail = detail
        super().__init__(
            f"ASSEMBLY BOOTSTRAP FAILURE — {setting}: {detail}"
        )
