"""
Assembly Bootstrap — App Configuration
========================================
Prepares the item registry when Django finishes loading.

Rules:
- Runs once via ready()
- Invalid ASSEMBLY_REGISTRY → BootstrapConfigurationError prevents startup
- The registry lives exactly as long as this app config
"""

import logging

from django.apps import AppConfig

logger = logging.getLogger("assembly.bootstrap")


class AssemblyBootstrapConfig(AppConfig):
    name = "assembly.bootstrap"
    label = "assembly_bootstrap"
    verbose_name = "Assembly Bootstrap"

    registry = None

    def ready(self):
        from assembly.bootstrap.settings import build_registry

        self.registry = build_registry()
        logger.info("Assembly item registry ready.")
