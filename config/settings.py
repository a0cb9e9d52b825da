"""
Assembly – Django Settings (Infrastructure Only)
================================================
Django serves as the configuration container for the assembly
registry. The registry itself does not depend on a database.
"""

import os
from pathlib import Path

# ── Paths ─────────────────────────────────────────────────────
BASE_DIR = Path(__file__).resolve().parent.parent

# ── Security ──────────────────────────────────────────────────
SECRET_KEY = os.environ.get("ASSEMBLY_SECRET_KEY", "assembly-dev-key")

DEBUG = True

ALLOWED_HOSTS = []

# ── Installed Apps ────────────────────────────────────────────
INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "assembly.bootstrap",
]

# ── Database ──────────────────────────────────────────────────
# Not used by the registry. Present for Django/pytest-django only.
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": BASE_DIR / "db.sqlite3",
    }
}

# ── Internationalization ──────────────────────────────────────
LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# ── Item Registry ─────────────────────────────────────────────
# OPTIONS: "Group.NAME" → value
# DISABLED: category → dotted class paths
ASSEMBLY_REGISTRY = {
    "OPTIONS": {},
    "DISABLED": {},
}

# ── Logging ───────────────────────────────────────────────────
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "handlers": {
        "console": {"class": "logging.StreamHandler"},
    },
    "loggers": {
        "assembly": {
            "handlers": ["console"],
            "level": os.environ.get("ASSEMBLY_LOG_LEVEL", "INFO"),
        },
    },
}
