"""Test settings.

Tests build their own catalog directories under tmp paths and pass them to
the commands explicitly, so CATALOG_DIR is pinned to a directory that never
holds catalogs.
"""
import os

# Provide test defaults BEFORE importing base (which reads them at import).
os.environ.setdefault("SECRET_KEY", "test-secret-key-not-for-production")
os.environ.setdefault("CATALOG_CANONICAL_LANGUAGE", "en")

from .base import *  # noqa: F401, F403, E402

DEBUG = True

CATALOG_DIR = str(BASE_DIR / "tests" / "no-catalogs")  # noqa: F405
CATALOG_EXTENSION = ".po"
CATALOG_STUB_FORMAT = "{canonical_value} ({language})"
