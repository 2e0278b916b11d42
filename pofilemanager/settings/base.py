"""Base settings shared by every environment.

Catalog settings come from the environment so the same checkout can be
pointed at different locale directories without editing code.
"""
import os
from pathlib import Path

from django.core.exceptions import ImproperlyConfigured

BASE_DIR = Path(__file__).resolve().parent.parent.parent

# No sessions, signing or password hashing happen here; the key only has to
# be present for Django to start. Environment-specific modules set it.
SECRET_KEY = os.environ.get("SECRET_KEY", "")

DEBUG = False
ALLOWED_HOSTS = []

INSTALLED_APPS = [
    "apps.catalogs",
]

# Catalogs live on the file system; nothing uses the ORM.
DATABASES = {}

USE_I18N = True
USE_TZ = True
LANGUAGE_CODE = "en"

# ------------------------------------------------------------------
# Translation catalogs
# ------------------------------------------------------------------

# Directory holding one <language><extension> file per language.
CATALOG_DIR = os.environ.get("CATALOG_DIR", ".")

# Language whose catalog holds the full set of msgids.
CATALOG_CANONICAL_LANGUAGE = os.environ.get("CATALOG_CANONICAL_LANGUAGE", "en").strip()
if not CATALOG_CANONICAL_LANGUAGE:
    raise ImproperlyConfigured(
        "CATALOG_CANONICAL_LANGUAGE is empty. Set it to a language id such as 'en'."
    )

CATALOG_EXTENSION = os.environ.get("CATALOG_EXTENSION", ".po")

# msgstr written by add_stubs; placeholders: {key}, {language}, {canonical_value}.
CATALOG_STUB_FORMAT = os.environ.get(
    "CATALOG_STUB_FORMAT", "{canonical_value} ({language})"
)

# ------------------------------------------------------------------
# Logging
# ------------------------------------------------------------------

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {
            "format": "{levelname} {name}: {message}",
            "style": "{",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "simple",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": "WARNING",
    },
    "loggers": {
        "apps": {
            "handlers": ["console"],
            "level": os.environ.get("LOG_LEVEL", "WARNING"),
            "propagate": False,
        },
    },
}
