"""Django system checks for the catalog settings.

These run automatically with every manage.py command. Missing directories
and catalogs are only warnings, because find_missing/add_stubs/add_language
accept a directory on the command line that overrides CATALOG_DIR.

Check IDs:
    POFileManager.W001 — CATALOG_DIR does not exist or is not a directory
    POFileManager.W002 — No catalog for CATALOG_CANONICAL_LANGUAGE in CATALOG_DIR
    POFileManager.E001 — CATALOG_STUB_FORMAT uses an unknown placeholder
    POFileManager.E002 — CATALOG_EXTENSION does not start with "."

Run checks manually:
    python manage.py check
"""
from pathlib import Path

from django.conf import settings
from django.core.checks import Error, Warning, register

from apps.catalogs.catalog import CATALOG_EXTENSION
from apps.catalogs.stubs import DEFAULT_STUB_FORMAT, STUB_FORMAT_FIELDS, stub_format_fields


@register()
def check_catalog_directory(app_configs, **kwargs):
    """W001/W002: the default catalog directory and its canonical catalog."""
    catalog_dir = Path(getattr(settings, "CATALOG_DIR", "."))
    language = getattr(settings, "CATALOG_CANONICAL_LANGUAGE", "en")
    extension = getattr(settings, "CATALOG_EXTENSION", CATALOG_EXTENSION)

    if not catalog_dir.is_dir():
        return [
            Warning(
                f"CATALOG_DIR {catalog_dir} does not exist or is not a directory.",
                hint="Set the CATALOG_DIR environment variable, or pass a directory to each command.",
                id="POFileManager.W001",
            )
        ]

    if not (catalog_dir / f"{language}{extension}").is_file():
        return [
            Warning(
                f"No canonical catalog {language}{extension} in {catalog_dir}.",
                hint=(
                    "Set CATALOG_CANONICAL_LANGUAGE to a language that has a "
                    "catalog in CATALOG_DIR."
                ),
                id="POFileManager.W002",
            )
        ]

    return []


@register()
def check_stub_format(app_configs, **kwargs):
    """E001: CATALOG_STUB_FORMAT must only use known placeholders."""
    template = getattr(settings, "CATALOG_STUB_FORMAT", DEFAULT_STUB_FORMAT)
    valid = ", ".join("{" + name + "}" for name in sorted(STUB_FORMAT_FIELDS))

    try:
        unknown = stub_format_fields(template) - STUB_FORMAT_FIELDS
    except ValueError as exc:
        return [
            Error(
                f"CATALOG_STUB_FORMAT {template!r} is not a valid format string: {exc}",
                hint=f"Valid placeholders: {valid}",
                id="POFileManager.E001",
            )
        ]

    if unknown:
        return [
            Error(
                f"CATALOG_STUB_FORMAT {template!r} uses unknown placeholder(s): "
                f"{', '.join(sorted(unknown))}.",
                hint=f"Valid placeholders: {valid}",
                id="POFileManager.E001",
            )
        ]

    return []


@register()
def check_catalog_extension(app_configs, **kwargs):
    """E002: CATALOG_EXTENSION must look like a file extension."""
    extension = getattr(settings, "CATALOG_EXTENSION", CATALOG_EXTENSION)
    if not extension.startswith(".") or len(extension) < 2:
        return [
            Error(
                f"CATALOG_EXTENSION {extension!r} must start with '.' (e.g. '.po').",
                id="POFileManager.E002",
            )
        ]
    return []
