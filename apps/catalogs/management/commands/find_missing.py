"""
List msgids that are in the canonical catalog but missing from the others.

Usage:
    python manage.py find_missing                    # CATALOG_DIR, CATALOG_CANONICAL_LANGUAGE
    python manage.py find_missing locale             # canonical language from settings
    python manage.py find_missing locale fr          # fr.po is the canonical catalog

Output lists each language that is missing something, followed by the
missing msgids indented two spaces. Nothing is printed when every catalog
is complete. Read-only.
"""
import logging

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from apps.catalogs.catalog_set import CatalogSet
from apps.catalogs.exceptions import CatalogError

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "List msgids present in the canonical catalog but missing from each other catalog."

    def add_arguments(self, parser):
        parser.add_argument(
            "directory",
            nargs="?",
            default=None,
            help="Directory holding one catalog per language (default: CATALOG_DIR).",
        )
        parser.add_argument(
            "language",
            nargs="?",
            default=None,
            help="Canonical language (default: CATALOG_CANONICAL_LANGUAGE).",
        )

    def handle(self, *args, **options):
        directory = options["directory"] or settings.CATALOG_DIR
        language = options["language"] or settings.CATALOG_CANONICAL_LANGUAGE

        try:
            catalogs = CatalogSet(
                directory, language, extension=settings.CATALOG_EXTENSION,
            )
            missing = catalogs.find_missing()
        except CatalogError as exc:
            raise CommandError(str(exc))
        except OSError as exc:
            logger.exception("Failed to read catalogs in %s", directory)
            raise CommandError(f"Could not read catalogs in {directory}: {exc}")

        for lang, keys in missing.items():
            if not keys:
                continue
            self.stdout.write(lang)
            for key in keys:
                self.stdout.write(f"  {key}")

        logger.debug(
            "find_missing over %s: %d language(s) incomplete",
            directory, sum(1 for keys in missing.values() if keys),
        )
