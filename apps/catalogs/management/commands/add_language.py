"""
Create a catalog for a new language, copying the canonical header block.

Usage:
    python manage.py add_language de                         # in CATALOG_DIR
    python manage.py add_language de --directory locale      # explicit directory
    python manage.py add_language de --canonical fr          # copy fr.po's headers

Safe to re-run: an already tracked language is left alone. Refuses to
overwrite a file that exists on disk.
"""
from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from apps.catalogs.catalog_set import CatalogSet
from apps.catalogs.exceptions import CatalogError


class Command(BaseCommand):
    help = "Create an empty catalog for a new language with the canonical catalog's headers."

    def add_arguments(self, parser):
        parser.add_argument(
            "new_language",
            help="Language id for the new catalog (file name without extension).",
        )
        parser.add_argument(
            "--directory",
            default=None,
            help="Directory holding one catalog per language (default: CATALOG_DIR).",
        )
        parser.add_argument(
            "--canonical",
            default=None,
            help="Canonical language (default: CATALOG_CANONICAL_LANGUAGE).",
        )

    def handle(self, *args, **options):
        new_language = options["new_language"]
        directory = options["directory"] or settings.CATALOG_DIR
        canonical = options["canonical"] or settings.CATALOG_CANONICAL_LANGUAGE

        try:
            catalogs = CatalogSet(
                directory, canonical, extension=settings.CATALOG_EXTENSION,
            )
            if catalogs.has_language(new_language):
                self.stdout.write(
                    f"{new_language} already has a catalog at "
                    f"{catalogs.language_file(new_language).path}. Nothing to do."
                )
                return
            catalog = catalogs.add_language(new_language)
        except (CatalogError, ValueError) as exc:
            raise CommandError(str(exc))
        except OSError as exc:
            raise CommandError(f"Could not create the {new_language} catalog: {exc}")

        self.stdout.write(self.style.SUCCESS(
            f"Created {catalog.path} with {len(catalog.headers())} header field(s) "
            f"from {canonical}."
        ))
        self.stdout.write(
            f"  Run 'python manage.py add_stubs {directory} {canonical}' to fill it."
        )
