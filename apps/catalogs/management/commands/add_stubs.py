"""
Add stub entries for every msgid missing relative to the canonical catalog.

Usage:
    python manage.py add_stubs                          # CATALOG_DIR, CATALOG_CANONICAL_LANGUAGE
    python manage.py add_stubs locale en                # explicit directory and language
    python manage.py add_stubs locale en --dry-run      # Show what would be added
    python manage.py add_stubs --format "TODO: {key}"   # Custom stub value
    python manage.py add_stubs --no-value               # Leave stubs untranslated

By default each stub's msgstr is "<canonical msgstr> (<language>)", so
untranslated text is easy to spot in the running application. Each catalog
is written as soon as its stubs are added; a failure part-way leaves the
catalogs already processed on disk.
"""
import logging

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from apps.catalogs.catalog_set import CatalogSet
from apps.catalogs.exceptions import CatalogError
from apps.catalogs.stubs import format_stub

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Add stub entries to every catalog for msgids found only in the canonical catalog."

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
        parser.add_argument(
            "--format",
            dest="stub_format",
            default=None,
            help=(
                "Stub msgstr template using {key}, {language} and "
                "{canonical_value} (default: CATALOG_STUB_FORMAT). When the canonical "
                "msgstr is empty, the msgid is used for {canonical_value}."
            ),
        )
        parser.add_argument(
            "--no-value",
            action="store_true",
            help="Add stubs with an empty msgstr instead of a formatted value.",
        )
        parser.add_argument(
            "--dry-run",
            action="store_true",
            help="Show what would be added without modifying files.",
        )

    def handle(self, *args, **options):
        directory = options["directory"] or settings.CATALOG_DIR
        language = options["language"] or settings.CATALOG_CANONICAL_LANGUAGE
        dry_run = options["dry_run"]

        if options["no_value"]:
            stub_policy = None
        else:
            try:
                stub_policy = format_stub(
                    options["stub_format"] or settings.CATALOG_STUB_FORMAT
                )
            except ValueError as exc:
                raise CommandError(str(exc))

        try:
            catalogs = CatalogSet(
                directory,
                language,
                stub_policy=stub_policy,
                extension=settings.CATALOG_EXTENSION,
            )
            if dry_run:
                added = catalogs.find_missing()
            else:
                added = catalogs.add_stubs()
        except CatalogError as exc:
            raise CommandError(str(exc))
        except OSError as exc:
            logger.exception("Failed to write catalogs in %s", directory)
            raise CommandError(f"Could not update catalogs in {directory}: {exc}")

        total = sum(len(keys) for keys in added.values())
        verb = "Would add" if dry_run else "Added"
        for lang, keys in added.items():
            if not keys:
                continue
            self.stdout.write(f"{lang}: {verb.lower()} {len(keys)} stub(s)")
            for key in keys:
                self.stdout.write(f"  + {key}")

        if dry_run:
            self.stdout.write(self.style.WARNING(
                f"\n--dry-run: {total} stub(s) would be added. No files modified."
            ))
        elif total:
            changed = sum(1 for keys in added.values() if keys)
            self.stdout.write(self.style.SUCCESS(
                f"\n{verb} {total} stub(s) across {changed} catalog(s)."
            ))
        else:
            self.stdout.write(self.style.SUCCESS(
                "\nAll catalogs already have every canonical msgid."
            ))
