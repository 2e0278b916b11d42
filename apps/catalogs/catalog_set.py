"""A directory of per-language catalogs synchronised against one canonical catalog.

The set is a snapshot of the directory listing taken on first access: files
added to the directory afterwards by other processes are not picked up. New
languages are onboarded through add_language(), which copies the canonical
header block into the new file.
"""
import logging
import os
from pathlib import Path

from apps.catalogs.catalog import CATALOG_EXTENSION, Catalog
from apps.catalogs.exceptions import ConfigurationError, OverwriteProtectionError

logger = logging.getLogger(__name__)


class CatalogSet:
    """All catalogs directly under ``base_dir``, keyed by language.

    Usage:
        catalogs = CatalogSet("locale", "en", stub_policy=format_stub())
        catalogs.find_missing()   # {"en": [], "ru": ["Save"], ...}
        catalogs.add_stubs()

    Raises ConfigurationError on construction if ``base_dir`` holds no
    catalog for ``canonical_language``.
    """

    def __init__(self, base_dir, canonical_language, stub_policy=None,
                 extension=CATALOG_EXTENSION):
        self.base_dir = Path(base_dir)
        self.canonical_language = canonical_language
        self.stub_policy = stub_policy
        self.extension = extension
        self._catalogs = None

        if not self.base_dir.is_dir():
            raise ConfigurationError(
                f"Catalog directory {self.base_dir} does not exist.",
                base_dir=self.base_dir,
                language=canonical_language,
            )
        if not self.has_language(canonical_language):
            raise ConfigurationError(
                f"No catalog for canonical language '{canonical_language}' "
                f"in {self.base_dir} (expected {canonical_language}{extension}).",
                base_dir=self.base_dir,
                language=canonical_language,
            )

    def __repr__(self):
        return f"<CatalogSet {self.base_dir} canonical={self.canonical_language}>"

    def _collection(self):
        """Language -> Catalog, built from the directory listing on first use."""
        if self._catalogs is None:
            self._catalogs = {}
            for path in sorted(self.base_dir.iterdir()):
                if not path.is_file() or not path.name.endswith(self.extension):
                    continue
                catalog = Catalog(path, extension=self.extension)
                self._catalogs.setdefault(catalog.language(), catalog)
            logger.debug(
                "Found %d catalog(s) in %s: %s",
                len(self._catalogs), self.base_dir, ", ".join(self._catalogs),
            )
        return self._catalogs

    def catalogs(self):
        """Tracked catalogs in discovery order."""
        return list(self._collection().values())

    def languages(self):
        return list(self._collection())

    def has_language(self, language):
        return language in self._collection()

    def language_file(self, language):
        """The tracked Catalog for ``language``, or None."""
        return self._collection().get(language)

    def canonical_language_file(self):
        """The canonical Catalog, looked up by language each time."""
        catalog = self.language_file(self.canonical_language)
        if catalog is None:
            raise ConfigurationError(
                f"Canonical catalog '{self.canonical_language}' is no longer "
                f"tracked in {self.base_dir}.",
                base_dir=self.base_dir,
                language=self.canonical_language,
            )
        return catalog

    def add_language(self, language):
        """Create and track an empty catalog for ``language``.

        Does nothing if the language is already tracked. The new file gets
        the canonical catalog's header fields and no other entries. Returns
        the language's Catalog.

        Raises OverwriteProtectionError if a file for the language exists on
        disk but is not tracked, and ValueError for an id that is not a plain
        file-name token.
        """
        existing = self.language_file(language)
        if existing is not None:
            return existing

        if (
            not language
            or os.sep in language
            or "/" in language
            or (os.altsep and os.altsep in language)
            or "." in language
        ):
            raise ValueError(f"Invalid language id: {language!r}")

        path = self.base_dir / f"{language}{self.extension}"
        if path.exists():
            raise OverwriteProtectionError(
                f"{path} already exists but is not tracked; refusing to overwrite it.",
                path=path,
            )

        catalog = Catalog(path, extension=self.extension)
        catalog.set_headers(self.canonical_language_file().headers())
        catalog.save()
        self._collection()[language] = catalog
        logger.info("Added language '%s' at %s", language, path)
        return catalog

    def find_missing(self):
        """{language: [missing keys]} for every tracked catalog, canonical included."""
        canonical = self.canonical_language_file()
        return {
            language: catalog.find_missing_from(canonical)
            for language, catalog in self._collection().items()
        }

    def add_stubs(self):
        """Add stubs to every tracked catalog, saving each one as it is done.

        There is no cross-file rollback: if a later catalog fails, earlier
        ones stay written. Returns {language: [added keys]}.
        """
        canonical = self.canonical_language_file()
        added = {}
        for language, catalog in list(self._collection().items()):
            added[language] = catalog.add_stubs_from(canonical, self.stub_policy)
        return added
