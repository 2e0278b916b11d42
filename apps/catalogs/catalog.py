"""One language's gettext catalog (.po file).

A Catalog wraps a polib.POFile loaded lazily from its path. polib does the
parsing and serialisation; this module adds the msgid bookkeeping used to keep
sibling catalogs in step with a canonical one:

  - keys() / msgids()         which messages the catalog has
  - find_missing_from(other)  which of other's messages it lacks
  - add_stubs_from(other)     append those messages, then save once

The header block (msgid "") is held by polib as POFile.metadata and is always
written as the first entry, so no mutation here can drop it.
"""
import logging
import os
import shutil
import tempfile
from pathlib import Path

import polib

from apps.catalogs.exceptions import DuplicateKeyError
from apps.catalogs.stubs import resolve_stub

logger = logging.getLogger(__name__)

CATALOG_EXTENSION = ".po"

# msgid reserved for the header block.
HEADER_KEY = ""


def parse_header_block(text):
    """Parse a header entry value into a {field: value} dict.

    Each line is split on the first ": ". Lines without a separator are
    ignored. Accepts both real newlines and the escaped "\\n" marker.
    """
    headers = {}
    for line in text.replace("\\n", "\n").split("\n"):
        name, sep, value = line.partition(": ")
        if sep and name.strip():
            headers[name.strip()] = value.strip()
    return headers


def _current_umask():
    umask = os.umask(0)
    os.umask(umask)
    return umask


class Catalog:
    """A language's .po file: ordered entries plus the header block.

    Usage:
        catalog = Catalog.load("locale/ru.po")
        missing = catalog.find_missing_from(Catalog.load("locale/en.po"))
    """

    def __init__(self, path, extension=CATALOG_EXTENSION):
        self.path = Path(path)
        self.extension = extension
        self._po = None
        self._index = None
        self._headers = None

    @classmethod
    def load(cls, path, extension=CATALOG_EXTENSION):
        """Return a Catalog for ``path`` with its entries already parsed."""
        catalog = cls(path, extension=extension)
        catalog._pofile()
        return catalog

    def __repr__(self):
        return f"<Catalog {self.language()} ({self.path})>"

    def _pofile(self):
        """Parse the file on first use. A missing file is an empty catalog."""
        if self._po is None:
            if self.path.exists():
                logger.debug("Loading catalog %s", self.path)
                self._po = polib.pofile(str(self.path))
            else:
                logger.debug("Catalog %s does not exist yet, starting empty", self.path)
                self._po = polib.POFile()
        return self._po

    # ------------------------------------------------------------------
    # Derived attributes
    # ------------------------------------------------------------------

    def language(self):
        """File base name with the catalog extension stripped."""
        name = self.path.name
        if self.extension and name.endswith(self.extension):
            return name[: -len(self.extension)]
        return self.path.stem

    def header_entry(self):
        """The header block as an entry with msgid "", or None if absent."""
        po = self._pofile()
        if not po.metadata:
            return None
        return po.metadata_as_entry()

    def headers(self):
        """Header fields as a dict, parsed once and cached."""
        if self._headers is None:
            entry = self.header_entry()
            self._headers = parse_header_block(entry.msgstr) if entry else {}
        return self._headers

    def set_headers(self, headers):
        """Replace the header block with the given fields (in memory only)."""
        self._pofile().metadata = dict(headers)
        self._headers = None

    # ------------------------------------------------------------------
    # Entries
    # ------------------------------------------------------------------

    def entries(self):
        """All entries in file order, header entry first when present."""
        header = self.header_entry()
        messages = list(self._pofile())
        return [header] + messages if header is not None else messages

    def msgids(self):
        """Message keys in file order, header excluded."""
        return [entry.msgid for entry in self._pofile() if entry.msgid != HEADER_KEY]

    def keys(self):
        """Set of message keys, header excluded. Obsolete entries count."""
        return set(self.msgids())

    def _build_entry_index(self):
        index = {}
        for entry in self._pofile():
            index.setdefault(entry.msgid, entry)
        return index

    def _entry_index(self):
        """msgid -> first entry with that msgid, built once and kept current by add_entry."""
        if self._index is None:
            self._index = self._build_entry_index()
        return self._index

    def entry_for(self, key):
        """Return the entry whose msgid is exactly ``key``, or None."""
        return self._entry_index().get(key)

    def add_entry(self, key, value=None):
        """Append a new entry in memory and return it. Does not save.

        Raises DuplicateKeyError if ``key`` is already present or is the
        reserved header key.
        """
        if key == HEADER_KEY:
            raise DuplicateKeyError(
                "The empty msgid is reserved for the header block.", key=key
            )
        if self.entry_for(key) is not None:
            raise DuplicateKeyError(
                f"{self.path.name} already has an entry for {key!r}.", key=key
            )
        entry = polib.POEntry(msgid=key, msgstr=value or "")
        self._pofile().append(entry)
        self._entry_index()[key] = entry
        return entry

    def save(self):
        """Write header and entries back to the catalog's path.

        Writes to a temporary file in the same directory and moves it into
        place. An existing file keeps its permission bits; a new file gets
        the default mode for the current umask.
        """
        po = self._pofile()
        fd, tmp_path = tempfile.mkstemp(suffix=".tmp", dir=str(self.path.parent))
        os.close(fd)
        try:
            po.save(tmp_path)
            if self.path.exists():
                shutil.copymode(str(self.path), tmp_path)
            else:
                os.chmod(tmp_path, 0o666 & ~_current_umask())
            shutil.move(tmp_path, str(self.path))
        except Exception:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise
        logger.info("Saved %s (%d entries)", self.path, len(po))

    # ------------------------------------------------------------------
    # Synchronisation
    # ------------------------------------------------------------------

    def find_missing_from(self, other):
        """Keys present in ``other`` but not here, in ``other``'s order.

        ``other`` may be a Catalog or a path to a catalog file. Each missing
        key is reported once even if ``other`` repeats it.
        """
        if not isinstance(other, Catalog):
            other = type(self)(other, extension=self.extension)

        seen = self.keys()
        missing = []
        for key in other.msgids():
            if key not in seen:
                seen.add(key)
                missing.append(key)
        return missing

    def add_stubs_from(self, other, stub_policy=None):
        """Append a stub for every key missing relative to ``other``, then save.

        Stub values come from ``stub_policy`` (see apps.catalogs.stubs). The
        catalog is saved exactly once, after all stubs are added, even when
        nothing was missing. Returns the list of added keys.
        """
        if not isinstance(other, Catalog):
            other = type(self)(other, extension=self.extension)

        language = self.language()
        added = []
        for key in self.find_missing_from(other):
            canonical = other.entry_for(key)
            value = resolve_stub(
                stub_policy,
                key=key,
                language=language,
                canonical_value=canonical.msgstr if canonical is not None else None,
            )
            self.add_entry(key, value)
            added.append(key)

        self.save()
        if added:
            logger.info("Added %d stub(s) to %s", len(added), self.path.name)
        return added
