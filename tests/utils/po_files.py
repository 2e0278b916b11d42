"""Helpers for writing real .po files in tests."""
import polib

DEFAULT_METADATA = {
    "Project-Id-Version": "Example 1.0",
    "MIME-Version": "1.0",
    "Content-Type": "text/plain; charset=utf-8",
    "Content-Transfer-Encoding": "8bit",
}


def write_po(path, entries, metadata=None):
    """Write a .po file from (msgid, msgstr) pairs and return its path."""
    po = polib.POFile()
    po.metadata = dict(DEFAULT_METADATA if metadata is None else metadata)
    for msgid, msgstr in entries:
        po.append(polib.POEntry(msgid=msgid, msgstr=msgstr))
    po.save(str(path))
    return path
