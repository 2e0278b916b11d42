"""Errors raised by the catalog synchronisation engine.

Only a missing catalog file is tolerated silently (it loads as an empty
catalog). Everything else surfaces at the call that caused it; OS-level
I/O errors and polib parse errors are not wrapped.
"""


class CatalogError(Exception):
    """Base class for catalog errors."""


class ConfigurationError(CatalogError):
    """Raised when a CatalogSet cannot find its canonical catalog."""

    def __init__(self, message, base_dir=None, language=None):
        super().__init__(message)
        self.base_dir = base_dir
        self.language = language


class OverwriteProtectionError(CatalogError):
    """Raised when onboarding a language would clobber an untracked file."""

    def __init__(self, message, path=None):
        super().__init__(message)
        self.path = path


class DuplicateKeyError(CatalogError):
    """Raised when adding an entry whose msgid is already in the catalog.

    The empty msgid is reserved for the header block and is always
    treated as present.
    """

    def __init__(self, message, key=None):
        super().__init__(message)
        self.key = key
