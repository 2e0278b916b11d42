"""Stub value policies for entries added to a catalog.

A policy is one of:
  - None: stubs are left untranslated (empty msgstr)
  - a string: every stub gets that exact value
  - a callable: called with keyword arguments ``key``, ``language`` and
    ``canonical_value`` for each missing key, returns the stub value

The canonical value is looked up by the caller and passed in, so a policy
never needs a reference to the catalog set it is used with.
"""
from string import Formatter

DEFAULT_STUB_FORMAT = "{canonical_value} ({language})"

STUB_FORMAT_FIELDS = frozenset({"key", "language", "canonical_value"})


def resolve_stub(policy, key, language, canonical_value=None):
    """Return the stub value for one missing key, or None for no value."""
    if policy is None:
        return None
    if callable(policy):
        return policy(key=key, language=language, canonical_value=canonical_value)
    return policy


def stub_format_fields(template):
    """Return the set of placeholder names used in a stub template.

    Raises ValueError if the template is not a valid format string.
    """
    return {
        field_name.split(".")[0].split("[")[0]
        for _, field_name, _, _ in Formatter().parse(template)
        if field_name is not None
    }


def format_stub(template=DEFAULT_STUB_FORMAT):
    """Build a stub policy that fills ``template`` for each missing key.

    Supported placeholders: {key}, {language}, {canonical_value}. When the
    canonical catalog has no translation for the key (empty msgstr, common
    for source-language catalogs), the key itself stands in for it.

    Examples:
        format_stub()("Save", "ru", "Save")        -> "Save (ru)"
        format_stub("TODO: {key}")("Save", "ru")   -> "TODO: Save"
    """
    unknown = stub_format_fields(template) - STUB_FORMAT_FIELDS
    if unknown:
        raise ValueError(
            f"Unknown placeholder(s) in stub format {template!r}: "
            f"{', '.join(sorted(unknown))}"
        )

    def policy(key, language, canonical_value=None):
        return template.format(
            key=key,
            language=language,
            canonical_value=canonical_value or key,
        )

    return policy
