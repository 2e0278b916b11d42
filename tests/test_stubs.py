"""Tests for stub value policies."""
import pytest

from apps.catalogs.stubs import (
    DEFAULT_STUB_FORMAT,
    format_stub,
    resolve_stub,
    stub_format_fields,
)


def test_no_policy_gives_no_value():
    assert resolve_stub(None, "Save", "ru", "Save") is None


def test_fixed_policy_returns_string():
    assert resolve_stub("TODO", "Save", "ru", "Save") == "TODO"


def test_callable_policy_called_with_keywords():
    def policy(**kwargs):
        return repr(sorted(kwargs.items()))

    result = resolve_stub(policy, "Save", "ru", "Enregistrer")
    assert result == repr([
        ("canonical_value", "Enregistrer"),
        ("key", "Save"),
        ("language", "ru"),
    ])


def test_default_format():
    assert format_stub()("Save", "ru", "Save it") == "Save it (ru)"


def test_format_falls_back_to_key_without_canonical_value():
    policy = format_stub(DEFAULT_STUB_FORMAT)
    assert policy("Save", "ru", "") == "Save (ru)"
    assert policy("Save", "ru", None) == "Save (ru)"


def test_custom_format():
    assert format_stub("[{language}] {key}")("Save", "hi", "x") == "[hi] Save"


def test_unknown_placeholder_rejected():
    with pytest.raises(ValueError, match="msgid"):
        format_stub("{msgid} ({language})")


def test_positional_placeholder_rejected():
    with pytest.raises(ValueError):
        format_stub("{} ({language})")


def test_stub_format_fields():
    assert stub_format_fields("{key}/{language}/{canonical_value}") == {
        "key", "language", "canonical_value",
    }
    assert stub_format_fields("plain text") == set()


def test_stub_format_fields_rejects_broken_template():
    with pytest.raises(ValueError):
        stub_format_fields("{key")
