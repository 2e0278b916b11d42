"""Shared fixtures for catalog tests."""
import pytest

from tests.utils.po_files import write_po


@pytest.fixture
def locale_dir(tmp_path):
    """en (complete), ru (foo only) and hi (foo, baz)."""
    write_po(tmp_path / "en.po", [
        ("foo", "Foo"),
        ("bar", "Bar"),
        ("baz", "Baz"),
    ])
    write_po(tmp_path / "ru.po", [("foo", "Фу")])
    write_po(tmp_path / "hi.po", [("foo", "फू"), ("baz", "बाज़")])
    return tmp_path
