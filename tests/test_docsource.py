"""Tests for case-insensitive query helpers."""

from nix_options_documentation.docsource import (
    Lowercase,
    ascii_lower,
    contains_insensitive_ascii,
    starts_with_insensitive_ascii,
)


def test_lowercase_folds_ascii_only() -> None:
    """Test only ASCII letters are folded."""
    assert Lowercase("Services.FOO") == "services.foo"
    assert Lowercase("ÄBC") == "Äbc"
    assert ascii_lower("İX") == "İx"


def test_lowercase_is_idempotent() -> None:
    """Test wrapping an existing query returns it unchanged."""
    query = Lowercase("Foo")

    assert Lowercase(query) is query


def test_starts_with() -> None:
    """Test prefix matching."""
    assert starts_with_insensitive_ascii("FooBar", Lowercase("foo"))
    assert starts_with_insensitive_ascii("FooBar", Lowercase(""))
    assert not starts_with_insensitive_ascii("FooBar", Lowercase("bar"))
    assert not starts_with_insensitive_ascii("Fo", Lowercase("foo"))


def test_contains() -> None:
    """Test substring matching."""
    assert contains_insensitive_ascii("FooBar", Lowercase("OBA"))
    assert contains_insensitive_ascii("FooBar", Lowercase(""))
    assert not contains_insensitive_ascii("FooBar", Lowercase("baz"))
