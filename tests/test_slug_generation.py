from __future__ import annotations

import pytest

from markdown_toc.slugify import generate_slug


@pytest.mark.parametrize(
    ("title", "expected"),
    [
        ("Hello World", "hello-world"),
        ("What's New?", "whats-new"),
        ("API", "api"),
        ("Multiple   Spaces", "multiple-spaces"),
        ("snake_case stays", "snake_case-stays"),
        ("Already-hyphenated -- twice", "already-hyphenated-twice"),
        ("C++ / CLI", "c-cli"),
        ("Version 2.0", "version-20"),
        ("", ""),
    ],
)
def test_generate_slug_expected_examples(title: str, expected: str):
    """Validates slug generation for representative examples."""
    assert generate_slug(title) == expected


def test_generate_slug_keeps_edge_hyphens():
    assert generate_slug("- leading") == "-leading"
    assert generate_slug("trailing !") == "trailing-"


def test_generate_slug_drops_non_ascii_by_default():
    assert generate_slug("Café au lait") == "caf-au-lait"
    assert generate_slug("Read 📖, Write ✍️, Repeat!") == "read-write-repeat"


def test_generate_slug_preserves_unicode_when_requested():
    assert generate_slug("Café au lait", preserve_unicode=True) == "café-au-lait"
    assert generate_slug("Über Uns", preserve_unicode=True) == "über-uns"


def test_identical_titles_share_an_anchor():
    assert generate_slug("Usage") == generate_slug("Usage")
