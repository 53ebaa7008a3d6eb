"""Slug generation for markdown headings."""

from __future__ import annotations

import re

ASCII_DISALLOWED = re.compile(r"[^A-Za-z0-9_\s-]")
UNICODE_DISALLOWED = re.compile(r"[^\w\s-]")


def generate_slug(title: str, preserve_unicode: bool = False) -> str:
    """Generate the anchor slug for a Markdown heading title.

    Lowercases the title, removes everything except word characters,
    whitespace, and hyphens, then collapses whitespace runs and hyphen runs
    into single hyphens. Leading and trailing hyphens are kept, and an empty
    title yields an empty slug.

    Args:
        title: The heading text to convert into a slug.
        preserve_unicode: When True, Unicode letters and digits count as word
            characters; otherwise only ``[A-Za-z0-9_]`` do.

    Returns:
        str: Hyphen-separated slug suitable for anchor links.

    Examples:
        generate_slug("Hello World")  # "hello-world"
        generate_slug("What's New?")  # "whats-new"
        generate_slug("C++ / CLI")  # "c-cli"
        generate_slug("Café", preserve_unicode=True)  # "café"
    """
    disallowed = UNICODE_DISALLOWED if preserve_unicode else ASCII_DISALLOWED

    slug = title.lower()
    slug = disallowed.sub("", slug)
    slug = re.sub(r"\s+", "-", slug)
    slug = re.sub(r"-+", "-", slug)

    return slug
