from __future__ import annotations

import os

import pytest

from markdown_toc.document import TextDocument
from markdown_toc.slugify import generate_slug
from markdown_toc.updater import update_toc

atheris = pytest.importorskip("atheris")


def test_generate_slug_with_fuzzed_input():
    data = os.urandom(4096)
    provider = atheris.FuzzedDataProvider(data)
    generated = set()

    for _ in range(128):
        if provider.remaining_bytes() == 0:
            break
        text = provider.ConsumeUnicodeNoSurrogates(64)
        slug = generate_slug(text)
        slug.encode("ascii")
        assert slug == slug.lower()
        generated.add(slug)

    assert generated  # ensure we exercised the loop


def test_update_toc_with_fuzzed_documents():
    data = os.urandom(4096)
    provider = atheris.FuzzedDataProvider(data)
    lines: list[str] = []

    while provider.remaining_bytes() > 0 and len(lines) < 64:
        prefix = provider.PickValueInList(["# ", "## ", "### ", "```", "", "<!-- ", "1. "])
        lines.append(prefix + provider.ConsumeUnicodeNoSurrogates(24).replace("\n", " "))

    document = TextDocument("\n".join(lines))
    update_toc(document, allow_without_config=True)
    update_toc(document, allow_without_config=True)

    assert len(document.read_lines()) >= len(lines)
