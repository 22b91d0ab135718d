"""Outline identifier parsing.

Kobo stores table-of-contents entries with ContentIDs such as::

    book.epub!OPS!xhtml/Chapter01.xhtml#chapter01_4-2

The trailing ``-2`` declares the TOC depth of the entry; without it the ContentID is the
same string a highlight made in that section carries.
"""

from __future__ import annotations

import re

_DEPTH_SUFFIX_RE = re.compile(r"-(?P<depth>[0-9]+)\Z")

# Checked in this order; the first marker found wins.
DOCUMENT_EXTENSIONS: tuple[str, ...] = (".xhtml", ".html", ".xml")

# Depths are unsigned 32-bit on the device; anything larger is treated as absent.
MAX_DEPTH = 2**32 - 1


def normalize(identifier: str) -> str:
    """Strip a trailing ``-<digits>`` suffix from an identifier.

    Examples:
        ``"...xhtml#chapter01_4-2"`` -> ``"...xhtml#chapter01_4"``
        ``"...xhtml#section-abc"`` -> unchanged
    """

    m = _DEPTH_SUFFIX_RE.search(identifier)
    if not m:
        return identifier
    return identifier[: m.start()]


def depth_of(identifier: str) -> int:
    """Return the depth declared by the ``-<digits>`` suffix, or 1 when absent."""

    m = _DEPTH_SUFFIX_RE.search(identifier)
    if not m:
        return 1
    digits = m.group("depth").lstrip("0")
    if len(digits) > len(str(MAX_DEPTH)):
        return 1
    depth = int(digits or "0")
    if depth > MAX_DEPTH:
        return 1
    # "-0" would put a node above the document root
    return max(1, depth)


def base_file_of(identifier: str, extensions: tuple[str, ...] = DOCUMENT_EXTENSIONS) -> str:
    """Return the identifier cut right after its document-file extension.

    ``"book!ch01.xhtml#sec2-3"`` -> ``"book!ch01.xhtml"``. Identifiers without a known
    extension are returned whole.
    """

    for ext in extensions:
        pos = identifier.find(ext)
        if pos != -1:
            return identifier[: pos + len(ext)]
    return identifier
