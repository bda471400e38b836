#!/usr/bin/env python3
# Copyright 2026 Yevgeniy Zaremba
# SPDX-License-Identifier: Apache-2.0

"""Path-keyed allocation of type names for nested objects."""

from __future__ import annotations

import re
from typing import Sequence

WORD_RE = re.compile(r"[A-Z]+(?![a-z])|[A-Z]?[a-z]+|[0-9]+")

# Built-in names of the rendered languages that a generated type must not shadow.
RESERVED_NAMES = frozenset(
    {
        "Any",
        "Array",
        "Box",
        "Dict",
        "False",
        "HashMap",
        "List",
        "None",
        "NotRequired",
        "Option",
        "Optional",
        "Record",
        "Result",
        "Self",
        "String",
        "True",
        "TypedDict",
        "Value",
        "Vec",
    }
)


def split_words(text: str) -> list[str]:
    """Split a key into words on case changes, digits and punctuation."""
    return WORD_RE.findall(text)


def to_type_name(segment: str) -> str:
    """Turn a JSON key into a PascalCase identifier."""
    words = split_words(segment)
    if not words:
        return "Type"
    name = "".join(word[:1].upper() + word[1:].lower() if not word.isupper() else word for word in words)
    if name[0].isdigit():
        name = f"T{name}"
    return name


class NameAllocator:
    """Assign one stable, unique name per object path.

    The empty path is the document root and always maps to ``root_name``
    verbatim. Every other path is named after its last segment; a name already
    held by another path (or reserved) gets a numeric suffix starting at 2.
    """

    def __init__(self, root_name: str = "Data") -> None:
        self.root_name = root_name
        self._by_path: dict[tuple[str, ...], str] = {(): root_name}
        self._taken: set[str] = {root_name}

    def allocate(self, path: Sequence[str]) -> str:
        key = tuple(path)
        name = self._by_path.get(key)
        if name is None:
            name = self._unique(to_type_name(key[-1]))
            self._by_path[key] = name
        return name

    def reserve(self, base: str) -> str:
        """Allocate a free name that is not tied to any path."""
        return self._unique(base)

    def is_taken(self, name: str) -> bool:
        return name in self._taken

    def _unique(self, base: str) -> str:
        name = base
        suffix = 2
        while name in self._taken or name in RESERVED_NAMES:
            name = f"{base}{suffix}"
            suffix += 1
        self._taken.add(name)
        return name
