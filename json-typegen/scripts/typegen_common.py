#!/usr/bin/env python3
# Copyright 2026 Yevgeniy Zaremba
# SPDX-License-Identifier: Apache-2.0

"""Shared helpers for json-typegen scripts."""

from __future__ import annotations

import json
import re
import sys
from pathlib import Path
from typing import Any, Union

PATH_TOKEN_RE = re.compile(r"([^.\[\]]+)|(\[(\*|\d+)\])")

JsonValue = Union[None, bool, int, float, str, "list[JsonValue]", "dict[str, JsonValue]"]


class TypegenError(Exception):
    """Base class for errors raised by json-typegen."""


def read_text(path: str | None) -> str:
    if not path or path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def load_json(path: str | None) -> JsonValue:
    """Load JSON from a file path or stdin when path is '-' or None."""
    return json.loads(read_text(path))


def write_text(text: str, path: str | None = None) -> None:
    """Write rendered text to a file, or to stdout when path is '-' or None."""
    if not text.endswith("\n"):
        text += "\n"
    if not path or path == "-":
        sys.stdout.write(text)
        return
    Path(path).write_text(text, encoding="utf-8")


def parse_path(path: str) -> list[str | int]:
    """Parse dot path syntax with optional array indices and wildcards."""
    if not path:
        return []
    tokens: list[str | int] = []
    for match in PATH_TOKEN_RE.finditer(path):
        key = match.group(1)
        bracket_token = match.group(3)
        if key is not None:
            tokens.append(key)
        elif bracket_token is not None:
            if bracket_token == "*":
                tokens.append("*")
            else:
                tokens.append(int(bracket_token))
    return tokens


def extract_values(data: Any, path: str) -> list[Any]:
    """Extract all values matching path. Wildcards return multiple matches."""
    tokens = parse_path(path)
    if not tokens:
        return [data]
    values: list[Any] = [data]
    for token in tokens:
        next_values: list[Any] = []
        for item in values:
            if token == "*":
                if isinstance(item, list):
                    next_values.extend(item)
                elif isinstance(item, dict):
                    next_values.extend(item.values())
            elif isinstance(token, int):
                if isinstance(item, list) and -len(item) <= token < len(item):
                    next_values.append(item[token])
            else:
                if isinstance(item, dict) and token in item:
                    next_values.append(item[token])
        values = next_values
    return values


def resolve_array(data: Any, array_path: str | None) -> list[Any]:
    """Resolve an array from data or an explicit path."""
    if array_path:
        values = extract_values(data, array_path)
        for value in values:
            if isinstance(value, list):
                return value
        return []
    if isinstance(data, list):
        return data
    return []


def type_name(value: Any) -> str:
    """Map python value to a JSON-like type name."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, int) and not isinstance(value, bool):
        return "int"
    if isinstance(value, float):
        return "float"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__
