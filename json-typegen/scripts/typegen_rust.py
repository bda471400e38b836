#!/usr/bin/env python3
# Copyright 2026 Yevgeniy Zaremba
# SPDX-License-Identifier: Apache-2.0

"""Render a type graph as Rust structs deriving serde traits."""

from __future__ import annotations

from typing import assert_never

from typegen_model import (
    ArrayType,
    BoolType,
    CompositeDef,
    Field,
    FieldType,
    FloatType,
    IntegerType,
    MixedType,
    NullType,
    ObjectType,
    OptionalType,
    StringType,
    TypeGraph,
    UnknownType,
)
from typegen_naming import split_words
from typegen_render import Renderer

KEYWORDS = frozenset(
    """
    abstract as async await become box break const continue do dyn else enum extern
    false final fn for if impl in let loop macro match mod move mut override priv pub
    ref return static struct trait true try type typeof unsafe unsized use virtual
    where while yield
    """.split()
)
# Keywords that cannot be written as raw identifiers.
NON_RAW_KEYWORDS = frozenset({"crate", "self", "Self", "super"})

DERIVES = "#[derive(Debug, Clone, Serialize, Deserialize)]"
VALUE = "serde_json::Value"


def to_field_name(key: str) -> str:
    """snake_case identifier for a JSON key, keeping Rust keywords usable."""
    name = "_".join(word.lower() for word in split_words(key))
    if not name:
        return "field"
    if name[0].isdigit():
        return f"field_{name}"
    if name in NON_RAW_KEYWORDS:
        return f"{name}_"
    if name in KEYWORDS:
        return f"r#{name}"
    return name


def rust_string(text: str) -> str:
    out: list[str] = []
    for char in text:
        if char in ('"', "\\"):
            out.append("\\" + char)
        elif char == "\n":
            out.append("\\n")
        elif char == "\t":
            out.append("\\t")
        elif ord(char) < 0x20:
            out.append(f"\\u{{{ord(char):x}}}")
        else:
            out.append(char)
    return '"' + "".join(out) + '"'


def is_nullable(field_type: FieldType) -> bool:
    return isinstance(field_type, (OptionalType, NullType))


class RustRenderer(Renderer):
    target = "rust"
    extension = "rs"

    def header(self, graph: TypeGraph) -> str:
        if not graph.definitions:
            return ""
        return "use serde::{Deserialize, Serialize};"

    def type_ref(self, field_type: FieldType) -> str:
        if isinstance(field_type, NullType):
            return f"Option<{VALUE}>"
        if isinstance(field_type, BoolType):
            return "bool"
        if isinstance(field_type, IntegerType):
            return "i64"
        if isinstance(field_type, FloatType):
            return "f64"
        if isinstance(field_type, StringType):
            return "String"
        if isinstance(field_type, ArrayType):
            return f"Vec<{self.type_ref(field_type.items)}>"
        if isinstance(field_type, ObjectType):
            return field_type.name
        if isinstance(field_type, OptionalType):
            return f"Option<{self.type_ref(field_type.inner)}>"
        if isinstance(field_type, (UnknownType, MixedType)):
            return VALUE
        assert_never(field_type)

    def field_decl(self, field: Field, name: str | None = None) -> str:
        name = name or to_field_name(field.key)
        attrs: list[str] = []
        if name.removeprefix("r#") != field.key:
            attrs.append(f"rename = {rust_string(field.key)}")
        rendered = self.type_ref(field.type)
        if field.optional:
            if not is_nullable(field.type):
                rendered = f"Option<{rendered}>"
            attrs.append('skip_serializing_if = "Option::is_none"')
        lines = []
        if attrs:
            lines.append(f"{self.indent}#[serde({', '.join(attrs)})]")
        lines.append(f"{self.indent}pub {name}: {rendered},")
        return "\n".join(lines)

    def definition(self, composite: CompositeDef) -> str:
        used: set[str] = set()
        lines = [DERIVES, f"pub struct {composite.name} {{"]
        for field in composite.fields:
            base = to_field_name(field.key)
            name = base
            suffix = 2
            while name in used:
                name = f"{base}_{suffix}"
                suffix += 1
            used.add(name)
            lines.append(self.field_decl(field, name))
        lines.append("}")
        return "\n".join(lines)

    def root_alias(self, graph: TypeGraph) -> str:
        return f"pub type {graph.root_name} = {self.type_ref(graph.root)};"
