#!/usr/bin/env python3
# Copyright 2026 Yevgeniy Zaremba
# SPDX-License-Identifier: Apache-2.0

"""Render a type graph as TypeScript interfaces."""

from __future__ import annotations

import json
import re
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
from typegen_render import Renderer

IDENTIFIER_RE = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def property_name(key: str) -> str:
    if IDENTIFIER_RE.match(key):
        return key
    return json.dumps(key, ensure_ascii=False)


class TypeScriptRenderer(Renderer):
    target = "typescript"
    extension = "ts"
    indent = "  "

    def type_ref(self, field_type: FieldType) -> str:
        if isinstance(field_type, NullType):
            return "null"
        if isinstance(field_type, BoolType):
            return "boolean"
        if isinstance(field_type, (IntegerType, FloatType)):
            return "number"
        if isinstance(field_type, StringType):
            return "string"
        if isinstance(field_type, ArrayType):
            items = self.type_ref(field_type.items)
            if " " in items:
                items = f"({items})"
            return f"{items}[]"
        if isinstance(field_type, ObjectType):
            return field_type.name
        if isinstance(field_type, OptionalType):
            return f"{self.type_ref(field_type.inner)} | null"
        if isinstance(field_type, UnknownType):
            return "unknown"
        if isinstance(field_type, MixedType):
            return "any"
        assert_never(field_type)

    def field_decl(self, field: Field) -> str:
        marker = "?" if field.optional else ""
        return f"{self.indent}{property_name(field.key)}{marker}: {self.type_ref(field.type)};"

    def definition(self, composite: CompositeDef) -> str:
        lines = [f"export interface {composite.name} {{"]
        lines.extend(self.field_decl(field) for field in composite.fields)
        lines.append("}")
        return "\n".join(lines)

    def root_alias(self, graph: TypeGraph) -> str:
        return f"export type {graph.root_name} = {self.type_ref(graph.root)};"
