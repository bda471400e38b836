#!/usr/bin/env python3
# Copyright 2026 Yevgeniy Zaremba
# SPDX-License-Identifier: Apache-2.0

"""Render a type graph as Python TypedDict declarations."""

from __future__ import annotations

import json
import keyword
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


def is_attribute_name(key: str) -> bool:
    return key.isidentifier() and not keyword.iskeyword(key)


def typing_names(field_type: FieldType) -> set[str]:
    if isinstance(field_type, (UnknownType, MixedType)):
        return {"Any"}
    if isinstance(field_type, OptionalType):
        return {"Optional"} | typing_names(field_type.inner)
    if isinstance(field_type, ArrayType):
        return typing_names(field_type.items)
    return set()


class TypedDictRenderer(Renderer):
    target = "python"
    extension = "py"
    separator = "\n\n\n"

    def ordered(self, graph: TypeGraph) -> list[CompositeDef]:
        # TypedDict field types are evaluated when the class is created, so
        # every definition must follow the definitions it references.
        emitted: list[str] = []
        visiting: set[str] = set()

        def visit(name: str) -> None:
            if name in emitted or name in visiting:
                return
            visiting.add(name)
            for dependency in graph.dependencies(name):
                visit(dependency)
            visiting.discard(name)
            emitted.append(name)

        for composite in graph.definitions:
            visit(composite.name)
        return [graph.definition(name) for name in emitted]

    def header(self, graph: TypeGraph) -> str:
        names: set[str] = set(typing_names(graph.root))
        for composite in graph.definitions:
            names.add("TypedDict")
            for field in composite.fields:
                names |= typing_names(field.type)
                if field.optional:
                    names.add("NotRequired")
        if not names:
            return ""
        return f"from typing import {', '.join(sorted(names))}"

    def type_ref(self, field_type: FieldType) -> str:
        if isinstance(field_type, NullType):
            return "None"
        if isinstance(field_type, BoolType):
            return "bool"
        if isinstance(field_type, IntegerType):
            return "int"
        if isinstance(field_type, FloatType):
            return "float"
        if isinstance(field_type, StringType):
            return "str"
        if isinstance(field_type, ArrayType):
            return f"list[{self.type_ref(field_type.items)}]"
        if isinstance(field_type, ObjectType):
            return field_type.name
        if isinstance(field_type, OptionalType):
            return f"Optional[{self.type_ref(field_type.inner)}]"
        if isinstance(field_type, (UnknownType, MixedType)):
            return "Any"
        assert_never(field_type)

    def annotation(self, field: Field) -> str:
        rendered = self.type_ref(field.type)
        if field.optional:
            return f"NotRequired[{rendered}]"
        return rendered

    def field_decl(self, field: Field) -> str:
        return f"{self.indent}{field.key}: {self.annotation(field)}"

    def definition(self, composite: CompositeDef) -> str:
        if all(is_attribute_name(field.key) for field in composite.fields):
            lines = [f"class {composite.name}(TypedDict):"]
            lines.extend(self.field_decl(field) for field in composite.fields)
            if not composite.fields:
                lines.append(f"{self.indent}pass")
            return "\n".join(lines)
        # Keys that are not identifiers need the functional form.
        lines = [f"{composite.name} = TypedDict("]
        lines.append(f"{self.indent}{json.dumps(composite.name)},")
        lines.append(f"{self.indent}{{")
        for field in composite.fields:
            key = json.dumps(field.key, ensure_ascii=False)
            lines.append(f"{self.indent * 2}{key}: {self.annotation(field)},")
        lines.append(f"{self.indent}}},")
        lines.append(")")
        return "\n".join(lines)

    def root_alias(self, graph: TypeGraph) -> str:
        return f"{graph.root_name} = {self.type_ref(graph.root)}"
