#!/usr/bin/env python3
# Copyright 2026 Yevgeniy Zaremba
# SPDX-License-Identifier: Apache-2.0

"""Render a type graph as a JSON Schema (draft 2020-12) document."""

from __future__ import annotations

import json
from typing import Any, assert_never

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

DRAFT = "https://json-schema.org/draft/2020-12/schema"


def ref(name: str) -> dict[str, Any]:
    return {"$ref": f"#/$defs/{name}"}


def nullable(schema: dict[str, Any]) -> dict[str, Any]:
    """Widen a schema so it also accepts null."""
    if not schema:
        return schema
    json_type = schema.get("type")
    if isinstance(json_type, str):
        if json_type == "null":
            return schema
        return {**schema, "type": [json_type, "null"]}
    return {"anyOf": [schema, {"type": "null"}]}


class JsonSchemaRenderer(Renderer):
    target = "jsonschema"
    extension = "jsonschema"

    def type_schema(self, field_type: FieldType) -> dict[str, Any]:
        if isinstance(field_type, NullType):
            return {"type": "null"}
        if isinstance(field_type, BoolType):
            return {"type": "boolean"}
        if isinstance(field_type, IntegerType):
            return {"type": "integer"}
        if isinstance(field_type, FloatType):
            return {"type": "number"}
        if isinstance(field_type, StringType):
            return {"type": "string"}
        if isinstance(field_type, ArrayType):
            return {"type": "array", "items": self.type_schema(field_type.items)}
        if isinstance(field_type, ObjectType):
            return ref(field_type.name)
        if isinstance(field_type, OptionalType):
            return nullable(self.type_schema(field_type.inner))
        if isinstance(field_type, (UnknownType, MixedType)):
            return {}
        assert_never(field_type)

    def definition_schema(self, composite: CompositeDef) -> dict[str, Any]:
        out: dict[str, Any] = {
            "type": "object",
            "properties": {field.key: self.type_schema(field.type) for field in composite.fields},
        }
        required = [field.key for field in composite.fields if not field.omittable]
        if required:
            out["required"] = required
        return out

    def document(self, graph: TypeGraph) -> dict[str, Any]:
        doc: dict[str, Any] = {"$schema": DRAFT, "title": graph.root_name}
        doc.update(self.type_schema(graph.root))
        if graph.definitions:
            doc["$defs"] = {
                composite.name: self.definition_schema(composite) for composite in self.ordered(graph)
            }
        return doc

    def type_ref(self, field_type: FieldType) -> str:
        return json.dumps(self.type_schema(field_type), ensure_ascii=False)

    def field_decl(self, field: Field) -> str:
        return f"{json.dumps(field.key, ensure_ascii=False)}: {self.type_ref(field.type)}"

    def definition(self, composite: CompositeDef) -> str:
        return json.dumps(self.definition_schema(composite), ensure_ascii=False, indent=2)

    def render(self, graph: TypeGraph) -> str:
        return json.dumps(self.document(graph), ensure_ascii=False, indent=2) + "\n"
