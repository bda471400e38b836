#!/usr/bin/env python3
# Copyright 2026 Yevgeniy Zaremba
# SPDX-License-Identifier: Apache-2.0

"""Infer a type graph (root type plus named object definitions) from a JSON value."""

from __future__ import annotations

import logging
from typing import Any

from typegen_common import JsonValue, type_name
from typegen_model import (
    BOOL,
    FLOAT,
    INTEGER,
    MIXED,
    NULL,
    STRING,
    UNKNOWN,
    ArrayType,
    CompositeDef,
    Field,
    FieldType,
    FloatType,
    IntegerType,
    NullType,
    ObjectType,
    OptionalType,
    TypeGraph,
    UnknownType,
    describe,
)
from typegen_naming import NameAllocator

logger = logging.getLogger(__name__)


def unify(left: FieldType, right: FieldType) -> FieldType:
    """Merge two types observed for the same field or array slot.

    Null with anything gives Optional of the other type. Unknown is the
    identity: it carries no information, so it yields the other side.
    Integer with Float widens to Float instead of becoming Mixed.

    Objects at the same path share a definition, so equal object references
    unify to themselves; two different references cannot be reconciled and,
    like every other conflicting pair, collapse to Mixed.
    """
    if left == right:
        return left
    if isinstance(left, UnknownType):
        return right
    if isinstance(right, UnknownType):
        return left
    if isinstance(left, NullType):
        return right if isinstance(right, OptionalType) else OptionalType(right)
    if isinstance(right, NullType):
        return left if isinstance(left, OptionalType) else OptionalType(left)
    if isinstance(left, OptionalType) or isinstance(right, OptionalType):
        inner = unify(_strip_optional(left), _strip_optional(right))
        return inner if isinstance(inner, OptionalType) else OptionalType(inner)
    if isinstance(left, ArrayType) and isinstance(right, ArrayType):
        return ArrayType(unify(left.items, right.items))
    if {type(left), type(right)} == {IntegerType, FloatType}:
        return FLOAT
    return MIXED


def _strip_optional(field_type: FieldType) -> FieldType:
    if isinstance(field_type, OptionalType):
        return field_type.inner
    return field_type


class _Slot:
    __slots__ = ("type", "optional")

    def __init__(self, field_type: FieldType, optional: bool) -> None:
        self.type = field_type
        self.optional = optional


class _Shape:
    """Fields accumulated for one definition while the document is walked."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.slots: dict[str, _Slot] = {}
        self.instances = 0

    def absorb(self, observed: dict[str, FieldType]) -> None:
        if self.instances == 0:
            for key, field_type in observed.items():
                self.slots[key] = _Slot(field_type, False)
        else:
            for key, slot in self.slots.items():
                if key not in observed:
                    slot.optional = True
            for key, field_type in observed.items():
                slot = self.slots.get(key)
                if slot is None:
                    self.slots[key] = _Slot(field_type, True)
                else:
                    slot.type = unify(slot.type, field_type)
        self.instances += 1

    def freeze(self, sort_fields: bool) -> CompositeDef:
        keys = sorted(self.slots) if sort_fields else list(self.slots)
        fields = []
        for key in keys:
            slot = self.slots[key]
            # A key that only ever held null carries no type information.
            field_type = UNKNOWN if isinstance(slot.type, NullType) else slot.type
            fields.append(Field(key, field_type, slot.optional))
        return CompositeDef(self.name, tuple(fields))


class TypeInferrer:
    """Walk one JSON document and collect its type graph.

    Each instance owns its name allocator, so one inferrer should be used for
    a single document.
    """

    def __init__(self, root_name: str = "Data", sort_fields: bool = False) -> None:
        self.root_name = root_name
        self.sort_fields = sort_fields
        self.allocator = NameAllocator(root_name)
        self._shapes: dict[str, _Shape] = {}

    def infer(self, value: JsonValue) -> TypeGraph:
        root = self.infer_value(value, ())
        definitions = tuple(shape.freeze(self.sort_fields) for shape in self._shapes.values())
        if isinstance(root, ObjectType):
            root_name = root.name
        elif self.root_name not in self._shapes:
            root_name = self.root_name
        else:
            root_name = self.allocator.reserve(f"{self.root_name}List")
        logger.debug("Inferred root %s with %d definition(s)", describe(root), len(definitions))
        return TypeGraph(root=root, definitions=definitions, root_name=root_name)

    def infer_value(self, value: Any, path: tuple[str, ...]) -> FieldType:
        if value is None:
            return NULL
        if isinstance(value, bool):
            return BOOL
        if isinstance(value, int):
            return INTEGER
        if isinstance(value, float):
            return FLOAT
        if isinstance(value, str):
            return STRING
        if isinstance(value, list):
            return self.infer_array(value, path)
        if isinstance(value, dict):
            return self.infer_object(value, path)
        raise TypeError(f"Not a JSON value: {type_name(value)}")

    def infer_array(self, values: list[Any], path: tuple[str, ...]) -> FieldType:
        items: FieldType = UNKNOWN
        for item in values:
            items = unify(items, self.infer_value(item, path))
        return ArrayType(items)

    def infer_object(self, value: dict[str, Any], path: tuple[str, ...]) -> FieldType:
        name = self.allocator.allocate(path)
        shape = self._shapes.get(name)
        if shape is None:
            shape = _Shape(name)
            self._shapes[name] = shape
        observed = {key: self.infer_value(inner, path + (key,)) for key, inner in value.items()}
        shape.absorb(observed)
        return ObjectType(name)


def infer(value: JsonValue, root_name: str = "Data", sort_fields: bool = False) -> TypeGraph:
    """Infer the type graph of a parsed JSON document."""
    return TypeInferrer(root_name, sort_fields=sort_fields).infer(value)
