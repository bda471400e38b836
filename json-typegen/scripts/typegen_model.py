#!/usr/bin/env python3
# Copyright 2026 Yevgeniy Zaremba
# SPDX-License-Identifier: Apache-2.0

"""Inferred type model: field types, composite definitions and the type graph."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union, assert_never


@dataclass(frozen=True)
class NullType:
    pass


@dataclass(frozen=True)
class BoolType:
    pass


@dataclass(frozen=True)
class IntegerType:
    pass


@dataclass(frozen=True)
class FloatType:
    pass


@dataclass(frozen=True)
class StringType:
    pass


@dataclass(frozen=True)
class UnknownType:
    """No concrete type was observed (only nulls, or an empty array)."""


@dataclass(frozen=True)
class MixedType:
    """Two or more incompatible concrete types were observed for one slot."""


@dataclass(frozen=True)
class ArrayType:
    items: FieldType


@dataclass(frozen=True)
class ObjectType:
    name: str


@dataclass(frozen=True)
class OptionalType:
    inner: FieldType


FieldType = Union[
    NullType,
    BoolType,
    IntegerType,
    FloatType,
    StringType,
    ArrayType,
    ObjectType,
    OptionalType,
    UnknownType,
    MixedType,
]

NULL = NullType()
BOOL = BoolType()
INTEGER = IntegerType()
FLOAT = FloatType()
STRING = StringType()
UNKNOWN = UnknownType()
MIXED = MixedType()


def describe(field_type: FieldType) -> str:
    """Compact text form of a field type, e.g. ``Array(Optional(String))``."""
    if isinstance(field_type, NullType):
        return "Null"
    if isinstance(field_type, BoolType):
        return "Bool"
    if isinstance(field_type, IntegerType):
        return "Integer"
    if isinstance(field_type, FloatType):
        return "Float"
    if isinstance(field_type, StringType):
        return "String"
    if isinstance(field_type, ArrayType):
        return f"Array({describe(field_type.items)})"
    if isinstance(field_type, ObjectType):
        return f"Object({field_type.name})"
    if isinstance(field_type, OptionalType):
        return f"Optional({describe(field_type.inner)})"
    if isinstance(field_type, UnknownType):
        return "Unknown"
    if isinstance(field_type, MixedType):
        return "Mixed"
    assert_never(field_type)


def referenced_names(field_type: FieldType) -> list[str]:
    """Names of the composite definitions a field type points at."""
    if isinstance(field_type, ObjectType):
        return [field_type.name]
    if isinstance(field_type, ArrayType):
        return referenced_names(field_type.items)
    if isinstance(field_type, OptionalType):
        return referenced_names(field_type.inner)
    return []


@dataclass(frozen=True)
class Field:
    key: str
    type: FieldType
    optional: bool = False

    @property
    def omittable(self) -> bool:
        """Missing from some instances or null in some; never a required key."""
        return self.optional or isinstance(self.type, OptionalType)


@dataclass(frozen=True)
class CompositeDef:
    name: str
    fields: tuple[Field, ...]

    def field(self, key: str) -> Field | None:
        for item in self.fields:
            if item.key == key:
                return item
        return None

    @property
    def keys(self) -> list[str]:
        return [item.key for item in self.fields]


@dataclass(frozen=True)
class TypeGraph:
    """Root type plus every composite definition, in discovery order.

    ``root_name`` names the root declaration when the root is not an object
    (for example ``type DataList = Data[]``); for object roots it equals the
    root definition's name.
    """

    root: FieldType
    definitions: tuple[CompositeDef, ...]
    root_name: str

    def definition(self, name: str) -> CompositeDef:
        for composite in self.definitions:
            if composite.name == name:
                return composite
        raise KeyError(name)

    def dependencies(self, name: str) -> list[str]:
        seen: list[str] = []
        for item in self.definition(name).fields:
            for ref in referenced_names(item.type):
                if ref not in seen:
                    seen.append(ref)
        return seen
