#!/usr/bin/env python3
# Copyright 2026 Yevgeniy Zaremba
# SPDX-License-Identifier: Apache-2.0

"""Base class shared by the declaration renderers."""

from __future__ import annotations

from typegen_model import CompositeDef, Field, FieldType, ObjectType, TypeGraph


class Renderer:
    """Turn a type graph into source text for one target.

    Subclasses provide the three per-target capabilities: ``type_ref`` for a
    single field type, ``field_decl`` for one field line and ``definition`` for
    a whole composite. ``render`` stitches them together.
    """

    target = ""
    extension = ""
    indent = "    "
    separator = "\n\n"

    def render(self, graph: TypeGraph) -> str:
        blocks: list[str] = []
        header = self.header(graph)
        if header:
            blocks.append(header)
        for composite in self.ordered(graph):
            blocks.append(self.definition(composite))
        if not isinstance(graph.root, ObjectType):
            blocks.append(self.root_alias(graph))
        return self.separator.join(blocks) + "\n"

    def ordered(self, graph: TypeGraph) -> list[CompositeDef]:
        """Definitions in emission order; discovery order unless overridden."""
        return list(graph.definitions)

    def header(self, graph: TypeGraph) -> str:
        return ""

    def root_alias(self, graph: TypeGraph) -> str:
        raise NotImplementedError

    def type_ref(self, field_type: FieldType) -> str:
        raise NotImplementedError

    def field_decl(self, field: Field) -> str:
        raise NotImplementedError

    def definition(self, composite: CompositeDef) -> str:
        raise NotImplementedError
