#!/usr/bin/env python3
# Copyright 2026 Yevgeniy Zaremba
# SPDX-License-Identifier: Apache-2.0

"""Registry of output targets and the single render entry point."""

from __future__ import annotations

from typegen_common import TypegenError
from typegen_model import TypeGraph
from typegen_render import Renderer
from typegen_rust import RustRenderer
from typegen_schema import JsonSchemaRenderer
from typegen_typeddict import TypedDictRenderer
from typegen_typescript import TypeScriptRenderer

TARGETS: dict[str, Renderer] = {
    renderer.target: renderer
    for renderer in (RustRenderer(), TypeScriptRenderer(), JsonSchemaRenderer(), TypedDictRenderer())
}


class UnknownTargetError(TypegenError, ValueError):
    def __init__(self, target: str) -> None:
        super().__init__(f"Unknown target {target!r}; expected one of: {', '.join(TARGETS)}")
        self.target = target


def get_renderer(target: str) -> Renderer:
    try:
        return TARGETS[target]
    except KeyError:
        raise UnknownTargetError(target) from None


def render(graph: TypeGraph, target: str) -> str:
    """Render a type graph for one target selector."""
    return get_renderer(target).render(graph)


def extension(target: str) -> str:
    return get_renderer(target).extension
