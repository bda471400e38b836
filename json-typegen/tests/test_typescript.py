from __future__ import annotations

from typegen_infer import infer
from typegen_model import ArrayType, MIXED, OptionalType, STRING, UNKNOWN
from typegen_typescript import TypeScriptRenderer, property_name


def test_partial_fields() -> None:
    doc = [{"name": "Alice"}, {"name": "Bob", "is_student": True}]

    text = TypeScriptRenderer().render(infer(doc))

    assert text == (
        "export interface Data {\n"
        "  name: string;\n"
        "  is_student?: boolean;\n"
        "}\n"
        "\n"
        "export type DataList = Data[];\n"
    )


def test_nullable_and_nested() -> None:
    doc = {"user": {"nick": None, "scores": [1, 2.5]}, "history": [{"at": "x"}, {"at": None}]}

    text = TypeScriptRenderer().render(infer(doc))

    assert "export interface Data {\n  user: User;\n  history: History[];\n}" in text
    assert "export interface User {\n  nick: unknown;\n  scores: number[];\n}" in text
    assert "export interface History {\n  at: string | null;\n}" in text


def test_type_refs() -> None:
    renderer = TypeScriptRenderer()

    assert renderer.type_ref(ArrayType(OptionalType(STRING))) == "(string | null)[]"
    assert renderer.type_ref(ArrayType(UNKNOWN)) == "unknown[]"
    assert renderer.type_ref(MIXED) == "any"


def test_quoted_property_names() -> None:
    assert property_name("first_name") == "first_name"
    assert property_name("$id") == "$id"
    assert property_name("first-name") == '"first-name"'
    assert property_name("2fa") == '"2fa"'


def test_object_root_has_no_alias() -> None:
    text = TypeScriptRenderer().render(infer({"a": 1}, root_name="Config"))

    assert text == "export interface Config {\n  a: number;\n}\n"
