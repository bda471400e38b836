from __future__ import annotations

import json
import logging
import tomllib
from pathlib import Path

import pytest

from typegen import main, output_path
from typegen_infer import infer
from typegen_targets import TARGETS, UnknownTargetError, extension, render


def _write(tmp_path: Path, data: object, name: str = "data.json") -> Path:
    path = tmp_path / name
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_writes_one_file_per_target(tmp_path: Path) -> None:
    path = _write(tmp_path, [{"name": "Alice"}, {"name": "Bob", "age": 3}])

    assert main([str(path)]) == 0

    for suffix in ("rs", "ts", "jsonschema", "py"):
        assert (tmp_path / f"data.json.{suffix}").exists()
    schema = json.loads((tmp_path / "data.json.jsonschema").read_text(encoding="utf-8"))
    assert schema["$defs"]["Data"]["required"] == ["name"]


def test_single_target_prints_to_stdout(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = _write(tmp_path, {"user": {"id": 1}})

    assert main([str(path), "typescript", "--name", "Root"]) == 0

    out = capsys.readouterr().out
    assert "export interface Root {\n  user: User;\n}" in out
    assert not (tmp_path / "data.json.ts").exists()


def test_single_target_to_output_file(tmp_path: Path) -> None:
    path = _write(tmp_path, {"b": 1, "a": 2})
    out_path = tmp_path / "types.rs"

    assert main([str(path), "rust", "--output", str(out_path), "--sort-fields"]) == 0

    text = out_path.read_text(encoding="utf-8")
    assert text.index("pub a: i64") < text.index("pub b: i64")


def test_array_path(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = _write(tmp_path, {"page": 1, "results": [{"id": 1}, {"id": 2, "ok": True}]})

    assert main([str(path), "python", "--array-path", "results", "--name", "Result"]) == 0

    out = capsys.readouterr().out
    assert "class Result(TypedDict):\n    id: int\n    ok: NotRequired[bool]\n" in out


def test_stdout_flag_prints_every_target(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = _write(tmp_path, {"a": 1})

    assert main([str(path), "--stdout"]) == 0

    out = capsys.readouterr().out
    banners = [line for line in out.splitlines() if line.startswith("==> ")]
    assert banners == ["==> rust <==", "==> typescript <==", "==> jsonschema <==", "==> python <=="]
    assert out.index("==> rust <==") < out.index("pub struct Data") < out.index("==> typescript <==")
    assert "pub struct Data" in out
    assert "export interface Data" in out
    assert '"$schema"' in out
    assert "class Data(TypedDict)" in out
    assert not (tmp_path / "data.json.rs").exists()


def test_missing_file(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.ERROR):
        assert main([str(tmp_path / "missing.json")]) == 1

    assert "Cannot read" in caplog.text


def test_invalid_json(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    path = tmp_path / "broken.json"
    path.write_text('{"a": 1,', encoding="utf-8")

    with caplog.at_level(logging.ERROR):
        assert main([str(path)]) == 1

    assert "Invalid JSON" in caplog.text
    assert not (tmp_path / "broken.json.rs").exists()


def test_input_that_is_not_utf8(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    path = tmp_path / "latin1.json"
    path.write_bytes(b'{"a": "\xff"}')

    with caplog.at_level(logging.ERROR):
        assert main([str(path)]) == 1

    assert "Cannot decode" in caplog.text
    assert not (tmp_path / "latin1.json.rs").exists()


def test_unknown_target(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    path = _write(tmp_path, {"a": 1})

    with caplog.at_level(logging.ERROR):
        assert main([str(path), "cobol"]) == 1

    assert "Unknown target 'cobol'" in caplog.text


def test_registry() -> None:
    assert list(TARGETS) == ["rust", "typescript", "jsonschema", "python"]
    assert extension("jsonschema") == "jsonschema"
    assert output_path("in.json", "typescript") == "in.json.ts"
    with pytest.raises(UnknownTargetError):
        render(infer({}), "cobol")


def test_installed_modules_carry_the_project_prefix() -> None:
    root = Path(__file__).resolve().parents[2]
    config = tomllib.loads((root / "pyproject.toml").read_text(encoding="utf-8"))
    modules = config["tool"]["setuptools"]["py-modules"]
    scripts = sorted(path.stem for path in (root / "json-typegen" / "scripts").glob("*.py"))

    assert sorted(modules) == scripts
    assert all(name == "typegen" or name.startswith("typegen_") for name in modules)
