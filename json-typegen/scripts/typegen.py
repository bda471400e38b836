#!/usr/bin/env python3
# Copyright 2026 Yevgeniy Zaremba
# SPDX-License-Identifier: Apache-2.0

"""Generate type declarations (Rust, TypeScript, JSON Schema, TypedDict) from a JSON file."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from typegen_common import load_json, resolve_array, write_text
from typegen_infer import infer
from typegen_targets import TARGETS, UnknownTargetError, extension, get_renderer, render

logger = logging.getLogger("typegen")


def output_path(input_path: str, target: str) -> str:
    """File name for one rendered target, e.g. ``data.json.rs``."""
    return f"{input_path}.{extension(target)}"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Infer types from a JSON file and render declarations.")
    parser.add_argument("input", help="Input JSON file path or '-' for stdin.")
    parser.add_argument(
        "target",
        nargs="?",
        help=f"Output target ({', '.join(TARGETS)}). All targets are written to files when omitted.",
    )
    parser.add_argument("--name", default="Data", help="Name of the root type.")
    parser.add_argument("--array-path", help="Path to a nested array to infer from instead of the whole document.")
    parser.add_argument("--sort-fields", action="store_true", help="Emit fields in alphabetical order.")
    parser.add_argument("--output", help="Write a single target to this path instead of stdout.")
    parser.add_argument("--stdout", action="store_true", help="Print every target to stdout instead of writing files.")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log debug details to stderr.")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    if args.target:
        try:
            get_renderer(args.target)
        except UnknownTargetError as err:
            logger.error("%s", err)
            return 1

    try:
        data = load_json(args.input)
    except OSError as err:
        logger.error("Cannot read %s: %s", args.input, err)
        return 1
    except UnicodeDecodeError as err:
        logger.error("Cannot decode %s as UTF-8: %s", args.input, err.reason)
        return 1
    except json.JSONDecodeError as err:
        logger.error("Invalid JSON in %s: %s (line %d, column %d)", args.input, err.msg, err.lineno, err.colno)
        return 1

    if args.array_path:
        data = resolve_array(data, args.array_path)
        logger.debug("Resolved %s to %d record(s)", args.array_path, len(data))

    graph = infer(data, root_name=args.name, sort_fields=args.sort_fields)
    logger.debug("Found %d type definition(s)", len(graph.definitions))

    if args.target:
        write_text(render(graph, args.target), args.output)
        if args.output:
            logger.info("Wrote %s", args.output)
        return 0

    to_stdout = args.stdout or args.input == "-"
    for target in TARGETS:
        text = render(graph, target)
        if to_stdout:
            write_text(f"==> {target} <==")
            write_text(text)
            continue
        path = output_path(args.input, target)
        write_text(text, path)
        logger.info("Wrote %s", path)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
