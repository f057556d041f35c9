"""CLI entry point for contextfit."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace
from typing import Any


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="contextfit",
        description="Render a JSON response the way an agent would receive it: "
        "oversized collections are limited and the shape is outlined.",
    )
    parser.add_argument(
        "file",
        nargs="?",
        default="-",
        help="JSON file to render (default: read from stdin)",
    )
    parser.add_argument(
        "--tool-name",
        default=None,
        help="Tool name used for the header and the saved file name",
    )
    parser.add_argument(
        "--max-items",
        type=int,
        default=None,
        help="Maximum items kept in the limited collection (default: CONTEXTFIT_MAX_ITEMS or 10)",
    )
    parser.add_argument(
        "--save-dir",
        default=None,
        metavar="PATH",
        help="Directory to save the full, untruncated response",
    )
    parser.add_argument(
        "-p",
        "--param",
        action="append",
        dest="params",
        default=[],
        metavar="KEY=VALUE",
        help="Tool parameter recorded in the saved file name (can be repeated)",
    )
    parser.add_argument(
        "--plain",
        action="store_true",
        default=False,
        help="Print the raw markdown text instead of rendering it",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Enable debug logging",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    from contextfit.cli.output_formatter import OutputFormatter
    from contextfit.exceptions import ContextFitError
    from contextfit.render.renderer import RenderOptions, ResponseRenderer
    from contextfit.utils.config import ResponseConfig

    formatter = OutputFormatter(plain=args.plain)

    try:
        params = _parse_params(args.params)
    except ValueError as e:
        parser.error(str(e))

    try:
        config = ResponseConfig.from_env()
        if args.max_items is not None:
            config = replace(config, max_items_for_context=args.max_items)
        data = _read_json(args.file)
        renderer = ResponseRenderer(config)
        text = renderer.render(
            data,
            RenderOptions(
                raw_data_save_dir=args.save_dir or config.default_save_dir,
                tool_name=args.tool_name,
                params=params,
            ),
        )
    except (OSError, json.JSONDecodeError, ContextFitError) as e:
        formatter.show_error(str(e))
        return 1

    formatter.show_response(text)
    return 0


def _read_json(path: str) -> Any:
    if path == "-":
        return json.load(sys.stdin)
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def _parse_params(specs: list[str]) -> dict[str, str]:
    params: dict[str, str] = {}
    for spec in specs:
        key, sep, value = spec.partition("=")
        if not sep or not key:
            raise ValueError(f"Expected KEY=VALUE, got: {spec}")
        params[key] = value
    return params


if __name__ == "__main__":
    sys.exit(main())
