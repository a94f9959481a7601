"""Command-line interface for htmltree."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from .codec import to_html, to_tree
from .config import DocumentOptions, apply_options, load_options
from .document import create_html_document
from .dom_model import Element, node_from_dict, node_to_dict
from .errors import HtmlTreeError
from .io_utils import json_text, load_json, read_text, warn, write_text
from .mutations import extract_all_resources
from .traversal import prune


def _emit(content: str, output: Optional[str]) -> None:
    if output:
        write_text(Path(output), content)
    else:
        sys.stdout.write(content)


def _load_tree(path: Path) -> Element:
    if not path.exists():
        raise SystemExit(f"Input HTML not found: {path}")
    root = to_tree(read_text(path))
    if root is None:
        raise SystemExit(f"No <html> element found in {path}")
    return root


def _load_options(config: Optional[str]) -> DocumentOptions:
    if not config:
        return DocumentOptions()
    config_path = Path(config)
    if not config_path.exists():
        raise SystemExit(f"Config file not found: {config_path}")
    return load_options(config_path)


def _handle_to_json(args: argparse.Namespace) -> None:
    root = _load_tree(Path(args.input))
    _emit(json_text(node_to_dict(root)), args.output)


def _handle_to_html(args: argparse.Namespace) -> None:
    input_path = Path(args.input)
    if not input_path.exists():
        raise SystemExit(f"Input JSON not found: {input_path}")
    try:
        payload = load_json(input_path)
    except json.JSONDecodeError as exc:
        raise SystemExit(f"{input_path}: {exc}") from exc
    _emit(to_html(node_from_dict(payload)) + "\n", args.output)


def _handle_resources(args: argparse.Namespace) -> None:
    root = _load_tree(Path(args.input))
    lines = [f"{res.name}\t{res.attribute}\t{res.value}" for res in extract_all_resources(root)]
    if not lines:
        warn(f"No resources found in {args.input}")
        return
    sys.stdout.write("\n".join(lines) + "\n")


def _handle_new(args: argparse.Namespace) -> None:
    options = _load_options(args.config)
    if args.title is not None:
        options.title = args.title
    root = create_html_document(
        options.title,
        lang=options.lang,
        charset=options.charset,
        viewport=options.viewport,
    )
    apply_options(root, options)
    _emit("<!DOCTYPE html>" + to_html(root) + "\n", args.output)


def _handle_patch(args: argparse.Namespace) -> None:
    input_path = Path(args.input)
    root = _load_tree(input_path)
    apply_options(root, _load_options(args.config))
    _emit("<!DOCTYPE html>" + to_html(root) + "\n", args.output or str(input_path))


def _handle_strip(args: argparse.Namespace) -> None:
    input_path = Path(args.input)
    root = _load_tree(input_path)
    names = {name.lower() for name in args.tag}
    prune(root, lambda view: view.name in names)
    _emit("<!DOCTYPE html>" + to_html(root) + "\n", args.output)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Convert and edit HTML documents as trees.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    to_json_parser = subparsers.add_parser("to-json", help="Convert an HTML file into a JSON tree.")
    to_json_parser.add_argument("input", help="Input HTML file.")
    to_json_parser.add_argument("-o", "--output", help="Write to this file instead of stdout.")
    to_json_parser.set_defaults(func=_handle_to_json)

    to_html_parser = subparsers.add_parser("to-html", help="Render a JSON tree as HTML.")
    to_html_parser.add_argument("input", help="Input JSON file.")
    to_html_parser.add_argument("-o", "--output", help="Write to this file instead of stdout.")
    to_html_parser.set_defaults(func=_handle_to_html)

    resources_parser = subparsers.add_parser(
        "resources", help="List src/href/data/action attributes of an HTML file."
    )
    resources_parser.add_argument("input", help="Input HTML file.")
    resources_parser.set_defaults(func=_handle_resources)

    new_parser = subparsers.add_parser("new", help="Create an empty HTML document.")
    new_parser.add_argument("--config", help="YAML file with document options.")
    new_parser.add_argument("--title", help="Document title (overrides the config).")
    new_parser.add_argument("-o", "--output", help="Write to this file instead of stdout.")
    new_parser.set_defaults(func=_handle_new)

    patch_parser = subparsers.add_parser("patch", help="Apply document options to an HTML file.")
    patch_parser.add_argument("input", help="HTML file to patch.")
    patch_parser.add_argument("--config", required=True, help="YAML file with document options.")
    patch_parser.add_argument("-o", "--output", help="Write here instead of patching in place.")
    patch_parser.set_defaults(func=_handle_patch)

    strip_parser = subparsers.add_parser("strip", help="Remove elements by tag name.")
    strip_parser.add_argument("input", help="Input HTML file.")
    strip_parser.add_argument(
        "--tag", action="append", required=True, help="Tag name to remove; may be repeated."
    )
    strip_parser.add_argument("-o", "--output", help="Write to this file instead of stdout.")
    strip_parser.set_defaults(func=_handle_strip)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    try:
        args.func(args)
    except HtmlTreeError as exc:
        raise SystemExit(str(exc)) from exc
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
