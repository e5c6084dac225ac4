"""Command line entry point: doclets to specification, specification to Markdown."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from jsdoc2spec.generate import generate
from jsdoc2spec.load_config import info_options, load_config
from jsdoc2spec.load_doclets import load_doclets, parse_doclets
from jsdoc2spec.markdown.to_markdown import render_document
from jsdoc2spec.write_spec import write_spec


def run_spec(args: argparse.Namespace, config: dict[str, Any]) -> int:
    """Convert a jsdoc doclet dump into a specification file."""
    for key in ("name", "description", "version", "license"):
        value = getattr(args, key)
        if value is not None:
            config[key] = value
    destination = args.output or config["output"]

    try:
        if str(args.doclets) == "-":
            doclets = parse_doclets(sys.stdin.read())
        else:
            doclets = load_doclets(args.doclets)
    except FileNotFoundError:
        msg = f"Doclet file not found: {args.doclets}"
        raise SystemExit(msg) from None
    except json.JSONDecodeError as e:
        msg = f"Invalid doclet JSON in {args.doclets}: {e}"
        raise SystemExit(msg) from None

    generate(doclets, destination, info_options(config))
    print(f"Generated specification: {destination}")
    return 0


def run_md(args: argparse.Namespace, config: dict[str, Any]) -> int:
    """Render a specification file as Markdown."""
    md_config = config["markdown"]
    if args.no_toc:
        md_config["toc"] = False
    destination = args.output or md_config["output"]

    try:
        spec = json.loads(args.spec.read_text(encoding="utf-8"))
    except FileNotFoundError:
        msg = f"Specification not found: {args.spec}"
        raise SystemExit(msg) from None
    except json.JSONDecodeError as e:
        msg = f"Invalid specification JSON in {args.spec}: {e}"
        raise SystemExit(msg) from None

    text = render_document(
        spec,
        title=md_config.get("title", True),
        toc=md_config.get("toc", True),
        references=md_config.get("references", True),
    )
    write_spec(text, destination)
    print(f"Generated Markdown: {destination}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for both subcommands."""
    ap = argparse.ArgumentParser(
        description="Convert jsdoc doclets into an API specification and Markdown.",
    )
    ap.add_argument("--config", help="Path to a YAML configuration file")
    ap.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log verbose diagnostics (duplicate names, default export moves)",
    )
    sub = ap.add_subparsers(dest="command", required=True)

    sp = sub.add_parser("spec", help="Build a JSON specification from doclets")
    sp.add_argument(
        "doclets",
        type=Path,
        help="JSON file written by `jsdoc -X` ('-' reads stdin)",
    )
    sp.add_argument("-o", "--output", help="Destination of the specification JSON")
    sp.add_argument("--name", help="Override the package name")
    sp.add_argument("--description", help="Override the package description")
    sp.add_argument("--version", help="Override the package version")
    sp.add_argument("--license", help="Override the package license")
    sp.set_defaults(func=run_spec)

    mp = sub.add_parser("md", help="Render a JSON specification as Markdown")
    mp.add_argument("spec", type=Path, help="Specification JSON file")
    mp.add_argument("-o", "--output", help="Destination of the Markdown file")
    mp.add_argument(
        "--no-toc",
        action="store_true",
        help="Leave out the table of contents",
    )
    mp.set_defaults(func=run_md)
    return ap


def log_level(config: dict[str, Any], *, verbose: bool = False) -> str:
    """Return the logging level name, accepting lowercase config values."""
    if verbose:
        return "DEBUG"
    return str(config.get("log_level") or "INFO").upper()


def main(argv: list[str] | None = None) -> int:
    """Run the selected subcommand."""
    args = build_parser().parse_args(argv)
    config = load_config(args.config)
    logging.basicConfig(
        level=log_level(config, verbose=args.verbose),
        format="%(levelname)s %(name)s: %(message)s",
    )
    return args.func(args, config)


if __name__ == "__main__":
    raise SystemExit(main())
