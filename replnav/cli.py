"""Command-line entry point for definition and documentation lookups.

``replnav find-def`` prints the resolved location as ``path:line:column`` (the
scratch copy for definitions that live inside a jar); ``replnav doc`` prints the
backend's documentation text.
"""

import argparse
import logging
import sys
from pathlib import Path

import yaml

from replnav.console_editor import ConsoleEditor
from replnav.find_definition import DefinitionLookup
from replnav.load_config import BackendConfig, load_config


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="replnav",
        description="Resolve Clojure symbol definitions through an nREPL backend.",
    )
    ap.add_argument(
        "--config",
        help="Path to a YAML configuration file",
    )
    ap.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log backend invocations and lookup decisions",
    )
    sub = ap.add_subparsers(dest="command", required=True)

    find_def = sub.add_parser("find-def", help="Locate the definition of a symbol")
    find_def.add_argument("file", type=Path, help="File whose namespace is in scope")
    find_def.add_argument("symbol", help="Symbol to resolve")
    find_def.add_argument(
        "--active-file",
        default="",
        help="File currently open in the editor (default: none)",
    )
    find_def.add_argument(
        "--modified",
        action="store_true",
        help="Treat the active file as having unsaved changes",
    )

    doc = sub.add_parser("doc", help="Show documentation for a symbol")
    doc.add_argument("file", type=Path, help="File whose namespace is in scope")
    doc.add_argument("symbol", help="Symbol to document")
    return ap


def main(argv: list[str] | None = None) -> int:
    """Run a single lookup and return the process exit code."""
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = BackendConfig.from_dict(load_config(args.config))
    except (ValueError, yaml.YAMLError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    active_file = getattr(args, "active_file", "")
    editor = ConsoleEditor(
        sys.stdout, active_file, modified=getattr(args, "modified", False)
    )
    lookup = DefinitionLookup(config, editor)

    if args.command == "doc":
        text = lookup.show_documentation(args.file, args.symbol)
        if text:
            sys.stdout.write(text)
    else:
        lookup.find_definition(args.file, args.symbol)

    return 1 if lookup.backend_missing else 0


if __name__ == "__main__":
    raise SystemExit(main())
