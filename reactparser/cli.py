"""Command-line interface for reactparser."""

from __future__ import annotations

import argparse
import json
import logging
import math
import os
import sys
from typing import Any, Dict, Optional

from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from reactparser import ReactParser
from reactparser.core.config import config
from reactparser.core.error_handling import ReactParserError
from reactparser.models.component import ComponentDescriptor
from reactparser.models.enums import ComponentPattern, Dialect


def _parser_for(file_path: str, dialect: Optional[str], lenient: bool) -> ReactParser:
    strict = False if lenient else None
    if dialect:
        return ReactParser(dialect, strict)
    return ReactParser.from_file_path(file_path, strict)


def _json_safe(value: Any) -> Any:
    """Replace non-finite floats with their JavaScript spellings."""
    if isinstance(value, float) and not math.isfinite(value):
        if math.isnan(value):
            return "NaN"
        return "Infinity" if value > 0 else "-Infinity"
    if isinstance(value, dict):
        return {key: _json_safe(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_json_safe(item) for item in value]
    return value


def _render_tree(descriptor: ComponentDescriptor, tree: Tree) -> Tree:
    """Add ``descriptor``'s props, state and children beneath ``tree``."""
    if descriptor.props:
        tree.add(f"[cyan]props:[/cyan] {', '.join(descriptor.prop_names)}")
    for entry in descriptor.state:
        tree.add(f"[magenta]state[/magenta] {entry.name} = {escape(repr(entry.value))}")
    for child in descriptor.children:
        _render_tree(child, tree.add(f"[bold]<{child.name}>[/bold]"))
    return tree


def _extract(file_path: str, pattern: Optional[str], dialect: Optional[str], lenient: bool,
             raw_json: bool, output: Optional[str], console: Console) -> None:
    """Extract the component declared in ``file_path``."""
    parser = _parser_for(file_path, dialect, lenient)
    descriptor = parser.extract_file(file_path, pattern)
    data: Dict[str, Any] = _json_safe(descriptor.to_dict())
    if output:
        with open(output, "w", encoding="utf8") as fh:
            json.dump(data, fh, indent=2, allow_nan=False)
        console.print(f"[green]Wrote[/green] {output}")
    elif raw_json:
        print(json.dumps(data, indent=2, allow_nan=False))
    else:
        title = descriptor.name or "[dim](anonymous)[/dim]"
        console.print(_render_tree(descriptor, Tree(f"[bold green]{title}[/bold green]")))


def _check(file_path: str, dialect: Optional[str], lenient: bool, console: Console) -> None:
    """Report which declaration pattern ``file_path`` uses."""
    parser = _parser_for(file_path, dialect, lenient)
    root = parser.parse(parser.load_file(file_path))
    if parser.has_component_declaration(root):
        console.print(f"{file_path}: [bold]{ComponentPattern.CLASS.value}[/bold] pattern candidate")
    else:
        console.print(f"{file_path}: [bold]{ComponentPattern.FACTORY.value}[/bold] pattern candidate")


def main() -> None:
    """Entry point for the ``reactparser`` command."""

    console = Console()
    parser = argparse.ArgumentParser(description="Extract React component structure from source files")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--quiet", action="store_true", help="Reduce logs to errors only")
    sub = parser.add_subparsers(dest="command")

    extract_p = sub.add_parser("extract", help="Extract the component declared in a file")
    extract_p.add_argument("file", help="Source file path")
    extract_p.add_argument(
        "--pattern",
        choices=[p.value for p in ComponentPattern],
        help="Declaration pattern (detected when omitted)",
    )
    extract_p.add_argument("--dialect", choices=[d.value for d in Dialect], help="Grammar override")
    extract_p.add_argument("--lenient", action="store_true", help="Accept sources with syntax errors")
    extract_p.add_argument("--raw-json", action="store_true", help="Output raw JSON")
    extract_p.add_argument("--output", help="Write JSON to this file")

    check_p = sub.add_parser("check", help="Report which declaration pattern a file uses")
    check_p.add_argument("file", help="Source file path")
    check_p.add_argument("--dialect", choices=[d.value for d in Dialect], help="Grammar override")
    check_p.add_argument("--lenient", action="store_true", help="Accept sources with syntax errors")

    args = parser.parse_args()
    if getattr(args, "debug", False):
        log_level = logging.DEBUG
    elif getattr(args, "quiet", False):
        log_level = logging.ERROR
    elif getattr(args, "verbose", False):
        log_level = logging.INFO
    else:
        log_level = getattr(logging, str(config.get("logging", "level", "WARNING")).upper(), logging.WARNING)
    logging.basicConfig(level=log_level)

    if args.command is None:
        parser.print_help()
        return
    if not os.path.exists(args.file):
        console.print(f"[bold red]File not found:[/bold red] {args.file}")
        sys.exit(1)
    try:
        if args.command == "extract":
            _extract(args.file, args.pattern, args.dialect, args.lenient, args.raw_json, args.output, console)
        elif args.command == "check":
            _check(args.file, args.dialect, args.lenient, console)
    except ReactParserError as e:
        console.print(f"[bold red]{type(e).__name__}:[/bold red] {escape(str(e))}")
        sys.exit(1)


if __name__ == "__main__":
    main()
