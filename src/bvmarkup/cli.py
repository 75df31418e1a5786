#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Command-line interface for normalizing component markup.

Examples
--------
Normalize a page and print the result:
    $ bvmarkup page.html

Write to a file and show a summary of what changed:
    $ bvmarkup page.html --out page.normalized.html --summary

Read from stdin, open popovers on click unless the author says otherwise:
    $ cat page.html | bvmarkup - --popover-trigger click

Use environment variables for defaults:
    $ export BVMARKUP_CONFIG=./site/.bvmarkup.toml
    $ bvmarkup page.html
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.table import Table

from bvmarkup.config import load_options
from bvmarkup.diagnostics import DiagnosticCollector
from bvmarkup.exceptions import BvMarkupError, FileError, ParsingError, ValidationError
from bvmarkup.logging_utils import configure_logging
from bvmarkup.nodes import parse_html, serialize_html
from bvmarkup.options import ComponentOptions
from bvmarkup.transforms import ComponentPipeline

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_FILE_ERROR = 1
EXIT_VALIDATION_ERROR = 3


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="bvmarkup",
        description="Normalize popover, tooltip, modal and trigger markup for bootstrap-vue.",
    )
    parser.add_argument("input", help="HTML file to normalize, or '-' for stdin")
    parser.add_argument("--out", "-o", help="Output file (default: stdout)")
    parser.add_argument("--config", help="Configuration file (default: discovered from the working directory)")
    parser.add_argument("--no-config", action="store_true", help="Ignore configuration files")
    parser.add_argument(
        "--no-markdown", action="store_true", help="Insert attribute text into slots without Markdown rendering"
    )
    for affordance in ("popover", "tooltip"):
        parser.add_argument(f"--{affordance}-trigger", help=f"Default {affordance} trigger (e.g. hover, click)")
        parser.add_argument(f"--{affordance}-placement", help=f"Default {affordance} placement (e.g. top, bottom)")
    parser.add_argument("--summary", action="store_true", help="Print a summary table to stderr")
    parser.add_argument(
        "--log-level",
        default=os.environ.get("BVMARKUP_LOG_LEVEL", "WARNING"),
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Logging level (default: WARNING)",
    )
    parser.add_argument("--log-file", help="Also write log output to this file")
    parser.add_argument("--trace", action="store_true", help="Include timestamps and logger names in log output")
    return parser


def build_options(parsed_args: argparse.Namespace) -> ComponentOptions:
    """Combine config file options with command-line overrides."""
    if parsed_args.no_config:
        options = ComponentOptions()
    else:
        options = load_options(parsed_args.config or os.environ.get("BVMARKUP_CONFIG"))

    if parsed_args.no_markdown:
        options = options.create_updated(render_markdown=False)

    for affordance in ("popover", "tooltip"):
        overrides = {}
        trigger = getattr(parsed_args, f"{affordance}_trigger")
        placement = getattr(parsed_args, f"{affordance}_placement")
        if trigger:
            overrides["trigger"] = trigger
        if placement:
            overrides["placement"] = placement
        if overrides:
            current = getattr(options, affordance)
            options = options.create_updated(**{affordance: current.create_updated(**overrides)})
    return options


def _read_input(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    path = Path(source)
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        raise FileError(f"Cannot read input file: {source}", file_path=source, original_error=e) from e


def _write_output(destination: Optional[str], content: str) -> None:
    if not destination:
        sys.stdout.write(content)
        return
    try:
        Path(destination).write_text(content, encoding="utf-8")
    except OSError as e:
        raise FileError(f"Cannot write output file: {destination}", file_path=destination, original_error=e) from e


def _print_summary(counts: dict, collector: DiagnosticCollector) -> None:
    console = Console(stderr=True)
    table = Table(title="Normalized Components")
    table.add_column("Component", style="cyan", no_wrap=True)
    table.add_column("Count", style="green", justify="right")
    for kind, count in sorted(counts.items(), key=lambda item: item[0].value):
        table.add_row(kind.value, str(count))
    console.print(table)

    if len(collector):
        deprecations = Table(title="Deprecated Syntax")
        deprecations.add_column("Component", style="cyan")
        deprecations.add_column("Kind", style="magenta")
        deprecations.add_column("Used", style="yellow")
        deprecations.add_column("Use instead", style="green")
        for diagnostic in collector:
            deprecations.add_row(
                diagnostic.component, diagnostic.kind, diagnostic.deprecated_name, diagnostic.replacement_name
            )
        console.print(deprecations)


def main(args: list[str] | None = None) -> int:
    """Execute the CLI and return an exit code."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    configure_logging(parsed_args.log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)

    try:
        options = build_options(parsed_args)
    except (ValidationError, ParsingError) as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR
    except FileError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_FILE_ERROR

    collector = DiagnosticCollector()
    try:
        markup = _read_input(parsed_args.input)
        soup = parse_html(markup)
        counts = ComponentPipeline(options=options, sink=collector).transform_tree(soup)
        _write_output(parsed_args.out, serialize_html(soup))
    except BvMarkupError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_FILE_ERROR

    logger.info(f"Normalized {sum(counts.values())} component(s) with {len(collector)} deprecation warning(s)")
    if parsed_args.summary:
        _print_summary(counts, collector)
    return EXIT_SUCCESS
