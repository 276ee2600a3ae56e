"""
Command-line interface for typelower.

Reads a JSON type document and prints the Go declarations it lowers to.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from . import __version__
from .codegen import (
    GenerationResult,
    GeneratorError,
    GoGenerator,
    generate_code,
    get_config_manager,
    load_config,
    load_types,
)
from .codegen.languages.go import GO_KEYWORDS, GO_SCALAR_TYPES
from .logging_config import get_logger, setup_logging

logger = get_logger(__name__)

console = Console()


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="typelower",
        description="Lower a JSON type document into Go type declarations.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        help="Type document (JSON file, '-' for stdin)",
    )
    parser.add_argument(
        "--output",
        "-o",
        metavar="FILE",
        help="Output file for generated code (default: stdout)",
    )
    parser.add_argument(
        "--config",
        "-c",
        metavar="FILE",
        help="JSON configuration file",
    )
    parser.add_argument(
        "--save-config",
        metavar="FILE",
        help="Write the effective configuration to a JSON file",
    )
    parser.add_argument(
        "--no-pointers",
        action="store_true",
        help="Reference named types by value instead of through a pointer",
    )
    parser.add_argument(
        "--tag-key",
        metavar="KEY",
        help="Struct tag key (default: json)",
    )
    parser.add_argument(
        "--plain",
        action="store_true",
        help="Print code without syntax highlighting",
    )
    parser.add_argument(
        "--list-reserved",
        action="store_true",
        help="List the Go reserved words identifiers are checked against",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Show generation metadata and info logging",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return an exit code."""
    args = create_parser().parse_args(argv)

    if args.debug:
        setup_logging(logging.DEBUG)
    elif args.verbose:
        setup_logging(logging.INFO)
    else:
        setup_logging(logging.WARNING)

    if args.list_reserved:
        return _list_reserved()

    try:
        config = _build_config(args)
        if args.save_config:
            get_config_manager().save_config(config, args.save_config)
            console.print(
                f"[green]✓[/green] Configuration saved to [cyan]{args.save_config}[/cyan]"
            )
            if not args.input:
                return 0

        if not args.input:
            console.print("[red]✗[/red] An input type document is required")
            return 1

        document = _load_document(args.input)
        types = load_types(document)
    except (CLIError, GeneratorError) as e:
        console.print(f"[red]✗ Error:[/red] {e}")
        logger.error("Failed to prepare generation: %s", e)
        return 1

    logger.info("Loaded %d named types from %s", len(types), args.input)
    result = generate_code(GoGenerator(config), types)
    return _output_result(result, args)


def _load_document(source: str) -> Any:
    """Read and parse the JSON type document."""
    try:
        if source == "-":
            return json.load(sys.stdin)
        with open(source, "r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise CLIError(f"Invalid JSON input: {e}")
    except OSError as e:
        raise CLIError(f"Failed to load input: {e}")


def _build_config(args: argparse.Namespace):
    """Merge the config file with command-line overrides."""
    overrides = {}
    if args.no_pointers:
        overrides["named_type_pointers"] = False
    if args.tag_key:
        overrides["tag_key"] = args.tag_key

    return load_config(custom_config=overrides, config_file=args.config)


def _output_result(result: GenerationResult, args: argparse.Namespace) -> int:
    """Print or save generated code, then show warnings and metadata."""
    if not result.success:
        console.print(f"[red]✗ Code generation failed:[/red] {result.error_message}")
        logger.error("Code generation failed: %s", result.error_message)
        return 1

    if args.output:
        output_path = Path(args.output)
        try:
            output_path.write_text(result.code + "\n", encoding="utf-8")
        except OSError as e:
            console.print(f"[red]✗ Failed to write to {output_path}:[/red] {e}")
            return 1
        console.print(
            f"[green]✓[/green] Generated Go code saved to [cyan]{output_path}[/cyan]"
        )
        logger.info("Wrote %d characters to %s", len(result.code), output_path)
    elif args.plain:
        console.print(result.code, markup=False, highlight=False)
    else:
        console.print(Syntax(result.code, "go", theme="monokai"))

    if args.verbose and result.metadata:
        metadata_table = Table(
            title="📊 Generation Metadata",
            box=box.SIMPLE,
            show_header=True,
            header_style="bold cyan",
        )
        metadata_table.add_column("Property", style="bold")
        metadata_table.add_column("Value", style="green")
        for key, value in result.metadata.items():
            metadata_table.add_row(key.replace("_", " ").title(), str(value))
        console.print()
        console.print(metadata_table)

    if result.warnings:
        console.print("\n[yellow]⚠️  Warnings:[/yellow]")
        for warning in result.warnings:
            console.print(f"  [yellow]•[/yellow] {warning}")
            logger.warning(warning)

    return 0


def _list_reserved() -> int:
    """Print the reserved-word table."""
    table = Table(title="📋 Go Reserved Words", box=box.ROUNDED, title_style="bold cyan")
    table.add_column("Word", style="bold green", no_wrap=True)
    table.add_column("Kind", style="cyan")

    for word in sorted(GO_KEYWORDS | GO_SCALAR_TYPES):
        kind = "keyword" if word in GO_KEYWORDS else "scalar type"
        table.add_row(word, kind)

    console.print(table)
    console.print(
        Panel(
            "Identifiers equal to one of these words get a trailing [bold]_[/bold]",
            title="💡 Sanitizing",
            border_style="blue",
        )
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
