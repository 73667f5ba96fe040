"""
Command-line interface for PropTypes generation.

Reads an OpenAPI document from a file, URL or stdin and writes the
generated PropTypes module to a file or the terminal.
"""

import argparse
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from . import __version__
from .core.config import ConfigError, GeneratorConfig, load_config
from .core.generator import GenerationResult, generate_code
from .logging_config import configure_logging, get_logger
from .registry import RegistryError, get_generator, get_registry, list_supported_targets
from .utils import DocumentLoaderError, load_document, parse_document_text

logger = get_logger(__name__)


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


# Initialize rich consoles; diagnostics go to stderr so stdout stays pipeable
console = Console()
err_console = Console(stderr=True)


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="oas-proptypes",
        description="Generate React PropTypes from OpenAPI component schemas",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  oas-proptypes openapi.json -o src/propTypes.js
  oas-proptypes api.yaml --spaces 2 --shape-refs identifier
  oas-proptypes --url https://example.com/openapi.json --plain
  cat openapi.json | oas-proptypes --stdin
        """.strip(),
    )

    # Input options (mutually exclusive)
    input_group = parser.add_mutually_exclusive_group(required=False)
    input_group.add_argument("file", nargs="?", help="OpenAPI document (JSON or YAML)")
    input_group.add_argument("--url", help="URL to fetch the document from")
    input_group.add_argument(
        "--stdin", action="store_true", help="Read the document from standard input"
    )
    parser.add_argument(
        "--yaml",
        action="store_true",
        help="Parse standard input as YAML instead of JSON",
    )

    # Core generation options
    parser.add_argument("--output", "-o", help="Output file (default: stdout)")
    parser.add_argument("--config", help="Configuration file path (JSON)")
    parser.add_argument(
        "--target",
        "-t",
        default="proptypes",
        help="Generation target (default: proptypes)",
    )

    style_group = parser.add_argument_group("output style")
    style_group.add_argument("--suffix", help="Suffix for exported identifiers")
    style_group.add_argument("--namespace", help="Validator namespace identifier")
    style_group.add_argument(
        "--spaces",
        type=int,
        metavar="N",
        help="Indent with N spaces instead of tabs",
    )
    style_group.add_argument(
        "--shape-refs",
        choices=["name", "identifier"],
        help="How $ref objects appear inside shape(...)",
    )
    style_group.add_argument(
        "--no-header", action="store_true", help="Omit the import line"
    )
    style_group.add_argument(
        "--lenient",
        action="store_true",
        help="Render unsupported types as a bare validator instead of failing",
    )

    display_group = parser.add_argument_group("display")
    display_group.add_argument(
        "--plain",
        action="store_true",
        help="Print raw code to stdout without highlighting",
    )
    display_group.add_argument(
        "--verbose", "-v", action="store_true", help="Show generation metadata"
    )
    display_group.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    display_group.add_argument(
        "--list-targets",
        action="store_true",
        help="List supported targets and exit",
    )
    display_group.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Entry point for the ``oas-proptypes`` command.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    configure_logging("DEBUG" if args.verbose else args.log_level)

    try:
        if args.list_targets:
            return _list_targets()

        if not (args.file or args.url or args.stdin):
            err_console.print("[red]✗[/red] Input source required (file, --url, or --stdin)")
            return 1

        api = _get_input_data(args)
        config = _build_config(args)
        return _generate_and_output(api, config, args)

    except CLIError as e:
        err_console.print(f"[red]✗ Error:[/red] {escape(str(e))}")
        return 1


def _list_targets() -> int:
    """List supported targets with details."""
    registry = get_registry()

    table = Table(title="📋 Supported Targets", box=box.ROUNDED, title_style="bold cyan")
    table.add_column("Target", style="bold green", no_wrap=True)
    table.add_column("Extension", style="cyan")
    table.add_column("Generator Class", style="dim")
    table.add_column("Aliases", style="blue")

    for target in list_supported_targets():
        info = registry.get_target_info(target)
        aliases = ", ".join(info["aliases"]) if info["aliases"] else "[dim]none[/dim]"
        table.add_row(target, info["file_extension"], info["class"], aliases)

    console.print()
    console.print(table)
    console.print()
    return 0


def _get_input_data(args: argparse.Namespace) -> Any:
    """Get the parsed document from the selected source."""
    try:
        if args.file:
            return load_document(file_path=args.file)[1]
        if args.url:
            return load_document(url=args.url)[1]
        return parse_document_text(sys.stdin.read(), yaml_format=args.yaml)
    except (DocumentLoaderError, FileNotFoundError, UnicodeDecodeError) as e:
        raise CLIError(f"Failed to load input: {e}") from e


def _build_config(args: argparse.Namespace) -> GeneratorConfig:
    """Build configuration from CLI arguments."""
    overrides: Dict[str, Any] = {}

    if args.suffix is not None:
        overrides["component_suffix"] = args.suffix

    if args.namespace:
        overrides["validator_namespace"] = args.namespace

    if args.spaces is not None:
        overrides["use_tabs"] = False
        overrides["indent_size"] = args.spaces

    if args.shape_refs:
        overrides["shape_reference_style"] = args.shape_refs

    if args.no_header:
        overrides["add_header"] = False

    if args.lenient:
        overrides["strict_types"] = False

    try:
        target = get_registry().resolve(args.target)
        return load_config(target, custom_config=overrides, config_file=args.config)
    except (ConfigError, RegistryError) as e:
        raise CLIError(f"Configuration error: {e}") from e


def _generate_and_output(
    api: Any, config: GeneratorConfig, args: argparse.Namespace
) -> int:
    """Generate code and handle output with rich formatting."""
    try:
        generator = get_generator(args.target, config)
    except RegistryError as e:
        raise CLIError(str(e)) from e

    result = generate_code(generator, api)

    if not result.success:
        err_console.print(
            f"[red]✗ {escape(result.error_kind or 'Error')}:[/red] "
            f"{escape(result.error_message or '')}"
        )
        return 1

    output_file = args.output or config.output_file
    if output_file:
        output_path = Path(output_file)
        try:
            output_path.write_text(result.code, encoding="utf-8")
        except OSError as e:
            raise CLIError(f"Failed to write to {output_path}: {e}") from e
        logger.info("Wrote %d bytes to %s", len(result.code), output_path)
        console.print(
            f"[green]✓[/green] Generated PropTypes saved to [cyan]{escape(str(output_path))}[/cyan]"
        )
    elif args.plain:
        sys.stdout.write(result.code)
    else:
        console.print(
            Panel(
                Syntax(result.code, "javascript", theme="monokai"),
                title="📄 Generated PropTypes",
                border_style="green",
            )
        )

    if args.verbose:
        _print_metadata(result)

    if result.warnings:
        err_console.print("\n[yellow]⚠️  Warnings:[/yellow]")
        for warning in result.warnings:
            err_console.print(f"  [yellow]•[/yellow] {escape(warning)}")

    return 0


def _print_metadata(result: GenerationResult):
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
