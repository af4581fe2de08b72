"""CLI entry point for metatag.

Invoked as::

    metatag [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m metatag.cli.main

Commands
--------
inspect     Resolve tag kinds against a class or a method
version     Show version information

Targets and tag kinds are given as ``package.module:Qualified.name``.
"""
from __future__ import annotations

import importlib
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click
from rich.console import Console
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table

from metatag.core.errors import MethodNotFoundError
from metatag.tags.model import MethodRef, Tag

if TYPE_CHECKING:
    from metatag.report import ResolutionReport

console = Console()
err_console = Console(stderr=True)


def _split_reference(reference: str) -> tuple[str, list[str]]:
    module_name, sep, attr_path = reference.partition(":")
    if not sep or not module_name or not attr_path:
        err_console.print(
            f"[red]Error:[/red] Invalid reference {reference!r}; "
            "expected 'package.module:Qualified.name'"
        )
        sys.exit(1)
    return module_name, attr_path.split(".")


def _import_or_exit(module_name: str) -> Any:
    """Import a module, exiting on error."""
    try:
        return importlib.import_module(module_name)
    except ImportError as exc:
        err_console.print(f"[red]Error:[/red] Cannot import {module_name}: {exc}")
        sys.exit(1)


def _load_target(reference: str) -> type | MethodRef:
    """Load a class or method reference, exiting on error."""
    module_name, parts = _split_reference(reference)
    owner: Any = None
    obj: Any = _import_or_exit(module_name)
    for part in parts:
        owner = obj
        try:
            obj = getattr(obj, part)
        except AttributeError:
            err_console.print(f"[red]Error:[/red] {reference!r} not found ({part!r} missing)")
            sys.exit(1)
    if isinstance(obj, type):
        return obj
    if isinstance(owner, type):
        try:
            return MethodRef.of(owner, parts[-1])
        except MethodNotFoundError as exc:
            err_console.print(f"[red]Error:[/red] {exc}")
            sys.exit(1)
    err_console.print(f"[red]Error:[/red] {reference!r} is neither a class nor a method")
    sys.exit(1)


def _load_tag_kind(reference: str) -> type:
    """Load a tag kind reference, exiting on error."""
    kind = _load_target(reference)
    if not (isinstance(kind, type) and issubclass(kind, Tag)):
        err_console.print(f"[red]Error:[/red] {reference!r} is not a Tag subclass")
        sys.exit(1)
    return kind


def _flag(value: bool | None) -> str:
    if value is None:
        return "-"
    return "[green]yes[/green]" if value else "[dim]no[/dim]"


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="metatag")
def cli() -> None:
    """Tag resolution for Python classes and methods."""


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from metatag import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]metatag[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# inspect command
# ---------------------------------------------------------------------------


@cli.command(name="inspect")
@click.argument("target")
@click.option(
    "--tag",
    "-t",
    "tag_refs",
    multiple=True,
    required=True,
    help="Tag kind to resolve, as module:Name (repeatable)",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["table", "json", "yaml"], case_sensitive=False),
    default="table",
    help="Output format",
)
@click.option("--output", "-o", default=None, help="Output file path (json/yaml only)")
def inspect_command(
    target: str, tag_refs: tuple[str, ...], output_format: str, output: str | None
) -> None:
    """Resolve tag kinds against a class or a method.

    TARGET is module:Class or module:Class.method.

    Examples:

    \b
        metatag inspect myapp.repos:UserRepository --tag myapp.tags:Service
        metatag inspect myapp.repos:UserRepository.find -t myapp.tags:Transactional
    """
    from metatag.report import ReportSerializer, build_report

    subject = _load_target(target)
    kinds = tuple(_load_tag_kind(ref) for ref in tag_refs)
    report = build_report(subject, kinds)

    if output_format == "table":
        _print_table(report)
        return

    serializer = ReportSerializer()
    if output_format == "json":
        text = serializer.to_json(report, indent=2)
    else:
        text = serializer.to_yaml(report)

    if output:
        Path(output).write_text(text, encoding="utf-8")
        console.print(f"[green]Report written to[/green] {output}")
    else:
        console.print(Syntax(text, output_format, line_numbers=False))


def _print_table(report: "ResolutionReport") -> None:
    table = Table(title=f"Tags: {report.target_name}", show_lines=True)
    table.add_column("Tag kind", style="bold", min_width=12)
    table.add_column("Resolved")
    if not report.is_method:
        table.add_column("Declared on")
        table.add_column("Local", justify="center")
        table.add_column("Inherited", justify="center")

    for result in report.results:
        resolved = escape(repr(result.tag)) if result.tag is not None else "[dim]none[/dim]"
        row = [result.kind.__qualname__, resolved]
        if not report.is_method:
            declared_on = (
                result.declaring_class.__qualname__
                if result.declaring_class is not None
                else "[dim]-[/dim]"
            )
            row += [declared_on, _flag(result.locally_declared), _flag(result.inherited)]
        table.add_row(*row)

    console.print(table)
    if len(report.kinds) > 1 and not report.is_method:
        any_of = report.any_of_declaring_class
        name = any_of.__qualname__ if any_of is not None else "none"
        console.print(f"\n[bold]First class declaring any kind:[/bold] {name}")


if __name__ == "__main__":
    cli()
