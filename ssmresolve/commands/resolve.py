"""
Resolve Commands

CLI commands that resolve parameter placeholders through the SSM Parameter
Store.

Commands:
- file <input> <output>: Resolve a document into another file.
- text [--input TEXT]: Resolve stdin (or TEXT) and print the result.
- extract [<file>]: Show the parameters a document references.
- refs <ref>...: Resolve an explicit list of references.

Every command reads its ResolveOptions and store settings from the parent
group's context object.
"""

from typing import Iterable, NoReturn, Optional
import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from ssmresolve.commands.base import RichCommand, rich_help
from ssmresolve.config.settings import appsettings
from ssmresolve.exceptions import ResolverError
from ssmresolve.lib.fileio import file_validate, text_read
from ssmresolve.lib.log import LOG
from ssmresolve.lib.lookup import ParameterLookup
from ssmresolve.lib.policy import secure_references
from ssmresolve.lib.resolver import (
    file_resolve,
    parameterList_resolve,
    parameters_extractFromText,
    text_resolve,
)
from ssmresolve.lib.ssm import SsmParameterService
from ssmresolve.models.dataModel import ResolutionMap, ResolveOptions

console: Console = Console()
err_console: Console = Console(stderr=True)

MASK: str = "****"


def lookup_create(ctx: click.Context) -> ParameterLookup:
    """
    Build the SSM lookup from the group options.

    :param ctx: Click context whose `obj` carries region and endpoint.
    :return: A parameter lookup bound to SSM.
    """
    return SsmParameterService(
        region=ctx.obj.get("region"),
        endpoint_url=ctx.obj.get("endpoint_url"),
        batch_size=appsettings.ssmBatchSize,
    )


def error_report(ctx: click.Context, error: ResolverError) -> NoReturn:
    """Print `error` on stderr and exit with its code."""
    LOG(f"{type(error).__name__}: {error}")
    err_console.print(f"[bold red]Error:[/bold red] {escape(str(error))}", soft_wrap=True)
    ctx.exit(error.exit_code)


def resolutionMap_table(
    resolution_map: ResolutionMap, show_values: bool
) -> Table:
    """
    Render a resolution map as a Rich table.

    :param resolution_map: Reference to resolved parameter info.
    :param show_values: Print secure values instead of a mask.
    :return: Table with one row per reference, sorted by reference.
    """
    secure: set[str] = secure_references(resolution_map)
    table = Table(title="Parameters")
    table.add_column("Reference", style="cyan")
    table.add_column("Name", style="green")
    table.add_column("Type", style="yellow")
    table.add_column("Value")
    for reference in sorted(resolution_map):
        info = resolution_map[reference]
        value: str = info.value if show_values or reference not in secure else MASK
        table.add_row(
            escape(reference), escape(info.name), info.type.value, escape(value)
        )
    return table


def source_read(path: Optional[str]) -> str:
    """Read `path`, or stdin when no path is given."""
    if path is None:
        return click.get_text_stream("stdin").read()
    file_validate(path, appsettings.maxFileSize)
    return text_read(path)


@click.command(
    "file",
    cls=RichCommand,
    short_help="Resolve a document into a file",
    help=rich_help(
        command="file",
        description="Resolve parameter placeholders in a file.",
        usage="ssmresolve file <input> <output>",
        args={
            "<input>": "Document containing placeholders.",
            "<output>": "Destination of the resolved document (may equal <input>).",
        },
    ),
)
@click.argument("input_file", type=str)
@click.argument("output_file", type=str)
@click.pass_context
def file(ctx: click.Context, input_file: str, output_file: str) -> None:
    """
    Resolve placeholders in INPUT_FILE and write OUTPUT_FILE.

    :param input_file: Document to read.
    :param output_file: Destination file.
    """
    options: ResolveOptions = ctx.obj["options"]
    try:
        file_resolve(lookup_create(ctx), input_file, output_file, options)
    except ResolverError as e:
        error_report(ctx, e)
    err_console.print(
        f"[bold green]Resolved document written to {escape(output_file)}[/bold green]",
        soft_wrap=True,
    )


@click.command(
    "text",
    cls=RichCommand,
    short_help="Resolve stdin and print the result",
    help=rich_help(
        command="text",
        description="Resolve parameter placeholders in text read from stdin.",
        usage="ssmresolve text [--input TEXT]",
        args={},
    ),
)
@click.option("--input", "-i", "input_text", type=str, help="Text to resolve instead of stdin")
@click.pass_context
def text(ctx: click.Context, input_text: Optional[str]) -> None:
    """
    Resolve placeholders in the given text or stdin and print it to stdout.

    :param input_text: Text to resolve; stdin is read when omitted.
    """
    options: ResolveOptions = ctx.obj["options"]
    try:
        source: str = input_text if input_text is not None else source_read(None)
        resolved: str = text_resolve(lookup_create(ctx), source, options)
    except ResolverError as e:
        error_report(ctx, e)
    click.echo(resolved, nl=False)


@click.command(
    "extract",
    cls=RichCommand,
    short_help="Show the parameters a document references",
    help=rich_help(
        command="extract",
        description="Resolve and list the parameters referenced by a document.",
        usage="ssmresolve extract [<file>] [--show-values]",
        args={"<file>": "Document to scan; stdin when omitted."},
    ),
)
@click.argument("path", type=str, required=False)
@click.option("--show-values", is_flag=True, help="Print secure values unmasked")
@click.pass_context
def extract(ctx: click.Context, path: Optional[str], show_values: bool) -> None:
    """
    Print a table of the parameters referenced in PATH (or stdin).

    :param path: Document to scan.
    :param show_values: Print secure values unmasked.
    """
    options: ResolveOptions = ctx.obj["options"]
    try:
        resolution_map: ResolutionMap = parameters_extractFromText(
            lookup_create(ctx), source_read(path), options
        )
    except ResolverError as e:
        error_report(ctx, e)

    if not resolution_map:
        console.print("[bold yellow]No parameter placeholders found.[/bold yellow]")
        return
    console.print(resolutionMap_table(resolution_map, show_values))


@click.command(
    "refs",
    cls=RichCommand,
    short_help="Resolve a list of parameter references",
    help=rich_help(
        command="refs",
        description="Resolve an explicit list of parameter references.",
        usage="ssmresolve refs <ref> [<ref>...] [--show-values]",
        args={"<ref>": "Parameter reference, e.g. db/host or ssm-secure:db/pass."},
    ),
)
@click.argument("references", type=str, nargs=-1, required=True)
@click.option("--show-values", is_flag=True, help="Print secure values unmasked")
@click.pass_context
def refs(ctx: click.Context, references: Iterable[str], show_values: bool) -> None:
    """
    Print a table of the resolved REFERENCES.

    :param references: Parameter references; duplicates are ignored.
    :param show_values: Print secure values unmasked.
    """
    options: ResolveOptions = ctx.obj["options"]
    try:
        resolution_map: ResolutionMap = parameterList_resolve(
            lookup_create(ctx), references, options
        )
    except ResolverError as e:
        error_report(ctx, e)
    console.print(resolutionMap_table(resolution_map, show_values))
