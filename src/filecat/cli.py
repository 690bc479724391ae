"""Command line interface for the filecat metadata catalog."""

from __future__ import annotations

import difflib
import logging
from typing import Any, Iterable, Optional

import click
import yaml
from click.core import ParameterSource
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table

from filecat.catalog import Catalog, NotFoundError, sample_records
from filecat.config import (
    ConfigError,
    ConfigManager,
    FilecatConfig,
    assign_nested,
    resolve_with_precedence,
)
from filecat.ingestion import ImportFileError, ImportResult, ParseError, import_file
from filecat.query import SearchCriteria, resolve_sort_key, sort_records
from filecat.records import (
    FileRecord,
    RecordType,
    UnrecognizedTypeError,
    build_record,
    type_for_code,
)
from filecat.reports import Report, summarize

console = Console()

SHELL_ACTIONS = (
    ("1", "Search files"),
    ("2", "Open file"),
    ("3", "Archive file"),
    ("4", "Delete file"),
    ("5", "Add file"),
    ("6", "Import from file"),
    ("7", "Show archive"),
    ("8", "Exit"),
)

SHELL_DEFAULT_SORT = "creation_date"


def _handle_cli_error(
    message: str,
    *,
    code: str,
    json_output: bool,
    original: Exception | None = None,
) -> None:
    """Emit a standardized error and terminate the command.

    Args:
        message: Human-readable error message.
        code: Machine-readable error identifier.
        json_output: Indicates whether JSON mode is active.
        original: Original exception for chaining when not using JSON.

    Raises:
        SystemExit: When emitting JSON output to terminate the command.
        click.ClickException: For non-JSON flows to surface the error.
    """

    if json_output:
        console.print_json(data={"error": {"code": code, "message": message}})
        raise SystemExit(1)

    raise click.ClickException(message) from original


def _configure_logging(level: str) -> None:
    """Route log records through Rich on stderr at the configured level."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _load_config() -> FilecatConfig:
    """Load the effective configuration and apply its logging settings.

    Raises:
        click.ClickException: If configuration cannot be loaded.
    """

    try:
        config = ConfigManager().load()
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc
    _configure_logging(config.logging.level)
    return config


def _format_record_line(record: FileRecord) -> str:
    tags = " ".join(record.tags)
    return escape(
        f"{record.name} ({record.creation_date}, {record.size_kb} KB, "
        f"{record.path}, tags: {tags})"
    )


def _print_records(records: Iterable[FileRecord]) -> None:
    for record in records:
        console.print(_format_record_line(record), soft_wrap=True)


def _print_report(report: Report) -> None:
    console.print("[bold]Search statistics:[/bold]")
    console.print(f"  Files: {report.count}")
    console.print(f"  Total size: {report.total_size_kb} KB")
    console.print(f"  Average size: {report.average_size_kb} KB")
    console.print(f"  Last modified: {escape(report.last_modification_date)}")


def _records_table(records: Iterable[FileRecord]) -> Table:
    table = Table(title="Matching files")
    table.add_column("Name", overflow="fold")
    table.add_column("Type")
    table.add_column("Created")
    table.add_column("Modified")
    table.add_column("Size (KB)", justify="right")
    table.add_column("Path", overflow="fold")
    table.add_column("Tags", overflow="fold")
    for record in records:
        table.add_row(
            escape(record.name),
            record.record_type.value,
            escape(record.creation_date),
            escape(record.modification_date),
            str(record.size_kb),
            escape(record.path),
            escape(", ".join(record.tags)),
        )
    return table


def _report_import_problems(result: ImportResult) -> None:
    if not result.errors:
        return
    console.print(f"[yellow]{len(result.errors)} line(s) could not be imported:[/yellow]")
    for message in result.errors:
        console.print(f"  - {escape(message)}", soft_wrap=True)


def _parse_optional_size(raw: str) -> Optional[int]:
    """Return ``raw`` as a non-negative integer, or None when blank.

    Raises:
        click.BadParameter: If ``raw`` is not a non-negative integer.
    """

    text = raw.strip()
    if not text:
        return None
    try:
        value = int(text)
    except ValueError:
        raise click.BadParameter(f"{raw!r} is not an integer.") from None
    if value < 0:
        raise click.BadParameter("Sizes cannot be negative.")
    return value


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="filecat")
def cli() -> None:
    """filecat keeps a searchable catalog of file metadata.

    Returns:
        None: This function is invoked for its side effects.
    """


@cli.command()
@click.argument("source", type=click.Path(exists=True, dir_okay=False, path_type=str))
@click.option(
    "--type",
    "record_type",
    type=str,
    help="Record type to match (TextDocument, PDFDocument, ... or txt, pdf, ...).",
)
@click.option("--tag", type=str, help="Tag that matching files must carry.")
@click.option("--min-size", type=click.IntRange(min=0), default=0, help="Minimum size in KB.")
@click.option("--max-size", type=click.IntRange(min=0), help="Maximum size in KB.")
@click.option("--created", "creation_date", type=str, help="Exact creation date (DD.MM.YYYY).")
@click.option(
    "--modified", "modification_date", type=str, help="Exact modification date (DD.MM.YYYY)."
)
@click.option("--sort", "sort_key", type=str, help="Sort by name, creation_date or size_kb.")
@click.option("--json", "json_output", is_flag=True, help="Emit results as JSON.")
@click.option("--quiet", is_flag=True, help="Only print the statistics block.")
@click.pass_context
def search(
    ctx: click.Context,
    source: str,
    record_type: str | None,
    tag: str | None,
    min_size: int,
    max_size: int | None,
    creation_date: str | None,
    modification_date: str | None,
    sort_key: str | None,
    json_output: bool,
    quiet: bool,
) -> None:
    """Import SOURCE and list the files matching every given filter.

    Args:
        ctx: Click context for parameter source inspection.
        source: Import file in the ``name,path,date,size,tags`` format.
        record_type: Optional record type filter.
        tag: Optional tag filter.
        min_size: Inclusive lower size bound in KB.
        max_size: Inclusive upper size bound in KB.
        creation_date: Optional exact creation date.
        modification_date: Optional exact modification date.
        sort_key: Sort key; defaults to the configured one.
        json_output: When True, emit JSON instead of text.
        quiet: When True, only print the statistics block.

    Raises:
        click.ClickException: If the source or filters are invalid.
    """

    config = _load_config()
    explicit_quiet = ctx.get_parameter_source("quiet") == ParameterSource.COMMANDLINE
    quiet_enabled = quiet if explicit_quiet else config.cli.quiet_default
    if json_output and explicit_quiet and quiet:
        raise click.ClickException("--json cannot be combined with --quiet.")

    catalog = Catalog()
    try:
        imported = import_file(
            catalog,
            source,
            encoding=config.catalog.import_encoding,
            strict=config.catalog.strict_import,
        )
    except (ImportFileError, ParseError) as exc:
        _handle_cli_error(
            f"Import failed: {exc}", code="import_error", json_output=json_output, original=exc
        )

    try:
        criteria = SearchCriteria(
            record_type=record_type,
            tag=tag,
            min_size=min_size,
            max_size=max_size,
            creation_date=creation_date,
            modification_date=modification_date,
        )
    except ValidationError as exc:
        _handle_cli_error(
            f"Invalid search filters: {exc.errors()[0]['msg']}",
            code="invalid_criteria",
            json_output=json_output,
            original=exc,
        )

    effective_sort = sort_key or config.search.default_sort
    if resolve_sort_key(effective_sort) is None:
        _handle_cli_error(
            f"Unknown sort key {effective_sort!r}.",
            code="invalid_sort",
            json_output=json_output,
        )

    matches = sort_records(catalog.search(criteria), effective_sort)
    report = summarize(matches)

    if json_output:
        console.print_json(
            data={
                "results": [record.model_dump(mode="json") for record in matches],
                "report": report.model_dump(mode="json"),
                "import": {
                    "records": len(imported.records),
                    "skipped": imported.skipped,
                    "errors": imported.errors,
                },
            }
        )
        return

    if not quiet_enabled:
        _report_import_problems(imported)
        if matches:
            console.print(_records_table(matches))
        else:
            console.print("[yellow]No files match the given filters.[/yellow]")
    _print_report(report)


@cli.command()
@click.option(
    "--import",
    "import_path",
    type=click.Path(exists=True, dir_okay=False, path_type=str),
    help="Import file loaded before the session starts.",
)
@click.option(
    "--samples/--no-samples",
    default=True,
    help="Seed the session with demo records (defaults to configuration).",
)
@click.pass_context
def shell(ctx: click.Context, import_path: str | None, samples: bool) -> None:
    """Start an interactive catalog session.

    Args:
        ctx: Click context for parameter source inspection.
        import_path: Optional import file to load at startup.
        samples: Whether to seed demo records when given on the command line.
    """

    config = _load_config()
    explicit_samples = ctx.get_parameter_source("samples") == ParameterSource.COMMANDLINE
    seed = samples if explicit_samples else config.catalog.seed_samples
    catalog = Catalog(sample_records() if seed else ())
    if import_path:
        _shell_import(catalog, config, import_path)

    handlers = {
        "1": _shell_search,
        "2": _shell_open,
        "3": _shell_archive,
        "4": _shell_delete,
        "5": _shell_add,
        "6": _shell_import_prompt,
        "7": _shell_show_archive,
    }
    while True:
        console.print("[bold]Choose an action:[/bold]")
        for key, label in SHELL_ACTIONS:
            console.print(f"  {key}. {label}")
        choice = click.prompt(
            "Action", type=click.Choice([key for key, _ in SHELL_ACTIONS]), show_choices=False
        )
        if choice == "8":
            console.print("Goodbye.")
            return
        try:
            handlers[choice](catalog, config)
        except NotFoundError as exc:
            console.print(f"[red]{escape(str(exc))}[/red]")
        except click.BadParameter as exc:
            console.print(f"[red]{escape(exc.format_message())}[/red]")


def _shell_search(catalog: Catalog, config: FilecatConfig) -> None:
    record_type = click.prompt("File type (blank for any)", default="", show_default=False)
    tag = click.prompt("Tag (blank for any)", default="", show_default=False)
    min_size = click.prompt("Minimum size in KB", type=click.IntRange(min=0), default=0)
    max_size = _parse_optional_size(
        click.prompt("Maximum size in KB (blank for none)", default="", show_default=False)
    )
    creation_date = click.prompt("Creation date (blank for any)", default="", show_default=False)
    modification_date = click.prompt(
        "Modification date (blank for any)", default="", show_default=False
    )
    sort_key = click.prompt(
        "Sort by (name, creation_date, size_kb)", default=SHELL_DEFAULT_SORT
    )
    try:
        criteria = SearchCriteria(
            record_type=record_type,
            tag=tag,
            min_size=min_size,
            max_size=max_size,
            creation_date=creation_date,
            modification_date=modification_date,
        )
    except ValidationError as exc:
        console.print(f"[red]Invalid search filters: {escape(exc.errors()[0]['msg'])}[/red]")
        return

    if resolve_sort_key(sort_key) is None:
        console.print(
            f"[yellow]Unknown sort key '{escape(sort_key)}'; keeping catalog order.[/yellow]"
        )
    matches = sort_records(catalog.search(criteria), sort_key)
    _print_records(matches)
    _print_report(summarize(matches))


def _shell_open(catalog: Catalog, config: FilecatConfig) -> None:
    name = click.prompt("Name of the file to open")
    console.print(escape(catalog.open(name)))


def _shell_archive(catalog: Catalog, config: FilecatConfig) -> None:
    name = click.prompt("Name of the file to archive")
    catalog.archive(name)
    console.print(f"[green]File {escape(name)} moved to archive.[/green]")


def _shell_delete(catalog: Catalog, config: FilecatConfig) -> None:
    name = click.prompt("Name of the file to delete")
    if catalog.find_by_name(name) is None:
        raise NotFoundError(name)
    confirmed = click.confirm(f"Are you sure you want to delete {name}?", default=False)
    if catalog.delete(name, confirmed=confirmed):
        console.print(f"[green]File {escape(name)} deleted.[/green]")
    else:
        console.print("Deletion cancelled.")


def _shell_add(catalog: Catalog, config: FilecatConfig) -> None:
    codes = ", ".join(record_type.code for record_type in RecordType)
    code = click.prompt(f"File type ({codes})")
    try:
        type_for_code(code)
    except UnrecognizedTypeError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        return

    name = click.prompt("File name")
    path = click.prompt("Path", default="", show_default=False)
    creation_date = click.prompt("Creation date (e.g. 01.01.2023)", default="", show_default=False)
    size_kb = click.prompt("Size in KB", type=click.IntRange(min=0))
    console.print("Enter tags one per line; finish with an empty line.")
    tags: list[str] = []
    while True:
        tag = click.prompt("Tag", default="", show_default=False)
        if not tag:
            break
        tags.append(tag)

    try:
        record = build_record(code, name, path, creation_date, size_kb, tags)
    except ValidationError as exc:
        console.print(f"[red]Invalid file record: {escape(exc.errors()[0]['msg'])}[/red]")
        return
    catalog.add(record)
    console.print(f"[green]File {escape(record.name)} added.[/green]")


def _shell_import(catalog: Catalog, config: FilecatConfig, path: str) -> None:
    try:
        result = import_file(
            catalog,
            path,
            encoding=config.catalog.import_encoding,
            strict=config.catalog.strict_import,
        )
    except (ImportFileError, ParseError) as exc:
        console.print(f"[red]Import failed: {escape(str(exc))}[/red]")
        return
    console.print(
        f"[green]Imported {len(result.records)} file(s) from {escape(path)}.[/green]",
        soft_wrap=True,
    )
    _report_import_problems(result)


def _shell_import_prompt(catalog: Catalog, config: FilecatConfig) -> None:
    path = click.prompt("Path to the import file")
    _shell_import(catalog, config, path)


def _shell_show_archive(catalog: Catalog, config: FilecatConfig) -> None:
    archived = catalog.all_archived()
    if not archived:
        console.print("The archive is empty.")
        return
    _print_records(archived)


@cli.group()
def config() -> None:
    """Manage filecat configuration files and overrides.

    Returns:
        None: This function is invoked for its side effects.
    """


@config.command("view")
@click.option("--no-env", is_flag=True, help="Ignore environment overrides when displaying output.")
def config_view(no_env: bool) -> None:
    """Display the effective configuration after applying precedence rules.

    Raises:
        click.ClickException: If configuration cannot be loaded.
    """
    try:
        effective = ConfigManager().load(include_env=not no_env)
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc

    yaml_text = yaml.safe_dump(effective.model_dump(mode="python"), sort_keys=False)
    console.print(Syntax(yaml_text, "yaml", word_wrap=True))


@config.command("set")
@click.argument("key")
@click.option("--value", required=True, help="Value to assign to KEY.")
def config_set(key: str, value: str) -> None:
    """Persist a configuration value expressed as a dotted KEY.

    Args:
        key: Dotted path such as ``search.default_sort``.
        value: YAML-literal value to write into the configuration file.

    Raises:
        click.ClickException: If parsing, assignment, or validation fails.
    """
    manager = ConfigManager()
    segments = [segment.strip() for segment in key.split(".") if segment.strip()]
    if not segments:
        raise click.ClickException("KEY must specify a dotted path such as 'search.default_sort'.")

    try:
        manager.ensure_exists()
        before = manager.read_text().splitlines()
        parsed_value: Any = yaml.safe_load(value)
        file_data = manager.load_file_overrides()
        assign_nested(file_data, segments, parsed_value)
        resolve_with_precedence(defaults=FilecatConfig(), file_overrides=file_data)
    except yaml.YAMLError as exc:
        raise click.ClickException(f"Unable to parse value: {exc}") from exc
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc

    manager.save(file_data)
    diff = list(
        difflib.unified_diff(
            before,
            manager.read_text().splitlines(),
            fromfile="config.yaml (before)",
            tofile="config.yaml (after)",
            lineterm="",
        )
    )
    console.print(Syntax("\n".join(diff), "diff", word_wrap=False))
    console.print(f"[green]Updated {'.'.join(segments)}.[/green]")


def main() -> None:
    """Invoke the Click CLI as the console script entry point."""
    cli()


if __name__ == "__main__":
    main()
