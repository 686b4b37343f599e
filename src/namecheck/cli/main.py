"""CLI entry point for namecheck.

Invoked as::

    namecheck [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m namecheck.cli.main

Commands
--------
check       Check an identifier records file against naming rules
classify    Show which casing styles an identifier matches
convert     Re-case an identifier into another style
resolve     Show which rule applies to a construct kind
presets     List built-in naming presets
adapters    List configuration adapters
translate   Convert a third-party tool config into a rule document
version     Show version information

Exit codes: 0 clean (or warnings only), 1 violations of error severity,
2 configuration error.
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.syntax import Syntax
from rich.table import Table

console = Console()
err_console = Console(stderr=True)

PROJECT_CONFIG = ".namecheck.yaml"

EXIT_CLEAN = 0
EXIT_VIOLATIONS = 1
EXIT_CONFIGURATION_ERROR = 2


def _configure_logging(verbose: bool) -> None:
    """Route the ``namecheck`` logger through a Rich handler on stderr."""
    logger = logging.getLogger("namecheck")
    logger.handlers.clear()
    logger.addHandler(RichHandler(console=err_console, show_path=False, show_time=False))
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False


def _config_error(message: str) -> None:
    err_console.print(f"[red]Configuration error:[/red] {message}")
    sys.exit(EXIT_CONFIGURATION_ERROR)


def _severity_color(severity: str) -> str:
    """Map a severity value to a Rich color string."""
    return {"error": "red", "warning": "yellow"}.get(severity, "white")


def _parse_pairs(values: tuple[str, ...], what: str) -> list[tuple[str, str]]:
    pairs = []
    for value in values:
        key, sep, rest = value.partition("=")
        if not sep or not key or not rest:
            raise click.BadParameter(f"expected KEY=VALUE, got {value!r}", param_hint=what)
        pairs.append((key.strip(), rest.strip()))
    return pairs


def _gather_documents(
    rule_files: tuple[str, ...],
    presets: tuple[str, ...],
    adapters: tuple[str, ...],
) -> list[Any]:
    """Collect rule documents from presets, rule files and adapter configs.

    Falls back to ``.namecheck.yaml`` in the working directory when no
    source is given.  Exits with status 2 on any configuration problem.
    """
    from namecheck.adapters import get_adapter
    from namecheck.plugins import PluginNotFoundError
    from namecheck.presets import PresetLibrary
    from namecheck.rules import ConfigurationError, RuleSource, read_document

    preset_names = list(presets)
    documents: list[Any] = []
    try:
        if not (rule_files or presets or adapters) and Path(PROJECT_CONFIG).is_file():
            project = read_document(PROJECT_CONFIG) or {}
            if not isinstance(project, dict):
                _config_error(f"{PROJECT_CONFIG} must contain a mapping")
            preset_names.extend(project.pop("presets", None) or [])
            if project.get("rules"):
                project.setdefault("name", PROJECT_CONFIG)
                documents.append(project)

        library = PresetLibrary()
        for name in preset_names:
            document = library.load_document(name)
            document["layer"] = RuleSource.PRESET.value
            documents.insert(0, document)

        for path in rule_files:
            data = read_document(path)
            if data is not None:
                if isinstance(data, dict):
                    data.setdefault("name", path)
                documents.append(data)

        for name, path in _parse_pairs(adapters, "--adapter"):
            documents.append(get_adapter(name).translate_file(path))
    except (ConfigurationError, PluginNotFoundError) as exc:
        _config_error(str(exc))
    except KeyError as exc:
        _config_error(str(exc.args[0]) if exc.args else str(exc))
    return documents


def _read_records(path: str) -> list[Any]:
    from namecheck.rules import ConfigurationError, read_document

    try:
        data = read_document(path)
    except ConfigurationError as exc:
        _config_error(str(exc))
    if isinstance(data, dict):
        data = data.get("identifiers", data.get("records"))
    if not isinstance(data, list):
        _config_error(f"{path} must contain a list of identifier records")
    return data


def _emit(text: str, output: str | None, what: str) -> None:
    if output:
        Path(output).write_text(text, encoding="utf-8")
        err_console.print(f"[green]{what} written to[/green] {output}")
    else:
        click.echo(text, nl=not text.endswith("\n"))


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="namecheck")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Show debug logging on stderr")
def cli(verbose: bool) -> None:
    """Cross-language naming-convention checker."""
    _configure_logging(verbose)


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from namecheck import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]namecheck[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# check command
# ---------------------------------------------------------------------------


@cli.command(name="check")
@click.argument("records", type=click.Path(exists=False))
@click.option("--rules", "-r", "rule_files", multiple=True, help="Rule file (YAML, JSON or TOML); repeatable")
@click.option("--preset", "-p", "presets", multiple=True, help="Built-in preset name; repeatable")
@click.option("--adapter", "-a", "adapters", multiple=True, metavar="NAME=FILE", help="Third-party config to import; repeatable")
@click.option("--workers", "-j", type=click.IntRange(min=1), default=1, show_default=True, help="Worker threads")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["table", "json", "yaml"], case_sensitive=False),
    default="table",
    help="Report output format",
)
@click.option("--output", "-o", default=None, help="Output file path (defaults to stdout)")
def check_command(
    records: str,
    rule_files: tuple[str, ...],
    presets: tuple[str, ...],
    adapters: tuple[str, ...],
    workers: int,
    output_format: str,
    output: str | None,
) -> None:
    """Check identifier records against naming rules.

    RECORDS is a YAML or JSON file holding a list of identifier records
    (text, kind, scope, language and optional file/line/column).

    Examples:

    \b
        namecheck check ids.yaml --preset typescript
        namecheck check ids.json -r naming.yaml --format json
        namecheck check ids.yaml -a eslint=.eslintrc.json
    """
    from namecheck.engine import ComplianceEngine, RunStatus
    from namecheck.report import ReportSerializer

    documents = _gather_documents(rule_files, presets, adapters)
    items = _read_records(records)
    report = ComplianceEngine(workers=workers).check(documents, items)

    if output_format != "table":
        serializer = ReportSerializer()
        text = serializer.to_json(report) if output_format == "json" else serializer.to_yaml(report)
        _emit(text, output, "Report")
        sys.exit(report.exit_code)

    if report.status is RunStatus.CONFIGURATION_ERROR:
        for message in report.errors:
            err_console.print(f"[red]Configuration error:[/red] {message}")
        sys.exit(report.exit_code)

    for skipped in report.skipped:
        err_console.print(f"[yellow]Skipped[/yellow] record #{skipped.sequence}: {skipped.reason}")

    if not report.violations:
        console.print(f"[green]OK[/green] {records}: {report.summary.total_checked} identifier(s), no violations")
        sys.exit(EXIT_CLEAN)

    table = Table(title=f"Naming: {records}", show_lines=True)
    table.add_column("Location", min_width=10)
    table.add_column("Identifier", style="bold")
    table.add_column("Kind")
    table.add_column("Severity", min_width=8)
    table.add_column("Reason")
    table.add_column("Suggestion")

    for v in report.violations:
        color = _severity_color(v.severity.value)
        table.add_row(
            str(v.record.location),
            v.record.text,
            v.record.kind.value,
            f"[{color}]{v.severity.value}[/{color}]",
            f"{v.reason.value}\n[dim]{v.detail}[/dim]",
            ", ".join(v.suggestions) or "-",
        )

    console.print(table)
    console.print(
        f"\n[bold]Summary:[/bold] {report.summary.total_checked} checked, "
        f"{report.error_count} error(s), {report.warning_count} warning(s)"
    )
    sys.exit(report.exit_code)


# ---------------------------------------------------------------------------
# classify / convert commands
# ---------------------------------------------------------------------------


@cli.command(name="classify")
@click.argument("identifiers", nargs=-1, required=True)
def classify_command(identifiers: tuple[str, ...]) -> None:
    """Show the casing styles each identifier matches."""
    from namecheck.casing import classify, split_words

    table = Table(title="Casing")
    table.add_column("Identifier", style="bold")
    table.add_column("Styles")
    table.add_column("Words", style="dim")
    for text in identifiers:
        styles = sorted(style.value for style in classify(text))
        table.add_row(text, ", ".join(styles) or "[red]unclassifiable[/red]", " ".join(split_words(text)))
    console.print(table)


@cli.command(name="convert")
@click.argument("identifiers", nargs=-1, required=True)
@click.option("--to", "target", required=True, help="Target casing style, e.g. snake_case")
@click.option("--from", "source", default=None, help="Source casing style (detected when omitted)")
def convert_command(identifiers: tuple[str, ...], target: str, source: str | None) -> None:
    """Re-case identifiers into another style, one per line."""
    from namecheck.casing import CasingStyle, transform

    try:
        target_style = CasingStyle.from_name(target)
        source_style = CasingStyle.from_name(source) if source else None
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from None
    for text in identifiers:
        click.echo(transform(text, source_style, target_style))


# ---------------------------------------------------------------------------
# resolve command
# ---------------------------------------------------------------------------


@cli.command(name="resolve")
@click.option("--kind", "-k", required=True, help="Construct kind, e.g. privateField")
@click.option("--language", "-l", default=None, help="Language tag")
@click.option("--scope", "-s", "scope_pairs", multiple=True, metavar="KEY=VALUE", help="Scope dimension; repeatable")
@click.option("--rules", "-r", "rule_files", multiple=True, help="Rule file; repeatable")
@click.option("--preset", "-p", "presets", multiple=True, help="Preset name; repeatable")
@click.option("--adapter", "-a", "adapters", multiple=True, metavar="NAME=FILE", help="Third-party config; repeatable")
def resolve_command(
    kind: str,
    language: str | None,
    scope_pairs: tuple[str, ...],
    rule_files: tuple[str, ...],
    presets: tuple[str, ...],
    adapters: tuple[str, ...],
) -> None:
    """Show the candidate rules for a target and the one that wins."""
    from namecheck.rules import ConfigurationError, ConstructKind, RuleResolver, Scope, build_rule_set

    try:
        construct = ConstructKind.from_name(kind)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--kind") from None
    scope = Scope.of(dict(_parse_pairs(scope_pairs, "--scope")))
    documents = _gather_documents(rule_files, presets, adapters)
    try:
        resolver = RuleResolver(build_rule_set(documents))
        for line in resolver.explain(construct, scope, language):
            console.print(f"  {line}", highlight=False)
        rule = resolver.resolve(construct, scope, language)
    except ConfigurationError as exc:
        _config_error(str(exc))
    console.print(f"[bold]Effective rule:[/bold] {rule.name}", highlight=False)


# ---------------------------------------------------------------------------
# presets / adapters commands
# ---------------------------------------------------------------------------


@cli.command(name="presets")
@click.option("--show", "show", default=None, help="Print the rule document of one preset")
def presets_command(show: str | None) -> None:
    """List built-in naming presets."""
    import yaml

    from namecheck.presets import PresetLibrary

    library = PresetLibrary()
    if show is not None:
        try:
            document = library.load_document(show)
        except KeyError as exc:
            _config_error(str(exc.args[0]))
        text = yaml.dump(document, default_flow_style=False, allow_unicode=True, sort_keys=False)
        console.print(Syntax(text, "yaml"))
        return

    table = Table(title="Presets")
    table.add_column("Name", style="bold")
    table.add_column("Language")
    table.add_column("Tags", style="dim")
    table.add_column("Description")
    for meta in library.list_presets():
        table.add_row(meta.name, meta.language, ", ".join(meta.tags), meta.description)
    console.print(table)


@cli.command(name="adapters")
def adapters_command() -> None:
    """List built-in and installed configuration adapters."""
    from namecheck.adapters import adapter_registry, list_adapters

    names = list_adapters()
    table = Table(title="Adapters")
    table.add_column("Name", style="bold")
    table.add_column("Language")
    table.add_column("Reads")
    for name in names:
        cls = adapter_registry.get(name)
        table.add_row(name, cls.language or "-", cls.description)
    console.print(table)


@cli.command(name="translate")
@click.argument("adapter")
@click.argument("file", type=click.Path(exists=False))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "yaml"], case_sensitive=False),
    default="yaml",
    help="Rule document output format",
)
@click.option("--output", "-o", default=None, help="Output file path (defaults to stdout)")
def translate_command(adapter: str, file: str, output_format: str, output: str | None) -> None:
    """Translate a third-party naming config into a namecheck rule document.

    ADAPTER is an adapter name (see `namecheck adapters`); FILE is the
    tool's configuration file.

    Examples:

    \b
        namecheck translate eslint .eslintrc.json -o naming.yaml
        namecheck translate clang-tidy .clang-tidy
    """
    import json

    import yaml

    from namecheck.adapters import get_adapter
    from namecheck.plugins import PluginNotFoundError
    from namecheck.rules import ConfigurationError, load_rule_document

    try:
        document = get_adapter(adapter).translate_file(file)
        load_rule_document(document, origin=file)
    except (ConfigurationError, PluginNotFoundError) as exc:
        _config_error(str(exc))

    if output_format == "json":
        text = json.dumps(document, indent=2, ensure_ascii=False)
    else:
        text = yaml.dump(document, default_flow_style=False, allow_unicode=True, sort_keys=False)
    _emit(text, output, "Rule document")


if __name__ == "__main__":
    cli()
