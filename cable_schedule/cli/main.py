"""Command-line interface for the cable schedule engine."""

import logging

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from .. import __version__

console = Console()


def _setup_logging(verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _load_entries(file_path, schedule_id):
    """Parse a schedule file and resolve its parallel sets."""
    from ..parsers import load_cable_schedule
    from ..engine import resolve_parallel_groups

    result = load_cable_schedule(file_path, schedule_id=schedule_id)

    if not result.is_valid and not result.entries:
        for error in result.validation_result.errors:
            console.print(f"  Row {error.row}: {error.message}" if error.row else f"  - {error.message}")
        raise click.ClickException(f"No valid cable entries in {file_path}")

    for warning in result.validation_result.warnings:
        logging.getLogger(__name__).warning("Row %s: %s", warning.row, warning.message)

    return resolve_parallel_groups(result.entries)


def _load_tenants(tenants):
    if not tenants:
        return None
    from ..parsers import load_tenant_names
    return load_tenant_names(tenants)


def _group_entries(entries, tenants, settings):
    """Group entries by shop using the configured pattern and label."""
    from ..engine import group_by_shop, make_shop_key_extractor

    return group_by_shop(
        entries,
        tenant_names=_load_tenants(tenants),
        key_extractor=make_shop_key_extractor(settings.shop_pattern),
        ungrouped_label=settings.ungrouped_label,
    )


def _money(value: float) -> str:
    return f"{value:,.2f}"


def _entries_table(title, entries):
    from ..models import display_tag, effective_length, effective_cost

    table = Table(title=title)
    table.add_column("Cable #", justify="right")
    table.add_column("Cable Tag", style="cyan")
    table.add_column("From")
    table.add_column("To")
    table.add_column("Size")
    table.add_column("Length (m)", justify="right")
    table.add_column("Cost", justify="right")

    for entry in entries:
        table.add_row(
            str(entry.cable_number),
            display_tag(entry),
            entry.from_location,
            entry.to_location,
            entry.cable_size or "-",
            f"{effective_length(entry):.2f}",
            _money(effective_cost(entry)),
        )
    return table


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
def cli(verbose):
    """Cable Schedule tools.

    Group, split, total and page through cable schedules.
    """
    _setup_logging(verbose)


FILE_OPTION = click.option(
    "--file", "-f", "file_path",
    required=True,
    type=click.Path(exists=True),
    help="Path to the cable schedule (.xlsx, .xls or .csv)"
)
SCHEDULE_OPTION = click.option(
    "--schedule-id",
    default="default",
    help="Schedule id for rows that do not name one"
)
TENANTS_OPTION = click.option(
    "--tenants", "-t",
    default=None,
    type=click.Path(exists=True),
    help="Tenant list with shop number and shop name columns"
)


@cli.command()
@FILE_OPTION
def validate(file_path):
    """Validate a cable schedule file."""
    from ..parsers import load_cable_schedule

    console.print(f"Validating: [cyan]{file_path}[/cyan]\n")
    result = load_cable_schedule(file_path)

    if result.is_valid:
        console.print(f"[green]✓ Valid cable schedule with {result.entry_count} entries[/green]")
    else:
        console.print("[red]✗ Validation errors found:[/red]")
        for error in result.validation_result.errors:
            console.print(f"  Row {error.row}: {error.message}")

    if result.validation_result.warnings:
        console.print("\n[yellow]Warnings:[/yellow]")
        for warning in result.validation_result.warnings:
            console.print(f"  Row {warning.row}: {warning.message}")

    if not result.is_valid:
        raise SystemExit(1)


@cli.command()
@FILE_OPTION
@SCHEDULE_OPTION
@TENANTS_OPTION
@click.option("--settings", "settings_path", default=None, help="YAML settings file")
def summary(file_path, schedule_id, tenants, settings_path):
    """Show group subtotals and project totals."""
    from ..engine import aggregate, aggregate_groups
    from ..settings import load_settings

    settings = load_settings(settings_path)
    entries = _load_entries(file_path, schedule_id)
    groups = _group_entries(entries, tenants, settings)
    subtotals = aggregate_groups(groups)
    totals = aggregate(entries)

    table = Table(title="Cable Schedule Summary")
    table.add_column("Group", style="cyan")
    table.add_column("Cables", justify="right")
    table.add_column("Length (m)", justify="right")
    table.add_column("Cost", justify="right")

    for group in groups:
        subtotal = subtotals[group.shop_number]
        table.add_row(
            group.shop_name,
            str(subtotal.entry_count),
            f"{subtotal.total_length:.2f}",
            _money(subtotal.total_cost),
        )
    table.add_row(
        "[bold]Total[/bold]",
        str(totals.entry_count),
        f"{totals.total_length:.2f}",
        _money(totals.total_cost),
    )

    console.print(table)


@cli.command()
@FILE_OPTION
@SCHEDULE_OPTION
@TENANTS_OPTION
@click.option("--settings", "settings_path", default=None, help="YAML settings file")
def groups(file_path, schedule_id, tenants, settings_path):
    """List cables grouped by destination shop."""
    from ..engine import aggregate, is_flat_schedule
    from ..settings import load_settings

    settings = load_settings(settings_path)
    entries = _load_entries(file_path, schedule_id)
    shop_groups = _group_entries(entries, tenants, settings)

    if is_flat_schedule(shop_groups):
        console.print(_entries_table("Cable Entries", entries))
        return

    for group in shop_groups:
        totals = aggregate(group.entries)
        console.print(_entries_table(
            f"{group.shop_name} ({totals.entry_count} cables, {totals.total_length:.2f} m)",
            group.entries,
        ))


@cli.command()
@FILE_OPTION
@SCHEDULE_OPTION
@click.option("--page", "-p", "page_number", default=1, type=int, help="Page number (1-based)")
@click.option("--page-size", "-s", default=None, type=int, help="Rows per page")
@click.option("--settings", "settings_path", default=None, help="YAML settings file")
def page(file_path, schedule_id, page_number, page_size, settings_path):
    """Show one page of the schedule with page and project totals."""
    from ..exceptions import ValidationError
    from ..repository import InMemoryCableEntryRepository
    from ..services import ScheduleView
    from ..settings import load_settings

    settings = load_settings(settings_path)
    entries = _load_entries(file_path, schedule_id)
    view = ScheduleView(
        InMemoryCableEntryRepository(entries),
        sorted({e.schedule_id for e in entries}),
        settings=settings,
    )

    try:
        if page_size is not None:
            view.set_page_size(page_size)
        window = view.go_to_page(page_number)
    except ValidationError as e:
        raise click.ClickException(str(e))

    console.print(_entries_table(
        f"Page {window.page} of {window.total_pages} "
        f"(rows {window.from_index + 1}-{window.from_index + window.limit} of {window.total_count})",
        view.current_entries(),
    ))

    page_totals = view.page_totals()
    project_totals = view.project_totals()
    console.print(Panel.fit(
        f"Page: {page_totals.total_length:.2f} m, {_money(page_totals.total_cost)}\n"
        f"Project: {project_totals.total_length:.2f} m, {_money(project_totals.total_cost)}",
        title="Totals",
        border_style="blue",
    ))


@cli.command()
@FILE_OPTION
@SCHEDULE_OPTION
@click.option("--tag", required=True, help="Cable tag to split (e.g., MSB-DB1)")
@click.option("--count", "-n", required=True, type=int, help="Number of parallel cables")
@click.option("--settings", "settings_path", default=None, help="YAML settings file")
@click.option("--output", "-o", required=True, type=click.Path(), help="Output .xlsx or .csv")
def split(file_path, schedule_id, tag, count, output, settings_path):
    """Split a cable into parallel cables and write the schedule."""
    from ..engine import parse_parallel_tag, resolve_parallel_groups
    from ..exceptions import ValidationError
    from ..export import export_schedule
    from ..models import display_tag
    from ..repository import InMemoryCableEntryRepository
    from ..services import ScheduleEditor
    from ..settings import load_settings

    entries = _load_entries(file_path, schedule_id)
    wanted = parse_parallel_tag(tag)

    target = next((e for e in entries if display_tag(e) == tag or e.cable_tag == tag), None)
    if target is None:
        target = next((e for e in entries if e.resolved_base_tag == wanted["base"]), None)
    if target is None:
        raise click.ClickException(f"Cable tag not found: {tag}")

    repository = InMemoryCableEntryRepository(entries)
    try:
        siblings = ScheduleEditor(repository).split(target.id, count)
    except ValidationError as e:
        raise click.ClickException(str(e))

    schedule_ids = sorted({e.schedule_id for e in entries})
    updated = resolve_parallel_groups(repository.fetch_all_entries_for_aggregate(schedule_ids))
    path = export_schedule(_group_entries(updated, None, load_settings(settings_path)), output)

    console.print(f"[green]✓ Split {siblings[0].base_cable_tag} into {count} parallel cables[/green]")
    console.print(f"[green]✓ Schedule saved to:[/green] {path}")


@cli.command()
@FILE_OPTION
@SCHEDULE_OPTION
@TENANTS_OPTION
@click.option("--output", "-o", required=True, type=click.Path(), help="Output .xlsx or .csv")
@click.option("--settings", "settings_path", default=None, help="YAML settings file")
def export(file_path, schedule_id, tenants, output, settings_path):
    """Export the grouped schedule with subtotals."""
    from ..engine import sort_by_shop
    from ..export import export_schedule
    from ..settings import load_settings

    settings = load_settings(settings_path)
    entries = sort_by_shop(_load_entries(file_path, schedule_id))
    path = export_schedule(_group_entries(entries, tenants, settings), output)

    console.print(f"[green]✓ Cable schedule saved to: {path}[/green]")
    console.print(f"  Total cables: {len(entries)}")


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
