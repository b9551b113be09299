"""Backup, restore, reset and settings commands."""

from pathlib import Path

import click
from eggflow.cli.error_handling import handle_domain_error
from eggflow.domain.entities import Theme

THEMES = [t.value for t in Theme]


@click.group()
def data_group():
    """Export, import or reset all farm data."""
    pass


@data_group.command("export")
@click.argument("output", type=click.Path(dir_okay=False, path_type=Path), required=False)
@click.pass_context
def export_data(ctx, output: Path | None):
    """Write all data as JSON to OUTPUT (or stdout)."""
    text = ctx.obj["store"].export_data()
    if output is None:
        click.echo(text)
        return
    output.write_text(text, encoding="utf-8")
    click.echo(f"Exported data to {output}")


@data_group.command("import")
@click.argument("source", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--yes", is_flag=True, help="Skip confirmation")
@click.pass_context
def import_data(ctx, source: Path, yes: bool):
    """Replace all data with the contents of a JSON backup.

    If the file cannot be read the current data is left unchanged.
    """
    if not yes and not click.confirm("This will replace all current data. Continue?"):
        click.echo("Import cancelled.")
        return

    try:
        document = ctx.obj["store"].import_data(source.read_text(encoding="utf-8"))
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(
        f"Imported {len(document.accounts)} accounts, {len(document.transactions)} transactions, "
        f"{len(document.egg_collections)} egg collections and "
        f"{len(document.feed_transactions)} feed entries"
    )


@data_group.command("reset")
@click.option("--yes", is_flag=True, help="Skip confirmation")
@click.pass_context
def reset_data(ctx, yes: bool):
    """Delete all records and restore default settings."""
    if not yes and not click.confirm("This will delete ALL data. Continue?"):
        click.echo("Reset cancelled.")
        return
    ctx.obj["store"].reset_data()
    click.echo("All data has been reset.")


@click.command("settings")
@click.option("--currency", help="Currency shown before amounts, e.g. PKR")
@click.option("--farm-name", help="Farm name used in reports")
@click.option("--theme", type=click.Choice(THEMES, case_sensitive=False), help="Display theme")
@click.pass_context
def settings(ctx, currency: str | None, farm_name: str | None, theme: str | None):
    """Show or change farm settings."""
    store = ctx.obj["store"]
    changes = {}
    if currency is not None:
        changes["currency"] = currency.strip()
    if farm_name is not None:
        changes["farm_name"] = farm_name.strip()
    if theme is not None:
        changes["theme"] = Theme(theme.lower())

    current = store.update_settings(**changes) if changes else store.settings
    click.echo(f"Farm name: {current.farm_name}")
    click.echo(f"Currency: {current.currency}")
    click.echo(f"Theme: {current.theme.value}")


def register_commands(cli):
    """Register data and settings commands with main CLI."""
    cli.add_command(data_group, name="data")
    cli.add_command(settings)
