"""Main CLI entry point."""

import logging

import click
from eggflow.database.factories import create_sqlite_storage
from eggflow.domain.store import RecordStore

# Import and register all commands at module level
from eggflow.cli.commands import (
    account,
    transaction,
    invoice,
    eggs,
    feed,
    cash,
    ledger,
    report,
    insight,
    data,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides EGGFLOW_DB_PATH environment variable)",
    envvar="EGGFLOW_DB_PATH",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    envvar="EGGFLOW_LOG_LEVEL",
    show_default=True,
    help="Logging verbosity",
)
@click.pass_context
def cli(ctx, db_path: str | None, log_level: str):
    """EggFlow - Egg farm bookkeeping.

    Track egg production, feed stock, customer and vendor ledgers, cash in
    hand and sales invoices.
    """
    ctx.ensure_object(dict)
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Open storage only when actually running a command (not when showing help)
    if ctx.invoked_subcommand is not None:
        storage = create_sqlite_storage(database_path=db_path)
        storage.connect()
        storage.initialize_schema()
        ctx.call_on_close(storage.disconnect)
        ctx.obj["storage"] = storage
        ctx.obj["store"] = RecordStore.open(storage)


# Register all commands
account.register_commands(cli)
transaction.register_commands(cli)
invoice.register_commands(cli)
eggs.register_commands(cli)
feed.register_commands(cli)
cash.register_commands(cli)
ledger.register_commands(cli)
report.register_commands(cli)
insight.register_commands(cli)
data.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
