"""Account ledger command."""

import click
from eggflow.cli.account_resolution import resolve_account_or_exit
from eggflow.cli.date_filters import date_range_options, resolve_cli_date_range
from eggflow.cli.formatting import format_money
from eggflow.domain.account import AccountService
from eggflow.domain.ledger import LedgerService
from eggflow.utils.date_parser import get_date_range


@click.command("ledger")
@click.argument("account", metavar="ACCOUNT")
@date_range_options
@click.pass_context
def ledger(ctx, account: str, start_date: str | None, end_date: str | None, periods: tuple[str, ...]):
    """Show an account statement with running balance.

    The opening balance covers every transaction before the start date.
    Debits (Sale, Withdrawal, Payment) raise the balance; credits
    (Purchase, Receipt, Deposit, Expense) lower it. The default range is
    the last 30 days.

    Examples:
        eggflow ledger "Ali Traders"
        eggflow ledger "Ali Traders" --this-year
        eggflow ledger abc123xyz --start-date 2024-01-01 --end-date 2024-03-31
    """
    store = ctx.obj["store"]
    account_service = AccountService(store)
    account_id = resolve_account_or_exit(ctx, account_service, account)
    start, end = resolve_cli_date_range(
        ctx,
        start_date=start_date,
        end_date=end_date,
        periods=periods,
        default_range=get_date_range("last-30-days"),
    )

    statement = LedgerService(store).build_statement(account_id, start, end)
    currency = store.settings.currency

    click.echo(f"\nLedger: {account_service.display_name(account_id)} ({start} to {end})")
    click.echo("=" * 92)
    click.echo(f"{'Date':<12} {'Type':<11} {'Notes':<22} {'Debit':>15} {'Credit':>15} {'Balance':>15}")
    click.echo("-" * 92)
    click.echo(f"{'':<12} {'Opening':<11} {'':<22} {'':>15} {'':>15} {format_money(statement.opening_balance, currency):>15}")
    for row in statement.rows:
        txn = row.transaction
        debit = format_money(row.debit, currency) if row.debit else "-"
        credit = format_money(row.credit, currency) if row.credit else "-"
        notes = (txn.notes or "")[:22]
        click.echo(
            f"{txn.date!s:<12} {txn.type.value:<11} {notes:<22} {debit:>15} {credit:>15} "
            f"{format_money(row.balance, currency):>15}"
        )
    click.echo("-" * 92)
    click.echo(f"Closing balance: {format_money(statement.closing_balance, currency)}")


def register_commands(cli):
    """Register ledger command with main CLI."""
    cli.add_command(ledger)
