"""Account management commands."""

from dataclasses import replace

import click
from eggflow.cli.account_resolution import resolve_account_or_exit
from eggflow.cli.date_filters import parse_date_or_exit
from eggflow.cli.error_handling import handle_domain_error
from eggflow.cli.formatting import format_money
from eggflow.domain.account import AccountService
from eggflow.domain.entities import AccountCategory, AccountType
from eggflow.domain.ledger import LedgerService
from eggflow.utils.amount_parser import parse_amount

ACCOUNT_TYPES = [t.value for t in AccountType]
ACCOUNT_CATEGORIES = [c.value for c in AccountCategory]


@click.group()
def account_group():
    """Manage customer, vendor, employee, utility and owner accounts."""
    pass


@account_group.command("create")
@click.argument("name", metavar="ACCOUNT_NAME")
@click.option(
    "--type", "account_type", type=click.Choice(ACCOUNT_TYPES, case_sensitive=False),
    default=AccountType.CUSTOMER.value, show_default=True, help="Account type",
)
@click.option("--category", type=click.Choice(ACCOUNT_CATEGORIES, case_sensitive=False), help="Reporting category")
@click.option("--phone", default="", help="Phone number")
@click.option("--address", default="", help="Address")
@click.option("--salary", help="Monthly salary (employees only)")
@click.option("--joining-date", help="Joining date (employees only)")
@click.pass_context
def create_account(
    ctx,
    name: str,
    account_type: str,
    category: str | None,
    phone: str,
    address: str,
    salary: str | None,
    joining_date: str | None,
):
    """Create a new account.

    Examples:
        eggflow account create "Ali Traders"
        eggflow account create "Feed Mills Ltd" --type Vendor --category Expense
        eggflow account create "Rashid" --type Employee --salary 25000 --joining-date 2024-03-01
    """
    service = AccountService(ctx.obj["store"])

    salary_amount = None
    if salary is not None:
        try:
            salary_amount = parse_amount(salary)
        except ValueError as e:
            click.echo(f"Error: Invalid salary: {e}", err=True)
            ctx.exit(1)
    joined = parse_date_or_exit(ctx, joining_date, "joining date") if joining_date else None

    try:
        account = service.create_account(
            name=name,
            account_type=AccountType(account_type.title()),
            phone=phone,
            address=address,
            category=AccountCategory(category.title()) if category else None,
            salary=salary_amount,
            joining_date=joined,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Created {account.type.value.lower()} account '{account.name}' (ID: {account.id})")


@account_group.command("list")
@click.option("--all", "show_all", is_flag=True, help="Include archived accounts")
@click.option("--type", "account_type", type=click.Choice(ACCOUNT_TYPES, case_sensitive=False), help="Filter by type")
@click.pass_context
def list_accounts(ctx, show_all: bool, account_type: str | None):
    """List accounts (archived accounts are hidden unless --all is given)."""
    service = AccountService(ctx.obj["store"])

    accounts = service.list_accounts(
        include_archived=show_all,
        account_type=AccountType(account_type.title()) if account_type else None,
    )
    if not accounts:
        click.echo("No accounts found.")
        return

    click.echo("\nAccounts:")
    click.echo("-" * 72)
    for acc in accounts:
        archived = " [archived]" if acc.archived else ""
        click.echo(f"ID: {acc.id:9s} | {acc.name:24s} | {acc.type.value:8s} | {acc.phone}{archived}")


@account_group.command("show")
@click.argument("account", metavar="ACCOUNT")
@click.pass_context
def show_account(ctx, account: str):
    """Show account details and current balance.

    ACCOUNT can be an account name or ID.
    """
    store = ctx.obj["store"]
    service = AccountService(store)
    account_id = resolve_account_or_exit(ctx, service, account)
    acc = service.get_account(account_id)

    click.echo(f"Account: {acc.name} (ID: {acc.id})")
    click.echo(f"  Type: {acc.type.value}")
    if acc.category is not None:
        click.echo(f"  Category: {acc.category.value}")
    if acc.phone:
        click.echo(f"  Phone: {acc.phone}")
    if acc.address:
        click.echo(f"  Address: {acc.address}")
    if acc.salary is not None:
        click.echo(f"  Salary: {format_money(acc.salary, store.settings.currency)}")
    if acc.joining_date is not None:
        click.echo(f"  Joined: {acc.joining_date}")
    if acc.archived:
        click.echo("  Status: archived")
    balance = LedgerService(store).account_balance(acc.id)
    click.echo(f"  Balance: {format_money(balance, store.settings.currency)}")


@account_group.command("update")
@click.argument("account", metavar="ACCOUNT")
@click.option("--name", help="New account name")
@click.option("--type", "account_type", type=click.Choice(ACCOUNT_TYPES, case_sensitive=False), help="New account type")
@click.option("--category", type=click.Choice(ACCOUNT_CATEGORIES, case_sensitive=False), help="New reporting category")
@click.option("--phone", help="New phone number")
@click.option("--address", help="New address")
@click.pass_context
def update_account(
    ctx,
    account: str,
    name: str | None,
    account_type: str | None,
    category: str | None,
    phone: str | None,
    address: str | None,
) -> None:
    """Update account details.

    Only the fields that are provided change.

    Examples:
        eggflow account update "Ali Traders" --phone 0300-1234567
        eggflow account update abc123xyz --name "Ali & Sons"
    """
    service = AccountService(ctx.obj["store"])
    account_id = resolve_account_or_exit(ctx, service, account)
    acc = service.get_account(account_id)

    changes = {}
    if name is not None:
        changes["name"] = name.strip()
    if account_type is not None:
        changes["type"] = AccountType(account_type.title())
    if category is not None:
        changes["category"] = AccountCategory(category.title())
    if phone is not None:
        changes["phone"] = phone
    if address is not None:
        changes["address"] = address

    try:
        service.update_account(replace(acc, **changes))
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Updated account '{changes.get('name', acc.name)}'")


@account_group.command("archive")
@click.argument("account", metavar="ACCOUNT")
@click.pass_context
def archive_account(ctx, account: str) -> None:
    """Archive an account.

    Archived accounts are hidden from lists but their transactions still
    count in ledgers and reports.
    """
    service = AccountService(ctx.obj["store"])
    account_id = resolve_account_or_exit(ctx, service, account)
    acc = service.set_archived(account_id, True)
    click.echo(f"Archived account '{acc.name}'")


@account_group.command("unarchive")
@click.argument("account", metavar="ACCOUNT")
@click.pass_context
def unarchive_account(ctx, account: str) -> None:
    """Restore an archived account."""
    service = AccountService(ctx.obj["store"])
    account_id = resolve_account_or_exit(ctx, service, account)
    acc = service.set_archived(account_id, False)
    click.echo(f"Restored account '{acc.name}'")


@account_group.command("delete")
@click.argument("account", metavar="ACCOUNT")
@click.pass_context
def delete_account(ctx, account: str) -> None:
    """Delete an account.

    ACCOUNT can be an account name or ID. Transactions that refer to the
    account are kept and show the account as "Unknown". Prefer
    'account archive' to keep the name.
    """
    service = AccountService(ctx.obj["store"])
    account_id = resolve_account_or_exit(ctx, service, account)
    acc = service.get_account(account_id)

    if not click.confirm(f"Are you sure you want to delete account '{acc.name}' (ID: {account_id})?"):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_account(account_id)
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted account '{acc.name}'")


def register_commands(cli):
    """Register account commands with main CLI."""
    cli.add_command(account_group, name="account")
