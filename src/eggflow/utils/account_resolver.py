"""Utility for resolving account names to IDs."""

from eggflow.domain.account import AccountService


def resolve_account(account_service: AccountService, account: str) -> str:
    """Resolve account ID or name to account ID.

    IDs are matched first, then names (case-insensitive). Archived accounts
    are included so history can still be looked up.

    Args:
        account_service: AccountService instance
        account: Account ID or name

    Returns:
        Account ID

    Raises:
        ValueError: If account is not found or the name is ambiguous
    """
    account = account.strip()
    if account_service.get_account(account) is not None:
        return account

    matches = [
        acc
        for acc in account_service.list_accounts(include_archived=True)
        if acc.name.lower() == account.lower()
    ]
    if len(matches) == 1:
        return matches[0].id
    if len(matches) > 1:
        ids = ", ".join(acc.id for acc in matches)
        raise ValueError(f"Account name '{account}' is ambiguous (IDs: {ids})")

    raise ValueError(f"Account '{account}' not found")
