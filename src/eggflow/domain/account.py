"""Account domain service."""

from dataclasses import replace
from datetime import date
from decimal import Decimal
from typing import Optional

from eggflow.domain.entities import Account, AccountCategory, AccountType
from eggflow.domain.errors import NotFoundError, ValidationError, account_not_found
from eggflow.domain.store import RecordStore

UNKNOWN_ACCOUNT = "Unknown"


class AccountService:
    """Service for managing accounts."""

    def __init__(self, store: RecordStore):
        """Initialize account service.

        Args:
            store: Record store instance
        """
        self.store = store

    def create_account(
        self,
        name: str,
        account_type: AccountType,
        phone: str = "",
        address: str = "",
        category: Optional[AccountCategory] = None,
        salary: Optional[Decimal] = None,
        joining_date: Optional[date] = None,
    ) -> Account:
        """Create a new account.

        Salary and joining date only apply to employees.

        Returns:
            The stored account with its assigned ID

        Raises:
            ValidationError: If the name is empty, or employee-only fields
                are given for another account type
        """
        name = name.strip()
        if not name:
            raise ValidationError("Account name is required")
        if account_type is not AccountType.EMPLOYEE and (
            salary is not None or joining_date is not None
        ):
            raise ValidationError("Salary and joining date only apply to employees")
        if salary is not None and salary < 0:
            raise ValidationError("Salary cannot be negative")

        return self.store.add_account(
            Account(
                id="",
                name=name,
                type=account_type,
                phone=phone,
                address=address,
                category=category,
                salary=salary,
                joining_date=joining_date,
            )
        )

    def get_account(self, account_id: Optional[str]) -> Optional[Account]:
        """Get account by ID.

        Returns:
            Account entity or None if not found
        """
        return self.store.get_account(account_id)

    def require_account(self, account_id: Optional[str]) -> Account:
        """Get account by ID or raise.

        Raises:
            ValidationError: If no account ID was given
            NotFoundError: If the account does not exist
        """
        if not account_id:
            raise ValidationError("Select an account")
        account = self.store.get_account(account_id)
        if account is None:
            raise NotFoundError(account_not_found(account_id))
        return account

    def list_accounts(
        self,
        include_archived: bool = False,
        account_type: Optional[AccountType] = None,
    ) -> list[Account]:
        """List accounts in store order.

        Args:
            include_archived: If True, include archived accounts
            account_type: Optional type filter
        """
        return [
            acc
            for acc in self.store.document.accounts
            if (include_archived or not acc.archived)
            and (account_type is None or acc.type == account_type)
        ]

    def update_account(self, account: Account) -> None:
        """Replace an account record.

        Raises:
            ValidationError: If the new name is empty
            NotFoundError: If the account does not exist
        """
        if not account.name.strip():
            raise ValidationError("Account name is required")
        self.store.update_account(account)

    def set_archived(self, account_id: str, archived: bool) -> Account:
        """Archive or restore an account.

        Archived accounts are hidden from selection lists but their history
        still counts everywhere.
        """
        account = replace(self.require_account(account_id), archived=archived)
        self.store.update_account(account)
        return account

    def delete_account(self, account_id: str) -> None:
        """Delete an account.

        Transactions that reference it are kept and show as "Unknown".
        """
        self.store.delete_account(account_id)

    def display_name(self, account_id: Optional[str]) -> str:
        """Return the account name, or "Unknown" for a missing account."""
        account = self.store.get_account(account_id)
        if account is None:
            return UNKNOWN_ACCOUNT
        return account.name
