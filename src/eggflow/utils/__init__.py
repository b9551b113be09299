"""Utility functions for eggflow."""

from eggflow.utils.date_parser import parse_date
from eggflow.utils.amount_parser import parse_amount
from eggflow.utils.account_resolver import resolve_account

__all__ = ["parse_date", "parse_amount", "resolve_account"]
