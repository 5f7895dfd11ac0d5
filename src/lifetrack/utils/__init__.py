"""Utility functions for lifetrack."""

from lifetrack.utils.date_parser import parse_date
from lifetrack.utils.amount_parser import parse_amount
from lifetrack.utils.user_resolver import resolve_user

__all__ = ["parse_date", "parse_amount", "resolve_user"]
