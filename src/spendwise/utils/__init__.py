"""Utility functions for spendwise."""

from spendwise.utils.date_parser import parse_date, month_bounds, month_key
from spendwise.utils.amount_parser import has_cent_precision, parse_amount

__all__ = ["parse_date", "month_bounds", "month_key", "parse_amount", "has_cent_precision"]
