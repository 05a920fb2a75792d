"""CLI helpers for date and amount option parsing."""

from datetime import date
from decimal import Decimal

import click

from spendwise.utils.amount_parser import parse_amount
from spendwise.utils.date_parser import parse_date


def resolve_as_of(ctx, as_of: str | None) -> date:
    """Resolve the --as-of option to a reference date, defaulting to today."""
    if not as_of:
        return date.today()
    try:
        return parse_date(as_of)
    except ValueError as e:
        click.echo(f"Error: Invalid --as-of date: {e}", err=True)
        ctx.exit(1)


def resolve_optional_date(ctx, value: str | None, label: str) -> date | None:
    """Parse an optional date option, exiting on bad input."""
    if not value:
        return None
    try:
        return parse_date(value)
    except ValueError as e:
        click.echo(f"Error: Invalid {label}: {e}", err=True)
        ctx.exit(1)


def resolve_amount(ctx, value: str, label: str = "amount") -> Decimal:
    """Parse an amount option, exiting on bad input."""
    try:
        return parse_amount(value)
    except ValueError as e:
        click.echo(f"Error: Invalid {label} format: {e}", err=True)
        ctx.exit(1)
