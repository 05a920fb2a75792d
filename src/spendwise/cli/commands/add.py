"""Add transaction command."""

import click
from spendwise.cli.date_filters import resolve_amount, resolve_as_of, resolve_optional_date
from spendwise.cli.error_handling import handle_domain_error
from spendwise.domain.alerts import AlertService
from spendwise.domain.entities import Category, TransactionType
from spendwise.domain.errors import DomainError
from spendwise.domain.transaction import TransactionService


@click.command("add")
@click.option("--user", "user_id", required=True, type=int, help="User ID")
@click.option(
    "--type",
    "txn_type",
    required=True,
    type=click.Choice([t.value for t in TransactionType]),
    help="Transaction type",
)
@click.option("--amount", required=True, help="Transaction amount (e.g., 123.45)")
@click.option(
    "--category",
    required=True,
    type=click.Choice([c.value for c in Category], case_sensitive=False),
    help="Transaction category",
)
@click.option("--description", required=True, help="Transaction description")
@click.option(
    "--date",
    "txn_date",
    help="Transaction date (YYYY-MM-DD or relative like 'today', 'yesterday'); defaults to --as-of",
)
@click.option("--as-of", help="Reference date for the budget alert check (defaults to today)")
@click.pass_context
def add_transaction(
    ctx,
    user_id: int,
    txn_type: str,
    amount: str,
    category: str,
    description: str,
    txn_date: str | None,
    as_of: str | None,
):
    """Add a transaction.

    Adding an expense checks the current month's budget usage and emails an
    alert when it reaches 80%.

    Examples:
        spendwise add --user 1 --type expense --amount 42.50 --category Food --description "Groceries"
        spendwise add --user 1 --type income --amount 3000 --category Salary --description "Pay" --date 2024-01-31
    """
    db = ctx.obj["db"]
    alert_service = AlertService(db, ctx.obj["notifier"])
    service = TransactionService(db, alert_service=alert_service)

    now = resolve_as_of(ctx, as_of)
    parsed_date = resolve_optional_date(ctx, txn_date, "date") or now
    parsed_amount = resolve_amount(ctx, amount)

    try:
        transaction_id = service.create_transaction(
            user_id=user_id,
            type=txn_type,
            amount=parsed_amount,
            category=category,
            description=description,
            date=parsed_date,
            now=now,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Created transaction {transaction_id}")
    click.echo(f"  Type: {txn_type}")
    click.echo(f"  Date: {parsed_date}")
    click.echo(f"  Amount: ${parsed_amount:,.2f}")
    click.echo(f"  Category: {category}")
    click.echo(f"  Description: {description}")


def register_commands(cli):
    """Register add command with main CLI."""
    cli.add_command(add_transaction)
