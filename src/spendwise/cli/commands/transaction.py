"""Transaction management commands."""

import click
from spendwise.cli.date_filters import resolve_amount, resolve_optional_date
from spendwise.cli.error_handling import handle_domain_error
from spendwise.domain.entities import Category, TransactionType
from spendwise.domain.errors import DomainError
from spendwise.domain.transaction import TransactionService

TYPE_CHOICE = click.Choice([t.value for t in TransactionType])
CATEGORY_CHOICE = click.Choice([c.value for c in Category], case_sensitive=False)


@click.group()
def transaction_group():
    """Manage transactions."""
    pass


@transaction_group.command("list")
@click.option("--user", "user_id", required=True, type=int, help="User ID")
@click.option("--type", "txn_type", type=TYPE_CHOICE, help="Only income or only expenses")
@click.option("--category", type=CATEGORY_CHOICE, help="Only this category")
@click.option("--start-date", help="Start date (YYYY-MM-DD or relative like 'last month', 'this year')")
@click.option("--end-date", help="End date (YYYY-MM-DD or relative like 'today')")
@click.option("--search", help="Text to look for in descriptions")
@click.option("--page", default=1, show_default=True, type=int, help="Page number")
@click.option("--limit", default=10, show_default=True, type=int, help="Transactions per page")
@click.pass_context
def list_transactions(
    ctx,
    user_id: int,
    txn_type: str | None,
    category: str | None,
    start_date: str | None,
    end_date: str | None,
    search: str | None,
    page: int,
    limit: int,
):
    """List transactions, newest first."""
    db = ctx.obj["db"]
    service = TransactionService(db)

    start = resolve_optional_date(ctx, start_date, "start date")
    end = resolve_optional_date(ctx, end_date, "end date")

    try:
        result = service.list_transactions(
            user_id,
            type=txn_type,
            category=category,
            start_date=start,
            end_date=end,
            search=search,
            page=page,
            limit=limit,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    if not result.transactions:
        click.echo("No transactions found.")
        return

    click.echo(f"{'ID':<6} {'Date':<12} {'Type':<8} {'Category':<14} {'Amount':>12}  Description")
    click.echo("-" * 80)
    for txn in result.transactions:
        click.echo(
            f"{txn.id:<6} {txn.date.isoformat():<12} {txn.type.value:<8} "
            f"{txn.category.value:<14} {txn.amount:>12,.2f}  {txn.description}"
        )
    click.echo()
    click.echo(f"Page {result.current} of {result.pages} ({result.total} transactions)")


@transaction_group.command("update")
@click.argument("transaction_id", type=int)
@click.option("--user", "user_id", required=True, type=int, help="Owning user ID")
@click.option("--type", "txn_type", type=TYPE_CHOICE, help="Transaction type")
@click.option("--amount", help="Transaction amount (e.g., 123.45)")
@click.option("--category", type=CATEGORY_CHOICE, help="Transaction category")
@click.option("--description", help="Transaction description")
@click.option("--date", "txn_date", help="Transaction date (YYYY-MM-DD or relative like 'today')")
@click.pass_context
def update_transaction(
    ctx,
    transaction_id: int,
    user_id: int,
    txn_type: str | None,
    amount: str | None,
    category: str | None,
    description: str | None,
    txn_date: str | None,
) -> None:
    """Update a transaction.

    Updates only the fields that are provided.

    Examples:
        spendwise transaction update 4 --user 1 --amount 75.00
        spendwise transaction update 4 --user 1 --category Bills
    """
    db = ctx.obj["db"]
    service = TransactionService(db)

    parsed_amount = resolve_amount(ctx, amount) if amount is not None else None
    parsed_date = resolve_optional_date(ctx, txn_date, "date")

    try:
        service.update_transaction(
            user_id,
            transaction_id,
            type=txn_type,
            amount=parsed_amount,
            category=category,
            description=description,
            date=parsed_date,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
        return
    click.echo(f"Updated transaction {transaction_id}")


@transaction_group.command("delete")
@click.argument("transaction_id", type=int)
@click.option("--user", "user_id", required=True, type=int, help="Owning user ID")
@click.confirmation_option(prompt="Are you sure you want to delete this transaction?")
@click.pass_context
def delete_transaction(ctx, transaction_id: int, user_id: int) -> None:
    """Delete a transaction permanently."""
    db = ctx.obj["db"]
    service = TransactionService(db)

    try:
        service.delete_transaction(user_id, transaction_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return
    click.echo(f"Deleted transaction {transaction_id}")


def register_commands(cli):
    """Register transaction commands with main CLI."""
    cli.add_command(transaction_group, name="transaction")
