"""Dashboard command."""

import calendar

import click
from spendwise.cli.date_filters import resolve_as_of
from spendwise.cli.error_handling import handle_domain_error
from spendwise.domain.dashboard import DashboardService
from spendwise.domain.entities import DashboardPeriod, TransactionType
from spendwise.domain.errors import DomainError


@click.command("dashboard")
@click.option("--user", "user_id", required=True, type=int, help="User ID")
@click.option(
    "--period",
    default=DashboardPeriod.MONTH.value,
    show_default=True,
    type=click.Choice([p.value for p in DashboardPeriod]),
    help="Window to summarize",
)
@click.option("--as-of", help="End of the window (defaults to today)")
@click.pass_context
def show_dashboard(ctx, user_id: int, period: str, as_of: str | None):
    """Show income, expenses and category breakdown for a period."""
    db = ctx.obj["db"]
    service = DashboardService(db)
    now = resolve_as_of(ctx, as_of)

    try:
        stats = service.get_dashboard_stats(user_id, now, period=period)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    summary = stats.summary
    click.echo(f"Dashboard ({stats.period.value}: {stats.start_date} to {stats.end_date})")
    click.echo("=" * 50)
    click.echo(f"{'Income':<30} {summary.income:>18,.2f}")
    click.echo(f"{'Expenses':<30} {summary.expense:>18,.2f}")
    click.echo(f"{'Balance':<30} {summary.balance:>18,.2f}")
    click.echo(f"{'Transactions':<30} {summary.transaction_count:>18}")

    if stats.category_rollups:
        click.echo()
        click.echo("Expenses by category")
        click.echo("-" * 50)
        for rollup in stats.category_rollups:
            label = f"{rollup.category.value} ({rollup.count})"
            click.echo(f"{label:<30} {rollup.total:>18,.2f}")

    if stats.monthly_trend:
        click.echo()
        click.echo("This year by month")
        click.echo("-" * 50)
        for entry in stats.monthly_trend:
            label = f"{calendar.month_abbr[entry.month]} {entry.type.value}"
            click.echo(f"{label:<30} {entry.total:>18,.2f}")

    if stats.recent_transactions:
        click.echo()
        click.echo("Recent transactions")
        click.echo("-" * 50)
        for txn in stats.recent_transactions:
            sign = "-" if txn.type == TransactionType.EXPENSE else "+"
            click.echo(f"{txn.date.isoformat()}  {txn.description[:24]:<24} {sign}{txn.amount:>12,.2f}")


def register_commands(cli):
    """Register dashboard command with main CLI."""
    cli.add_command(show_dashboard)
