"""Budget snapshot and analytics commands."""

import click
from spendwise.cli.date_filters import resolve_as_of
from spendwise.cli.error_handling import handle_domain_error
from spendwise.domain.analytics import AnalyticsService
from spendwise.domain.budget import BudgetService
from spendwise.domain.errors import DomainError
from spendwise.domain.trend import DEFAULT_TREND_MONTHS


@click.command("budget")
@click.option("--user", "user_id", required=True, type=int, help="User ID")
@click.option("--as-of", help="Any date in the month to report on (defaults to today)")
@click.pass_context
def show_budget(ctx, user_id: int, as_of: str | None):
    """Show budget usage for the current month."""
    db = ctx.obj["db"]
    service = BudgetService(db)
    now = resolve_as_of(ctx, as_of)

    try:
        snapshot = service.get_snapshot(user_id, now)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Budget for {snapshot.period_start} to {snapshot.period_end}")
    click.echo("=" * 50)
    click.echo(f"{'Budget':<30} {snapshot.budget:>18,.2f}")
    click.echo(f"{'Current expenses':<30} {snapshot.current_expenses:>18,.2f}")
    click.echo(f"{'Remaining':<30} {snapshot.remaining:>18,.2f}")
    click.echo(f"{'Used':<30} {snapshot.budget_usage:>17.1f}%")
    if snapshot.is_over_budget:
        click.echo()
        click.echo("Over budget!")


@click.command("analytics")
@click.option("--user", "user_id", required=True, type=int, help="User ID")
@click.option(
    "--months",
    default=DEFAULT_TREND_MONTHS,
    show_default=True,
    type=int,
    help="Number of months to include",
)
@click.option("--as-of", help="Any date in the last month to include (defaults to today)")
@click.pass_context
def show_analytics(ctx, user_id: int, months: int, as_of: str | None):
    """Show monthly budget vs. expenses with recommendations."""
    db = ctx.obj["db"]
    service = AnalyticsService(db)
    now = resolve_as_of(ctx, as_of)

    try:
        analytics = service.get_analytics(user_id, now, months=months)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"{'Month':<10} {'Budget':>14} {'Expenses':>14} {'Savings':>14}")
    click.echo("-" * 55)
    for point in analytics.trend:
        click.echo(
            f"{point.month_key:<10} {point.budget:>14,.2f} "
            f"{point.expenses:>14,.2f} {point.savings:>14,.2f}"
        )

    summary = analytics.summary
    click.echo()
    click.echo(f"Average monthly expense: {summary.avg_monthly_expense:,.2f}")
    click.echo(f"Total savings: {summary.total_savings:,.2f}")
    click.echo(f"Budget adherence: {summary.budget_adherence:.2f}%")

    if summary.recommendations:
        click.echo()
        click.echo("Recommendations:")
        for rec in summary.recommendations:
            click.echo(f"  - {rec.message}")


def register_commands(cli):
    """Register budget commands with main CLI."""
    cli.add_command(show_budget)
    cli.add_command(show_analytics)
